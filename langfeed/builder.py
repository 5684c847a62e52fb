from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Dict, Mapping, Sequence

from langfeed.channel import build_channel_meta, build_feed_urls, cap_entries
from langfeed.collect import collect_entries, group_entries_by_lang, resolve_languages
from langfeed.models import FeedEntry
from langfeed.rss import generate_rss2
from langfeed.site import SiteContext

log = logging.getLogger(__name__)


class FeedWriteError(RuntimeError):
    """A feed could not be written; the build must not pass as successful."""

    def __init__(self, lang: str, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not write RSS feed for '{lang}' to {path}: {cause}")
        self.lang = lang
        self.path = path


def feed_relative_path(lang: str, default_lang: str, filename: str) -> PurePosixPath:
    if lang == default_lang:
        return PurePosixPath(filename)
    return PurePosixPath(lang) / filename


class RssFeedBuilder:
    """
    Runs one build pass: collect posts, split them per language and
    write one RSS document per language that has at least one entry.

    Languages are rendered one after another; the first write failure
    stops the pass.
    """

    def build(self, ctx: SiteContext) -> Dict[str, Path]:
        written: Dict[str, Path] = {}

        entries = collect_entries(ctx.content_files, ctx.identity.url)
        if not entries:
            log.info("No published posts, skipping RSS feeds")
            return written

        entries_by_lang = group_entries_by_lang(entries, ctx.i18n.default)
        languages = resolve_languages(ctx.i18n)
        feed_urls = build_feed_urls(languages, ctx)

        for lang in languages:
            lang_entries = cap_entries(
                entries_by_lang.get(lang, []), ctx.config.feed_item_count
            )
            if not lang_entries:
                log.debug("No posts for '%s', no feed written", lang)
                continue

            written[lang] = self.render_and_write(ctx, lang, feed_urls, lang_entries)

        log.info("Wrote %s RSS feed(s): %s", len(written), ", ".join(written))
        return written

    def render_and_write(
        self,
        ctx: SiteContext,
        lang: str,
        feed_urls: Mapping[str, str],
        entries: Sequence[FeedEntry],
    ) -> Path:
        channel = build_channel_meta(lang, feed_urls, entries, ctx)
        xml = generate_rss2(channel, entries, ctx.identity, ctx.config.feed_ttl)
        return self.write_feed(ctx, lang, xml, len(entries))

    def write_feed(self, ctx: SiteContext, lang: str, xml: str, item_count: int) -> Path:
        relative = feed_relative_path(lang, ctx.i18n.default, ctx.config.feed_filename)
        target = Path(ctx.output_dir) / relative
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(xml, encoding="utf-8")
        except OSError as exc:
            log.error("Writing RSS feed '%s' to %s failed: %s", lang, target, exc)
            raise FeedWriteError(lang, target, exc) from exc

        log.debug("RSS '%s' feed has been created with %s items.", lang, item_count)
        return target


def build_feeds(ctx: SiteContext) -> Dict[str, Path]:
    return RssFeedBuilder().build(ctx)
