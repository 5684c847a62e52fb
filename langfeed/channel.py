from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from langfeed.models import ChannelMeta, FeedEntry
from langfeed.site import SiteContext
from langfeed.utils import escape, format_rfc2822, normalize_base_url

RIGHTS_EN = "All rights reserved."
RIGHTS_TR = "Tüm hakları saklıdır."


def channel_link_for(lang: str, ctx: SiteContext) -> str:
    lang_config = ctx.i18n.lang_config(lang)
    if lang_config is not None and lang_config.canonical is not None:
        return lang_config.canonical
    return ctx.identity.url


def build_feed_urls(languages: Sequence[str], ctx: SiteContext) -> Dict[str, str]:
    """Absolute feed URL per language, used for self and alternate links."""
    filename = ctx.config.feed_filename
    return {
        lang: f"{normalize_base_url(channel_link_for(lang, ctx) or '')}{filename}"
        for lang in languages
    }


def build_alternate_feed_links(feed_urls: Mapping[str, str], lang: str) -> str:
    return "\n".join(
        f'    <atom:link href="{escape(url)}" rel="alternate" '
        f'hreflang="{escape(other)}" type="application/rss+xml" />'
        for other, url in feed_urls.items()
        if other != lang and url
    )


def cap_entries(entries: Sequence[FeedEntry], item_count: Optional[int]) -> List[FeedEntry]:
    if item_count:
        return list(entries[:item_count])
    return list(entries)


def rights_text(lang: str, culture: str) -> str:
    if str(lang).lower().startswith("en") or str(culture).lower().startswith("en"):
        return RIGHTS_EN
    return RIGHTS_TR


def build_copyright(
    oldest: Optional[FeedEntry], now: datetime, author: str, rights: str
) -> str:
    start_year = oldest.date.year if oldest and oldest.date else now.year
    if author:
        return f"© {start_year} - {now.year} {author}. {rights}"
    return f"© {start_year} - {now.year}. {rights}"


def build_channel_meta(
    lang: str,
    feed_urls: Mapping[str, str],
    entries: Sequence[FeedEntry],
    ctx: SiteContext,
) -> ChannelMeta:
    """
    Channel metadata for one language.

    `entries` must already be sorted and capped: the oldest (last) entry
    drives pubDate and the first copyright year.
    """
    identity = ctx.identity
    now = ctx.clock()
    channel_link = channel_link_for(lang, ctx)
    culture = ctx.i18n.culture(lang) or lang
    oldest = entries[-1] if entries else None

    return ChannelMeta(
        site_title=ctx.i18n.t(lang, "site.title", identity.author),
        site_description=ctx.i18n.t(lang, "site.description", ""),
        channel_link=channel_link,
        self_feed_link=feed_urls.get(lang) or f"{channel_link}{ctx.config.feed_filename}",
        language_code=culture.replace("_", "-"),
        last_build_date=format_rfc2822(now),
        alternate_feed_links=build_alternate_feed_links(feed_urls, lang),
        pub_date=format_rfc2822(oldest.date) if oldest and oldest.date else "",
        copyright=build_copyright(oldest, now, identity.author, rights_text(lang, culture)),
    )
