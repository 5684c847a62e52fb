from __future__ import annotations

from typing import Any, Iterable, Sequence

from langfeed.config import GENERATOR_NAME, STYLESHEET_HREF
from langfeed.models import ChannelMeta, FeedEntry, SiteIdentity
from langfeed.utils import (
    escape,
    format_iso8601,
    format_rfc2822,
    join_lines,
    uniq_strings,
    with_cdata,
)


def author_field(identity: SiteIdentity) -> str:
    if identity.email and identity.author:
        return f"{identity.email} ({identity.author})"
    return identity.email or identity.author or ""


def category_lines(values: Iterable[Any], domain: str) -> str:
    return "\n".join(
        f'    <category domain="{escape(domain)}">{escape(value)}</category>'
        for value in uniq_strings(values)
    )


def render_item(entry: FeedEntry, author: str) -> str:
    description = with_cdata((entry.description or "").strip())
    updated = format_iso8601(entry.updated)

    return join_lines(
        [
            "  <item>",
            f"    <title>{escape(entry.title)}</title>",
            f"    <link>{escape(entry.link)}</link>",
            f'    <guid isPermaLink="true">{escape(entry.guid)}</guid>',
            f"    <pubDate>{format_rfc2822(entry.date)}</pubDate>" if entry.date else "",
            f"    <atom:updated>{updated}</atom:updated>" if updated else "",
            f"    <description>{description}</description>" if description else "",
            f"    <author>{escape(author)}</author>" if author else "",
            category_lines([entry.category], "category"),
            category_lines(entry.categories, "tag"),
            "  </item>",
        ]
    )


def render_items(entries: Sequence[FeedEntry], identity: SiteIdentity) -> str:
    author = author_field(identity)
    return "\n".join(render_item(entry, author) for entry in entries)


def generate_rss2(
    channel: ChannelMeta,
    entries: Sequence[FeedEntry],
    identity: SiteIdentity,
    ttl: int,
) -> str:
    """Build an RSS 2.0 feed (with the Atom namespace) as an XML string."""
    # managingEditor keeps "email (name)" even when one side is empty
    managing_editor = f"{identity.email} ({identity.author})"

    return (
        join_lines(
            [
                '<?xml version="1.0" encoding="UTF-8"?>',
                f'<?xml-stylesheet type="text/xsl" href="{STYLESHEET_HREF}"?>',
                '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
                "  <channel>",
                f"    <title>{escape(channel.site_title)}</title>",
                f"    <link>{escape(channel.channel_link)}</link>",
                f'    <atom:link href="{escape(channel.self_feed_link)}" '
                'rel="self" type="application/rss+xml" />',
                channel.alternate_feed_links,
                f"    <description>{escape(channel.site_description)}</description>",
                f"    <language>{escape(channel.language_code)}</language>",
                f"    <lastBuildDate>{channel.last_build_date}</lastBuildDate>",
                f"    <pubDate>{channel.pub_date}</pubDate>" if channel.pub_date else "",
                f"    <copyright>{escape(channel.copyright)}</copyright>",
                f"    <generator>{escape(GENERATOR_NAME)}</generator>",
                f"    <managingEditor>{escape(managing_editor)}</managingEditor>",
                f"    <ttl>{int(ttl)}</ttl>",
                render_items(entries, identity),
                "  </channel>",
                "</rss>",
            ]
        )
        + "\n"
    )
