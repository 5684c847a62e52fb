from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from langfeed.utils import is_positive_number

FEED_FILENAME = "feed.xml"
FEED_TTL = 1440
GENERATOR_NAME = "Langfeed Static Site Feed Builder"
STYLESHEET_HREF = "/assets/rss.xsl"


@dataclass(frozen=True)
class FeedConfig:
    """Plugin overrides. Bad values fall back to defaults instead of failing the build."""

    feed_filename: str = FEED_FILENAME
    feed_ttl: int = FEED_TTL
    feed_item_count: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> FeedConfig:
        data = data or {}
        filename = data.get("feedFilename", data.get("feed_filename"))
        ttl = data.get("feedTtl", data.get("feed_ttl"))
        count = data.get("feedItemCount", data.get("feed_item_count"))

        if isinstance(filename, str) and filename.strip():
            filename = filename.strip()
        else:
            filename = FEED_FILENAME

        if (
            isinstance(ttl, (int, float))
            and not isinstance(ttl, bool)
            and math.isfinite(ttl)
            and ttl >= 0
        ):
            ttl = int(ttl)
        else:
            ttl = FEED_TTL

        count = int(count) if is_positive_number(count) else None
        # fractions below one leave the feed uncapped
        if count == 0:
            count = None

        return cls(feed_filename=filename, feed_ttl=ttl, feed_item_count=count)
