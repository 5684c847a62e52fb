from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


@dataclass
class SiteIdentity:
    url: str = ""
    author: str = ""
    email: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SiteIdentity:
        return cls(
            url=data.get("url") or "",
            author=data.get("author") or "",
            email=data.get("email") or "",
        )


@dataclass
class LanguageBuildConfig:
    canonical: Optional[str] = None
    culture: Optional[str] = None


@dataclass
class ContentFile:
    """
    A candidate post as handed over by the host build pipeline.

    Dates are kept as the host delivered them (datetime, date or string);
    they are only resolved when the file is projected into a FeedEntry.
    """

    title: str = ""
    lang: Optional[str] = None
    description: Optional[str] = None
    canonical: str = ""
    date: Any = None
    updated: Any = None
    category: Any = None
    tags: Any = field(default_factory=list)

    is_valid: bool = True
    is_draft: bool = False
    is_published: bool = True
    is_post_template: bool = True

    @property
    def is_post(self) -> bool:
        return bool(
            self.is_valid
            and not self.is_draft
            and self.is_published
            and self.is_post_template
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ContentFile:
        """Build a record from either camelCase (host) or snake_case keys."""
        return cls(
            title=data.get("title") or "",
            lang=data.get("lang"),
            description=data.get("description"),
            canonical=data.get("canonical") or "",
            date=data.get("date"),
            updated=data.get("updated"),
            category=data.get("category"),
            tags=data.get("tags", []),
            is_valid=bool(_pick(data, "isValid", "is_valid", default=True)),
            is_draft=bool(_pick(data, "isDraft", "is_draft", default=False)),
            is_published=bool(_pick(data, "isPublished", "is_published", default=True)),
            is_post_template=bool(
                _pick(data, "isPostTemplate", "is_post_template", default=True)
            ),
        )


@dataclass(frozen=True)
class FeedEntry:
    title: str
    lang: Optional[str]
    description: Optional[str]
    link: str
    guid: str
    date: Optional[datetime] = None
    updated: Optional[datetime] = None
    category: Any = None
    categories: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class ChannelMeta:
    site_title: str
    site_description: str
    channel_link: str
    self_feed_link: str
    language_code: str
    last_build_date: str
    alternate_feed_links: str
    pub_date: str
    copyright: str
