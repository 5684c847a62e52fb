from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List, Mapping

from langfeed.config import FeedConfig
from langfeed.i18n import I18n
from langfeed.models import ContentFile, SiteIdentity


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _section(manifest: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = manifest.get(name) or {}
    if not isinstance(value, Mapping):
        raise ValueError(f"manifest '{name}' must be an object")
    return value


def _record(item: Any, index: int) -> Mapping[str, Any]:
    if not isinstance(item, Mapping):
        raise ValueError(f"manifest content #{index} must be an object")
    return item


@dataclass
class SiteContext:
    """Everything one build pass needs, passed explicitly to every stage."""

    output_dir: Path
    identity: SiteIdentity = field(default_factory=SiteIdentity)
    i18n: I18n = field(default_factory=I18n)
    config: FeedConfig = field(default_factory=FeedConfig)
    content_files: List[ContentFile] = field(default_factory=list)
    clock: Callable[[], datetime] = utc_now

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any], output_dir: Path) -> SiteContext:
        """
        Build a context from a JSON-like manifest:

            {"identity": {...}, "i18n": {...}, "config": {...}, "content": [...]}
        """
        content = manifest.get("content") or []
        if not isinstance(content, list):
            raise ValueError("manifest 'content' must be a list of records")

        return cls(
            output_dir=Path(output_dir),
            identity=SiteIdentity.from_mapping(_section(manifest, "identity")),
            i18n=I18n.from_mapping(_section(manifest, "i18n")),
            config=FeedConfig.from_mapping(_section(manifest, "config")),
            content_files=[
                ContentFile.from_mapping(_record(item, index))
                for index, item in enumerate(content)
            ],
        )
