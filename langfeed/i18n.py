from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from langfeed.models import LanguageBuildConfig


@dataclass
class I18n:
    """
    Language table and translation lookup for one site.

    `build` holds the per-language canonical URL and locale,
    `translations` the strings per language, either flat
    ({"site.title": ...}) or nested ({"site": {"title": ...}}).
    """

    default: str = "en"
    supported: List[str] = field(default_factory=list)
    build: Dict[str, LanguageBuildConfig] = field(default_factory=dict)
    translations: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def languages(self) -> List[str]:
        return list(self.supported) if self.supported else [self.default]

    def lang_config(self, lang: str) -> Optional[LanguageBuildConfig]:
        return self.build.get(lang) or self.build.get(self.default)

    def culture(self, lang: str) -> Optional[str]:
        config = self.build.get(lang)
        return config.culture if config and config.culture else None

    def t(self, lang: str, key: str, fallback: str = "") -> str:
        strings = self.translations.get(lang) or {}
        value = strings.get(key)
        if value is None:
            value = strings
            for part in key.split("."):
                if not isinstance(value, Mapping):
                    value = None
                    break
                value = value.get(part)
        if isinstance(value, str) and value:
            return value
        return fallback

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> I18n:
        build = {
            lang: LanguageBuildConfig(
                canonical=(conf or {}).get("canonical"),
                culture=(conf or {}).get("culture"),
            )
            for lang, conf in (data.get("build") or {}).items()
        }
        return cls(
            default=data.get("default") or "en",
            supported=list(data.get("supported") or []),
            build=build,
            translations=dict(data.get("translations") or {}),
        )
