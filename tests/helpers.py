from datetime import datetime, timezone
from pathlib import Path

import context  # noqa: F401

from langfeed.config import FeedConfig
from langfeed.i18n import I18n
from langfeed.models import ContentFile, LanguageBuildConfig, SiteIdentity
from langfeed.site import SiteContext

NOW = datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)
ATOM = "{http://www.w3.org/2005/Atom}"


def post(title="Post", lang="en", date="2024-05-01T00:00:00Z", **kwargs) -> ContentFile:
    kwargs.setdefault("canonical", f"/{lang}/{title.lower().replace(' ', '-')}/")
    return ContentFile(title=title, lang=lang, date=date, **kwargs)


def make_context(
    files=(),
    output_dir=".",
    supported=("en", "tr"),
    config=None,
    identity=None,
    now=NOW,
) -> SiteContext:
    i18n = I18n(
        default="en",
        supported=list(supported),
        build={
            "en": LanguageBuildConfig(canonical="https://example.com/", culture="en_US"),
            "tr": LanguageBuildConfig(canonical="https://example.com/tr", culture="tr_TR"),
            "de": LanguageBuildConfig(canonical="https://example.com/de/", culture="de_DE"),
        },
        translations={
            "en": {"site": {"title": "Example Blog", "description": "Notes & essays"}},
            "tr": {"site.title": "Örnek Blog"},
        },
    )
    return SiteContext(
        output_dir=Path(output_dir),
        identity=identity
        or SiteIdentity(url="https://example.com", author="Jane Doe", email="jane@example.com"),
        i18n=i18n,
        config=config or FeedConfig(),
        content_files=list(files),
        clock=lambda: now,
    )
