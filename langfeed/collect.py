from __future__ import annotations

import logging
from functools import reduce
from typing import Dict, Iterable, List, Sequence

from langfeed.i18n import I18n
from langfeed.models import ContentFile, FeedEntry
from langfeed.utils import parse_date, resolve_url, timestamp

log = logging.getLogger(__name__)


def to_entry(file: ContentFile, base_url: str) -> FeedEntry:
    date = parse_date(file.date)
    updated = date if file.updated is None else parse_date(file.updated)
    link = resolve_url(str(file.canonical or ""), base_url)
    tags = file.tags if isinstance(file.tags, (list, tuple)) else []

    return FeedEntry(
        title=file.title,
        lang=file.lang,
        description=None if file.description is None else str(file.description),
        link=link,
        guid=link,
        date=date,
        updated=updated,
        category=file.category,
        categories=list(tags),
    )


def collect_entries(files: Iterable[ContentFile], base_url: str) -> List[FeedEntry]:
    """
    Project eligible content files into feed entries, newest first.

    Undated entries sort as the epoch; ties keep their input order.
    """
    files = list(files)
    entries = [to_entry(file, base_url) for file in files if file.is_post]

    skipped = len(files) - len(entries)
    if skipped:
        log.debug("Skipped %s content files that are not published posts", skipped)

    return sorted(entries, key=lambda entry: timestamp(entry.date), reverse=True)


def group_entries_by_lang(
    entries: Sequence[FeedEntry], default_lang: str
) -> Dict[str, List[FeedEntry]]:
    def add(acc: Dict[str, List[FeedEntry]], entry: FeedEntry) -> Dict[str, List[FeedEntry]]:
        acc.setdefault(entry.lang or default_lang, []).append(entry)
        return acc

    return reduce(add, entries, {})


def resolve_languages(i18n: I18n) -> List[str]:
    return i18n.languages()
