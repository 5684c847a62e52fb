from __future__ import annotations

import email.utils as email_utils
import html
import math
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

from dateutil import parser as date_parser

# characters XML 1.0 does not allow, even as entities
_XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def ensure_utc(dt: datetime) -> datetime:
    """
    Return a timezone aware datetime in UTC.

    The RSS specification recommends RFC 2822 dates in GMT.
    To keep things predictable we always normalise to UTC.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_rfc2822(dt: datetime) -> str:
    """
    Format a datetime in RFC 2822 format for RSS pubDate / lastBuildDate.

    Example: Tue, 03 Jun 2003 09:39:21 GMT
    """
    return email_utils.format_datetime(ensure_utc(dt), usegmt=True)


def format_iso8601(dt: Optional[datetime]) -> str:
    """Atom timestamp such as 2024-01-01T12:00:00.000Z, or "" without a date."""
    if dt is None:
        return ""
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_date(value: Any) -> Optional[datetime]:
    """
    Resolve a content date into an aware UTC datetime.

    Accepts datetimes, plain dates, epoch seconds and anything
    python-dateutil understands. Returns None instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    text = str(value).strip()
    if not text:
        return None
    try:
        return ensure_utc(date_parser.parse(text))
    except (ValueError, TypeError, OverflowError):
        return None


def timestamp(dt: Optional[datetime]) -> float:
    """Sort key for entries; missing dates count as the epoch."""
    if dt is None:
        return 0.0
    return ensure_utc(dt).timestamp()


def strip_invalid_xml(text: str) -> str:
    return _XML_INVALID_CHARS.sub("", text)


def escape(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(strip_invalid_xml(str(value)), quote=True)


def normalize_base_url(base_url: str) -> str:
    return base_url if base_url.endswith("/") else f"{base_url}/"


def resolve_url(path: Optional[str], base_url: str) -> str:
    """
    Resolve a canonical path against the site base URL.

    Absolute URLs are returned untouched, everything else is joined
    onto the base with exactly one slash in between.
    """
    path = (path or "").strip()
    if path.startswith(("http://", "https://", "//")):
        return path
    return normalize_base_url(base_url or "") + path.lstrip("/")


def uniq_strings(items: Iterable[Any]) -> list[str]:
    """Trimmed, non-empty strings in first-seen order without duplicates."""
    seen: dict[str, None] = {}
    for value in items:
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value:
            seen.setdefault(value, None)
    return list(seen)


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(line for line in lines if line)


def with_cdata(value: Optional[str]) -> str:
    value = strip_invalid_xml(value or "")
    if not value:
        return ""
    # "]]>" cannot appear inside a CDATA section
    return f"<![CDATA[ {value.replace(']]>', ']]]]><![CDATA[>')} ]]>"


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0
