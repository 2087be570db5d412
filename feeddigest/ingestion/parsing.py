"""Feed document parsing.

A retrieved document is handed to feedparser, its dialect is sniffed from
the reported version, and the matching extractor in ``PARSERS`` turns the
entries into uniform :class:`FeedItem` objects. RSS dates follow RFC 822,
Atom dates follow RFC 3339; feedparser's normalized time tuple is used as a
fallback for either.
"""

import calendar
import html
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Dict, List, Optional, Tuple

import feedparser
import pendulum
from feedparser.exceptions import ThingsNobodyCaresAboutButMe

from ..config import SourceConfig
from ..errors import FeedParseError
from .models import FeedFormat, FeedItem

DEFAULT_DESCRIPTION_LENGTH = 500

_TAG_RE = re.compile(r"<[^>]*>")


def to_utc(value: datetime) -> datetime:
    """Return a plain, timezone-aware UTC datetime. Naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(value.timestamp(), tz=timezone.utc)


def _from_struct(struct: Any) -> Optional[datetime]:
    if not struct:
        return None
    try:
        return datetime.fromtimestamp(calendar.timegm(struct), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return None


def parse_rfc822(raw: Optional[str]) -> Optional[datetime]:
    """Parse an RSS ``pubDate`` such as ``Tue, 10 Jun 2003 04:00:00 GMT``."""
    if not raw:
        return None
    try:
        return to_utc(parsedate_to_datetime(raw.strip()))
    except (TypeError, ValueError, IndexError, OverflowError, OSError):
        return None


def parse_rfc3339(raw: Optional[str]) -> Optional[datetime]:
    """Parse an Atom timestamp such as ``2003-12-13T18:30:02Z``."""
    if not raw:
        return None
    try:
        parsed = pendulum.parse(raw.strip())
        # pendulum also accepts durations and bare times
        if not isinstance(parsed, datetime):
            return None
        return to_utc(parsed)
    except (ValueError, OverflowError, OSError):
        return None


def clean_description(raw: Optional[str], max_length: int = DEFAULT_DESCRIPTION_LENGTH) -> str:
    """Strip markup from a description and cap its length."""
    if not raw:
        return ""
    text = html.unescape(_TAG_RE.sub(" ", raw))
    text = " ".join(text.split())
    if max_length and len(text) > max_length:
        text = text[: max_length - 3].rstrip() + "..."
    return text


def _entry_description(entry: Any) -> Optional[str]:
    for key in ("description", "summary"):
        value = entry.get(key)
        if value:
            return value
    for content in entry.get("content") or []:
        value = content.get("value")
        if value:
            return value
    return None


def _build_item(
    entry: Any,
    published: Optional[datetime],
    source: SourceConfig,
    max_length: int,
) -> Optional[FeedItem]:
    link = (entry.get("link") or "").strip()
    title = " ".join((entry.get("title") or "").split())
    if not title and not link:
        return None
    return FeedItem(
        title=title or link,
        link=link,
        published=published,
        description=clean_description(_entry_description(entry), max_length),
        source_name=source.name,
        source_url=source.url,
    )


def parse_rss_entries(
    entries: List[Any], source: SourceConfig, max_length: int = DEFAULT_DESCRIPTION_LENGTH
) -> List[FeedItem]:
    """Extract items from RSS 0.9x/1.0/2.0 entries."""
    items = []
    for entry in entries:
        published = parse_rfc822(entry.get("published"))
        if published is None:
            published = _from_struct(entry.get("published_parsed")) or _from_struct(
                entry.get("updated_parsed")
            )
        item = _build_item(entry, published, source, max_length)
        if item is not None:
            items.append(item)
    return items


def parse_atom_entries(
    entries: List[Any], source: SourceConfig, max_length: int = DEFAULT_DESCRIPTION_LENGTH
) -> List[FeedItem]:
    """Extract items from Atom entries, preferring ``published`` over ``updated``."""
    items = []
    for entry in entries:
        published = parse_rfc3339(entry.get("published")) or parse_rfc3339(entry.get("updated"))
        if published is None:
            published = _from_struct(entry.get("published_parsed")) or _from_struct(
                entry.get("updated_parsed")
            )
        item = _build_item(entry, published, source, max_length)
        if item is not None:
            items.append(item)
    return items


PARSERS: Dict[FeedFormat, Callable[..., List[FeedItem]]] = {
    FeedFormat.RSS: parse_rss_entries,
    FeedFormat.ATOM: parse_atom_entries,
}


def detect_format(parsed: Any) -> Optional[FeedFormat]:
    """Sniff the dialect from feedparser's reported version."""
    version = parsed.get("version") or ""
    if version.startswith("rss"):
        return FeedFormat.RSS
    if version.startswith("atom"):
        return FeedFormat.ATOM
    return None


def parse_document(
    content: bytes,
    source: SourceConfig,
    max_length: int = DEFAULT_DESCRIPTION_LENGTH,
) -> Tuple[FeedFormat, List[FeedItem]]:
    """Parse a raw feed document into its format and candidate items.

    Raises:
        FeedParseError: the document is malformed or not RSS/Atom.
    """
    parsed = feedparser.parse(content)

    if parsed.get("bozo") and not isinstance(
        parsed.get("bozo_exception"), ThingsNobodyCaresAboutButMe
    ):
        raise FeedParseError(f"Malformed feed: {parsed.get('bozo_exception')}")

    feed_format = detect_format(parsed)
    if feed_format is None:
        raise FeedParseError("Unrecognized feed format")

    return feed_format, PARSERS[feed_format](parsed.entries, source, max_length)
