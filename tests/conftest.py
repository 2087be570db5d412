"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from feeddigest.config import FetchSettings, SourceConfig

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)

Item = Tuple[str, str, Optional[datetime]]


def hours_ago(hours: float) -> datetime:
    return NOW - timedelta(hours=hours)


def rss_document(items: List[Item], description: str = "<p>Body &amp; more</p>") -> str:
    """RSS 2.0 document; each item is (title, link, published)."""
    entries = []
    for title, link, published in items:
        pub = f"<pubDate>{format_datetime(published, usegmt=True)}</pubDate>" if published else ""
        entries.append(
            f"<item><title>{title}</title><link>{link}</link>{pub}"
            f"<description><![CDATA[{description}]]></description></item>"
        )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<rss version="2.0"><channel><title>Fixture RSS</title>'
        "<link>https://rss.test/</link><description>fixture</description>"
        + "".join(entries)
        + "</channel></rss>"
    )


def atom_document(items: List[Item], summary: str = "Atom summary") -> str:
    """Atom 1.0 document; each item is (title, link, published)."""
    entries = []
    for i, (title, link, published) in enumerate(items):
        stamp = published.strftime("%Y-%m-%dT%H:%M:%SZ") if published else ""
        dates = f"<published>{stamp}</published><updated>{stamp}</updated>" if stamp else ""
        entries.append(
            f"<entry><title>{title}</title><link href=\"{link}\"/>"
            f"<id>urn:fixture:{i}</id>{dates}<summary>{summary}</summary></entry>"
        )
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom">'
        "<title>Fixture Atom</title><id>urn:fixture</id>"
        f"<updated>{NOW.strftime('%Y-%m-%dT%H:%M:%SZ')}</updated>"
        + "".join(entries)
        + "</feed>"
    )


def feed_transport(documents: Dict[str, str], status: Optional[Dict[str, int]] = None):
    """MockTransport serving fixture documents by URL; unknown URLs are 404."""
    status = status or {}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url in documents:
            return httpx.Response(status.get(url, 200), content=documents[url].encode("utf-8"))
        return httpx.Response(404, content=b"not found")

    return httpx.MockTransport(handler)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def rss_source() -> SourceConfig:
    return SourceConfig(name="rss.test", url="https://rss.test/feed.xml")


@pytest.fixture
def atom_source() -> SourceConfig:
    return SourceConfig(name="atom.test", url="https://atom.test/atom.xml")


@pytest.fixture
def fast_settings() -> FetchSettings:
    return FetchSettings(timeout=0.5, max_concurrent=3)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config path at an empty temp dir so user config never leaks in."""
    monkeypatch.setenv("FEEDDIGEST_CONFIG", str(tmp_path / "config" / "config.yaml"))
