"""Digest pipeline: fetch every source, keep recent items, write one JSON document."""

import os
import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional, Sequence, Union

import httpx
import pendulum
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from ..config import DEFAULT_SOURCES, FetchSettings, SourceConfig
from ..errors import DigestWriteError
from ..ingestion import (
    Article,
    DigestDocument,
    FeedResult,
    FetchMetadata,
    RSSFetcher,
    print_feed_summary,
)
from ..ingestion.parsing import to_utc

console = Console(stderr=True)

STDOUT = "-"


def utc_now() -> datetime:
    """Current time as a plain UTC datetime."""
    return to_utc(pendulum.now("UTC"))


def in_window(published: Optional[datetime], hours: int, now: datetime) -> bool:
    """Whether ``published`` lies within ``[now - hours, now]``."""
    if published is None:
        return False
    return now - timedelta(hours=hours) <= published <= now


def build_digest(
    results: Sequence[FeedResult],
    hours: int,
    now: datetime,
) -> DigestDocument:
    """Filter fetched items to the window and compute run counters.

    Articles keep source order, then document order within a source.
    """
    now = to_utc(now)
    articles: List[Article] = []
    total_articles = 0
    successful_feeds = 0

    for result in results:
        if not result.success:
            continue
        successful_feeds += 1
        total_articles += len(result.items)
        for item in result.items:
            if in_window(item.published, hours, now):
                articles.append(Article.from_item(item))

    metadata = FetchMetadata(
        total_feeds=len(results),
        successful_feeds=successful_feeds,
        total_articles=total_articles,
        filtered_articles=len(articles),
        time_range_hours=hours,
        fetched_at=now,
    )
    return DigestDocument(metadata=metadata, articles=articles)


def _target_mode(path: Path) -> int:
    """Mode for the digest file: keep an existing file's, else what open() would give."""
    if path.exists():
        return path.stat().st_mode & 0o777
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_digest(document: DigestDocument, output: Union[str, Path]) -> None:
    """Write the digest to ``output``, or stdout for ``-``.

    Files are written to a temporary sibling and renamed into place, so the
    target either holds the complete document or is left untouched.
    """
    payload = document.to_json() + "\n"

    if str(output) == STDOUT:
        sys.stdout.write(payload)
        sys.stdout.flush()
        return

    path = Path(output).expanduser()
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(payload)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise DigestWriteError(f"Cannot write digest to {path}: {e}") from e


def fetch_digest(
    hours: int,
    output_path: Union[str, Path],
    sources: Optional[Sequence[SourceConfig]] = None,
    settings: Optional[FetchSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    now: Optional[datetime] = None,
    show_progress: bool = True,
    verbose: bool = False,
) -> FetchMetadata:
    """Fetch all sources, keep items from the last ``hours`` and write the JSON digest.

    Per-source failures only show up in the counters. ``DigestWriteError``
    is raised when the output cannot be written.
    """
    if hours < 0:
        raise ValueError(f"hours must be >= 0, got {hours}")

    settings = settings or FetchSettings()
    if sources is None:
        sources = DEFAULT_SOURCES
    enabled = [s for s in sources if s.enabled]

    console.print(
        f"[dim]Fetching {len(enabled)} feeds (last {hours}h, "
        f"timeout {settings.timeout:g}s, {settings.max_concurrent} concurrent)[/dim]"
    )

    fetcher = RSSFetcher.from_settings(settings, transport=transport)

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        disable=not show_progress,
        transient=True,
    ) as progress:
        task = progress.add_task("Fetching feeds", total=len(enabled))

        def on_result(result: FeedResult) -> None:
            progress.advance(task, 1)

        results = fetcher.fetch_feeds_sync(enabled, on_result=on_result)

    print_feed_summary(results, show_failures=verbose)

    document = build_digest(results, hours, now or utc_now())
    write_digest(document, output_path)

    metadata = document.metadata
    console.print(
        f"[green]Digest written:[/green] {metadata.filtered_articles} of "
        f"{metadata.total_articles} articles from {metadata.successful_feeds}/"
        f"{metadata.total_feeds} feeds"
        + ("" if str(output_path) == STDOUT else f" -> {output_path}")
    )
    return metadata
