"""RSS/Atom feed fetcher with bounded concurrent processing."""

import asyncio
from typing import Callable, List, Optional, Sequence

import httpx
from rich.console import Console
from rich.table import Table

from ..config import FetchSettings, SourceConfig
from ..errors import FeedParseError
from .models import FeedResult
from .parsing import parse_document

console = Console(stderr=True)

ResultCallback = Callable[[FeedResult], None]


class RSSFetcher:
    """Fetch and parse RSS and Atom feeds."""

    def __init__(
        self,
        timeout: float = 15.0,
        max_concurrent: int = 10,
        user_agent: Optional[str] = None,
        description_max_length: int = 500,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize RSS fetcher.

        ``transport`` replaces the network layer; tests pass an
        ``httpx.MockTransport``.
        """
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.timeout = timeout
        self.max_concurrent = max_concurrent
        self.user_agent = user_agent or FetchSettings().user_agent
        self.description_max_length = description_max_length
        self.transport = transport

    @classmethod
    def from_settings(
        cls, settings: FetchSettings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "RSSFetcher":
        """Build a fetcher from configuration."""
        return cls(
            timeout=settings.timeout,
            max_concurrent=settings.max_concurrent,
            user_agent=settings.user_agent,
            description_max_length=settings.description_max_length,
            transport=transport,
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "application/rss+xml, application/atom+xml, application/xml, text/xml, */*",
            },
            limits=httpx.Limits(
                max_connections=self.max_concurrent,
                max_keepalive_connections=self.max_concurrent,
            ),
            transport=self.transport,
        )

    def _failure(
        self, source: SourceConfig, error: str, status_code: Optional[int] = None
    ) -> FeedResult:
        return FeedResult(
            source_name=source.name,
            source_url=source.url,
            success=False,
            status_code=status_code,
            error=error,
        )

    async def fetch_feed(self, client: httpx.AsyncClient, source: SourceConfig) -> FeedResult:
        """Fetch and parse a single feed. Never raises for per-source failures."""
        status_code = None
        try:
            # httpx timeouts apply per phase; wait_for bounds the whole request
            response = await asyncio.wait_for(client.get(source.url), timeout=self.timeout)
            status_code = response.status_code
            response.raise_for_status()

            feed_format, items = parse_document(
                response.content, source, self.description_max_length
            )

            return FeedResult(
                source_name=source.name,
                source_url=source.url,
                success=True,
                status_code=status_code,
                feed_format=feed_format,
                items=items,
                item_count=len(items),
            )

        except asyncio.TimeoutError:
            return self._failure(source, f"Timed out after {self.timeout:g}s", status_code)
        except httpx.TimeoutException as e:
            return self._failure(source, f"Timed out: {e}", status_code)
        except httpx.HTTPStatusError as e:
            return self._failure(source, f"HTTP {e.response.status_code}", status_code)
        except httpx.HTTPError as e:
            return self._failure(source, f"HTTP error: {e}", status_code)
        except FeedParseError as e:
            return self._failure(source, str(e), status_code)
        except Exception as e:  # noqa: BLE001
            return self._failure(source, f"Unexpected error: {e}", status_code)

    async def fetch_all_feeds(
        self,
        sources: Sequence[SourceConfig],
        on_result: Optional[ResultCallback] = None,
    ) -> List[FeedResult]:
        """Fetch all enabled feeds concurrently, at most ``max_concurrent`` in flight.

        Results come back in source order regardless of completion order.
        """
        enabled_sources = [s for s in sources if s.enabled]

        if not enabled_sources:
            return []

        # Create semaphore for concurrency control
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async with self._client() as client:

            async def fetch_with_semaphore(source: SourceConfig) -> FeedResult:
                async with semaphore:
                    result = await self.fetch_feed(client, source)
                if on_result is not None:
                    on_result(result)
                return result

            tasks = [fetch_with_semaphore(source) for source in enabled_sources]
            results = await asyncio.gather(*tasks)

        return list(results)

    def fetch_feeds_sync(
        self,
        sources: Sequence[SourceConfig],
        on_result: Optional[ResultCallback] = None,
    ) -> List[FeedResult]:
        """Synchronous wrapper for fetch_all_feeds."""
        return asyncio.run(self.fetch_all_feeds(sources, on_result))


def print_feed_summary(results: List[FeedResult], show_failures: bool = False) -> None:
    """Print summary of feed fetch results."""
    total_items = sum(r.item_count for r in results)
    successful = sum(1 for r in results if r.success)
    failed = len(results) - successful

    console.print(
        f"[bold]Feeds:[/bold] {len(results)} fetched, "
        f"[green]{successful} ok[/green], [red]{failed} failed[/red], "
        f"{total_items} items"
    )

    if failed and show_failures:
        table = Table(title="Failed feeds")
        table.add_column("Source", style="cyan")
        table.add_column("Status", style="yellow")
        table.add_column("Error", style="red")
        for result in results:
            if not result.success:
                table.add_row(
                    result.source_name,
                    str(result.status_code) if result.status_code else "-",
                    result.error or "",
                )
        console.print(table)
