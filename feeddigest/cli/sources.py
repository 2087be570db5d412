"""Sources commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import DEFAULT_SOURCES, Config, save_sources
from ..ingestion import FeedResult, RSSFetcher

console = Console()
err_console = Console(stderr=True)
sources_app = typer.Typer(help="Inspect feed sources")

SOURCES_OPTION = typer.Option(
    None,
    "--sources",
    "-s",
    help="YAML sources file replacing the embedded feed list",
)


def _load(sources_file: Optional[Path]):
    """Resolve fetch settings and the source list, exiting 1 on a bad file."""
    config = Config()
    try:
        settings = config.config.fetch
        return settings, config.get_sources(sources_file)
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@sources_app.command("list")
def sources_list(sources_file: Optional[Path] = SOURCES_OPTION) -> None:
    """List the feed sources a run would fetch."""
    _, sources = _load(sources_file)

    if not sources:
        console.print("[yellow]No sources configured.[/yellow]")
        return

    table = Table(title=f"Feed Sources ({len(sources)})")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", style="yellow")
    table.add_column("URL", style="blue")

    for source in sources:
        table.add_row(source.name, "✓" if source.enabled else "✗", source.url)

    console.print(table)


@sources_app.command("test")
def sources_test(
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all)"),
    sources_file: Optional[Path] = SOURCES_OPTION,
) -> None:
    """Fetch and parse sources, reporting each one's status."""
    settings, sources = _load(sources_file)

    if name:
        sources = [s for s in sources if s.name == name]
        if not sources:
            err_console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)

    def report(result: FeedResult) -> None:
        if result.success:
            fmt = result.feed_format.value if result.feed_format else "?"
            console.print(
                f"[green]✅ {result.source_name}: OK ({fmt}, {result.item_count} items)[/green]"
            )
        else:
            console.print(f"[red]❌ {result.source_name}: {result.error}[/red]")

    fetcher = RSSFetcher.from_settings(settings)
    results = fetcher.fetch_feeds_sync(sources, on_result=report)

    if results and not any(r.success for r in results):
        raise typer.Exit(1)


@sources_app.command("export")
def sources_export(
    path: Path = typer.Argument(..., help="Where to write the sources YAML file"),
) -> None:
    """Write the embedded feed list as an editable sources file."""
    if path.exists():
        err_console.print(f"[red]{path} already exists.[/red]")
        raise typer.Exit(1)
    save_sources(DEFAULT_SOURCES, path)
    console.print(f"[green]✅ Wrote {len(DEFAULT_SOURCES)} sources to {path}[/green]")
