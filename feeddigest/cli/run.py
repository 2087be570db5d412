"""Run command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..errors import DigestWriteError
from ..pipeline import fetch_digest

console = Console(stderr=True)


def run_command(
    hours: Optional[int] = typer.Option(
        None,
        "--hours",
        "-H",
        min=0,
        help="Look-back window in hours. Default: from config (24)",
    ),
    output: str = typer.Option(
        "-",
        "--output",
        "-o",
        help="Destination JSON file, or '-' for stdout",
    ),
    sources_file: Optional[Path] = typer.Option(
        None,
        "--sources",
        "-s",
        help="YAML sources file replacing the embedded feed list",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.1,
        help="Per-request timeout in seconds",
    ),
    concurrency: Optional[int] = typer.Option(
        None,
        "--concurrency",
        "-c",
        min=1,
        help="Maximum simultaneous requests",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="List failed feeds and their errors",
    ),
) -> None:
    """Fetch recent articles from all feeds and write them as JSON."""
    try:
        config = Config()
        settings = config.config.fetch

        # CLI options override config values
        overrides = {}
        if timeout is not None:
            overrides["timeout"] = timeout
        if concurrency is not None:
            overrides["max_concurrent"] = concurrency
        if overrides:
            settings = settings.model_copy(update=overrides)

        if hours is None:
            hours = settings.default_hours

        sources = config.get_sources(sources_file)

        fetch_digest(
            hours=hours,
            output_path=output,
            sources=sources,
            settings=settings,
            verbose=verbose,
        )

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except (DigestWriteError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Digest failed: {e}[/red]")
        raise typer.Exit(1)
