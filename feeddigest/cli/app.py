"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .run import run_command
from .sources import sources_app

app = typer.Typer(
    name="feeddigest",
    help="Feed Digest - fetch recent RSS/Atom articles as JSON",
    no_args_is_help=True,
)

# Register commands
app.command("run")(run_command)
app.add_typer(sources_app, name="sources", help="Inspect feed sources")


if __name__ == "__main__":
    app()
