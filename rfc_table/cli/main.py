"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .render import inject, render, statuses

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="rfc-table",
    help="Render the RFC status table of a GitHub repository",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="inject", context_settings={"help_option_names": ["-h", "--help"]})(
    inject
)
app.command(name="render", context_settings={"help_option_names": ["-h", "--help"]})(
    render
)
app.command(
    name="statuses", context_settings={"help_option_names": ["-h", "--help"]}
)(statuses)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from rfc_table import __version__

    console.print(f"RFC Table v{__version__}")


if __name__ == "__main__":
    app()
