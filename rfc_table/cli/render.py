"""CLI commands that render the RFC status table."""

import logging
from pathlib import Path

import typer
from github.GithubException import GithubException
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import RenderConfig
from ..github_client.client import GitHubClient
from ..storage.document import DocumentManager, list_doc_files
from ..table.renderer import TableRenderer
from ..table.status import DEFAULT_STATUS_REGISTRY, normalize_status
from .options import (
    DRY_RUN_OPTION,
    REPO_OPTION,
    STATUS_OPTION,
    TEXT_DIR_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

USAGE = "rfc-table inject README.md [--status <STATUS_1>] [--status <STATUS_2>] [...]"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _build_table(
    status_filter: list[str] | None,
    repo: str | None,
    text_dir: str | None,
    token: str | None,
) -> list[str]:
    config = RenderConfig(repository=repo, text_dir=text_dir, token=token)
    config.validate()

    doc_files = list_doc_files(config.text_dir)
    client = GitHubClient(token=config.token)
    renderer = TableRenderer(client, config.links(), doc_files)
    return renderer.render(status_filter)


def _fail(error: Exception) -> typer.Exit:
    err_console.print(f"❌ Error: {error}", markup=False)
    err_console.print(f"Usage:\n\t{USAGE}", markup=False)
    return typer.Exit(1)


def inject(
    readme: Path = typer.Argument(
        Path("README.md"), help="Markdown document holding the table markers"
    ),
    status: list[str] | None = STATUS_OPTION,
    repo: str | None = REPO_OPTION,
    text_dir: str | None = TEXT_DIR_OPTION,
    token: str | None = TOKEN_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Render the status table and inject it between the README markers.

    Examples:
        rfc-table inject README.md
        rfc-table inject FULL_INDEX.md --status done --status stale
    """
    _setup_logging(verbose)
    status_filter = [normalize_status(s) for s in status] if status else None
    document = DocumentManager(readme)

    err_console.print(
        f"Injecting '{document.path}' with status: "
        f"{', '.join(status_filter) if status_filter else '<all>'}",
        markup=False,
    )

    try:
        document.check_markers()
        rows = _build_table(status_filter, repo, text_dir, token)
        text = document.inject(rows, dry_run=dry_run)
    except (ValueError, OSError, GithubException) as e:
        raise _fail(e)

    if dry_run:
        console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
        return

    err_console.print(f"✨ Wrote {len(rows) - 2} rows to {document.path}")


def render(
    status: list[str] | None = STATUS_OPTION,
    repo: str | None = REPO_OPTION,
    text_dir: str | None = TEXT_DIR_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print the status table to stdout without touching any document."""
    _setup_logging(verbose)
    status_filter = [normalize_status(s) for s in status] if status else None

    try:
        rows = _build_table(status_filter, repo, text_dir, token)
    except (ValueError, OSError, GithubException) as e:
        raise _fail(e)

    for row in rows:
        console.print(
            row, markup=False, emoji=False, highlight=False, soft_wrap=True
        )


def statuses() -> None:
    """List the recognised status labels."""
    table = Table(title="RFC Statuses")
    table.add_column("Label", style="cyan")
    table.add_column("Display", style="green")

    for entry in DEFAULT_STATUS_REGISTRY:
        table.add_row(entry.label, entry.display)

    console.print(table)
