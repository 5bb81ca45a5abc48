"""Shared CLI option definitions so shorthands stay consistent across commands."""

import typer

STATUS_OPTION = typer.Option(
    None,
    "--status",
    "-s",
    help="Status to include, in display order (can be used multiple times)",
)

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="GitHub repository as owner/name (defaults to RFC_REPOSITORY)",
)

TEXT_DIR_OPTION = typer.Option(
    None, "--text-dir", help="Directory of RFC documents (defaults to RFC_TEXT_DIR)"
)

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Print the updated table without writing the file"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show progress logging")
