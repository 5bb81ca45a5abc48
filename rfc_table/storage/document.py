"""Reading RFC documents and splicing the table into a README."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEGIN_MARKER = "<!--BEGIN_TABLE-->"
END_MARKER = "<!--END_TABLE-->"


class MarkerNotFoundError(ValueError):
    """The document lacks usable table markers."""


def find_markers(lines: list[str], source: str = "document") -> tuple[int, int]:
    """Locate the begin and end marker lines.

    Raises:
        MarkerNotFoundError: If either marker is missing or they are out of order
    """
    try:
        begin = lines.index(BEGIN_MARKER)
        end = lines.index(END_MARKER)
    except ValueError:
        raise MarkerNotFoundError(f"unable to find begin/end markers in file {source}")

    if end < begin:
        raise MarkerNotFoundError(
            f"end marker precedes begin marker in file {source}"
        )
    return begin, end


def inject_table(text: str, rows: list[str], source: str = "document") -> str:
    """Replace everything between the table markers with ``rows``.

    Lines up to and including the begin marker, and from the end marker
    onward, are kept unchanged.

    Args:
        text: Document contents
        rows: Table lines to place between the markers
        source: Name used in error messages

    Returns:
        The new document contents

    Raises:
        MarkerNotFoundError: If either marker is missing or they are out of order
    """
    lines = text.split("\n")
    begin, end = find_markers(lines, source)
    return "\n".join([*lines[: begin + 1], *rows, *lines[end:]])


def list_doc_files(text_dir: str | Path) -> list[str]:
    """Names of the entries in the RFC text directory, sorted by name.

    Directories are included, since an RFC can be a folder of documents.
    """
    return sorted(entry.name for entry in Path(text_dir).iterdir())


class DocumentManager:
    """Manages the README the table is injected into."""

    def __init__(self, path: str | Path = "README.md"):
        """Initialize document manager.

        Args:
            path: Path to the Markdown document
        """
        self.path = Path(path).resolve()

    def read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def check_markers(self) -> None:
        """Fail early if the document cannot take a table."""
        find_markers(self.read().split("\n"), source=str(self.path))

    def inject(self, rows: list[str], dry_run: bool = False) -> str:
        """Inject table rows into the document.

        The file is written only once the complete text has been built.

        Args:
            rows: Table lines to inject
            dry_run: Build the new text without writing it

        Returns:
            The new document contents
        """
        text = inject_table(self.read(), rows, source=str(self.path))

        if dry_run:
            logger.info("Dry run, not writing %s", self.path)
            return text

        logger.info("Writing %s", self.path)
        self.path.write_text(text, encoding="utf-8")
        return text
