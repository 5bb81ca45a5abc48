"""Champion and pull request metadata embedded in RFC issue bodies.

RFC issues carry a small table written by hand::

    |PR|Champion|
    |--|--------|
    |#42|Jane|

The data row is read by position: two lines below the header, cell 1 for
the pull request and cell 2 for the champion.
"""

from pydantic import BaseModel, ConfigDict

METADATA_HEADER = "|PR|Champion|"


class IssueMetadata(BaseModel):
    """Metadata recovered from an issue body."""

    model_config = ConfigDict(frozen=True)

    champion: str | None = None
    pr_number: int | None = None


def _parse_pr_number(cell: str) -> int | None:
    if not cell.startswith("#"):
        return None
    digits = cell[1:].strip()
    if not digits.isdecimal() or int(digits) == 0:
        return None
    return int(digits)


def extract_metadata(body: str | None) -> IssueMetadata:
    """Extract champion and pull request number from an issue body.

    Missing header, missing data row, short rows and malformed cells all
    yield absent fields.
    """
    lines = (body or "").split("\n")

    header_index = next(
        (i for i, line in enumerate(lines) if line.startswith(METADATA_HEADER)), None
    )
    if header_index is None or header_index + 2 >= len(lines):
        return IssueMetadata()

    cells = lines[header_index + 2].split("|")
    pr_cell = cells[1] if len(cells) > 1 else ""
    champion_cell = cells[2].strip() if len(cells) > 2 else ""

    return IssueMetadata(
        champion=champion_cell or None,
        pr_number=_parse_pr_number(pr_cell),
    )
