"""URLs for issues, pull requests and RFC documents."""

import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

GITHUB_URL = "https://github.com"

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


class RepositoryLinks(BaseModel):
    """Builds links into the RFC repository."""

    model_config = ConfigDict(frozen=True)

    repository: str = Field(..., description="Repository in 'owner/name' form")
    branch: str = Field("main", description="Branch the RFC documents live on")
    text_dir: str = Field("text", description="Directory holding RFC documents")

    def issue_url(self, number: int) -> str:
        return f"{GITHUB_URL}/{self.repository}/issues/{number}"

    def pull_url(self, number: int) -> str:
        return f"{GITHUB_URL}/{self.repository}/pull/{number}"

    def doc_url(self, filename: str) -> str:
        path = f"blob/{self.branch}/{self.text_dir}/{filename}"
        return f"{GITHUB_URL}/{self.repository}/{path}"


def doc_number(filename: str) -> int | None:
    """Issue number encoded in an RFC document name, e.g. ``0007-foo.md`` -> 7."""
    match = _LEADING_DIGITS.match(filename.split("-", 1)[0])
    return int(match.group(1)) if match else None


def find_doc_file(filenames: Iterable[str], number: int) -> str | None:
    """Return the first document whose numeric prefix equals ``number``.

    When several documents share a prefix the first one in listing order
    wins.
    """
    return next((name for name in filenames if doc_number(name) == number), None)


def resolve_link(
    links: RepositoryLinks,
    number: int,
    doc_filename: str | None = None,
    pr_number: int | None = None,
) -> str:
    """Pick the most specific link for an issue: document, pull request, issue."""
    if doc_filename:
        return links.doc_url(doc_filename)
    if pr_number:
        return links.pull_url(pr_number)
    return links.issue_url(number)
