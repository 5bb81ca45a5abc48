"""Build the Markdown status table from GitHub issues."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from ..github_client.models import GitHubIssue
from .classifier import classify
from .links import RepositoryLinks, find_doc_file, resolve_link
from .metadata import extract_metadata
from .status import DEFAULT_STATUS_REGISTRY, UNKNOWN_STATUS, StatusRegistry

if TYPE_CHECKING:
    from ..github_client.client import GitHubClient

logger = logging.getLogger(__name__)

TABLE_HEADER = "\\#|Title|Owner|Status"
TABLE_SEPARATOR = "---|-----|-----|------"


class IssueRecord(BaseModel):
    """An issue normalised for display in the table."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    link: str
    assignee_display: str = ""
    champion_display: str = ""
    status: str
    doc_filename: str | None = None


def format_user(handle: str | None) -> str:
    """Render a GitHub handle as a profile link, or an empty cell."""
    if not handle:
        return ""
    if handle.startswith("@"):
        handle = handle[1:]
    handle = handle.strip()
    if not handle:
        return ""
    return f"[@{handle}](https://github.com/{handle})"


def build_records(
    issues: Iterable[GitHubIssue],
    doc_files: Sequence[str],
    links: RepositoryLinks,
    status_filter: Sequence[str] | None = None,
    registry: StatusRegistry = DEFAULT_STATUS_REGISTRY,
) -> Iterator[IssueRecord]:
    """Turn raw issues into table records, dropping what is not displayed.

    Pull requests, issues outside ``status_filter`` and closed issues of
    unknown status are skipped.
    """
    for issue in issues:
        if issue.is_pull_request:
            continue

        status = classify(issue.label_names, registry)
        if status_filter and status not in status_filter:
            continue
        if issue.state == "closed" and status == UNKNOWN_STATUS:
            logger.debug("Skipping closed issue #%d of unknown status", issue.number)
            continue

        metadata = extract_metadata(issue.body)
        doc = find_doc_file(doc_files, issue.number)
        assignee = issue.assignee.login if issue.assignee else None

        yield IssueRecord(
            number=issue.number,
            title=issue.title,
            link=resolve_link(links, issue.number, doc, metadata.pr_number),
            assignee_display=format_user(assignee),
            champion_display=format_user(metadata.champion),
            status=status,
            doc_filename=doc,
        )


def group_by_status(
    records: Iterable[IssueRecord], order: Sequence[str]
) -> dict[str, list[IssueRecord]]:
    """Group records by status in ``order``, each group sorted by issue number."""
    groups: dict[str, list[IssueRecord]] = {status: [] for status in order}
    for record in records:
        if record.status in groups:
            groups[record.status].append(record)

    for group in groups.values():
        group.sort(key=lambda record: record.number)
    return groups


def render_rows(
    records: Iterable[IssueRecord],
    links: RepositoryLinks,
    order: Sequence[str] | None = None,
    registry: StatusRegistry = DEFAULT_STATUS_REGISTRY,
) -> list[str]:
    """Render records as Markdown table lines, header and separator first."""
    lines = [TABLE_HEADER, TABLE_SEPARATOR]

    for status, group in group_by_status(records, order or registry.labels).items():
        display = registry.display(status) if status in registry else status
        for record in group:
            cols = [
                f"[{record.number}]({links.issue_url(record.number)})",
                f"[{record.title.strip()}]({record.link})",
                record.assignee_display,
                display,
            ]
            lines.append("|".join(cols))

    return lines


class TableRenderer:
    """Fetches a repository's issues and renders the status table."""

    def __init__(
        self,
        client: "GitHubClient",
        links: RepositoryLinks,
        doc_files: Sequence[str],
        registry: StatusRegistry = DEFAULT_STATUS_REGISTRY,
    ):
        """Initialize renderer.

        Args:
            client: Source of the repository's issues
            links: Link builder for the repository
            doc_files: RFC document names, in listing order
            registry: Recognised statuses
        """
        self.client = client
        self.links = links
        self.doc_files = list(doc_files)
        self.registry = registry

    def render(self, status_filter: Sequence[str] | None = None) -> list[str]:
        """Render the table, optionally restricted to and ordered by statuses.

        Args:
            status_filter: Status labels to include, in display order

        Returns:
            Markdown table lines
        """
        status_filter = list(status_filter) if status_filter else None

        # Issues of unknown status carry no matching label, so they can only
        # be found by an unfiltered search.
        search_labels = status_filter
        if status_filter and UNKNOWN_STATUS in status_filter:
            search_labels = None

        issues = self.client.iter_issues(self.links.repository, search_labels)
        records = build_records(
            issues, self.doc_files, self.links, status_filter, self.registry
        )
        lines = render_rows(records, self.links, status_filter, self.registry)
        logger.info("Rendered %d table rows", len(lines) - 2)
        return lines
