"""Test configuration and fixtures."""

from collections.abc import Callable

import pytest

from rfc_table.github_client.models import GitHubIssue, GitHubLabel, GitHubUser
from rfc_table.table.links import RepositoryLinks


@pytest.fixture
def links() -> RepositoryLinks:
    """Link builder for the RFC repository."""
    return RepositoryLinks(repository="aws/aws-cdk-rfcs")


@pytest.fixture
def make_issue() -> Callable[..., GitHubIssue]:
    """Factory for GitHub issues."""

    def _make_issue(
        number: int,
        labels: list[str] | None = None,
        state: str = "open",
        title: str | None = None,
        body: str | None = None,
        assignee: str | None = None,
        is_pull_request: bool = False,
    ) -> GitHubIssue:
        return GitHubIssue(
            number=number,
            title=title or f"RFC {number}",
            body=body,
            state=state,
            labels=[GitHubLabel(name=name) for name in labels or []],
            assignee=GitHubUser(login=assignee) if assignee else None,
            is_pull_request=is_pull_request,
        )

    return _make_issue


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep repository settings from the developer's shell out of the tests."""
    for name in ("RFC_REPOSITORY", "RFC_BRANCH", "RFC_TEXT_DIR"):
        monkeypatch.delenv(name, raising=False)
