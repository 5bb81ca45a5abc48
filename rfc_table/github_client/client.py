"""GitHub API client using PyGitHub."""

import logging
import os
from collections.abc import Iterator

from github import Auth, Github
from github.Issue import Issue
from github.Label import Label
from github.NamedUser import NamedUser

from .models import GitHubIssue, GitHubLabel, GitHubUser
from .search import build_status_query

logger = logging.getLogger(__name__)


class GitHubClient:
    """GitHub API client for reading a repository's issues."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var. Without a token the client is
                anonymous and subject to the public rate limit.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if self.token:
            self.github = Github(auth=Auth.Token(self.token))
        else:
            logger.warning("No GitHub token configured, using anonymous access")
            self.github = Github()

    def _convert_user(self, github_user: NamedUser | None) -> GitHubUser | None:
        """Convert PyGitHub user to our model."""
        if github_user is None:
            return None
        return GitHubUser(login=github_user.login)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(name=github_label.name)

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model."""
        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            body=github_issue.body,
            state=github_issue.state,
            labels=[self._convert_label(label) for label in github_issue.labels],
            assignee=self._convert_user(github_issue.assignee),
            is_pull_request=github_issue.pull_request is not None,
        )

    def iter_issues(
        self, repository: str, labels: list[str] | None = None
    ) -> Iterator[GitHubIssue]:
        """Yield the issues of a repository, fetching pages as they are consumed.

        Args:
            repository: Repository in ``owner/name`` form
            labels: Status labels to filter by on the server side

        Yields:
            GitHubIssue objects, pull requests included
        """
        query = build_status_query(repository, labels)
        logger.info("Searching with query: %s", query)

        for github_issue in self.github.search_issues(query):
            yield self._convert_issue(github_issue)
