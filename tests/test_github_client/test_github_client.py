"""Tests for GitHub client."""

import os
from unittest.mock import Mock, patch

import pytest
from github.GithubException import GithubException

from rfc_table.github_client.client import GitHubClient
from rfc_table.github_client.models import GitHubIssue


def _mock_issue(
    number: int = 42,
    labels: list[str] | None = None,
    assignee: str | None = "octocat",
    pull_request: object | None = None,
) -> Mock:
    mock_labels = []
    for name in labels or []:
        mock_label = Mock()
        mock_label.name = name
        mock_labels.append(mock_label)

    mock_issue = Mock()
    mock_issue.number = number
    mock_issue.title = "Test Issue"
    mock_issue.body = "Test body"
    mock_issue.state = "open"
    mock_issue.labels = mock_labels
    mock_issue.pull_request = pull_request
    if assignee is None:
        mock_issue.assignee = None
    else:
        mock_issue.assignee = Mock()
        mock_issue.assignee.login = assignee
    return mock_issue


class TestGitHubClient:
    """Test GitHubClient class."""

    @patch.dict(os.environ, {"GITHUB_TOKEN": "test_token"})
    def test_init_with_env_token(self) -> None:
        """Test initialization with environment token."""
        with (
            patch("rfc_table.github_client.client.Github") as mock_github,
            patch("rfc_table.github_client.client.Auth") as mock_auth,
        ):
            client = GitHubClient()

        assert client.token == "test_token"
        mock_auth.Token.assert_called_once_with("test_token")
        mock_github.assert_called_once_with(auth=mock_auth.Token.return_value)

    def test_init_with_explicit_token(self) -> None:
        """Test initialization with explicit token."""
        with (
            patch("rfc_table.github_client.client.Github"),
            patch("rfc_table.github_client.client.Auth") as mock_auth,
        ):
            GitHubClient(token="explicit_token")

        mock_auth.Token.assert_called_once_with("explicit_token")

    @patch.dict(os.environ, {}, clear=True)
    def test_init_without_token_is_anonymous(self) -> None:
        """Test initialization without token falls back to anonymous access."""
        with patch("rfc_table.github_client.client.Github") as mock_github:
            client = GitHubClient()

        assert client.token is None
        mock_github.assert_called_once_with()

    @patch("rfc_table.github_client.client.Github")
    def test_convert_issue(self, mock_github_class: Mock) -> None:
        """Test issue conversion."""
        client = GitHubClient(token="test_token")

        result = client._convert_issue(_mock_issue(labels=["status/done", "bug"]))

        assert isinstance(result, GitHubIssue)
        assert result.number == 42
        assert result.title == "Test Issue"
        assert result.label_names == {"status/done", "bug"}
        assert result.assignee is not None
        assert result.assignee.login == "octocat"
        assert result.is_pull_request is False

    @patch("rfc_table.github_client.client.Github")
    def test_convert_pull_request_without_assignee(
        self, mock_github_class: Mock
    ) -> None:
        """Test conversion of a pull request search result."""
        client = GitHubClient(token="test_token")

        result = client._convert_issue(
            _mock_issue(assignee=None, pull_request=Mock())
        )

        assert result.assignee is None
        assert result.is_pull_request is True

    @patch("rfc_table.github_client.client.Github")
    def test_iter_issues(self, mock_github_class: Mock) -> None:
        """Test iterating over search results."""
        mock_github = Mock()
        mock_github.search_issues.return_value = [_mock_issue(1), _mock_issue(2)]
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")
        results = list(
            client.iter_issues("aws/aws-cdk-rfcs", ["status/done", "status/stale"])
        )

        assert [issue.number for issue in results] == [1, 2]
        mock_github.search_issues.assert_called_once_with(
            "repo:aws/aws-cdk-rfcs is:issue label:status/done,status/stale"
        )

    @patch("rfc_table.github_client.client.Github")
    def test_iter_issues_is_lazy(self, mock_github_class: Mock) -> None:
        """Test that nothing is fetched until the iterator is consumed."""
        mock_github = Mock()
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")
        client.iter_issues("aws/aws-cdk-rfcs")

        mock_github.search_issues.assert_not_called()

    @patch("rfc_table.github_client.client.Github")
    def test_iter_issues_propagates_errors(self, mock_github_class: Mock) -> None:
        """Test that API failures are not swallowed."""
        mock_github = Mock()
        mock_github.search_issues.side_effect = GithubException(401, "Bad credentials")
        mock_github_class.return_value = mock_github

        client = GitHubClient(token="test_token")

        with pytest.raises(GithubException):
            list(client.iter_issues("aws/aws-cdk-rfcs"))
