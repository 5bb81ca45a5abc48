"""Pydantic models for the GitHub data the table is built from.

Only the fields the status table reads are mapped.
API Reference: https://docs.github.com/en/rest/issues
"""

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Search results mix issues and pull requests; ``is_pull_request`` tells
    them apart.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(
        ..., gt=0, description="Issue number within the repository (integer)"
    )
    title: str = Field(..., description="Short description/title of the issue (string)")
    body: str | None = Field(
        None, description="Detailed description of the issue in markdown (string)"
    )
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    assignee: GitHubUser | None = Field(
        None, description="User the issue is assigned to, if any"
    )
    is_pull_request: bool = Field(
        False, description="Whether the search result is a pull request"
    )

    @property
    def label_names(self) -> set[str]:
        """Names of all labels attached to the issue."""
        return {label.name for label in self.labels}
