"""Configuration for the RFC table renderer."""

import os
from typing import Optional

from .table.links import RepositoryLinks

DEFAULT_REPOSITORY = "aws/aws-cdk-rfcs"


class RenderConfig:
    """Configuration class read from environment variables."""

    def __init__(
        self,
        repository: Optional[str] = None,
        text_dir: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        """Initialize configuration, explicit arguments taking precedence."""
        self.token: Optional[str] = token or os.getenv("GITHUB_TOKEN")
        self.repository: str = repository or os.getenv(
            "RFC_REPOSITORY", DEFAULT_REPOSITORY
        )
        self.branch: str = os.getenv("RFC_BRANCH", "main")
        self.text_dir: str = text_dir or os.getenv("RFC_TEXT_DIR", "text")

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        owner, _, name = self.repository.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(
                f"Repository must be given as 'owner/name', got '{self.repository}'"
            )

    def links(self) -> RepositoryLinks:
        """Link builder for the configured repository."""
        return RepositoryLinks(
            repository=self.repository,
            branch=self.branch,
            text_dir=os.path.basename(os.path.normpath(self.text_dir)),
        )
