"""Base ABC for GitHub clients used by the release notes generator."""

from abc import ABC, abstractmethod
from typing import Any


class ReleaseNotesClientBase(ABC):
    """Base ABC for GitHub clients scoped to a single owner/repository pair."""

    # Repository
    @abstractmethod
    async def repository_exists(self) -> bool:
        """Check if the repository exists."""
        pass

    # Labels
    @abstractmethod
    async def label_exists(self, name: str) -> bool:
        """Check if a label with the given name exists in the repository."""
        pass

    # Milestones
    @abstractmethod
    async def get_milestone_by_title(self, title: str) -> Any | None:
        """Get a milestone by its title, or None if the repository has no such milestone."""
        pass

    @abstractmethod
    async def list_milestone_issues(self, milestone_title: str) -> list[Any]:
        """List all issues (open and closed) associated with a milestone, excluding pull requests."""
        pass

    @abstractmethod
    async def list_milestone_pull_requests(self, milestone_title: str) -> list[Any]:
        """List all pull requests (open and closed) associated with a milestone."""
        pass
