"""GitHub client adapter for the PyGithub library.

PyGithub is synchronous, so every call runs in a worker thread. This keeps the
adapter awaitable and lets independent lookups (such as label existence checks)
run concurrently.
"""

import asyncio
from typing import Any, Self

import structlog
from github import Github, UnknownObjectException
from github.Milestone import Milestone
from github.Repository import Repository

from release_notes_manager.utils.constants import DEFAULT_GITHUB_API_URL
from release_notes_manager.utils.github import is_pull_request
from release_notes_manager.utils.retry import retry_on_rate_limit

from .abc import ReleaseNotesClientBase
from .client import get_github_client

logger = structlog.get_logger(__name__)


class GitHubAdapter(ReleaseNotesClientBase):
    """GitHub client adapter for the PyGithub library."""

    def __init__(self, client: Github, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name
        self._milestone_items: dict[str, asyncio.Future[list[dict[str, Any]]]] = {}

    @classmethod
    async def create(
        cls,
        owner: str,
        repo_name: str,
        github_token: str,
        github_api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Owner (user or organization) of the repository
            repo_name: Name of the repository
            github_token: Personal access token used to authenticate
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    @property
    def full_name(self) -> str:
        """The repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo_name}"

    def _repository(self) -> Repository:
        """Lazy repository handle, no request is made until it is used."""
        return self.client.get_repo(self.full_name, lazy=True)

    # Repository
    @retry_on_rate_limit()
    async def repository_exists(self) -> bool:
        """Check if the repository exists (and is visible with the current credentials)."""
        try:
            await asyncio.to_thread(self.client.get_repo, self.full_name)
            return True
        except UnknownObjectException:
            logger.debug("Repository not found", owner=self.owner, repo_name=self.repo_name)
            return False

    # Labels
    @retry_on_rate_limit()
    async def label_exists(self, name: str) -> bool:
        """Check if a label with the given name exists in the repository."""
        try:
            await asyncio.to_thread(self._repository().get_label, name)
            return True
        except UnknownObjectException:
            logger.debug("Label not found", owner=self.owner, repo_name=self.repo_name, label=name)
            return False

    # Milestones
    @retry_on_rate_limit()
    async def list_milestones(self) -> list[Milestone]:
        """List all milestones (open and closed) for the repository."""
        return await asyncio.to_thread(lambda: list(self._repository().get_milestones(state="all")))

    async def get_milestone_by_title(self, title: str) -> Milestone | None:
        """Get a milestone by its exact title."""
        for milestone in await self.list_milestones():
            if milestone.title == title:
                return milestone
        return None

    @retry_on_rate_limit()
    async def _list_milestone_items(self, milestone: Milestone) -> list[dict[str, Any]]:
        """List the raw data of every issue and pull request attached to a milestone."""

        def _fetch() -> list[dict[str, Any]]:
            return [issue.raw_data for issue in self._repository().get_issues(milestone=milestone, state="all")]

        return await asyncio.to_thread(_fetch)

    async def _get_milestone_items(self, milestone_title: str) -> list[dict[str, Any]]:
        """Fetch the items of a milestone once, sharing the result between issue and pull request listings."""
        if milestone_title not in self._milestone_items:
            self._milestone_items[milestone_title] = asyncio.ensure_future(self._fetch_milestone_items(milestone_title))
        return await self._milestone_items[milestone_title]

    async def _fetch_milestone_items(self, milestone_title: str) -> list[dict[str, Any]]:
        milestone = await self.get_milestone_by_title(milestone_title)
        if milestone is None:
            logger.warning("Milestone not found, no items will be returned", owner=self.owner, repo_name=self.repo_name, milestone=milestone_title)
            return []
        return await self._list_milestone_items(milestone)

    async def list_milestone_issues(self, milestone_title: str) -> list[dict[str, Any]]:
        """List all issues (open and closed) associated with a milestone, excluding pull requests."""
        items = await self._get_milestone_items(milestone_title)
        issues = [item for item in items if not is_pull_request(item)]
        logger.debug("Fetched milestone issues", milestone=milestone_title, count=len(issues))
        return issues

    async def list_milestone_pull_requests(self, milestone_title: str) -> list[dict[str, Any]]:
        """List all pull requests (open and closed) associated with a milestone.

        Pull requests are returned in their issue representation, which carries the
        labels and the html URL of the pull request.
        """
        items = await self._get_milestone_items(milestone_title)
        pull_requests = [item for item in items if is_pull_request(item)]
        logger.debug("Fetched milestone pull requests", milestone=milestone_title, count=len(pull_requests))
        return pull_requests
