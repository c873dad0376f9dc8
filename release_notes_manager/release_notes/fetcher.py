"""Fetch the issues and pull requests of a milestone for release notes."""

import asyncio
import dataclasses
from typing import TypeVar

import structlog

from release_notes_manager.github.abc import ReleaseNotesClientBase
from release_notes_manager.utils.constants import (
    ENVIRONMENT_PLACEHOLDER,
    RELEASE_TYPE_PLACEHOLDER,
    REPO_NAME_PLACEHOLDER,
    VERSION_PLACEHOLDER,
)
from release_notes_manager.utils.helpers import replace_first

from .models import FetchedItems, GeneratorSettings, IssueItem, PullRequestItem, TrackedItem
from .sanitizer import TitleSanitizer

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=TrackedItem)


def render_template(template: str, settings: GeneratorSettings) -> str:
    """Substitute the version, release type and repository name placeholders in a template.

    Only the first occurrence of each placeholder is replaced. Missing values are
    substituted with an empty string.
    """
    release_type = settings.release_type or ""
    substitutions = {
        VERSION_PLACEHOLDER: settings.version or "",
        ENVIRONMENT_PLACEHOLDER: release_type,
        RELEASE_TYPE_PLACEHOLDER: release_type,
        REPO_NAME_PLACEHOLDER: settings.repo_name or "",
    }
    for placeholder, value in substitutions.items():
        template = replace_first(template, placeholder, value)
    return template


def filter_ignored(items: list[T], ignore_labels: list[str] | None) -> list[T]:
    """Remove every item carrying at least one of the ignored labels."""
    if not ignore_labels:
        return list(items)
    return [item for item in items if not item.has_any_label(ignore_labels)]


class ItemFetcher:
    """Fetches, filters and sanitizes the issues and pull requests of a milestone."""

    def __init__(self, client: ReleaseNotesClientBase, sanitizer: TitleSanitizer) -> None:
        """Initialize with a GitHub client scoped to the repository and a title sanitizer."""
        self.client = client
        self.sanitizer = sanitizer

    async def fetch(self, settings: GeneratorSettings) -> FetchedItems:
        """Fetch the issues and pull requests for the milestone named in the settings."""
        milestone_name = render_template(settings.milestone_name, settings)
        logger.info("Fetching milestone items", milestone=milestone_name)

        github_issues, github_pull_requests = await asyncio.gather(
            self.client.list_milestone_issues(milestone_name),
            self.client.list_milestone_pull_requests(milestone_name),
        )
        issues = [IssueItem.from_github(issue) for issue in github_issues]
        pull_requests = [PullRequestItem.from_github(pull_request) for pull_request in github_pull_requests]

        issues = filter_ignored(issues, settings.ignore_labels)
        pull_requests = filter_ignored(pull_requests, settings.ignore_labels)
        logger.info(
            "Fetched milestone items",
            milestone=milestone_name,
            issues=len(issues),
            pull_requests=len(pull_requests),
            ignored=len(github_issues) + len(github_pull_requests) - len(issues) - len(pull_requests),
        )

        return FetchedItems(
            issues=[self._sanitize(issue) for issue in issues],
            pull_requests=[self._sanitize(pull_request) for pull_request in pull_requests],
        )

    def _sanitize(self, item: T) -> T:
        return dataclasses.replace(item, title=self.sanitizer.sanitize(item.title))
