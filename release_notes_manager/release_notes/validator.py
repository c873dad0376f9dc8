"""Validation of generator settings against the target repository."""

import asyncio

import structlog

from release_notes_manager.configuration.exceptions import RequiredConfigurationElementError
from release_notes_manager.github.abc import ReleaseNotesClientBase
from release_notes_manager.utils.helpers import unique_in_order

from .exceptions import LabelValidationError, RepositoryNotFoundError
from .models import GeneratorSettings

logger = structlog.get_logger(__name__)

REQUIRED_SETTINGS: list[tuple[str, str, str]] = [
    ("owner_name", "ownerName", "Repository owner name"),
    ("repo_name", "repoName", "Repository name"),
    ("header_text", "headerText", "Header text"),
    ("github_token_env_var_name", "githubTokenEnvVarName", "GitHub token environment variable name"),
]
"""Required settings as (field name, settings file key, human readable name), checked in order."""


def validate_required_settings(settings: GeneratorSettings) -> None:
    """Check that every required setting has a value.

    Raises:
        RequiredConfigurationElementError: For the first required setting that is missing.
    """
    for field_name, setting_name, name in REQUIRED_SETTINGS:
        value = getattr(settings, field_name)
        if not value or not value.strip():
            logger.error("Missing required setting", setting=setting_name)
            raise RequiredConfigurationElementError(name=name, setting_name=setting_name)


class SettingsValidator:
    """Validates generator settings before anything is fetched."""

    def __init__(self, client: ReleaseNotesClientBase) -> None:
        """Initialize with a GitHub client scoped to the target repository."""
        self.client = client

    async def validate(self, settings: GeneratorSettings) -> None:
        """Validate the settings.

        Required settings are checked first, then the existence of the repository,
        then the labels referenced by the label mappings and the ignore list.

        Raises:
            RequiredConfigurationElementError: If a required setting is missing.
            RepositoryNotFoundError: If the repository does not exist.
            LabelValidationError: If labels referenced by a setting do not exist.
        """
        validate_required_settings(settings)

        if not await self.client.repository_exists():
            logger.error("Repository does not exist", owner=settings.owner_name, repo_name=settings.repo_name)
            raise RepositoryNotFoundError(settings.owner_name, settings.repo_name)

        label_groups: list[tuple[str, list[str]]] = [
            ("issueCategoryLabelMappings", list((settings.issue_category_label_mappings or {}).keys())),
            ("prCategoryLabelMappings", list((settings.pr_category_label_mappings or {}).keys())),
            ("ignoreLabels", list(settings.ignore_labels or [])),
        ]
        for setting_name, labels in label_groups:
            await self.validate_labels(setting_name, labels)

        logger.info("Settings validated", owner=settings.owner_name, repo_name=settings.repo_name)

    async def validate_labels(self, setting_name: str, labels: list[str]) -> None:
        """Check that every label exists, reporting all missing labels at once.

        Raises:
            LabelValidationError: If one or more labels do not exist.
        """
        labels = unique_in_order(labels)
        if not labels:
            return

        results = await asyncio.gather(*(self.client.label_exists(label) for label in labels))
        missing_labels = [label for label, exists in zip(labels, results) if not exists]
        if missing_labels:
            logger.error("Labels do not exist", setting=setting_name, missing_labels=missing_labels)
            raise LabelValidationError(setting_name, missing_labels)
        logger.debug("Labels exist", setting=setting_name, labels=labels)
