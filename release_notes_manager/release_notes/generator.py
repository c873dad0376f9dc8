"""Main release notes generation orchestration."""

from pathlib import Path
from typing import Awaitable, Callable

import structlog

from ..configuration.credentials import CredentialProvider, EnvironmentCredentialProvider
from ..configuration.env import settings as app_settings
from ..github.abc import ReleaseNotesClientBase
from ..github.adapter import GitHubAdapter
from .categorizer import Categorizer
from .fetcher import ItemFetcher
from .markdown import MarkdownRenderer
from .models import GeneratorSettings, ReleaseNotesResult, ReleaseNotesStatus
from .sanitizer import TitleSanitizer
from .validator import SettingsValidator, validate_required_settings

logger = structlog.get_logger(__name__)

ClientFactory = Callable[[str, str, str, str], Awaitable[ReleaseNotesClientBase]]
"""Callable building a GitHub client from (owner, repo name, token, API URL)."""


async def create_github_client(owner: str, repo_name: str, github_token: str, github_api_url: str) -> ReleaseNotesClientBase:
    """Default client factory backed by PyGithub."""
    return await GitHubAdapter.create(
        owner=owner,
        repo_name=repo_name,
        github_token=github_token,
        github_api_url=github_api_url,
    )


class ReleaseNotesGenerator:
    """Generates categorized markdown release notes for the issues and pull requests of a milestone.

    The generator validates the settings, fetches the milestone items, sanitizes their
    titles, sorts them into categories and renders the document. Any failure aborts
    the run; no partial document is ever returned.

    A generator holds no state between runs, but a fresh instance per run is expected.
    """

    def __init__(
        self,
        credential_provider: CredentialProvider | None = None,
        client_factory: ClientFactory | None = None,
        github_api_url: str | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            credential_provider: Resolves the GitHub token; defaults to reading environment variables
            client_factory: Builds the GitHub client; defaults to the PyGithub adapter
            github_api_url: GitHub API URL; defaults to the GITHUB_API_URL setting
        """
        self.credential_provider = credential_provider or EnvironmentCredentialProvider()
        self.client_factory = client_factory or create_github_client
        self.github_api_url = github_api_url or app_settings.GITHUB_API_URL

    async def create_client(self, settings: GeneratorSettings) -> ReleaseNotesClientBase:
        """Check the required settings, resolve the token and create the GitHub client."""
        validate_required_settings(settings)
        github_token = self.credential_provider.get_token(settings.github_token_env_var_name)
        return await self.client_factory(settings.owner_name, settings.repo_name, github_token, self.github_api_url)

    async def validate(self, settings: GeneratorSettings) -> None:
        """Validate the settings against the repository without generating anything."""
        client = await self.create_client(settings)
        await SettingsValidator(client).validate(settings)

    async def generate_notes(self, settings: GeneratorSettings) -> str:
        """Generate the release notes described by the settings.

        Returns:
            The release notes as a markdown document.
        """
        client = await self.create_client(settings)
        await SettingsValidator(client).validate(settings)

        fetcher = ItemFetcher(client, TitleSanitizer(settings))
        items = await fetcher.fetch(settings)

        sections = Categorizer(settings).categorize(items)
        notes = MarkdownRenderer().render(settings, sections)
        logger.info(
            "Generated release notes",
            owner=settings.owner_name,
            repo_name=settings.repo_name,
            categories=len(sections),
        )
        return notes


def apply_overrides(settings: GeneratorSettings, version: str | None = None, release_type: str | None = None) -> GeneratorSettings:
    """Return a copy of the settings with the version and/or release type replaced."""
    updates: dict[str, str] = {}
    if version is not None:
        updates["version"] = version
    if release_type is not None:
        updates["release_type"] = release_type
    if not updates:
        return settings
    return settings.model_copy(update=updates)


async def run_generate_release_notes(
    settings: GeneratorSettings,
    generator: ReleaseNotesGenerator,
    output_path: Path | None = None,
    dry_run: bool = False,
) -> ReleaseNotesResult:
    """Generate release notes and write them to output_path unless this is a dry run.

    Errors are reported through the result rather than raised.
    """
    try:
        notes = await generator.generate_notes(settings)
    except Exception as e:
        logger.exception("Failed to generate release notes")
        return ReleaseNotesResult(status=ReleaseNotesStatus.ERROR, error=str(e))

    if dry_run or output_path is None:
        status = ReleaseNotesStatus.DRY_RUN if dry_run else ReleaseNotesStatus.SUCCESS
        return ReleaseNotesResult(status=status, content=notes)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(notes, encoding="utf-8")
    logger.info("Wrote release notes", path=str(output_path))
    return ReleaseNotesResult(status=ReleaseNotesStatus.SUCCESS, content=notes, output_path=str(output_path))
