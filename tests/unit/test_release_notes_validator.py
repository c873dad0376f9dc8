"""Unit tests for validating generator settings."""

import pytest

from release_notes_manager.configuration.exceptions import RequiredConfigurationElementError
from release_notes_manager.release_notes.exceptions import LabelValidationError, RepositoryNotFoundError
from release_notes_manager.release_notes.models import GeneratorSettings
from release_notes_manager.release_notes.validator import SettingsValidator, validate_required_settings
from tests.unit.utils import FakeReleaseNotesClient

REQUIRED = {
    "owner_name": "octocat",
    "repo_name": "hello-world",
    "header_text": "Release ${VERSION}",
    "github_token_env_var_name": "GITHUB_TOKEN",
}


@pytest.mark.parametrize(
    "missing,setting_name",
    [
        ("owner_name", "ownerName"),
        ("repo_name", "repoName"),
        ("header_text", "headerText"),
        ("github_token_env_var_name", "githubTokenEnvVarName"),
    ],
)
def test_validate_required_settings_missing(missing: str, setting_name: str) -> None:
    """Test that an empty or blank required setting is reported by its settings file key."""
    for empty in ("", "   "):
        settings = GeneratorSettings(**{**REQUIRED, missing: empty})
        with pytest.raises(RequiredConfigurationElementError) as exc_info:
            validate_required_settings(settings)
        assert exc_info.value.setting_name == setting_name
        assert setting_name in str(exc_info.value)


def test_validate_required_settings_reports_first_missing() -> None:
    """Test that required settings are checked in order."""
    with pytest.raises(RequiredConfigurationElementError) as exc_info:
        validate_required_settings(GeneratorSettings())
    assert exc_info.value.setting_name == "ownerName"


@pytest.mark.asyncio
async def test_validate_success() -> None:
    """Test validation when the repository and every referenced label exist."""
    client = FakeReleaseNotesClient(labels=["bug", "dependencies", "wontfix"])
    settings = GeneratorSettings(
        **REQUIRED,
        issue_category_label_mappings={"bug": "Bug Fixes"},
        pr_category_label_mappings={"dependencies": "Dependencies", "bug": "Bug Fixes"},
        ignore_labels=["wontfix", "wontfix"],
    )
    await SettingsValidator(client).validate(settings)
    assert client.label_checks == ["bug", "dependencies", "bug", "wontfix"]


@pytest.mark.asyncio
async def test_validate_missing_repository() -> None:
    """Test that a missing repository is reported before any label is checked."""
    client = FakeReleaseNotesClient(repository_exists=False)
    settings = GeneratorSettings(**REQUIRED, ignore_labels=["wontfix"])
    with pytest.raises(RepositoryNotFoundError, match="octocat/hello-world"):
        await SettingsValidator(client).validate(settings)
    assert client.label_checks == []


@pytest.mark.asyncio
async def test_validate_reports_every_missing_label_of_a_setting() -> None:
    """Test that all missing labels of the first failing setting are reported together."""
    client = FakeReleaseNotesClient(labels=["bug"])
    settings = GeneratorSettings(
        **REQUIRED,
        issue_category_label_mappings={"bug": "Bug Fixes", "Bug Fixes 🐛": "Bug Fixes", "docs": "Documentation"},
        ignore_labels=["wontfix"],
    )
    with pytest.raises(LabelValidationError) as exc_info:
        await SettingsValidator(client).validate(settings)
    assert exc_info.value.setting_name == "issueCategoryLabelMappings"
    assert exc_info.value.missing_labels == ["Bug Fixes 🐛", "docs"]
    assert "'Bug Fixes 🐛', 'docs'" in str(exc_info.value)
    assert "wontfix" not in client.label_checks


@pytest.mark.asyncio
async def test_validate_ignore_labels() -> None:
    """Test that ignored labels must exist too."""
    client = FakeReleaseNotesClient(labels=["bug"])
    settings = GeneratorSettings(**REQUIRED, ignore_labels=["bug", "wontfix"])
    with pytest.raises(LabelValidationError) as exc_info:
        await SettingsValidator(client).validate(settings)
    assert exc_info.value.setting_name == "ignoreLabels"
    assert exc_info.value.missing_labels == ["wontfix"]
