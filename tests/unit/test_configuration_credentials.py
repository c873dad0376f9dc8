"""Unit tests for resolving the GitHub token."""

import pytest
from pytest import MonkeyPatch

from release_notes_manager.configuration.credentials import EnvironmentCredentialProvider, StaticCredentialProvider
from release_notes_manager.configuration.exceptions import CredentialNotFoundError


def test_environment_provider_reads_at_call_time(monkeypatch: MonkeyPatch) -> None:
    """Test that the token is read from the environment when requested, not when the provider is built."""
    provider = EnvironmentCredentialProvider()
    monkeypatch.setenv("RELEASE_NOTES_TOKEN", "  ghp_example  ")
    assert provider.get_token("RELEASE_NOTES_TOKEN") == "ghp_example"


@pytest.mark.parametrize("environ", [{}, {"RELEASE_NOTES_TOKEN": ""}, {"RELEASE_NOTES_TOKEN": "   "}])
def test_environment_provider_missing_token(environ: dict[str, str]) -> None:
    """Test that unset or empty variables are reported by name."""
    provider = EnvironmentCredentialProvider(environ)
    with pytest.raises(CredentialNotFoundError, match="RELEASE_NOTES_TOKEN") as exc_info:
        provider.get_token("RELEASE_NOTES_TOKEN")
    assert exc_info.value.env_var_name == "RELEASE_NOTES_TOKEN"


def test_static_provider() -> None:
    """Test that the static provider ignores the variable name."""
    assert StaticCredentialProvider("token").get_token("ANYTHING") == "token"
    with pytest.raises(CredentialNotFoundError):
        StaticCredentialProvider("").get_token("ANYTHING")
