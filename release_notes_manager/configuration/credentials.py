"""Credential providers used to resolve the GitHub token for a generation run.

Generator settings only carry the *name* of the environment variable holding the
token. Resolution happens through a provider handed to the generator, which keeps
the core independent from the process environment.
"""

import os
from typing import Mapping, Protocol

import structlog

from release_notes_manager.configuration.exceptions import CredentialNotFoundError

logger = structlog.get_logger(__name__)


class CredentialProvider(Protocol):
    """Protocol for objects able to resolve a GitHub token."""

    def get_token(self, env_var_name: str) -> str:
        """Return the token referenced by env_var_name.

        Raises:
            CredentialNotFoundError: If no token could be resolved.
        """
        ...


class EnvironmentCredentialProvider:
    """Resolves tokens from environment variables at call time."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize with an optional environment mapping (defaults to os.environ)."""
        self._environ = environ

    def get_token(self, env_var_name: str) -> str:
        """Read the token from the named environment variable."""
        environ = os.environ if self._environ is None else self._environ
        token = environ.get(env_var_name, "").strip()
        if not token:
            logger.error("GitHub token environment variable missing or empty", env_var_name=env_var_name)
            raise CredentialNotFoundError(env_var_name)
        return token


class StaticCredentialProvider:
    """Returns a fixed token, ignoring the environment variable name."""

    def __init__(self, token: str) -> None:
        """Initialize with the token to return."""
        self._token = token

    def get_token(self, env_var_name: str) -> str:
        """Return the fixed token."""
        if not self._token:
            raise CredentialNotFoundError(env_var_name)
        return self._token
