"""Custom exceptions for the release notes module."""


class ReleaseNotesError(Exception):
    """Base class for errors that abort release notes generation."""

    pass


class SettingsValidationError(ReleaseNotesError):
    """Raised when generator settings refer to things that do not exist."""

    pass


class RepositoryNotFoundError(SettingsValidationError):
    """Raised when the target repository does not exist."""

    def __init__(self, owner: str, repo_name: str) -> None:
        """Initialize with the owner and name of the missing repository."""
        super().__init__(f"The repository '{owner}/{repo_name}' does not exist.")
        self.owner = owner
        self.repo_name = repo_name


class LabelValidationError(SettingsValidationError):
    """Raised when one or more labels referenced by a setting do not exist."""

    def __init__(self, setting_name: str, missing_labels: list[str]) -> None:
        """Initialize with the setting name and every label that is missing."""
        labels = ", ".join(f"'{label}'" for label in missing_labels)
        super().__init__(f"The following labels referenced by '{setting_name}' do not exist: {labels}")
        self.setting_name = setting_name
        self.missing_labels = missing_labels


class VersionResolutionError(ReleaseNotesError):
    """Raised when a version found in a title cannot be resolved to major.minor.patch."""

    def __init__(self, version: str) -> None:
        """Initialize with the offending version string."""
        super().__init__(f"The version '{version}' has more than 3 numeric components and cannot be resolved.")
        self.version = version
