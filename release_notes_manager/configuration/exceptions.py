"""Contains exceptions raised when reconciling application configuration."""


class ConfigurationError(Exception):
    """Base class for configuration errors."""

    pass


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, setting_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (setting '{setting_name}')")
        self.name = name
        self.setting_name = setting_name


class CredentialNotFoundError(ConfigurationError):
    """Raised when the environment variable holding the GitHub token is unset or empty."""

    def __init__(self, env_var_name: str) -> None:
        """Initializes the exception with the name of the environment variable."""
        super().__init__(f"The environment variable '{env_var_name}' does not exist or has no value.")
        self.env_var_name = env_var_name
