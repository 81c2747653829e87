"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are missing or inconsistent for the environment."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        super().__init__(f"Invalid configuration for {setting}: {reason}")


class DependencyInjectionError(UtilError):
    """Raised when a DI component cannot be resolved to an implementation."""

    pass
