"""Configuration exceptions: settings files, environment, overrides."""

from typing import Any

from .base import SearchdocError


class ConfigurationError(SearchdocError):
    """Base class for configuration-related errors."""

    # Same status typer uses for bad command-line usage
    exit_code = 2


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": value, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
