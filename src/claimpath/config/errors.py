"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidConfigurationValueError(ConfigurationError):
    """Raised when an environment override is present but unusable."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} {reason}, got {value!r}")
