"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_int_env_var
from .errors import ConfigurationError, InvalidConfigurationValueError
from .logging import configure_logging
from .traversal import DEFAULT_TRAVERSAL_CONFIG, TraversalConfig, get_traversal_config

__all__ = [
    "DEFAULT_TRAVERSAL_CONFIG",
    "ConfigurationError",
    "InvalidConfigurationValueError",
    "TraversalConfig",
    "configure_logging",
    "get_traversal_config",
    "optional_int_env_var",
]
