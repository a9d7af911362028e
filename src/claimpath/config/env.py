"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import InvalidConfigurationValueError


def optional_int_env_var(name: str) -> int | None:
    """Return an integer environment variable, ``None`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise InvalidConfigurationValueError(name, value, "must be an integer") from exc
