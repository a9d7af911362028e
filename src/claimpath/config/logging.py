"""Shared logging helpers for claimpath."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "CLAIMPATH_LOG_LEVEL"


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    falls back to ``CLAIMPATH_LOG_LEVEL`` and then INFO, with a terse format
    suitable for console output. Pass ``force=True`` to reconfigure during tests or
    specialised entry points.
    """

    logging.basicConfig(
        level=_resolve_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def _resolve_level(level: int | str | None) -> int | str:
    if level is not None:
        return level
    raw = os.getenv(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return logging.INFO
    if raw.isdigit():
        return int(raw)
    return raw.upper()
