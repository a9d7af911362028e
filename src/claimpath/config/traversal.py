"""Traversal engine defaults and their environment overrides."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Final

from .env import optional_int_env_var
from .errors import InvalidConfigurationValueError

CONFLICT_TIER_ENV_VAR: Final[str] = "CLAIMPATH_CONFLICT_TIER"
AFFECTED_LABEL_PREVIEW_ENV_VAR: Final[str] = "CLAIMPATH_AFFECTED_LABEL_PREVIEW"

DEFAULT_PLACEHOLDER_QUESTION: Final[str] = "Is this applicable to your situation?"


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Knobs for forcing point extraction.

    ``affected_label_preview`` bounds how many claim labels a synthesized
    conditional summary names before collapsing the rest into ``+N more``.
    Conflicts must sit in a later tier than conditionals.
    """

    conditional_tier: int = 0
    conflict_tier: int = 1
    affected_label_preview: int = 3
    placeholder_question: str = DEFAULT_PLACEHOLDER_QUESTION

    def __post_init__(self) -> None:
        if self.conflict_tier <= self.conditional_tier:
            raise InvalidConfigurationValueError(
                "conflict_tier",
                self.conflict_tier,
                f"must be greater than conditional_tier ({self.conditional_tier})",
            )
        if self.affected_label_preview < 1:
            raise InvalidConfigurationValueError(
                "affected_label_preview", self.affected_label_preview, "must be at least 1"
            )


DEFAULT_TRAVERSAL_CONFIG: Final[TraversalConfig] = TraversalConfig()


def get_traversal_config() -> TraversalConfig:
    overrides: dict[str, int] = {}

    conflict_tier = optional_int_env_var(CONFLICT_TIER_ENV_VAR)
    if conflict_tier is not None:
        overrides["conflict_tier"] = conflict_tier

    label_preview = optional_int_env_var(AFFECTED_LABEL_PREVIEW_ENV_VAR)
    if label_preview is not None:
        overrides["affected_label_preview"] = label_preview

    return replace(DEFAULT_TRAVERSAL_CONFIG, **overrides)
