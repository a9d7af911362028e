"""Pydantic models describing the upstream mapper graph entries.

The upstream shape has drifted over time, so every entry is validated on its
own and the normalizer drops whatever fails. Identifier fields go through
``_coerce_text``: strings are stripped, non-zero numbers are stringified and
everything else (``None``, ``False``, ``0``, blanks, containers) is treated as
absent.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


def _coerce_text(value: object) -> str | None:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, int):
        return str(value) if value else None
    if isinstance(value, float):
        if not value or value != value:
            return None
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _coerce_text_list(value: object) -> tuple[str, ...] | None:
    if not isinstance(value, list | tuple):
        return None
    return tuple(text for item in value if (text := _coerce_text(item)) is not None)


def _string_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None


class UpstreamBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ClaimPayload(UpstreamBaseModel):
    id: str
    label: str | None = None
    text: str | None = None
    description: str | None = None
    source_statement_ids: tuple[str, ...] | None = Field(
        default=None, alias="sourceStatementIds"
    )

    _coerce_id = field_validator("id", mode="before")(_coerce_text)
    _coerce_label = field_validator("label", mode="before")(_coerce_text)
    _strings_only = field_validator("text", "description", mode="before")(_string_or_none)
    _coerce_sources = field_validator("source_statement_ids", mode="before")(_coerce_text_list)

    @property
    def display_label(self) -> str:
        return self.label or self.id

    @property
    def body(self) -> str | None:
        return self.text if self.text is not None else self.description


class ConflictEdgePayload(UpstreamBaseModel):
    """Explicit ``edges[]`` entry. Validated strictly, nothing is coerced."""

    from_id: StrictStr = Field(alias="from")
    to_id: StrictStr = Field(alias="to")
    type: Literal["conflict"]
    question: StrictStr | None = None
    source_statement_ids: tuple[str, ...] | None = Field(
        default=None, alias="sourceStatementIds"
    )

    _coerce_sources = field_validator("source_statement_ids", mode="before")(_coerce_text_list)

    @field_validator("from_id", "to_id")
    @classmethod
    def _require_endpoint(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("edge endpoint must be a non-blank string")
        return stripped


class TensionPayload(UpstreamBaseModel):
    claim_a_id: str = Field(alias="claimAId")
    claim_b_id: str = Field(alias="claimBId")
    question: str | None = None
    source_statement_ids: tuple[str, ...] | None = Field(
        default=None, alias="sourceStatementIds"
    )
    blocked_by_gates: tuple[str, ...] | None = Field(default=None, alias="blockedByGates")

    _coerce_ids = field_validator("claim_a_id", "claim_b_id", "question", mode="before")(
        _coerce_text
    )
    _coerce_lists = field_validator("source_statement_ids", "blocked_by_gates", mode="before")(
        _coerce_text_list
    )


class ClaimConflictPayload(UpstreamBaseModel):
    """Entry of a claim's own ``conflicts[]`` list."""

    claim_id: str = Field(alias="claimId")
    question: str | None = None

    _coerce_fields = field_validator("claim_id", "question", mode="before")(_coerce_text)


class ConditionalPayload(UpstreamBaseModel):
    """Top-level ``conditionals[]`` entry.

    Older mapper versions phrased the question as ``condition`` or ``prompt``.
    """

    id: str
    question: str | None = None
    condition: str | None = None
    prompt: str | None = None
    affected_claims: tuple[str, ...] = Field(alias="affectedClaims")
    source_statement_ids: tuple[str, ...] | None = Field(
        default=None, alias="sourceStatementIds"
    )

    _coerce_text_fields = field_validator("id", "question", "condition", "prompt", mode="before")(
        _coerce_text
    )
    _coerce_lists = field_validator("affected_claims", "source_statement_ids", mode="before")(
        _coerce_text_list
    )

    @field_validator("affected_claims", mode="after")
    @classmethod
    def _require_affected(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("conditional must affect at least one claim")
        return value

    @property
    def resolved_question(self) -> str:
        return self.question or self.condition or self.prompt or self.id


class GatePayload(UpstreamBaseModel):
    """Conditional gate nested under ``tiers[].gates[]``."""

    id: str
    type: Literal["conditional"]
    question: str | None = None
    condition: str | None = None
    blocked_claims: tuple[str, ...] = Field(alias="blockedClaims")
    source_statement_ids: tuple[str, ...] | None = Field(
        default=None, alias="sourceStatementIds"
    )

    _coerce_text_fields = field_validator("id", "question", "condition", mode="before")(
        _coerce_text
    )
    _coerce_lists = field_validator("blocked_claims", "source_statement_ids", mode="before")(
        _coerce_text_list
    )

    @field_validator("blocked_claims", mode="after")
    @classmethod
    def _require_blocked(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("gate must block at least one claim")
        return value

    @property
    def resolved_question(self) -> str:
        return self.question or self.condition or self.id
