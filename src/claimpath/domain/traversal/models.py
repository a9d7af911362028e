"""Canonical traversal model.

Everything here is immutable. The normalizer produces ``NormalizedGraph``
values, extraction turns them into ``ForcingPoint`` tuples, and the state
machine hands out fresh ``TraversalState`` snapshots on every transition so
callers can keep older snapshots around for undo or audit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ClaimStatus(StrEnum):
    ACTIVE = "active"
    PRUNED = "pruned"


class ForcingPointType(StrEnum):
    CONDITIONAL = "conditional"
    CONFLICT = "conflict"


def pair_key(a_id: str, b_id: str) -> str:
    """Order-independent key for an undirected claim pair."""

    return "::".join(sorted((a_id, b_id)))


@dataclass(frozen=True, slots=True, kw_only=True)
class Claim:
    id: str
    label: str
    text: str | None = None
    source_statement_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictEdge:
    """Conflict relationship between two claims; direction carries no meaning.

    Every edge is a conflict, so the kind is not stored.
    """

    from_id: str
    to_id: str
    question: str | None = None
    source_statement_ids: tuple[str, ...] = ()

    @property
    def pair_key(self) -> str:
        return pair_key(self.from_id, self.to_id)


@dataclass(frozen=True, slots=True, kw_only=True)
class Conditional:
    """Gate whose failure renders ``affected_claims`` inapplicable."""

    id: str
    question: str
    affected_claims: tuple[str, ...] = ()
    source_statement_ids: tuple[str, ...] = ()


def _empty_blocks() -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True, kw_only=True)
class NormalizedGraph:
    """Single canonical shape reconciled from the upstream graph variants."""

    claims: tuple[Claim, ...] = ()
    edges: tuple[ConflictEdge, ...] = ()
    conditionals: tuple[Conditional, ...] = ()
    conflict_blocks: Mapping[str, tuple[str, ...]] = field(default_factory=_empty_blocks)


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictOption:
    claim_id: str
    label: str
    text: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ForcingPoint:
    """One user-facing decision.

    Conditionals carry ``affected_claims``; conflicts carry ``options`` and,
    when the upstream graph recorded them, ``blocked_by_gate_ids``.
    """

    id: str
    type: ForcingPointType
    tier: int
    question: str
    condition: str
    affected_claims: tuple[str, ...] | None = None
    options: tuple[ConflictOption, ...] | None = None
    blocked_by_gate_ids: tuple[str, ...] | None = None
    source_statement_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Resolution:
    forcing_point_id: str
    type: ForcingPointType
    satisfied: bool | None = None
    user_input: str | None = None
    selected_claim_id: str | None = None
    selected_label: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TraversalState:
    """Snapshot of claim statuses, recorded resolutions and the decision path.

    The mappings are read-only views over containers owned by this snapshot;
    transitions copy them instead of writing through.
    """

    claim_statuses: Mapping[str, ClaimStatus]
    resolutions: Mapping[str, Resolution]
    path_steps: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        claim_statuses: dict[str, ClaimStatus],
        resolutions: dict[str, Resolution],
        path_steps: tuple[str, ...] | list[str] = (),
    ) -> TraversalState:
        return cls(
            claim_statuses=MappingProxyType(claim_statuses),
            resolutions=MappingProxyType(resolutions),
            path_steps=tuple(path_steps),
        )

    def status_of(self, claim_id: str) -> ClaimStatus | None:
        return self.claim_statuses.get(claim_id)

    def is_active(self, claim_id: str) -> bool:
        return self.claim_statuses.get(claim_id) == ClaimStatus.ACTIVE
