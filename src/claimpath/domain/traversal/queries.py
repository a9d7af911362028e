"""Read-only helpers over a traversal state."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from .models import ClaimStatus
from .state import claim_id_of

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import TraversalState

TClaim = TypeVar("TClaim")

EMPTY_PATH_SUMMARY = "No constraints applied."


def get_active_claims(claims: Iterable[TClaim], state: TraversalState) -> list[TClaim]:
    return _claims_with_status(claims, state, ClaimStatus.ACTIVE)


def get_pruned_claims(claims: Iterable[TClaim], state: TraversalState) -> list[TClaim]:
    return _claims_with_status(claims, state, ClaimStatus.PRUNED)


def get_path_summary(state: TraversalState) -> str:
    """Human-readable decision path, one step per line."""

    if not state.path_steps:
        return EMPTY_PATH_SUMMARY
    return "\n".join(state.path_steps)


def _claims_with_status(
    claims: Iterable[TClaim],
    state: TraversalState,
    status: ClaimStatus,
) -> list[TClaim]:
    selected: list[TClaim] = []
    for claim in claims:
        claim_id = claim_id_of(claim)
        if claim_id is not None and state.status_of(claim_id) == status:
            selected.append(claim)
    return selected
