"""Traversal state machine.

Both transitions are pure: they copy the incoming state's containers, apply the
resolution, and return a new snapshot. Pruning is monotonic. Re-resolving a
forcing point replaces its recorded ``Resolution`` but never reactivates claims
an earlier resolution pruned.

Nothing here checks that ``forcing_point_id`` names a member of the extracted
forcing point list; keeping the two in sync is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .models import ClaimStatus, ForcingPointType, Resolution, TraversalState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import ForcingPoint


log = logging.getLogger(__name__)


def claim_id_of(claim: object) -> str | None:
    """Id of an enriched claim given either as a mapping or an object."""

    raw = claim.get("id") if isinstance(claim, Mapping) else getattr(claim, "id", None)
    return raw if isinstance(raw, str) and raw else None


def init_traversal_state(claims: Iterable[object]) -> TraversalState:
    """Start a traversal with every claim active."""

    statuses = {
        claim_id: ClaimStatus.ACTIVE
        for claim in claims
        if (claim_id := claim_id_of(claim)) is not None
    }
    return TraversalState.build(claim_statuses=statuses, resolutions={})


def resolve_conditional(
    state: TraversalState,
    forcing_point_id: str,
    forcing_point: ForcingPoint,
    satisfied: bool,
    user_input: str | None = None,
) -> TraversalState:
    statuses = dict(state.claim_statuses)
    resolutions = dict(state.resolutions)
    path_steps = list(state.path_steps)

    _log_reresolve(state, forcing_point_id)
    resolutions[forcing_point_id] = Resolution(
        forcing_point_id=forcing_point_id,
        type=ForcingPointType.CONDITIONAL,
        satisfied=satisfied,
        user_input=user_input,
    )

    affected = forcing_point.affected_claims
    if not satisfied and affected is not None:
        for claim_id in affected:
            statuses[claim_id] = ClaimStatus.PRUNED
        path_steps.append(f'✗ "{forcing_point.condition}" — {len(affected)} claim(s) pruned')
    else:
        suffix = f" — {user_input}" if user_input else ""
        path_steps.append(f'✓ "{forcing_point.condition}"{suffix}')

    return TraversalState.build(
        claim_statuses=statuses, resolutions=resolutions, path_steps=path_steps
    )


def resolve_conflict(
    state: TraversalState,
    forcing_point_id: str,
    forcing_point: ForcingPoint,
    selected_claim_id: str,
    selected_label: str,
) -> TraversalState:
    statuses = dict(state.claim_statuses)
    resolutions = dict(state.resolutions)
    path_steps = list(state.path_steps)

    _log_reresolve(state, forcing_point_id)
    resolutions[forcing_point_id] = Resolution(
        forcing_point_id=forcing_point_id,
        type=ForcingPointType.CONFLICT,
        selected_claim_id=selected_claim_id,
        selected_label=selected_label,
    )

    if forcing_point.options is not None:
        rejected = [
            option for option in forcing_point.options if option.claim_id != selected_claim_id
        ]
        for option in rejected:
            statuses[option.claim_id] = ClaimStatus.PRUNED
        rejected_labels = ", ".join(option.label for option in rejected)
        path_steps.append(f'→ Chose "{selected_label}" over "{rejected_labels}"')

    return TraversalState.build(
        claim_statuses=statuses, resolutions=resolutions, path_steps=path_steps
    )


def _log_reresolve(state: TraversalState, forcing_point_id: str) -> None:
    # TODO: decide whether re-resolving should reactivate claims the earlier
    # resolution pruned; for now only the Resolution entry is replaced.
    if forcing_point_id in state.resolutions:
        log.info(
            "Re-resolving forcing point %s; claims pruned earlier stay pruned",
            forcing_point_id,
        )
