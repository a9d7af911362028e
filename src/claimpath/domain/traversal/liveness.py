"""Which forcing points are still actionable for a given state.

Conditionals form a hard global gate: while any conditional is still live, no
conflict is offered, whether or not it lists explicit ``blocked_by_gate_ids``.
A forcing point that loses its reason to exist through pruning elsewhere (a
conditional with no active affected claims, a conflict with fewer than two
active options) simply stops being live.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import ForcingPointType

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .models import ForcingPoint, TraversalState


def get_live_forcing_points(
    forcing_points: Sequence[ForcingPoint],
    state: TraversalState,
) -> list[ForcingPoint]:
    has_live_conditionals = any(_is_live_conditional(fp, state) for fp in forcing_points)
    return [
        fp
        for fp in forcing_points
        if fp.id not in state.resolutions
        and (
            _conditional_is_open(fp, state)
            if fp.type == ForcingPointType.CONDITIONAL
            else _conflict_is_open(fp, state, gated=has_live_conditionals)
        )
    ]


def is_traversal_complete(
    forcing_points: Sequence[ForcingPoint],
    state: TraversalState,
) -> bool:
    return not get_live_forcing_points(forcing_points, state)


def _is_live_conditional(fp: ForcingPoint, state: TraversalState) -> bool:
    return (
        fp.type == ForcingPointType.CONDITIONAL
        and fp.id not in state.resolutions
        and fp.affected_claims is not None
        and _any_active(fp.affected_claims, state)
    )


def _conditional_is_open(fp: ForcingPoint, state: TraversalState) -> bool:
    if fp.affected_claims is None:
        return True
    return _any_active(fp.affected_claims, state)


def _conflict_is_open(fp: ForcingPoint, state: TraversalState, *, gated: bool) -> bool:
    if gated:
        return False
    if fp.blocked_by_gate_ids and any(
        not _gate_satisfied(gate_id, state) for gate_id in fp.blocked_by_gate_ids
    ):
        return False
    if fp.options is not None:
        active_options = [option for option in fp.options if state.is_active(option.claim_id)]
        if len(active_options) < 2:
            return False
    return True


def _gate_satisfied(gate_id: str, state: TraversalState) -> bool:
    resolution = state.resolutions.get(gate_id)
    return (
        resolution is not None
        and resolution.type == ForcingPointType.CONDITIONAL
        and resolution.satisfied is True
    )


def _any_active(claim_ids: Iterable[str], state: TraversalState) -> bool:
    return any(state.is_active(claim_id) for claim_id in claim_ids)
