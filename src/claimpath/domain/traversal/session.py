"""Single-writer session wrapper around the pure traversal engine.

Forcing points are extracted once when the session starts. Every accepted
resolution pushes the previous snapshot onto the history, which is what makes
``undo`` possible without the engine knowing anything about it.

The session does no locking; one writer per session is assumed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .extract import extract_forcing_points
from .liveness import get_live_forcing_points, is_traversal_complete
from .models import ForcingPointType
from .queries import get_active_claims, get_path_summary, get_pruned_claims
from .state import init_traversal_state, resolve_conditional, resolve_conflict

if TYPE_CHECKING:
    from collections.abc import Iterable

    from claimpath.config import TraversalConfig

    from .models import ForcingPoint, Resolution, TraversalState


log = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalSession:
    claims: tuple[object, ...]
    forcing_points: tuple[ForcingPoint, ...]
    initial_state: TraversalState
    _state: TraversalState = field(init=False, repr=False)
    _history: list[TraversalState] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._state = self.initial_state

    @classmethod
    def start(
        cls,
        graph: object,
        claims: Iterable[object],
        *,
        initial_state: TraversalState | None = None,
        config: TraversalConfig | None = None,
    ) -> TraversalSession:
        """Extract forcing points from ``graph`` and seed the state from ``claims``.

        ``initial_state`` restores a previously saved traversal instead of
        starting with every claim active.
        """

        claim_list = tuple(claims)
        return cls(
            claims=claim_list,
            forcing_points=extract_forcing_points(graph, config=config),
            initial_state=(
                initial_state if initial_state is not None else init_traversal_state(claim_list)
            ),
        )

    @property
    def state(self) -> TraversalState:
        return self._state

    @property
    def history(self) -> tuple[TraversalState, ...]:
        return tuple(self._history)

    @property
    def live_forcing_points(self) -> list[ForcingPoint]:
        return get_live_forcing_points(self.forcing_points, self._state)

    @property
    def is_complete(self) -> bool:
        return is_traversal_complete(self.forcing_points, self._state)

    @property
    def active_claims(self) -> list[object]:
        return get_active_claims(self.claims, self._state)

    @property
    def pruned_claims(self) -> list[object]:
        return get_pruned_claims(self.claims, self._state)

    @property
    def path_summary(self) -> str:
        return get_path_summary(self._state)

    def forcing_point(self, forcing_point_id: str) -> ForcingPoint | None:
        return next((fp for fp in self.forcing_points if fp.id == forcing_point_id), None)

    def get_resolution(self, forcing_point_id: str) -> Resolution | None:
        return self._state.resolutions.get(forcing_point_id)

    def resolve_gate(
        self,
        forcing_point_id: str,
        satisfied: bool,
        user_input: str | None = None,
    ) -> TraversalState:
        """Answer a conditional; unknown ids and conflicts are ignored."""

        fp = self._lookup(forcing_point_id, ForcingPointType.CONDITIONAL)
        if fp is None:
            return self._state
        return self._advance(
            resolve_conditional(self._state, forcing_point_id, fp, satisfied, user_input)
        )

    def resolve_forcing_point(
        self,
        forcing_point_id: str,
        claim_id: str,
        label: str,
    ) -> TraversalState:
        """Pick a side of a conflict; unknown ids and conditionals are ignored."""

        fp = self._lookup(forcing_point_id, ForcingPointType.CONFLICT)
        if fp is None:
            return self._state
        return self._advance(resolve_conflict(self._state, forcing_point_id, fp, claim_id, label))

    def undo(self) -> TraversalState:
        if self._history:
            self._state = self._history.pop()
        return self._state

    def reset(self) -> TraversalState:
        self._history.clear()
        self._state = self.initial_state
        return self._state

    def _lookup(
        self, forcing_point_id: str, expected: ForcingPointType
    ) -> ForcingPoint | None:
        fp = self.forcing_point(forcing_point_id)
        if fp is None or fp.type != expected:
            log.debug(
                "Ignoring %s resolution for forcing point %s (found: %s)",
                expected,
                forcing_point_id,
                None if fp is None else fp.type,
            )
            return None
        return fp

    def _advance(self, next_state: TraversalState) -> TraversalState:
        self._history.append(self._state)
        self._state = next_state
        return next_state
