"""Traversal engine over a multi-model claim graph.

Flow:
1) normalize the upstream graph into one canonical shape
2) extract tier-ordered forcing points (computed once per session)
3) seed a traversal state with every claim active
4) apply user resolutions; each returns a new state snapshot
5) re-evaluate liveness after every transition until nothing is live
"""

from __future__ import annotations

from .extract import extract_forcing_points
from .liveness import get_live_forcing_points, is_traversal_complete
from .models import (
    Claim,
    ClaimStatus,
    Conditional,
    ConflictEdge,
    ConflictOption,
    ForcingPoint,
    ForcingPointType,
    NormalizedGraph,
    Resolution,
    TraversalState,
    pair_key,
)
from .normalize import normalize_traversal_graph
from .queries import get_active_claims, get_path_summary, get_pruned_claims
from .session import TraversalSession
from .state import init_traversal_state, resolve_conditional, resolve_conflict

__all__ = [
    "Claim",
    "ClaimStatus",
    "Conditional",
    "ConflictEdge",
    "ConflictOption",
    "ForcingPoint",
    "ForcingPointType",
    "NormalizedGraph",
    "Resolution",
    "TraversalSession",
    "TraversalState",
    "extract_forcing_points",
    "get_active_claims",
    "get_live_forcing_points",
    "get_path_summary",
    "get_pruned_claims",
    "init_traversal_state",
    "is_traversal_complete",
    "normalize_traversal_graph",
    "pair_key",
    "resolve_conditional",
    "resolve_conflict",
]
