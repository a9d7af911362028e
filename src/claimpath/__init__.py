"""Traversal engine for multi-model claim graphs."""

from __future__ import annotations

from importlib import metadata

from claimpath.domain.traversal import (
    ClaimStatus,
    ForcingPoint,
    ForcingPointType,
    NormalizedGraph,
    Resolution,
    TraversalSession,
    TraversalState,
    extract_forcing_points,
    get_active_claims,
    get_live_forcing_points,
    get_path_summary,
    get_pruned_claims,
    init_traversal_state,
    is_traversal_complete,
    normalize_traversal_graph,
    resolve_conditional,
    resolve_conflict,
)

try:
    __version__ = metadata.version("claimpath")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ClaimStatus",
    "ForcingPoint",
    "ForcingPointType",
    "NormalizedGraph",
    "Resolution",
    "TraversalSession",
    "TraversalState",
    "__version__",
    "extract_forcing_points",
    "get_active_claims",
    "get_live_forcing_points",
    "get_path_summary",
    "get_pruned_claims",
    "init_traversal_state",
    "is_traversal_complete",
    "normalize_traversal_graph",
    "resolve_conditional",
    "resolve_conflict",
]
