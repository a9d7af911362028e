"""Forcing point extraction.

Turns a normalized graph into the ordered list of decisions a user has to make:
conditionals first (they can prune claims wholesale), then pairwise conflicts.

Conflict ids derive from the claim pair and are stable across calls.
Conditionals without an id get a synthetic ``cond_{n}`` that is only unique
within one call; callers that need stable ids must keep the extracted tuple
instead of re-extracting.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import TYPE_CHECKING

from claimpath.config import DEFAULT_TRAVERSAL_CONFIG

from .models import ConflictOption, ForcingPoint, ForcingPointType
from .normalize import is_placeholder_question, normalize_traversal_graph

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from claimpath.config import TraversalConfig

    from .models import Claim, Conditional, ConflictEdge, NormalizedGraph


log = logging.getLogger(__name__)


def extract_forcing_points(
    graph: object,
    *,
    config: TraversalConfig | None = None,
) -> tuple[ForcingPoint, ...]:
    """Extract tier-ordered forcing points from a raw or normalized graph."""

    settings = config or DEFAULT_TRAVERSAL_CONFIG
    normalized = normalize_traversal_graph(graph)
    claims_by_id = {claim.id: claim for claim in normalized.claims}

    conditionals = list(_conditional_points(normalized.conditionals, claims_by_id, settings))
    conflicts = list(_conflict_points(normalized, claims_by_id, settings))
    forcing_points = tuple(sorted((*conditionals, *conflicts), key=lambda fp: fp.tier))

    log.debug(
        "Extracted %d forcing points (%d conditional, %d conflict) from %d claims",
        len(forcing_points),
        len(conditionals),
        len(conflicts),
        len(claims_by_id),
    )
    return forcing_points


def _conditional_points(
    conditionals: Iterable[Conditional],
    claims_by_id: Mapping[str, Claim],
    settings: TraversalConfig,
) -> Iterator[ForcingPoint]:
    synthetic_ids = count()
    for conditional in conditionals:
        affected = tuple(
            dict.fromkeys(
                claim_id.strip() for claim_id in conditional.affected_claims if claim_id.strip()
            )
        )
        if not affected:
            continue

        fallback_id = f"cond_{next(synthetic_ids)}"
        raw_id = conditional.id.strip()
        forcing_point_id = raw_id or fallback_id
        raw_question = (conditional.question or "").strip()

        if is_placeholder_question(raw_question, forcing_point_id):
            question = settings.placeholder_question
            condition = _affected_summary(affected, claims_by_id, settings.affected_label_preview)
        else:
            question = condition = raw_question

        yield ForcingPoint(
            id=forcing_point_id,
            type=ForcingPointType.CONDITIONAL,
            tier=settings.conditional_tier,
            question=question,
            condition=condition,
            affected_claims=affected,
            source_statement_ids=_sorted_union(
                claims_by_id[claim_id].source_statement_ids
                for claim_id in affected
                if claim_id in claims_by_id
            ),
        )


def _affected_summary(
    affected: tuple[str, ...],
    claims_by_id: Mapping[str, Claim],
    preview: int,
) -> str:
    labels = [
        label
        for claim_id in affected
        if (label := _label_for(claim_id, claims_by_id))
    ]
    if not labels:
        return f"Affects {len(affected)} claim(s)"
    summary = ", ".join(labels[:preview])
    if len(labels) > preview:
        summary += f" +{len(labels) - preview} more"
    return f"Affects: {summary}"


def _label_for(claim_id: str, claims_by_id: Mapping[str, Claim]) -> str:
    claim = claims_by_id.get(claim_id)
    return (claim.label if claim is not None and claim.label else claim_id).strip()


def _conflict_points(
    normalized: NormalizedGraph,
    claims_by_id: Mapping[str, Claim],
    settings: TraversalConfig,
) -> Iterator[ForcingPoint]:
    seen_pairs: set[str] = set()
    for edge in normalized.edges:
        key = edge.pair_key
        if key in seen_pairs:
            continue
        seen_pairs.add(key)

        claim_a = claims_by_id.get(edge.from_id)
        claim_b = claims_by_id.get(edge.to_id)
        if claim_a is None or claim_b is None:
            log.debug("Skipping conflict %s: claim missing from graph", key)
            continue

        yield _conflict_point(
            edge,
            key,
            claim_a,
            claim_b,
            blocked_by=normalized.conflict_blocks.get(key, ()),
            tier=settings.conflict_tier,
        )


def _conflict_point(
    edge: ConflictEdge,
    key: str,
    claim_a: Claim,
    claim_b: Claim,
    *,
    blocked_by: Iterable[str],
    tier: int,
) -> ForcingPoint:
    blocked_by_gate_ids = tuple(sorted({gate.strip() for gate in blocked_by if gate.strip()}))
    question = (edge.question or "").strip()
    return ForcingPoint(
        id=f"fp_conflict_{key}",
        type=ForcingPointType.CONFLICT,
        tier=tier,
        question=question or f"Choose between: {claim_a.label} vs {claim_b.label}",
        condition=f"{claim_a.label} vs {claim_b.label}",
        options=(
            ConflictOption(claim_id=claim_a.id, label=claim_a.label, text=claim_a.text),
            ConflictOption(claim_id=claim_b.id, label=claim_b.label, text=claim_b.text),
        ),
        blocked_by_gate_ids=blocked_by_gate_ids or None,
        source_statement_ids=_sorted_union(
            (
                claim_a.source_statement_ids,
                claim_b.source_statement_ids,
                edge.source_statement_ids,
            )
        ),
    )


def _sorted_union(groups: Iterable[Iterable[str]]) -> tuple[str, ...]:
    return tuple(sorted({item for group in groups for item in group}))
