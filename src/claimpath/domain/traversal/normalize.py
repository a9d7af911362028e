"""Normalization boundary between the upstream mapper and the traversal engine.

Responsibilities of this stage:
- accept the best available of several legacy graph shapes
- validate each claim/edge/conditional entry independently
- drop invalid members instead of failing the whole graph

Edge shapes are tried in order: an explicit ``edges[]`` array, then
``tensions[]`` (the only shape that carries gate dependencies), then each
claim's own ``conflicts[]`` list. Conditionals are merged from the top-level
``conditionals[]`` array and ``tiers[].gates[]``.

Nothing in this module raises on malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from .models import Claim, Conditional, ConflictEdge, NormalizedGraph, pair_key
from .schema import (
    ClaimConflictPayload,
    ClaimPayload,
    ConditionalPayload,
    ConflictEdgePayload,
    GatePayload,
    TensionPayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


log = logging.getLogger(__name__)

PLACEHOLDER_SENTINEL_PREFIX = "placeholder_"


def normalize_traversal_graph(raw: object) -> NormalizedGraph:
    """Reconcile an upstream graph of unknown shape into a ``NormalizedGraph``."""

    if isinstance(raw, NormalizedGraph):
        return raw
    if not isinstance(raw, Mapping):
        return NormalizedGraph()

    edges, conflict_blocks = _normalize_edges(raw)
    return NormalizedGraph(
        claims=_normalize_claims(raw),
        edges=edges,
        conditionals=_normalize_conditionals(raw),
        conflict_blocks=MappingProxyType(conflict_blocks),
    )


def is_placeholder_question(question: str | None, conditional_id: str) -> bool:
    """True when ``question`` carries no wording of its own."""

    return (
        not question
        or question == conditional_id
        or question == f"Condition: {conditional_id}"
    )


def _has_real_question(conditional: Conditional) -> bool:
    return not is_placeholder_question(
        conditional.question, conditional.id
    ) and not conditional.question.startswith(PLACEHOLDER_SENTINEL_PREFIX)


def _list_field(raw: Mapping[object, object], name: str) -> list[object] | None:
    value = raw.get(name)
    if isinstance(value, list | tuple):
        return list(value)
    return None


TModel = TypeVar("TModel", bound=BaseModel)


def _validated(model: type[TModel], entry: object) -> TModel | None:
    if not isinstance(entry, Mapping):
        return None
    try:
        return model.model_validate(dict(entry))
    except ValidationError:
        return None


def _validated_all(
    model: type[TModel], entries: Iterable[object]
) -> Iterator[TModel]:
    for entry in entries:
        payload = _validated(model, entry)
        if payload is not None:
            yield payload


def _normalize_claims(raw: Mapping[object, object]) -> tuple[Claim, ...]:
    return tuple(
        Claim(
            id=payload.id,
            label=payload.display_label,
            text=payload.body,
            source_statement_ids=payload.source_statement_ids or (),
        )
        for payload in _validated_all(ClaimPayload, _list_field(raw, "claims") or ())
    )


def _normalize_edges(
    raw: Mapping[object, object],
) -> tuple[tuple[ConflictEdge, ...], dict[str, tuple[str, ...]]]:
    explicit = _list_field(raw, "edges")
    if explicit is not None:
        return _edges_from_explicit(explicit), {}

    tensions = _list_field(raw, "tensions")
    if tensions:
        return _edges_from_tensions(tensions)

    return _edges_from_claim_conflicts(_list_field(raw, "claims") or []), {}


def _edges_from_explicit(entries: list[object]) -> tuple[ConflictEdge, ...]:
    candidates = [entry for entry in entries if entry]
    edges = tuple(
        ConflictEdge(
            from_id=payload.from_id,
            to_id=payload.to_id,
            question=payload.question,
            source_statement_ids=payload.source_statement_ids or (),
        )
        for payload in _validated_all(ConflictEdgePayload, candidates)
    )
    dropped = len(candidates) - len(edges)
    if dropped:
        log.warning("Dropped %d invalid edges from input.edges", dropped)
    return edges


def _edges_from_tensions(
    entries: list[object],
) -> tuple[tuple[ConflictEdge, ...], dict[str, tuple[str, ...]]]:
    edges: list[ConflictEdge] = []
    conflict_blocks: dict[str, tuple[str, ...]] = {}
    seen: set[str] = set()
    for tension in _validated_all(TensionPayload, entries):
        key = pair_key(tension.claim_a_id, tension.claim_b_id)
        if key in seen:
            continue
        seen.add(key)
        edges.append(
            ConflictEdge(
                from_id=tension.claim_a_id,
                to_id=tension.claim_b_id,
                question=tension.question,
                source_statement_ids=tension.source_statement_ids or (),
            )
        )
        if tension.blocked_by_gates is not None:
            conflict_blocks[key] = tension.blocked_by_gates
    return tuple(edges), conflict_blocks


def _edges_from_claim_conflicts(claims: list[object]) -> tuple[ConflictEdge, ...]:
    edges: list[ConflictEdge] = []
    seen: set[str] = set()
    for entry in claims:
        claim = _validated(ClaimPayload, entry)
        if claim is None or not isinstance(entry, Mapping):
            continue
        for conflict in _validated_all(ClaimConflictPayload, _list_field(entry, "conflicts") or ()):
            key = pair_key(claim.id, conflict.claim_id)
            if key in seen:
                continue
            seen.add(key)
            edges.append(
                ConflictEdge(from_id=claim.id, to_id=conflict.claim_id, question=conflict.question)
            )
    return tuple(edges)


def _normalize_conditionals(raw: Mapping[object, object]) -> tuple[Conditional, ...]:
    by_id: dict[str, Conditional] = {}
    for conditional in _iter_conditionals(raw):
        previous = by_id.get(conditional.id)
        by_id[conditional.id] = (
            conditional if previous is None else _merge_conditionals(previous, conditional)
        )
    return tuple(by_id.values())


def _iter_conditionals(raw: Mapping[object, object]) -> Iterator[Conditional]:
    for payload in _validated_all(ConditionalPayload, _list_field(raw, "conditionals") or ()):
        yield Conditional(
            id=payload.id,
            question=payload.resolved_question,
            affected_claims=payload.affected_claims,
            source_statement_ids=payload.source_statement_ids or (),
        )

    for tier in _list_field(raw, "tiers") or ():
        if not isinstance(tier, Mapping):
            continue
        for gate in _validated_all(GatePayload, _list_field(tier, "gates") or ()):
            yield Conditional(
                id=gate.id,
                question=gate.resolved_question,
                affected_claims=gate.blocked_claims,
                source_statement_ids=gate.source_statement_ids or (),
            )


def _merge_conditionals(previous: Conditional, incoming: Conditional) -> Conditional:
    if _has_real_question(previous):
        question = previous.question
    elif _has_real_question(incoming):
        question = incoming.question
    else:
        question = incoming.id
    return Conditional(
        id=previous.id,
        question=question,
        affected_claims=_ordered_union(previous.affected_claims, incoming.affected_claims),
        source_statement_ids=_ordered_union(
            previous.source_statement_ids, incoming.source_statement_ids
        ),
    )


def _ordered_union(*groups: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(item for group in groups for item in group))
