from __future__ import annotations

from types import SimpleNamespace

from claimpath.domain.traversal import (
    ConflictOption,
    ForcingPoint,
    ForcingPointType,
    get_active_claims,
    get_path_summary,
    get_pruned_claims,
    init_traversal_state,
    resolve_conditional,
    resolve_conflict,
)


def test_fresh_state_has_no_path() -> None:
    assert get_path_summary(init_traversal_state([{"id": "A"}])) == "No constraints applied."


def test_path_summary_joins_steps_in_order() -> None:
    gate = ForcingPoint(
        id="g1",
        type=ForcingPointType.CONDITIONAL,
        tier=0,
        question="Own a car?",
        condition="Own a car?",
        affected_claims=("C",),
    )
    conflict = ForcingPoint(
        id="c1",
        type=ForcingPointType.CONFLICT,
        tier=1,
        question="Rent or buy?",
        condition="Rent vs Buy",
        options=(
            ConflictOption(claim_id="A", label="Rent"),
            ConflictOption(claim_id="B", label="Buy"),
        ),
    )
    state = init_traversal_state([{"id": "A"}, {"id": "B"}, {"id": "C"}])

    state = resolve_conditional(state, "g1", gate, True, "yes")
    state = resolve_conflict(state, "c1", conflict, "B", "Buy")

    assert get_path_summary(state) == '✓ "Own a car?" — yes\n→ Chose "Buy" over "Rent"'


def test_claim_filters_preserve_order_and_identity() -> None:
    claims = [
        SimpleNamespace(id="A", label="Rent"),
        {"id": "B", "label": "Buy"},
        SimpleNamespace(id="C", label="Lease"),
    ]
    gate = ForcingPoint(
        id="g1",
        type=ForcingPointType.CONDITIONAL,
        tier=0,
        question="?",
        condition="?",
        affected_claims=("A", "C"),
    )
    state = resolve_conditional(init_traversal_state(claims), "g1", gate, False)

    active = get_active_claims(claims, state)
    pruned = get_pruned_claims(claims, state)

    assert active == [claims[1]]
    assert active[0] is claims[1]
    assert pruned == [claims[0], claims[2]]


def test_claims_unknown_to_state_match_neither_filter() -> None:
    state = init_traversal_state([{"id": "A"}])
    stranger = {"id": "Z"}

    assert get_active_claims([stranger], state) == []
    assert get_pruned_claims([stranger], state) == []
