from __future__ import annotations

import pytest


@pytest.fixture
def claims_ab() -> list[dict[str, object]]:
    return [
        {"id": "A", "label": "Label A", "text": "Rent close to work", "sourceStatementIds": ["s2"]},
        {"id": "B", "label": "Label B", "description": "Buy in the suburbs", "sourceStatementIds": ["s1"]},
    ]


@pytest.fixture
def conditional_graph(claims_ab: list[dict[str, object]]) -> dict[str, object]:
    return {
        "claims": claims_ab,
        "conditionals": [{"id": "g1", "affectedClaims": ["A"], "question": "Applicable?"}],
    }


@pytest.fixture
def conflict_graph(claims_ab: list[dict[str, object]]) -> dict[str, object]:
    return {
        "claims": claims_ab,
        "edges": [{"from": "A", "to": "B", "type": "conflict"}],
    }


@pytest.fixture
def gated_conflict_graph(claims_ab: list[dict[str, object]]) -> dict[str, object]:
    return {
        "claims": claims_ab,
        "conditionals": [
            {"id": "g1", "affectedClaims": ["A"], "question": "Do you work in the city?"}
        ],
        "tensions": [{"claimAId": "A", "claimBId": "B", "blockedByGates": ["g1"]}],
    }
