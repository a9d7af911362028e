from __future__ import annotations

import pytest

from claimpath.config import (
    DEFAULT_TRAVERSAL_CONFIG,
    ConfigurationError,
    InvalidConfigurationValueError,
    TraversalConfig,
    get_traversal_config,
    optional_int_env_var,
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAIMPATH_CONFLICT_TIER", raising=False)
    monkeypatch.delenv("CLAIMPATH_AFFECTED_LABEL_PREVIEW", raising=False)


def test_defaults_without_environment() -> None:
    config = get_traversal_config()

    assert config == DEFAULT_TRAVERSAL_CONFIG
    assert config == TraversalConfig(
        conditional_tier=0,
        conflict_tier=1,
        affected_label_preview=3,
        placeholder_question="Is this applicable to your situation?",
    )


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAIMPATH_CONFLICT_TIER", " 2 ")
    monkeypatch.setenv("CLAIMPATH_AFFECTED_LABEL_PREVIEW", "5")

    config = get_traversal_config()

    assert config.conflict_tier == 2
    assert config.affected_label_preview == 5
    assert config.conditional_tier == 0


def test_blank_environment_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAIMPATH_CONFLICT_TIER", "   ")

    assert get_traversal_config().conflict_tier == 1


def test_non_integer_value_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAIMPATH_AFFECTED_LABEL_PREVIEW", "three")

    with pytest.raises(InvalidConfigurationValueError, match="must be an integer") as exc:
        get_traversal_config()

    assert exc.value.name == "CLAIMPATH_AFFECTED_LABEL_PREVIEW"
    assert exc.value.value == "three"


def test_conflict_tier_must_follow_conditionals(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CLAIMPATH_CONFLICT_TIER", "0")

    with pytest.raises(ConfigurationError, match="must be greater than conditional_tier"):
        get_traversal_config()


@pytest.mark.parametrize("preview", ["-1", "0"])
def test_label_preview_below_one_raises(monkeypatch: pytest.MonkeyPatch, preview: str) -> None:
    monkeypatch.setenv("CLAIMPATH_AFFECTED_LABEL_PREVIEW", preview)

    with pytest.raises(ConfigurationError, match="must be at least 1"):
        get_traversal_config()


def test_config_rejects_conflicts_ordered_before_conditionals() -> None:
    with pytest.raises(InvalidConfigurationValueError) as exc:
        TraversalConfig(conditional_tier=2, conflict_tier=1)

    assert exc.value.name == "conflict_tier"
    assert exc.value.value == 1

    with pytest.raises(InvalidConfigurationValueError):
        TraversalConfig(conditional_tier=1, conflict_tier=1)


def test_config_rejects_empty_label_preview() -> None:
    with pytest.raises(InvalidConfigurationValueError) as exc:
        TraversalConfig(affected_label_preview=0)

    assert exc.value.name == "affected_label_preview"


def test_config_accepts_shifted_tiers() -> None:
    config = TraversalConfig(conditional_tier=2, conflict_tier=5, affected_label_preview=1)

    assert (config.conditional_tier, config.conflict_tier) == (2, 5)


def test_optional_int_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLAIMPATH_TEST_INT", raising=False)
    assert optional_int_env_var("CLAIMPATH_TEST_INT") is None

    monkeypatch.setenv("CLAIMPATH_TEST_INT", " 7 ")
    assert optional_int_env_var("CLAIMPATH_TEST_INT") == 7

    monkeypatch.setenv("CLAIMPATH_TEST_INT", "seven")
    with pytest.raises(InvalidConfigurationValueError) as excinfo:
        optional_int_env_var("CLAIMPATH_TEST_INT")
    assert excinfo.value.name == "CLAIMPATH_TEST_INT"
    assert excinfo.value.value == "seven"
