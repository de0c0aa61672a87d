"""Tests for SelectorConfig."""

from __future__ import annotations

import pytest

from ordstat.config import ENV_CHECK_INVARIANTS, ENV_PIVOT, ENV_SEED, SelectorConfig
from ordstat.core import PivotStrategy
from ordstat.env_parse import ConfigError


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (ENV_PIVOT, ENV_SEED, ENV_CHECK_INVARIANTS):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSelectorConfig:
    """Construction and validation."""

    def test_defaults(self) -> None:
        config = SelectorConfig()

        assert config.pivot is PivotStrategy.LEFTMOST
        assert config.seed is None
        assert config.check_invariants is False

    def test_negative_seed_rejected(self) -> None:
        with pytest.raises(ConfigError, match="seed"):
            SelectorConfig(seed=-1)

    def test_pivot_must_be_enum(self) -> None:
        with pytest.raises(ConfigError, match="PivotStrategy"):
            SelectorConfig(pivot="RANDOM")  # type: ignore[arg-type]

    def test_seeded_rng_reproducible(self) -> None:
        config = SelectorConfig(pivot=PivotStrategy.RANDOM, seed=5)
        assert config.make_rng().random() == config.make_rng().random()

    def test_to_dict(self) -> None:
        config = SelectorConfig(pivot=PivotStrategy.MEDIAN_OF_THREE, seed=3)
        assert config.to_dict() == {
            "pivot": "MEDIAN_OF_THREE",
            "seed": 3,
            "check_invariants": False,
        }


class TestSelectorConfigFromEnv:
    """Loading from ORDSTAT_* variables."""

    def test_unset_gives_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert SelectorConfig.from_env() == SelectorConfig()

    def test_all_set(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_PIVOT, "median_of_three")
        clean_env.setenv(ENV_SEED, "17")
        clean_env.setenv(ENV_CHECK_INVARIANTS, "yes")

        config = SelectorConfig.from_env()

        assert config.pivot is PivotStrategy.MEDIAN_OF_THREE
        assert config.seed == 17
        assert config.check_invariants is True

    def test_invalid_pivot_strict(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_PIVOT, "rightmost")
        with pytest.raises(ConfigError):
            SelectorConfig.from_env()

    def test_invalid_values_nonstrict_fall_back(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(ENV_PIVOT, "rightmost")
        clean_env.setenv(ENV_SEED, "-4")
        clean_env.setenv(ENV_CHECK_INVARIANTS, "sometimes")

        config = SelectorConfig.from_env(strict=False)

        assert config.pivot is PivotStrategy.LEFTMOST
        assert config.seed == 0
        assert config.check_invariants is False
