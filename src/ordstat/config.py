"""Selector configuration.

Environment variables (all optional):
    ORDSTAT_PIVOT: LEFTMOST | RANDOM | MEDIAN_OF_THREE (default LEFTMOST)
    ORDSTAT_SEED: Non-negative int seed for the RANDOM strategy (default unset)
    ORDSTAT_CHECK_INVARIANTS: Verify every partition result (default off)

Usage:
    config = SelectorConfig.from_env()
    value = select(3, data, config=config)
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from ordstat.core import PivotStrategy
from ordstat.env_parse import ConfigError, parse_bool, parse_enum, parse_int

ENV_PIVOT = "ORDSTAT_PIVOT"
ENV_SEED = "ORDSTAT_SEED"
ENV_CHECK_INVARIANTS = "ORDSTAT_CHECK_INVARIANTS"


@dataclass(frozen=True)
class SelectorConfig:
    """Configuration for quickselect.

    Attributes:
        pivot: Pivot selection strategy (default LEFTMOST)
        seed: Seed for the RANDOM strategy; None means nondeterministic
        check_invariants: Verify the partition postcondition after every pass
    """

    pivot: PivotStrategy = PivotStrategy.LEFTMOST
    seed: int | None = None
    check_invariants: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.pivot, PivotStrategy):
            raise ConfigError(f"pivot must be a PivotStrategy, got {self.pivot!r}")
        if self.seed is not None and self.seed < 0:
            raise ConfigError(f"seed must be >= 0, got {self.seed}")

    @classmethod
    def from_env(cls, *, strict: bool = True) -> SelectorConfig:
        """Build config from ``ORDSTAT_*`` environment variables."""
        pivot = parse_enum(
            ENV_PIVOT,
            {s.value for s in PivotStrategy},
            default=PivotStrategy.LEFTMOST.value,
            strict=strict,
        )
        return cls(
            pivot=PivotStrategy(pivot),
            seed=parse_int(ENV_SEED, None, min_value=0, strict=strict),
            check_invariants=parse_bool(ENV_CHECK_INVARIANTS, False, strict=strict),
        )

    def make_rng(self) -> random.Random:
        """Create the RNG used by the RANDOM strategy."""
        return random.Random(self.seed)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "pivot": self.pivot.value,
            "seed": self.seed,
            "check_invariants": self.check_invariants,
        }
