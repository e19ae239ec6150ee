"""
Module: engine.config

Purpose:
    Thresholds and point weights for the decision engine. Immutable
    configuration with validation on construction.

Key Classes:
    - EngineConfig: Stage thresholds and scoring weights

Dependencies:
    - dataclasses (std)
    - core.models: OutcomeKind

Used By:
    - engine.stages: Decision rules
    - engine.controller: Default configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from meadow_toolkit.core.models import OutcomeKind


@dataclass(frozen=True)
class EngineConfig:
    """
    Decision engine configuration (immutable).

    Attributes:
        very_good_threshold: Q2 indicator count must EXCEED this for
            "very good"
        good_threshold: Minimum Q2 indicator count for "good"
        management_threshold: Minimum composite score for upgrade by
            management alone
        site_factor_points: Points per true site factor
        measure_points: Points per committed measure

    Example:
        >>> config = EngineConfig()
        >>> config.quality_band(7)
        <OutcomeKind.Q2_GOOD: 'q2_good'>
    """

    very_good_threshold: int = 8
    good_threshold: int = 6
    management_threshold: int = 8
    site_factor_points: int = 2
    measure_points: int = 1

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.good_threshold <= 0:
            raise ValueError(f"good_threshold must be positive: {self.good_threshold}")
        if self.very_good_threshold < self.good_threshold:
            raise ValueError(
                f"very_good_threshold ({self.very_good_threshold}) must not be "
                f"below good_threshold ({self.good_threshold})"
            )
        if self.management_threshold <= 0:
            raise ValueError(f"management_threshold must be positive: {self.management_threshold}")
        if self.site_factor_points < 0 or self.measure_points < 0:
            raise ValueError("point weights must be non-negative")

    def quality_band(self, count: int) -> Optional[OutcomeKind]:
        """Q2 outcome reached by a given indicator count, or None below the good threshold."""
        if count > self.very_good_threshold:
            return OutcomeKind.Q2_VERY_GOOD
        if count >= self.good_threshold:
            return OutcomeKind.Q2_GOOD
        return None
