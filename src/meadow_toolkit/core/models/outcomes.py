"""
Module: outcomes

Purpose:
    Stage and outcome taxonomy for the assessment. Every session ends in
    exactly one StageResult carrying one of five OutcomeKinds.

Key Classes:
    - Stage: Wizard stages in evaluation order
    - OutcomeKind: The five terminal outcomes
    - StageResult: Terminal outcome with its score

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - engine.stages, engine.controller
    - engine.presentation: Outcome to descriptor mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Stage(str, Enum):
    """Wizard stages. RESULT is reached once a terminal outcome exists."""
    QUALITY_LEVEL = "quality_level"
    POTENTIAL_FLORA = "potential_flora"
    MANAGEMENT = "management"
    SEEDING = "seeding"
    RESULT = "result"


class OutcomeKind(str, Enum):
    Q2_VERY_GOOD = "q2_very_good"
    Q2_GOOD = "q2_good"
    MGMT_POTENTIAL = "mgmt_potential"
    SEEDING_POTENTIAL = "seeding_potential"
    NO_POTENTIAL = "no_potential"

    @property
    def meets_q2(self) -> bool:
        """True for the two outcomes where Q2 is already reached."""
        return self in (OutcomeKind.Q2_VERY_GOOD, OutcomeKind.Q2_GOOD)


@dataclass(frozen=True)
class StageResult:
    """
    Terminal outcome of an assessment.

    Attributes:
        kind: Which outcome was reached
        score: Indicator count (Q2 outcomes), composite score
            (potential outcomes) or 0 (no potential)

    Invariants:
        - score >= 0
        - no_potential always has score 0
    """
    kind: OutcomeKind
    score: int = 0

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"score must be non-negative: {self.score}")
        if self.kind is OutcomeKind.NO_POTENTIAL and self.score != 0:
            raise ValueError("no_potential must carry score 0")

    @classmethod
    def no_potential(cls) -> StageResult:
        return cls(OutcomeKind.NO_POTENTIAL, 0)
