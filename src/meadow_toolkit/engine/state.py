"""
Module: engine.state

Purpose:
    Per-session evaluation state. Owned by the controller and passed
    explicitly into every stage function; never persisted.

Key Classes:
    - EvaluationState: Selections, carried score, current stage, result
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from meadow_toolkit.core.models import PlantKind, SelectionSet, Stage, StageResult


@dataclass
class EvaluationState:
    """
    Mutable state of one assessment session.

    Attributes:
        q2_selection: Q2 indicator plants selected on stage 1
        potential_selection: Potential indicator plants selected on stage 2
        potential_score: Composite score from stage 3, reused by stage 4
        stage: Current stage
        result: Terminal result once stage is RESULT
    """
    q2_selection: SelectionSet = field(default_factory=lambda: SelectionSet(PlantKind.QUALITY))
    potential_selection: SelectionSet = field(default_factory=lambda: SelectionSet(PlantKind.POTENTIAL))
    potential_score: int = 0
    stage: Stage = Stage.QUALITY_LEVEL
    result: Optional[StageResult] = None

    @property
    def is_finished(self) -> bool:
        return self.result is not None

    def selection_for(self, kind: PlantKind) -> SelectionSet:
        if kind is PlantKind.QUALITY:
            return self.q2_selection
        return self.potential_selection

    def finish(self, result: StageResult) -> None:
        self.result = result
        self.stage = Stage.RESULT
