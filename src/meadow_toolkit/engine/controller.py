"""
Module: engine.controller

Purpose:
    Drive one assessment session. The controller owns the
    EvaluationState, guards that each trigger fires only in its own
    stage and delegates the decision to engine.stages.

    Start → quality level → potential flora → management → seeding → result
    (any stage may end early with a terminal result)

Key Classes:
    - AssessmentController: Session owner exposing the stage triggers
    - AssessmentError: Base class for controller misuse
    - StageError: Trigger or toggle outside its stage
    - SelectionError: Unknown plant id or wrong plant kind

Dependencies:
    - engine.stages: Decision procedures
    - engine.state: Session state
    - meadow_toolkit.core.models: Catalog and inputs

Used By:
    - cli: Headless assessment
    - gui.main_window: Wizard pages
"""

from __future__ import annotations

import logging
from typing import Optional

from meadow_toolkit.core.models import (
    ExclusionCriteria,
    ManagementMeasures,
    PlantKind,
    ReferenceCatalog,
    SiteFactors,
    Stage,
    StageResult,
)

from . import stages
from .config import EngineConfig
from .state import EvaluationState
from .stages import StageTransition

logger = logging.getLogger(__name__)


class AssessmentError(Exception):
    """Controller used outside its contract."""
    pass


class StageError(AssessmentError):
    """A trigger or toggle was used while the session is in another stage."""

    def __init__(self, expected: Stage, actual: Stage):
        super().__init__(f"Expected stage {expected.value!r}, session is at {actual.value!r}")
        self.expected = expected
        self.actual = actual


class SelectionError(AssessmentError):
    """A plant id is not catalogued or belongs to the other selection."""
    pass


_SELECTION_STAGES = {
    PlantKind.QUALITY: Stage.QUALITY_LEVEL,
    PlantKind.POTENTIAL: Stage.POTENTIAL_FLORA,
}


class AssessmentController:
    """
    Owner of one assessment session.

    Attributes:
        catalog: Reference catalog the selections are checked against
        config: Engine thresholds and weights

    Example:
        >>> controller = AssessmentController(catalog)
        >>> for plant_id in ("p01", "p02", "p03"):
        ...     controller.toggle_quality_plant(plant_id)
        >>> controller.evaluate_quality_level().next_stage
        <Stage.POTENTIAL_FLORA: 'potential_flora'>
    """

    def __init__(self, catalog: ReferenceCatalog, config: Optional[EngineConfig] = None):
        self.catalog = catalog
        self.config = config or EngineConfig()
        self._state = EvaluationState()

    # ─────────────────────────────────────────────────────────────────────
    # Session
    # ─────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> EvaluationState:
        return self._state

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def result(self) -> Optional[StageResult]:
        return self._state.result

    @property
    def is_finished(self) -> bool:
        return self._state.is_finished

    def reset(self) -> None:
        """Discard the current session and start over at stage 1."""
        self._state = EvaluationState()
        logger.info("Assessment reset")

    # ─────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────

    def toggle_quality_plant(self, plant_id: str) -> bool:
        """Toggle a Q2 indicator plant; returns the new membership."""
        return self._toggle(PlantKind.QUALITY, plant_id)

    def toggle_potential_plant(self, plant_id: str) -> bool:
        """Toggle a potential indicator plant; returns the new membership."""
        return self._toggle(PlantKind.POTENTIAL, plant_id)

    def _toggle(self, kind: PlantKind, plant_id: str) -> bool:
        self._require(_SELECTION_STAGES[kind])

        plant = self.catalog.get_plant(plant_id)
        if plant is None:
            raise SelectionError(f"Unknown plant id: {plant_id!r}")
        if plant.kind is not kind:
            raise SelectionError(
                f"Plant {plant_id!r} is a {plant.kind.value} plant, "
                f"cannot select it as {kind.value}"
            )

        selected = self._state.selection_for(kind).toggle(plant_id)
        logger.debug(f"{kind.value} selection: {plant_id} -> {selected}")
        return selected

    # ─────────────────────────────────────────────────────────────────────
    # Stage triggers
    # ─────────────────────────────────────────────────────────────────────

    def evaluate_quality_level(self) -> StageTransition:
        """Stage 1 trigger."""
        self._require(Stage.QUALITY_LEVEL)
        return self._log(stages.evaluate_quality_level(self._state, self.config))

    def confirm_potential_flora(self) -> StageTransition:
        """Stage 2 trigger."""
        self._require(Stage.POTENTIAL_FLORA)
        return self._log(stages.confirm_potential_flora(self._state))

    def evaluate_management(self, site: SiteFactors, measures: ManagementMeasures) -> StageTransition:
        """Stage 3 trigger; inputs are read at the moment of evaluation."""
        self._require(Stage.MANAGEMENT)
        return self._log(stages.score_management_potential(self._state, site, measures, self.config))

    def evaluate_seeding(self, exclusions: ExclusionCriteria) -> StageTransition:
        """Stage 4 trigger."""
        self._require(Stage.SEEDING)
        return self._log(stages.evaluate_seeding(self._state, exclusions))

    def _require(self, expected: Stage) -> None:
        if self._state.stage is not expected:
            raise StageError(expected, self._state.stage)

    def _log(self, transition: StageTransition) -> StageTransition:
        if transition.is_terminal:
            result = transition.result
            logger.info(f"Assessment finished: {result.kind.value} (score {result.score})")
        else:
            logger.info(f"Advanced to stage {transition.next_stage.value}")
        return transition
