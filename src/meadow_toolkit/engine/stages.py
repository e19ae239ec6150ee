"""
Module: engine.stages

Purpose:
    The four stage decision procedures. Each takes the session state
    explicitly, applies exactly one rule and either records a terminal
    StageResult or moves the state to the next stage.

    Stage 1  Q2 indicator count      > 8 very good, 6..8 good, else stage 2
    Stage 2  Potential flora         always stage 3
    Stage 3  Management potential    score >= 8 mgmt potential, else stage 4
    Stage 4  Seeding exclusions      any exclusion: none, else seeding

Key Functions:
    - evaluate_quality_level(): Stage 1
    - confirm_potential_flora(): Stage 2
    - score_management_potential(): Stage 3
    - evaluate_seeding(): Stage 4
    - compute_potential_score(): Stage 3 scoring arithmetic

Key Classes:
    - StageTransition: Next stage plus the result when terminal

Dependencies:
    - meadow_toolkit.core.models: inputs and outcomes
    - engine.config, engine.state

Used By:
    - engine.controller.AssessmentController
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from meadow_toolkit.core.models import (
    ExclusionCriteria,
    ManagementMeasures,
    OutcomeKind,
    SiteFactors,
    Stage,
    StageResult,
)

from .config import EngineConfig
from .state import EvaluationState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageTransition:
    """
    Outcome of a single stage evaluation.

    Attributes:
        next_stage: Stage the session is in afterwards
        result: Terminal result, set exactly when next_stage is RESULT
    """
    next_stage: Stage
    result: Optional[StageResult] = None

    @property
    def is_terminal(self) -> bool:
        return self.result is not None


def _finish(state: EvaluationState, result: StageResult) -> StageTransition:
    state.finish(result)
    return StageTransition(Stage.RESULT, result)


def _advance(state: EvaluationState, stage: Stage) -> StageTransition:
    state.stage = stage
    return StageTransition(stage)


def evaluate_quality_level(state: EvaluationState, config: EngineConfig) -> StageTransition:
    """
    Stage 1: judge Q2 from the number of selected indicator plants.

    A count below the good threshold never ends the assessment; it routes
    into the potential stages instead.
    """
    count = len(state.q2_selection)
    kind = config.quality_band(count)
    logger.debug(f"Q2 indicator count {count} -> {kind}")

    if kind is not None:
        return _finish(state, StageResult(kind, count))
    return _advance(state, Stage.POTENTIAL_FLORA)


def confirm_potential_flora(state: EvaluationState) -> StageTransition:
    """Stage 2: the selection is consumed by stage 3; nothing is decided here."""
    return _advance(state, Stage.MANAGEMENT)


def compute_potential_score(
    potential_plant_count: int,
    site: SiteFactors,
    measures: ManagementMeasures,
    config: EngineConfig,
) -> int:
    """
    Composite management score.

    score = plants + site_factor_points * true site factors
                   + measure_points * committed measures

    Example:
        >>> compute_potential_score(4, SiteFactors(True, True),
        ...                         ManagementMeasures(hay=True, early=True, cut_time=True),
        ...                         EngineConfig())
        11
    """
    return (
        potential_plant_count
        + config.site_factor_points * site.true_count
        + config.measure_points * measures.true_count
    )


def score_management_potential(
    state: EvaluationState,
    site: SiteFactors,
    measures: ManagementMeasures,
    config: EngineConfig,
) -> StageTransition:
    """
    Stage 3: score upgrade potential without reseeding.

    The score is stored on the state whichever branch is taken; stage 4
    reports it for the seeding outcome.
    """
    total = compute_potential_score(len(state.potential_selection), site, measures, config)
    state.potential_score = total
    logger.debug(
        f"Potential score {total}: plants={len(state.potential_selection)} "
        f"site={site.true_count} measures={measures.true_count}"
    )

    if total >= config.management_threshold:
        return _finish(state, StageResult(OutcomeKind.MGMT_POTENTIAL, total))
    return _advance(state, Stage.SEEDING)


def evaluate_seeding(state: EvaluationState, exclusions: ExclusionCriteria) -> StageTransition:
    """
    Stage 4: any exclusion criterion rules out reseeding.

    Without exclusions the stage-3 score is carried into the result as is.
    """
    if exclusions.any:
        return _finish(state, StageResult.no_potential())
    return _finish(state, StageResult(OutcomeKind.SEEDING_POTENTIAL, state.potential_score))
