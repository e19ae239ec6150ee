"""
Module: engine

Purpose:
    Staged decision engine for the Q2 meadow assessment. Routes a session
    through up to four stages to one of five terminal outcomes.

Key Functions:
    - evaluate_quality_level(), confirm_potential_flora(),
      score_management_potential(), evaluate_seeding(): stage rules
    - describe_result(): Outcome presentation lookup

Key Classes:
    - AssessmentController: Session owner with stage triggers
    - EngineConfig: Thresholds and weights
    - EvaluationState: Explicit session state

Used By:
    - cli, gui
"""

from .config import EngineConfig
from .state import EvaluationState
from .stages import (
    StageTransition,
    evaluate_quality_level,
    confirm_potential_flora,
    compute_potential_score,
    score_management_potential,
    evaluate_seeding,
)
from .controller import AssessmentController, AssessmentError, StageError, SelectionError
from .presentation import ResultDescriptor, Severity, describe_result

__all__ = [
    "EngineConfig",
    "EvaluationState",
    "StageTransition",
    "evaluate_quality_level",
    "confirm_potential_flora",
    "compute_potential_score",
    "score_management_potential",
    "evaluate_seeding",
    "AssessmentController",
    "AssessmentError",
    "StageError",
    "SelectionError",
    "ResultDescriptor",
    "Severity",
    "describe_result",
]
