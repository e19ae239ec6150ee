"""
Tests for AssessmentController: stage guards, selection checks and the
end-to-end scenarios of the assessment.
"""

import logging

import pytest

from meadow_toolkit.core.models import (
    ExclusionCriteria,
    ManagementMeasures,
    OutcomeKind,
    SiteFactors,
    Stage,
)
from meadow_toolkit.engine import AssessmentController, SelectionError, StageError


@pytest.fixture
def controller(catalog) -> AssessmentController:
    return AssessmentController(catalog)


def select_q2(controller: AssessmentController, n: int) -> None:
    for i in range(1, n + 1):
        controller.toggle_quality_plant(f"q{i:02d}")


def select_potential(controller: AssessmentController, n: int) -> None:
    for i in range(1, n + 1):
        controller.toggle_potential_plant(f"p{i:02d}")


def reach_seeding(controller: AssessmentController, potential: int, site: SiteFactors,
                  measures: ManagementMeasures) -> None:
    select_q2(controller, 3)
    controller.evaluate_quality_level()
    select_potential(controller, potential)
    controller.confirm_potential_flora()
    transition = controller.evaluate_management(site, measures)
    assert transition.next_stage is Stage.SEEDING


class TestSelection:

    def test_toggle_quality_plant_returns_membership(self, controller):
        assert controller.toggle_quality_plant("q01") is True
        assert controller.toggle_quality_plant("q01") is False
        assert len(controller.state.q2_selection) == 0

    def test_toggle_when_unknown_id_then_raises_error(self, controller):
        with pytest.raises(SelectionError, match="Unknown plant id"):
            controller.toggle_quality_plant("zz")

    def test_toggle_when_potential_plant_in_q2_then_raises_error(self, controller):
        with pytest.raises(SelectionError, match="potential plant"):
            controller.toggle_quality_plant("p01")

    def test_toggle_potential_when_not_in_stage_then_raises_stage_error(self, controller):
        with pytest.raises(StageError):
            controller.toggle_potential_plant("p01")

    def test_toggle_when_q2_plant_in_potential_then_raises_error(self, controller):
        controller.evaluate_quality_level()
        with pytest.raises(SelectionError):
            controller.toggle_potential_plant("q01")

    def test_q2_selection_frozen_after_stage_one(self, controller):
        select_q2(controller, 2)
        controller.evaluate_quality_level()
        with pytest.raises(StageError):
            controller.toggle_quality_plant("q03")


class TestStageGuards:

    def test_initial_stage(self, controller):
        assert controller.stage is Stage.QUALITY_LEVEL
        assert controller.result is None
        assert not controller.is_finished

    def test_management_before_stage_three_then_raises_error(self, controller):
        with pytest.raises(StageError) as exc_info:
            controller.evaluate_management(SiteFactors(), ManagementMeasures())
        assert exc_info.value.expected is Stage.MANAGEMENT
        assert exc_info.value.actual is Stage.QUALITY_LEVEL

    def test_seeding_before_stage_four_then_raises_error(self, controller):
        with pytest.raises(StageError):
            controller.evaluate_seeding(ExclusionCriteria())

    def test_trigger_after_result_then_raises_error(self, controller):
        select_q2(controller, 9)
        controller.evaluate_quality_level()
        with pytest.raises(StageError):
            controller.evaluate_quality_level()

    def test_reset_starts_fresh_session(self, controller):
        select_q2(controller, 9)
        controller.evaluate_quality_level()

        controller.reset()

        assert controller.stage is Stage.QUALITY_LEVEL
        assert len(controller.state.q2_selection) == 0
        assert controller.state.potential_score == 0
        assert controller.result is None

    def test_transitions_logged(self, controller, caplog):
        with caplog.at_level(logging.INFO, logger="meadow_toolkit.engine.controller"):
            controller.evaluate_quality_level()
        assert "Advanced to stage potential_flora" in caplog.text


class TestScenarios:
    """End-to-end walks through the stages."""

    def test_scenario_nine_q2_plants_then_very_good(self, controller):
        select_q2(controller, 9)

        transition = controller.evaluate_quality_level()

        assert transition.result.kind is OutcomeKind.Q2_VERY_GOOD
        assert transition.result.score == 9
        assert controller.is_finished

    def test_scenario_six_q2_plants_then_good(self, controller):
        select_q2(controller, 6)

        transition = controller.evaluate_quality_level()

        assert transition.result.kind is OutcomeKind.Q2_GOOD
        assert transition.result.score == 6

    def test_scenario_management_potential(self, controller):
        # Arrange: 3 Q2 plants, then 4 potential plants, both site factors, 3 measures
        select_q2(controller, 3)
        assert controller.evaluate_quality_level().next_stage is Stage.POTENTIAL_FLORA
        select_potential(controller, 4)
        assert controller.confirm_potential_flora().next_stage is Stage.MANAGEMENT

        # Act
        transition = controller.evaluate_management(
            SiteFactors(neighbors=True, structure=True),
            ManagementMeasures(hay=True, cut_time=True, late_use=True),
        )

        # Assert: 4 + 4 + 3
        assert transition.result.kind is OutcomeKind.MGMT_POTENTIAL
        assert transition.result.score == 11
        assert controller.state.potential_score == 11

    def test_scenario_wet_site_then_no_potential(self, controller):
        # 2 plants + 2 (one site factor) + 1 measure = 5
        reach_seeding(controller, 2, SiteFactors(neighbors=True), ManagementMeasures(hay=True))
        assert controller.state.potential_score == 5

        transition = controller.evaluate_seeding(ExclusionCriteria(wet=True))

        assert transition.result.kind is OutcomeKind.NO_POTENTIAL
        assert transition.result.score == 0

    def test_scenario_no_exclusions_then_seeding_with_carried_score(self, controller):
        reach_seeding(controller, 2, SiteFactors(structure=True), ManagementMeasures(early=True))

        transition = controller.evaluate_seeding(ExclusionCriteria())

        assert transition.result.kind is OutcomeKind.SEEDING_POTENTIAL
        assert transition.result.score == 5
        assert controller.stage is Stage.RESULT
