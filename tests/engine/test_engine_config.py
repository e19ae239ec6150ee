"""
Unit tests for EngineConfig.
"""

import pytest

from meadow_toolkit.core.models import OutcomeKind
from meadow_toolkit.engine import EngineConfig


class TestEngineConfig:
    """Tests for EngineConfig dataclass."""

    def test_defaults(self):
        config = EngineConfig()
        assert config.very_good_threshold == 8
        assert config.good_threshold == 6
        assert config.management_threshold == 8
        assert config.site_factor_points == 2
        assert config.measure_points == 1

    def test_init_when_good_threshold_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="good_threshold must be positive"):
            EngineConfig(good_threshold=0)

    def test_init_when_very_good_below_good_then_raises_error(self):
        with pytest.raises(ValueError, match="very_good_threshold"):
            EngineConfig(very_good_threshold=5, good_threshold=6)

    def test_init_when_management_threshold_zero_then_raises_error(self):
        with pytest.raises(ValueError, match="management_threshold must be positive"):
            EngineConfig(management_threshold=0)

    def test_init_when_negative_points_then_raises_error(self):
        with pytest.raises(ValueError, match="point weights"):
            EngineConfig(measure_points=-1)

    @pytest.mark.parametrize(
        "count,band",
        [
            (0, None),
            (5, None),
            (6, OutcomeKind.Q2_GOOD),
            (8, OutcomeKind.Q2_GOOD),
            (9, OutcomeKind.Q2_VERY_GOOD),
            (30, OutcomeKind.Q2_VERY_GOOD),
        ],
    )
    def test_quality_band_boundaries(self, count, band):
        assert EngineConfig().quality_band(count) is band

    def test_quality_band_when_custom_thresholds_then_returns_outcome_kinds(self):
        config = EngineConfig(very_good_threshold=3, good_threshold=2)

        assert config.quality_band(1) is None
        assert config.quality_band(2) is OutcomeKind.Q2_GOOD
        assert config.quality_band(4) is OutcomeKind.Q2_VERY_GOOD
