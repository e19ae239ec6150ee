"""
Unit tests for SelectionSet toggling.
"""

import pytest

from meadow_toolkit.core.models import PlantKind, SelectionSet


class TestSelectionSetToggle:
    """Tests for SelectionSet.toggle."""

    def test_toggle_when_absent_then_inserts(self):
        # Arrange
        selection = SelectionSet(PlantKind.QUALITY)

        # Act
        selected = selection.toggle("q01")

        # Assert
        assert selected is True
        assert "q01" in selection
        assert len(selection) == 1

    def test_toggle_when_present_then_removes(self):
        selection = SelectionSet.of(PlantKind.QUALITY, ["q01", "q02"])

        selected = selection.toggle("q01")

        assert selected is False
        assert not selection.contains("q01")
        assert selection.ids == frozenset({"q02"})

    @pytest.mark.parametrize("initial", [[], ["q01"], ["q01", "q02", "q03"]])
    def test_toggle_twice_restores_membership(self, initial):
        selection = SelectionSet.of(PlantKind.QUALITY, initial)
        before = selection.ids

        selection.toggle("q01")
        selection.toggle("q01")

        assert selection.ids == before

    def test_toggle_never_duplicates(self):
        selection = SelectionSet(PlantKind.POTENTIAL)
        for _ in range(3):
            selection.toggle("p01")
            selection.toggle("p02")
        # p01 and p02 toggled an odd number of times
        assert len(selection) == 2
        assert list(selection) == ["p01", "p02"]

    def test_clear_empties_set(self):
        selection = SelectionSet.of(PlantKind.POTENTIAL, ["p01", "p02"])
        selection.clear()
        assert len(selection) == 0

    def test_ids_is_snapshot(self):
        selection = SelectionSet.of(PlantKind.QUALITY, ["q01"])
        snapshot = selection.ids
        selection.toggle("q02")
        assert snapshot == frozenset({"q01"})
