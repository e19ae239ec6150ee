"""Widget tests for the wizard window and plant cards."""

import pytest
from PIL import Image
from PySide6.QtCore import QPoint, Qt

from meadow_toolkit.catalog import CatalogLoadError, load_catalog
from meadow_toolkit.core.models import OutcomeKind, PlantRecord, Stage
from meadow_toolkit.gui.main_window import MainWindow
from meadow_toolkit.gui.widgets.plant_card import PLACEHOLDER_ICON, PlantCard, pil_to_pixmap


class TestPlantCard:

    @pytest.mark.filterwarnings("error::DeprecationWarning")
    def test_click_toggles_through_owner(self, qtbot):
        selected = set()

        def toggle(plant_id):
            if plant_id in selected:
                selected.discard(plant_id)
                return False
            selected.add(plant_id)
            return True

        card = PlantCard(PlantRecord("q01", "Wiesen-Salbei", "Salvia pratensis", is_q2=True), toggle)
        qtbot.addWidget(card)
        card.show()

        with qtbot.waitSignal(card.toggled, timeout=1000) as blocker:
            qtbot.mouseClick(card, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, QPoint(2, 2))

        assert blocker.args == ["q01", True]
        assert card.isSelected()
        card.click()
        assert not card.isSelected()
        assert selected == set()

    def test_placeholder_when_no_image(self, qtbot):
        card = PlantCard(PlantRecord("q01", "a", "b"), lambda _id: True)
        qtbot.addWidget(card)
        assert card.image_label.text() == PLACEHOLDER_ICON

    def test_thumbnail_when_image_exists(self, qtbot, sample_image):
        plant = PlantRecord("q01", "a", "b", image=sample_image.name)
        card = PlantCard(plant, lambda _id: True, image_dir=sample_image.parent)
        qtbot.addWidget(card)
        assert not card.image_label.pixmap().isNull()

    def test_pil_to_pixmap_keeps_size(self, qtbot):
        pixmap = pil_to_pixmap(Image.new("RGB", (30, 20), color="red"))
        assert (pixmap.width(), pixmap.height()) == (30, 20)


class TestMainWindow:

    @pytest.fixture
    def window(self, qtbot, catalog_dir):
        window = MainWindow(data_dir=catalog_dir)
        qtbot.addWidget(window)
        return window

    def test_starts_on_quality_stage(self, window):
        assert window.load_error is None
        assert window.current_stage() is Stage.QUALITY_LEVEL
        assert len(window.cards_for(Stage.QUALITY_LEVEL)) == 12
        assert len(window.cards_for(Stage.POTENTIAL_FLORA)) == 10

    def test_nine_cards_then_very_good_result(self, window):
        for card in window.cards_for(Stage.QUALITY_LEVEL)[:9]:
            card.click()

        window.q2_button.click()

        assert window.current_stage() is Stage.RESULT
        assert window.controller.result.kind is OutcomeKind.Q2_VERY_GOOD
        assert window.result_panel.title_label.text() == "Qualitätsstufe II: Sehr gut erfüllt"

    def test_full_walk_to_no_potential(self, window):
        window.q2_button.click()
        assert window.current_stage() is Stage.POTENTIAL_FLORA

        window.potential_button.click()
        assert window.current_stage() is Stage.MANAGEMENT

        window.site_checks["neighbors"].setChecked(True)
        window.management_button.click()
        assert window.current_stage() is Stage.SEEDING
        assert window.controller.state.potential_score == 2

        window.exclusion_checks["wet"].setChecked(True)
        window.seeding_button.click()
        assert window.controller.result.kind is OutcomeKind.NO_POTENTIAL

    def test_management_inputs_read_at_evaluation(self, window):
        window.q2_button.click()
        for card in window.cards_for(Stage.POTENTIAL_FLORA)[:4]:
            card.click()
        window.potential_button.click()
        for name in ("neighbors", "structure"):
            window.site_checks[name].setChecked(True)
        for measure_id in ("meas-hay", "meas-cut-time", "meas-late-use"):
            window.measure_checks[measure_id].setChecked(True)

        window.management_button.click()

        assert window.controller.result.kind is OutcomeKind.MGMT_POTENTIAL
        assert window.controller.result.score == 11

    def test_restart_clears_session(self, window):
        for card in window.cards_for(Stage.QUALITY_LEVEL)[:6]:
            card.click()
        window.q2_button.click()

        window.result_panel.restart_button.click()

        assert window.current_stage() is Stage.QUALITY_LEVEL
        assert not any(c.isSelected() for c in window.cards_for(Stage.QUALITY_LEVEL))
        assert len(window.controller.state.q2_selection) == 0

    def test_load_failure_shows_message_and_no_stage(self, qtbot, tmp_path):
        window = MainWindow(data_dir=tmp_path)
        qtbot.addWidget(window)

        assert isinstance(window.load_error, CatalogLoadError)
        assert window.controller is None
        assert window.current_stage() is None
        assert "plants.json" in window.status_label.text()

    def test_custom_loader_is_used(self, qtbot, catalog_dir):
        calls = []

        def loader(data_dir):
            calls.append(data_dir)
            return load_catalog(data_dir)

        window = MainWindow(data_dir=catalog_dir, catalog_loader=loader)
        qtbot.addWidget(window)
        assert calls == [catalog_dir]
