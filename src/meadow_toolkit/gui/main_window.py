"""
Main Window for the Meadow Toolkit wizard.

One page per stage in a QStackedWidget. The window collects selections
and checkbox states and hands them to the AssessmentController; every
decision is made by the engine.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox, QGridLayout, QGroupBox, QLabel, QMainWindow, QPushButton,
    QScrollArea, QStackedWidget, QVBoxLayout, QWidget,
)

from meadow_toolkit import __version__
from meadow_toolkit.catalog import CatalogLoadError, load_catalog, resolve_data_dir
from meadow_toolkit.core.models import (
    ExclusionCriteria, ManagementMeasures, PlantRecord, ReferenceCatalog, SiteFactors, Stage,
)
from meadow_toolkit.engine import AssessmentController, StageTransition, describe_result
from meadow_toolkit.gui.styles.theme import Fonts, Styles
from meadow_toolkit.gui.widgets.plant_card import PlantCard
from meadow_toolkit.gui.widgets.result_panel import ResultPanel

logger = logging.getLogger(__name__)

CARD_COLUMNS = 4

SITE_FACTOR_LABELS: Dict[str, str] = {
    "neighbors": "Angrenzende Flächen weisen Q2-Qualität auf",
    "structure": "Die Fläche ist strukturreich (Säume, Hecken, Böschungen)",
}

EXCLUSION_LABELS: Dict[str, str] = {
    "shade": "Ungünstige Exposition / starke Beschattung",
    "wet": "Staunässe oder sehr feuchter Standort",
    "high_yield": "Sehr hoher Ertrag / stark gedüngter Boden",
    "weeds": "Starker Druck durch Problemunkräuter (z.B. Blacken, Disteln)",
}


class MainWindow(QMainWindow):
    """
    Wizard window.

    Args:
        data_dir: Catalog directory (defaults to resolve_data_dir())
        catalog_loader: Loader used at startup; replaceable for tests
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        catalog_loader: Callable[[Optional[Path]], ReferenceCatalog] = load_catalog,
    ):
        super().__init__()
        self.setWindowTitle(f"Wiesen-Evaluation (Meadow Toolkit {__version__})")
        self.resize(1100, 800)

        self.data_dir = resolve_data_dir(data_dir)
        self.controller: Optional[AssessmentController] = None
        self.load_error: Optional[CatalogLoadError] = None

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.status_label = QLabel("Daten werden geladen ...")
        self.status_label.setWordWrap(True)
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.stack.addWidget(self.status_label)

        try:
            catalog = catalog_loader(self.data_dir)
        except CatalogLoadError as e:
            # No stage becomes reachable after a failed load
            self.load_error = e
            self.status_label.setText(e.user_message)
            self.status_label.setStyleSheet(Styles.LOAD_ERROR)
            return

        self.controller = AssessmentController(catalog)
        self._pages: Dict[Stage, QWidget] = {}
        self._cards: Dict[Stage, List[PlantCard]] = {}
        self._build_pages(catalog)
        self._show_stage(Stage.QUALITY_LEVEL)

    # ─────────────────────────────────────────────────────────────────────
    # Page construction
    # ─────────────────────────────────────────────────────────────────────

    def _build_pages(self, catalog: ReferenceCatalog) -> None:
        self.q2_button = QPushButton("Qualität auswerten")
        self.q2_button.clicked.connect(self._on_evaluate_quality)
        self._add_plant_page(
            Stage.QUALITY_LEVEL,
            "Schritt 1: Q2-Zeigerpflanzen",
            "Wählen Sie alle Zeigerpflanzen aus, die regelmässig auf der Fläche vorkommen.",
            catalog.quality_plants,
            self.controller.toggle_quality_plant,
            self.q2_button,
        )

        self.potential_button = QPushButton("Weiter")
        self.potential_button.clicked.connect(self._on_confirm_potential)
        self._add_plant_page(
            Stage.POTENTIAL_FLORA,
            "Schritt 2: Potenzial-Flora",
            "Welche dieser Arten sind auf der Fläche vorhanden?",
            catalog.potential_plants,
            self.controller.toggle_potential_plant,
            self.potential_button,
        )

        self._add_management_page(catalog)
        self._add_seeding_page()

        self.result_panel = ResultPanel()
        self.result_panel.restartRequested.connect(self._on_restart)
        self._add_page(Stage.RESULT, self.result_panel)

    def _add_page(self, stage: Stage, widget: QWidget) -> None:
        self._pages[stage] = widget
        self.stack.addWidget(widget)

    def _page_layout(self, title: str, intro: str) -> tuple[QWidget, QVBoxLayout]:
        page = QWidget()
        layout = QVBoxLayout(page)
        heading = QLabel(title)
        heading.setStyleSheet(f"font-size: {Fonts.H1}; font-weight: {Fonts.WEIGHT_BOLD};")
        layout.addWidget(heading)
        intro_label = QLabel(intro)
        intro_label.setWordWrap(True)
        layout.addWidget(intro_label)
        return page, layout

    def _add_plant_page(
        self,
        stage: Stage,
        title: str,
        intro: str,
        plants: tuple[PlantRecord, ...],
        on_toggle: Callable[[str], bool],
        button: QPushButton,
    ) -> None:
        page, layout = self._page_layout(title, intro)

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        cards = []
        for i, plant in enumerate(plants):
            card = PlantCard(plant, on_toggle, image_dir=self.data_dir)
            grid.addWidget(card, i // CARD_COLUMNS, i % CARD_COLUMNS)
            cards.append(card)
        self._cards[stage] = cards

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(grid_host)
        layout.addWidget(scroll, stretch=1)

        button.setStyleSheet(Styles.BUTTON_PRIMARY)
        layout.addWidget(button, alignment=Qt.AlignmentFlag.AlignRight)
        self._add_page(stage, page)

    def _add_management_page(self, catalog: ReferenceCatalog) -> None:
        page, layout = self._page_layout(
            "Schritt 3: Standort und Bewirtschaftung",
            "Standortfaktoren zählen je 2 Punkte, jede Massnahme, zu der Sie bereit sind, 1 Punkt.",
        )

        site_box = QGroupBox("Standortfaktoren")
        site_layout = QVBoxLayout(site_box)
        self.site_checks: Dict[str, QCheckBox] = {}
        for name in SiteFactors.NAMES:
            check = QCheckBox(SITE_FACTOR_LABELS[name])
            self.site_checks[name] = check
            site_layout.addWidget(check)
        layout.addWidget(site_box)

        measures_box = QGroupBox("Massnahmen")
        measures_layout = QVBoxLayout(measures_box)
        by_id = {m.id: m for m in catalog.measures}
        self.measure_checks: Dict[str, QCheckBox] = {}
        for measure_id in ManagementMeasures.MEASURE_IDS:
            record = by_id.get(measure_id)
            check = QCheckBox(record.name if record else measure_id)
            if record and record.description:
                check.setToolTip(record.description)
            self.measure_checks[measure_id] = check
            measures_layout.addWidget(check)
        layout.addWidget(measures_box)
        layout.addStretch(1)

        self.management_button = QPushButton("Potenzial berechnen")
        self.management_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.management_button.clicked.connect(self._on_evaluate_management)
        layout.addWidget(self.management_button, alignment=Qt.AlignmentFlag.AlignRight)
        self._add_page(Stage.MANAGEMENT, page)

    def _add_seeding_page(self) -> None:
        page, layout = self._page_layout(
            "Schritt 4: Ansaat",
            "Trifft eines der folgenden Ausschlusskriterien auf die Fläche zu?",
        )
        box = QGroupBox("Ausschlusskriterien")
        box_layout = QVBoxLayout(box)
        self.exclusion_checks: Dict[str, QCheckBox] = {}
        for name in ExclusionCriteria.NAMES:
            check = QCheckBox(EXCLUSION_LABELS[name])
            self.exclusion_checks[name] = check
            box_layout.addWidget(check)
        layout.addWidget(box)
        layout.addStretch(1)

        self.seeding_button = QPushButton("Ansaat bewerten")
        self.seeding_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.seeding_button.clicked.connect(self._on_evaluate_seeding)
        layout.addWidget(self.seeding_button, alignment=Qt.AlignmentFlag.AlignRight)
        self._add_page(Stage.SEEDING, page)

    # ─────────────────────────────────────────────────────────────────────
    # Stage handling
    # ─────────────────────────────────────────────────────────────────────

    def current_stage(self) -> Optional[Stage]:
        widget = self.stack.currentWidget()
        for stage, page in getattr(self, "_pages", {}).items():
            if page is widget:
                return stage
        return None

    def cards_for(self, stage: Stage) -> List[PlantCard]:
        return list(self._cards.get(stage, []))

    def _show_stage(self, stage: Stage) -> None:
        self.stack.setCurrentWidget(self._pages[stage])

    def _apply(self, transition: StageTransition) -> None:
        if transition.is_terminal:
            self.result_panel.show_result(describe_result(transition.result))
        self._show_stage(transition.next_stage)

    def _on_evaluate_quality(self) -> None:
        self._apply(self.controller.evaluate_quality_level())

    def _on_confirm_potential(self) -> None:
        self._apply(self.controller.confirm_potential_flora())

    def _on_evaluate_management(self) -> None:
        site = SiteFactors.from_names(n for n, c in self.site_checks.items() if c.isChecked())
        measures = ManagementMeasures.from_ids(m for m, c in self.measure_checks.items() if c.isChecked())
        self._apply(self.controller.evaluate_management(site, measures))

    def _on_evaluate_seeding(self) -> None:
        exclusions = ExclusionCriteria.from_names(
            n for n, c in self.exclusion_checks.items() if c.isChecked()
        )
        self._apply(self.controller.evaluate_seeding(exclusions))

    def _on_restart(self) -> None:
        self.controller.reset()
        for cards in self._cards.values():
            for card in cards:
                card.set_selected(False)
        for check in (*self.site_checks.values(), *self.measure_checks.values(),
                      *self.exclusion_checks.values()):
            check.setChecked(False)
        self._show_stage(Stage.QUALITY_LEVEL)
