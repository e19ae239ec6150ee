"""
Selectable plant card: thumbnail (or placeholder), common name and
botanical name. Clicking the card asks the owner to toggle the plant and
reflects the returned membership.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from PIL import Image
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout

from meadow_toolkit.catalog.images import load_thumbnail
from meadow_toolkit.core.models import PlantRecord
from meadow_toolkit.gui.styles.theme import Colors, Styles

PLACEHOLDER_ICON = "✿"
IMAGE_HEIGHT = 120


def pil_to_pixmap(image: Image.Image) -> QPixmap:
    """Convert an RGB PIL image to a QPixmap."""
    rgb = image.convert("RGB")
    data = rgb.tobytes("raw", "RGB")
    qimage = QImage(data, rgb.width, rgb.height, rgb.width * 3, QImage.Format.Format_RGB888)
    # copy() detaches the QImage from the bytes buffer
    return QPixmap.fromImage(qimage.copy())


class PlantCard(QFrame):
    """
    Card for one catalog plant.

    Args:
        plant: Plant shown on the card
        on_toggle: Called with the plant id; returns the new membership
        image_dir: Directory relative image references resolve against
    """

    toggled = Signal(str, bool)

    def __init__(
        self,
        plant: PlantRecord,
        on_toggle: Callable[[str], bool],
        image_dir: Optional[Path] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.plant = plant
        self._on_toggle = on_toggle
        self._selected = False

        self.setObjectName("PlantCard")
        self.setStyleSheet(Styles.PLANT_CARD)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFixedWidth(200)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setFixedHeight(IMAGE_HEIGHT)
        thumb = load_thumbnail(plant, image_dir) if image_dir is not None else None
        if thumb is None:
            self.image_label.setText(PLACEHOLDER_ICON)
            self.image_label.setStyleSheet(f"font-size: 40pt; color: {Colors.PRIMARY_LIGHT};")
        else:
            self.image_label.setPixmap(pil_to_pixmap(thumb))
        layout.addWidget(self.image_label)

        self.name_label = QLabel(plant.name)
        self.name_label.setWordWrap(True)
        self.name_label.setStyleSheet("font-weight: 600;")
        layout.addWidget(self.name_label)

        self.botanical_label = QLabel(plant.botanical_name)
        self.botanical_label.setWordWrap(True)
        self.botanical_label.setStyleSheet(f"font-style: italic; color: {Colors.TEXT_SECONDARY};")
        layout.addWidget(self.botanical_label)

    def isSelected(self) -> bool:
        return self._selected

    def set_selected(self, selected: bool) -> None:
        if self._selected == selected:
            return
        self._selected = selected
        self.setProperty("selected", "true" if selected else "false")
        # Re-polish so the [selected] rule applies
        self.style().unpolish(self)
        self.style().polish(self)

    def click(self) -> None:
        """Toggle through the owner, as a mouse click does."""
        selected = self._on_toggle(self.plant.id)
        self.set_selected(selected)
        self.toggled.emit(self.plant.id, selected)

    def mousePressEvent(self, event):
        event.accept()

    def mouseReleaseEvent(self, event):
        if not self.isEnabled():
            return
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.click()
