"""
Result page: shows a ResultDescriptor with the title in its severity colour.
"""
from __future__ import annotations

from html import escape

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from meadow_toolkit.engine.presentation import ResultDescriptor
from meadow_toolkit.gui.styles.theme import Colors, Fonts, Styles


class ResultPanel(QWidget):
    """Terminal page of the wizard."""

    restartRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        self.title_label = QLabel()
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        self.body_label = QLabel()
        self.body_label.setWordWrap(True)
        self.body_label.setTextFormat(Qt.TextFormat.RichText)
        layout.addWidget(self.body_label)

        self.notice_label = QLabel()
        self.notice_label.setWordWrap(True)
        self.notice_label.setTextFormat(Qt.TextFormat.RichText)
        layout.addWidget(self.notice_label)

        self.after_label = QLabel()
        self.after_label.setWordWrap(True)
        self.after_label.setTextFormat(Qt.TextFormat.RichText)
        layout.addWidget(self.after_label)

        self.restart_button = QPushButton("Neue Bewertung starten")
        self.restart_button.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.restart_button.clicked.connect(self.restartRequested.emit)
        layout.addWidget(self.restart_button, alignment=Qt.AlignmentFlag.AlignLeft)

        self.descriptor = None

    def show_result(self, descriptor: ResultDescriptor) -> None:
        self.descriptor = descriptor
        self.title_label.setText(descriptor.title)
        self.title_label.setStyleSheet(
            f"font-size: {Fonts.H1}; font-weight: {Fonts.WEIGHT_BOLD}; "
            f"color: {Colors.for_severity(descriptor.severity)};"
        )

        self.body_label.setText("".join(f"<p>{escape(p)}</p>" for p in descriptor.paragraphs))

        self.notice_label.setText(f"<b>{escape(descriptor.notice_label)}</b><br>{escape(descriptor.notice)}")
        self.notice_label.setStyleSheet(
            Styles.NOTICE_WARNING if descriptor.notice_is_warning else Styles.NOTICE_INFO
        )

        after = ""
        if descriptor.bullets:
            after += "<ul>" + "".join(f"<li>{escape(b)}</li>" for b in descriptor.bullets) + "</ul>"
        after += "".join(f"<p>{escape(p)}</p>" for p in descriptor.closing)
        self.after_label.setText(after)
        self.after_label.setVisible(bool(after))
