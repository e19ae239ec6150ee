"""
Entry point for the PySide6 wizard.
"""
import logging
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from meadow_toolkit.gui.main_window import MainWindow
    from meadow_toolkit.gui.styles.theme import GLOBAL_STYLESHEET

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(name)s | %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("Meadow Toolkit")
    app.setApplicationDisplayName("Wiesen-Evaluation")
    app.setStyleSheet(GLOBAL_STYLESHEET)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
