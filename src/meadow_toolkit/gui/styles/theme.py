"""
Theme definitions for the Meadow Toolkit wizard.
"""
from meadow_toolkit.engine.presentation import Severity


class Colors:
    # Primary Colors
    PRIMARY = "#2e7d32"
    PRIMARY_LIGHT = "#66bb6a"
    PRIMARY_HOVER = "#1b5e20"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders
    BORDER = "#e0e0e0"

    # Status
    ERROR = "#c62828"
    ERROR_BG = "#ffebee"
    WARNING_BG = "#fff8e1"
    INFO_BG = "#e8f5e9"

    # Selection
    SELECTION_BG = "#e8f5e9"

    @staticmethod
    def for_severity(severity: Severity) -> str:
        return severity.color


class Fonts:
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"

    H1 = "18pt"
    BODY = "13pt"

    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


class Styles:
    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY};
            color: {Colors.TEXT_ON_PRIMARY};
            border-radius: 6px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_HOVER};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """

    PLANT_CARD = f"""
        QFrame#PlantCard {{
            background-color: {Colors.SURFACE};
            border: 2px solid {Colors.BORDER};
            border-radius: 8px;
        }}
        QFrame#PlantCard:hover {{
            border-color: {Colors.PRIMARY_LIGHT};
        }}
        QFrame#PlantCard[selected="true"] {{
            background-color: {Colors.SELECTION_BG};
            border-color: {Colors.PRIMARY};
        }}
    """

    NOTICE_INFO = f"""
        QLabel {{
            background-color: {Colors.INFO_BG};
            border-left: 4px solid {Colors.PRIMARY};
            padding: 12px;
        }}
    """

    NOTICE_WARNING = f"""
        QLabel {{
            background-color: {Colors.WARNING_BG};
            border-left: 4px solid {Colors.ERROR};
            padding: 12px;
        }}
    """

    LOAD_ERROR = f"""
        QLabel {{
            color: {Colors.ERROR};
            background-color: {Colors.ERROR_BG};
            padding: 20px;
            border-radius: 8px;
        }}
    """


GLOBAL_STYLESHEET = f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {Colors.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
    }}

    QGroupBox {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
        margin-top: 12px;
        padding: 8px;
    }}
"""
