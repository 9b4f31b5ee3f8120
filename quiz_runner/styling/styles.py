"""Centralized stylesheets for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:default {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
            }}
            QLineEdit, QTableWidget {{
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PANEL.get(theme)};
                border: 1px solid {ColorPalette.BORDER.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_muted_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_MUTED.get(theme)};"

    @staticmethod
    def get_timer_bar_style(warning: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.TIMER_WARNING if warning else ColorPalette.TIMER_NORMAL
        return f"QProgressBar::chunk {{ background-color: {color.get(theme)}; }}"
