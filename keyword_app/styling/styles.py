"""Centralized stylesheet builders for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QDialog {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QComboBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
        """

    @staticmethod
    def get_tile_style(revealed: bool, solved: bool, font_size: int, theme: Theme = Theme.LIGHT) -> str:
        if solved:
            background = ColorPalette.TILE_SOLVED.get(theme)
            text = ColorPalette.TILE_TEXT.get(theme)
        elif revealed:
            background = ColorPalette.TILE_REVEALED.get(theme)
            text = ColorPalette.TILE_TEXT.get(theme)
        else:
            background = ColorPalette.TILE_HIDDEN.get(theme)
            text = ColorPalette.TILE_HIDDEN_TEXT.get(theme)
        return (
            f"QPushButton {{ background-color: {background}; color: {text}; border: none; "
            f"border-radius: 14px; font-size: {font_size}pt; font-weight: 900; }}"
        )

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"QPushButton {{ background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)}; "
            f"color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)}; font-weight: bold; padding: 10px 18px; }}"
        )

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
