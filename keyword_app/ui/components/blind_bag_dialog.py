"""Blind bag dialog that spins through the roster and picks one student."""

from __future__ import annotations

import random

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from keyword_app.constants.game_constants import BLIND_BAG_SPIN_INTERVAL_MS, BLIND_BAG_SPIN_STEPS
from keyword_app.constants.ui_constants import (
    BLIND_BAG_EMPTY_MESSAGE,
    BLIND_BAG_REMAINING_TEMPLATE,
    BLIND_BAG_SPIN_AGAIN,
    BLIND_BAG_SPINNING,
    BLIND_BAG_TITLE,
)
from keyword_app.core.errors import EmptyRosterError
from keyword_app.core.game_manager import GameManager
from keyword_app.styling.color_palette import ColorPalette
from keyword_app.styling.styles import Styles


class BlindBagDialog(QDialog):
    """Cycles random names for a moment, then draws one for real.

    The spinning names are cosmetic; only the final ``pick_student`` call
    removes a name from the roster.
    """

    def __init__(self, game_manager: GameManager, font_size: int = 14, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self._font_size = font_size
        self._spin_step = 0
        self._spin_rng = random.Random()

        self.setWindowTitle(BLIND_BAG_TITLE)
        self.setModal(True)
        self.setMinimumWidth(420)

        self._build_ui()
        self._configure_spin_timer()
        self.spin()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.name_label = QLabel("", self)
        self.name_label.setAlignment(Qt.AlignCenter)
        self.name_label.setMinimumHeight(120)
        layout.addWidget(self.name_label)

        self.remaining_label = QLabel("", self)
        self.remaining_label.setAlignment(Qt.AlignCenter)
        self.remaining_label.setStyleSheet(f"color: {ColorPalette.TEXT_SECONDARY.light};")
        layout.addWidget(self.remaining_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.spin_button = QPushButton(BLIND_BAG_SPIN_AGAIN, self)
        self.spin_button.setStyleSheet(Styles.get_primary_button_style())
        self.spin_button.clicked.connect(self.spin)
        button_row.addWidget(self.spin_button)
        self.close_button = QPushButton("Close", self)
        self.close_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        button_row.addWidget(self.close_button)
        layout.addLayout(button_row)

    def _configure_spin_timer(self) -> None:
        self.spin_timer = QTimer(self)
        self.spin_timer.setInterval(BLIND_BAG_SPIN_INTERVAL_MS)
        self.spin_timer.timeout.connect(self._advance_spin)

    def spin(self) -> None:
        if self.spin_timer.isActive():
            return
        if self.game_manager.get_roster_size() == 0:
            self._show_empty()
            return
        self._spin_step = 0
        self.spin_button.setEnabled(False)
        self.spin_button.setText(BLIND_BAG_SPINNING)
        self._set_name_style(ColorPalette.TEXT_SECONDARY.light)
        self.spin_timer.start()

    def _advance_spin(self) -> None:
        self._spin_step += 1
        names = self.game_manager.get_roster()
        if names:
            self.name_label.setText(self._spin_rng.choice(names))
        if self._spin_step < BLIND_BAG_SPIN_STEPS:
            return
        self.spin_timer.stop()
        self._finish_spin()

    def _finish_spin(self) -> None:
        try:
            name = self.game_manager.pick_student()
        except EmptyRosterError:
            self._show_empty()
            return
        self.name_label.setText(name)
        self._set_name_style(ColorPalette.BUTTON_PRIMARY_BG.light)
        self._update_remaining()
        self.spin_button.setText(BLIND_BAG_SPIN_AGAIN)
        self.spin_button.setEnabled(self.game_manager.get_roster_size() > 0)

    def _show_empty(self) -> None:
        self.name_label.setText(BLIND_BAG_EMPTY_MESSAGE)
        self._set_name_style(ColorPalette.ERROR.light)
        self._update_remaining()
        self.spin_button.setText(BLIND_BAG_SPIN_AGAIN)
        self.spin_button.setEnabled(False)

    def _update_remaining(self) -> None:
        self.remaining_label.setText(BLIND_BAG_REMAINING_TEMPLATE.format(count=self.game_manager.get_roster_size()))

    def _set_name_style(self, color: str) -> None:
        self.name_label.setStyleSheet(f"color: {color}; font-size: {self._font_size * 2}pt; font-weight: 900;")

    def reject(self) -> None:
        self.spin_timer.stop()
        super().reject()

    def accept(self) -> None:
        self.spin_timer.stop()
        super().accept()
