"""Component for the live board: scrambled tiles, solve and blind bag."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from keyword_app.constants.game_constants import BOARD_MAX_COLUMNS
from keyword_app.constants.ui_constants import (
    BOARD_BLIND_BAG_BUTTON,
    BOARD_HOME_BUTTON,
    BOARD_INSTRUCTIONS,
    BOARD_RESET_BUTTON,
    BOARD_SOLVE_BUTTON,
)
from keyword_app.core.game_manager import GameManager
from keyword_app.core.models import BoardSnapshot, GameStatus, TileView
from keyword_app.ui.components.blind_bag_dialog import BlindBagDialog
from keyword_app.ui.components.question_dialog import QuestionDialog
from keyword_app.styling.styles import Styles


class BoardPanel(QWidget):
    """UI component showing the board while a game runs."""

    def __init__(
        self,
        game_manager: GameManager,
        board_url: str,
        on_back_to_setup: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.board_url = board_url
        self.on_back_to_setup = on_back_to_setup

        self._game_font_size: int = 14
        self._tile_buttons: list[QPushButton] = []
        self._rendered_tiles: list[TileView] = []
        self._rendered_status: GameStatus | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.network_label = QLabel(f"Board page for the projector: {self.board_url}", self)
        self.network_label.setWordWrap(True)
        layout.addWidget(self.network_label)

        self.status_label = QLabel("", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.status_label)

        self.tile_container = QWidget(self)
        self.tile_grid = QGridLayout()
        self.tile_grid.setSpacing(12)
        self.tile_container.setLayout(self.tile_grid)
        layout.addWidget(self.tile_container, stretch=1, alignment=Qt.AlignCenter)

        self.instructions_label = QLabel(BOARD_INSTRUCTIONS, self)
        self.instructions_label.setWordWrap(True)
        self.instructions_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.instructions_label)

        button_row = QHBoxLayout()
        self.blind_bag_button = QPushButton(BOARD_BLIND_BAG_BUTTON, self)
        self.blind_bag_button.clicked.connect(self._handle_blind_bag)
        button_row.addWidget(self.blind_bag_button)
        button_row.addStretch()

        self.solve_button = QPushButton(BOARD_SOLVE_BUTTON, self)
        self.solve_button.setStyleSheet(Styles.get_primary_button_style())
        self.solve_button.clicked.connect(self._handle_solve)
        button_row.addWidget(self.solve_button)

        self.reset_button = QPushButton(BOARD_RESET_BUTTON, self)
        self.reset_button.clicked.connect(self._handle_reset)
        button_row.addWidget(self.reset_button)

        self.home_button = QPushButton(BOARD_HOME_BUTTON, self)
        self.home_button.clicked.connect(self.on_back_to_setup)
        button_row.addWidget(self.home_button)
        layout.addLayout(button_row)

    def refresh(self) -> None:
        """Re-read the board from the manager; rebuilds tiles only when they changed."""
        snapshot = self.game_manager.get_snapshot()
        if snapshot.tiles != self._rendered_tiles or snapshot.status != self._rendered_status:
            self._render_tiles(snapshot.tiles, snapshot.status)
        self._update_controls(snapshot)

    def _render_tiles(self, tiles: list[TileView], status: GameStatus) -> None:
        if len(tiles) != len(self._tile_buttons):
            self._rebuild_grid(len(tiles))
        solved = status == GameStatus.SOLVED
        tile_size = self._game_font_size * 6
        for button, tile in zip(self._tile_buttons, tiles):
            if tile.char is not None:
                button.setText(tile.char)
            else:
                button.setText(str(tile.position + 1))
            button.setMinimumSize(tile_size, tile_size)
            button.setStyleSheet(
                Styles.get_tile_style(
                    revealed=tile.revealed,
                    solved=solved,
                    font_size=self._game_font_size * 2 if tile.char else self._game_font_size,
                )
            )
            button.setEnabled(status == GameStatus.PLAYING and not tile.revealed)
        self._rendered_tiles = tiles
        self._rendered_status = status

    def _rebuild_grid(self, count: int) -> None:
        for button in self._tile_buttons:
            self.tile_grid.removeWidget(button)
            button.deleteLater()
        self._tile_buttons = []
        for slot in range(count):
            button = QPushButton("", self.tile_container)
            button.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
            button.clicked.connect(lambda _checked=False, index=slot: self._handle_tile_clicked(index))
            row, column = divmod(slot, BOARD_MAX_COLUMNS)
            self.tile_grid.addWidget(button, row, column)
            self._tile_buttons.append(button)

    def _update_controls(self, snapshot: BoardSnapshot) -> None:
        status = snapshot.status
        total = len(self._rendered_tiles)
        revealed = sum(1 for tile in self._rendered_tiles if tile.revealed)
        if status == GameStatus.SOLVED:
            self.status_label.setText(f"The keyword is {snapshot.keyword}!")
        elif status == GameStatus.REVEALED:
            self.status_label.setText("All letters revealed. Who can solve the keyword?")
        else:
            self.status_label.setText(f"{revealed} / {total} letters revealed")
        self.solve_button.setEnabled(status == GameStatus.REVEALED)
        self.reset_button.setEnabled(status != GameStatus.SETUP)
        self.blind_bag_button.setEnabled(snapshot.blind_bag_open)
        self.blind_bag_button.setText(f"{BOARD_BLIND_BAG_BUTTON} ({snapshot.roster_size})")

    def _handle_tile_clicked(self, slot: int) -> None:
        if self.game_manager.get_status() != GameStatus.PLAYING:
            return
        question = self.game_manager.get_question_for_slot(slot)
        if question.position in self.game_manager.get_revealed_positions():
            return
        dialog = QuestionDialog(self.game_manager, question, font_size=self._game_font_size, parent=self)
        dialog.exec()
        self.refresh()

    def _handle_solve(self) -> None:
        self.game_manager.solve()
        self.refresh()

    def _handle_reset(self) -> None:
        self.game_manager.reset_progress()
        self.refresh()

    def _handle_blind_bag(self) -> None:
        if not self.game_manager.get_snapshot().blind_bag_open:
            return
        dialog = BlindBagDialog(self.game_manager, font_size=self._game_font_size, parent=self)
        dialog.exec()
        self.refresh()

    def set_game_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._rendered_tiles = []
        self.instructions_label.setStyleSheet(f"font-size: {max(10, font_size - 2)}pt;")
        self.refresh()
