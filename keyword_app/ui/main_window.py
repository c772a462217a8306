"""Qt main window switching between the setup form and the live board."""

from __future__ import annotations

from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from keyword_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from keyword_app.constants.game_constants import DEFAULT_QUESTION_FILE
from keyword_app.constants.ui_constants import BOARD_REFRESH_INTERVAL_MS, BOARD_URL_PLACEHOLDER, WINDOW_TITLE
from keyword_app.core.errors import InvalidSetupError
from keyword_app.core.events import GameEvent, GameNotification
from keyword_app.core.game_manager import GameManager
from keyword_app.core.models import GameStatus, Grade, QuestionRecord
from keyword_app.ui.components.board_panel import BoardPanel
from keyword_app.ui.components.setup_panel import SetupPanel
from keyword_app.ui.dialog_helpers import confirm_back_to_setup, show_error, show_info
from keyword_app.ui.settings_dialog import SettingsDialog
from keyword_app.styling.styles import Styles

logger = logging.getLogger(__name__)


class ConsoleMode(Enum):
    """High-level UI mode for the teacher console."""

    SETUP = auto()
    BOARD = auto()


class _NotificationBridge(QObject):
    """Re-emits manager notifications on the Qt thread; the API server runs elsewhere."""

    received = Signal(object)


class KeywordMainWindow(QMainWindow):
    """Main Qt window orchestrating setup and play."""

    def __init__(
        self,
        game_manager: GameManager,
        board_url: str | None = None,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.game_manager = game_manager
        self.board_url = board_url or BOARD_URL_PLACEHOLDER

        self._mode = ConsoleMode.SETUP
        self._ui_font_size: int = 10
        self._game_font_size: int = 14
        self._shuffle_seed = shuffle_seed

        self._bridge = _NotificationBridge(self)
        self._bridge.received.connect(self._handle_notification)
        for event in (GameEvent.STARTED, GameEvent.RETURNED_TO_SETUP):
            self.game_manager.subscribe(event, self._forward_notification)

        self._build_ui()
        self._configure_refresh_timer()
        self._apply_styles()
        self._auto_load_default_questions()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.setup_panel = SetupPanel(on_start=self._handle_start_game, parent=self)
        self.board_panel = BoardPanel(
            self.game_manager,
            self.board_url,
            on_back_to_setup=self._handle_back_to_setup,
            parent=self,
        )
        self.mode_stack.addWidget(self.setup_panel)
        self.mode_stack.addWidget(self.board_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(ConsoleMode.SETUP)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        self.title_label = QLabel("Secret Keyword", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label)
        header_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        header_row.addWidget(self.settings_button)

        layout.addLayout(header_row)

    def _configure_refresh_timer(self) -> None:
        # The board can also be driven through the HTTP API, so poll while playing.
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(BOARD_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        if self._mode == ConsoleMode.BOARD:
            self.board_panel.refresh()

    def _set_mode(self, mode: ConsoleMode) -> None:
        self._mode = mode
        index_map = {
            ConsoleMode.SETUP: 0,
            ConsoleMode.BOARD: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        if mode == ConsoleMode.BOARD:
            self.board_panel.refresh()

    def _forward_notification(self, notification: GameNotification) -> None:
        self._bridge.received.emit(notification)

    def _handle_notification(self, notification: GameNotification) -> None:
        if notification.event == GameEvent.STARTED:
            self._set_mode(ConsoleMode.BOARD)
        elif notification.event == GameEvent.RETURNED_TO_SETUP:
            self._set_mode(ConsoleMode.SETUP)

    def _handle_start_game(
        self,
        keyword: str,
        grade: Grade,
        questions: list[QuestionRecord],
        roster: list[str],
    ) -> None:
        try:
            self.game_manager.start(keyword, grade, questions, roster)
        except InvalidSetupError as exc:
            show_error(self, "Cannot start game", str(exc))
            return
        except RuntimeError as exc:
            show_error(self, "Game already running", str(exc))
            return
        self._set_mode(ConsoleMode.BOARD)

    def _handle_back_to_setup(self) -> None:
        if self.game_manager.get_status() != GameStatus.SOLVED and not confirm_back_to_setup(self):
            return
        self.game_manager.back_to_setup()
        self._set_mode(ConsoleMode.SETUP)

    def _auto_load_default_questions(self) -> None:
        default_path = Path(DEFAULT_QUESTION_FILE)
        if default_path.exists():
            self.setup_panel.import_from_path(default_path, quiet=True)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}\n\n"
            f"Board page: {self.board_url}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._ui_font_size,
            self._game_font_size,
            self._shuffle_seed,
        )
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._game_font_size = dialog.get_game_font_size()
            self._shuffle_seed = dialog.get_shuffle_seed()
            self.game_manager.set_shuffle_seed(self._shuffle_seed)
            logger.info("Settings applied (shuffle seed %s)", self._shuffle_seed)
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())

        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        self.setup_panel.apply_font_size(self._ui_font_size)
        self.board_panel.set_game_font_size(self._game_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        for event_type in (GameEvent.STARTED, GameEvent.RETURNED_TO_SETUP):
            self.game_manager.unsubscribe(event_type, self._forward_notification)
        super().closeEvent(event)
