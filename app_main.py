"""Application entry point for KeywordQt."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from keyword_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from keyword_app.core.game_manager import GameManager
from keyword_app.server.api_server import start_api_server
from keyword_app.ui.main_window import KeywordMainWindow
from keyword_app.utils.logging_config import configure_logging
from keyword_app.utils.settings import settings


def _determine_board_url(port: int) -> str:
    """Best-effort determination of the local IP for the projector board URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting KeywordQt…")

    game_manager = GameManager(shuffle_seed=settings.shuffle_seed)
    start_api_server(game_manager=game_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    board_url = _determine_board_url(DEFAULT_PORT)
    logger.info("Board page available at %s", board_url)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; AI question generation is disabled")

    app = QApplication(sys.argv)
    window = KeywordMainWindow(
        game_manager=game_manager,
        board_url=board_url,
        shuffle_seed=settings.shuffle_seed,
    )
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
