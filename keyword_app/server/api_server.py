"""FastAPI server that exposes the game board and actions to the classroom screen."""

from __future__ import annotations

import logging
from threading import Thread
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field
import uvicorn

from keyword_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from keyword_app.core.errors import EmptyRosterError, InvalidPositionError, InvalidSetupError
from keyword_app.core.game_manager import GameManager
from keyword_app.core.markdown_renderer import renderer
from keyword_app.core.models import BoardSnapshot, Grade, QuestionRecord
from keyword_app.core.services.roster_manager import parse_roster

logger = logging.getLogger(__name__)

_BOARD_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>KeywordQt Board</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f8fafc; color: #0f172a; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; align-items: center; gap: 1.5rem; }
      h1 { letter-spacing: 0.2em; text-transform: uppercase; margin: 0; }
      #status { color: #64748b; font-weight: bold; letter-spacing: 0.15em; text-transform: uppercase; font-size: 0.8rem; }
      #board { display: grid; gap: 0.75rem; }
      .tile { width: 5rem; height: 5rem; border-radius: 1rem; display: flex; align-items: center; justify-content: center; font-size: 2.5rem; font-weight: 900; box-shadow: 0 0.5rem 1rem rgba(15, 23, 42, 0.15); }
      .tile.hidden { background: #1e293b; color: #94a3b8; font-size: 1.5rem; }
      .tile.revealed { background: #10b981; color: #fff; }
      .tile.solved { background: #4f46e5; color: #fff; }
      #waiting { color: #94a3b8; font-style: italic; }
    </style>
  </head>
  <body>
    <h1>Secret Keyword</h1>
    <p id="status"></p>
    <div id="board"></div>
    <p id="waiting">Waiting for the teacher to start a game…</p>
    <script>
      const boardEl = document.getElementById('board');
      const statusEl = document.getElementById('status');
      const waitingEl = document.getElementById('waiting');

      function renderTiles(state) {
        const columns = Math.max(1, Math.min(state.keyword_length, 6));
        boardEl.style.gridTemplateColumns = `repeat(${columns}, 5rem)`;
        boardEl.innerHTML = '';
        state.tiles.forEach(tile => {
          const el = document.createElement('div');
          if (state.status === 'solved') {
            el.className = 'tile solved';
            el.textContent = tile.char;
          } else if (tile.revealed) {
            el.className = 'tile revealed';
            el.textContent = tile.char;
          } else {
            el.className = 'tile hidden';
            el.textContent = tile.position + 1;
          }
          boardEl.appendChild(el);
        });
      }

      async function refreshBoard() {
        try {
          const response = await fetch('/state');
          const state = await response.json();
          const inSetup = state.status === 'setup';
          waitingEl.style.display = inSetup ? 'block' : 'none';
          statusEl.textContent = inSetup
            ? ''
            : `Grade ${state.grade} • ${state.revealed_count}/${state.keyword_length} revealed`;
          renderTiles(state);
        } catch (error) {
          console.error('Error fetching board state:', error);
          waitingEl.textContent = 'Unable to reach the game server.';
          waitingEl.style.display = 'block';
        }
      }

      refreshBoard();
      setInterval(refreshBoard, 1500);
    </script>
  </body>
</html>
"""


class OptionsPayload(BaseModel):
    A: str
    B: str
    C: str
    D: str


class QuestionPayload(BaseModel):
    """One question record in the shape the generation service produces."""

    text: str
    options: OptionsPayload
    correct_answer: Literal["A", "B", "C", "D"] = Field(alias="correctAnswer")


class SetupPayload(BaseModel):
    """Payload schema for starting a game."""

    keyword: str
    grade: Grade
    questions: list[QuestionPayload]
    roster_text: str = ""


class AnswerPayload(BaseModel):
    """Payload schema for an answer to one tile's question."""

    position: int = Field(ge=0)
    choice: Literal["A", "B", "C", "D"]


def _get_game_manager_dependency(game_manager: GameManager):
    def dependency() -> GameManager:
        return game_manager

    return dependency


def _serialize_snapshot(snapshot: BoardSnapshot) -> dict[str, object]:
    return {
        "status": snapshot.status.value,
        "grade": snapshot.grade.value if snapshot.grade else None,
        "keyword_length": snapshot.keyword_length,
        "revealed_count": snapshot.revealed_count,
        "is_complete": snapshot.is_complete,
        "roster_size": snapshot.roster_size,
        "blind_bag_open": snapshot.blind_bag_open,
        "keyword": snapshot.keyword,
        "tiles": [
            {
                "slot": tile.slot,
                "position": tile.position,
                "char": tile.char,
                "revealed": tile.revealed,
            }
            for tile in snapshot.tiles
        ],
    }


def create_api_app(game_manager: GameManager) -> FastAPI:
    """Create a FastAPI application wired to the provided game manager."""
    app = FastAPI(title="KeywordQt API", version="0.1.0")
    manager_dep = _get_game_manager_dependency(game_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_board_page() -> str:
        return _BOARD_PAGE_HTML

    @app.get("/state")
    def get_state(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        return _serialize_snapshot(manager.get_snapshot())

    @app.get("/questions/{position}")
    def get_question(position: int, manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        try:
            question = manager.get_question(position)
        except InvalidPositionError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {
            "position": question.position,
            "number": question.position + 1,
            "question_html": renderer.render_question(question),
            "options": dict(question.options),
            "revealed": question.position in manager.get_revealed_positions(),
        }

    @app.post("/setup", status_code=201)
    def start_game(payload: SetupPayload, manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        records = [
            QuestionRecord(
                text=question.text,
                options=question.options.model_dump(),
                correct_answer=question.correct_answer,
            )
            for question in payload.questions
        ]
        try:
            snapshot = manager.start(payload.keyword, payload.grade, records, parse_roster(payload.roster_text))
        except InvalidSetupError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _serialize_snapshot(snapshot)

    @app.post("/answer")
    def submit_answer(payload: AnswerPayload, manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        try:
            outcome = manager.submit_answer(payload.position, payload.choice)
        except InvalidPositionError as exc:
            logger.warning("Answer rejected: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return {
            "position": outcome.position,
            "correct": outcome.correct,
            "accepted": outcome.accepted,
            "status": outcome.status.value,
        }

    @app.post("/solve")
    def solve(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        manager.solve()
        return _serialize_snapshot(manager.get_snapshot())

    @app.post("/reset")
    def reset_progress(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        manager.reset_progress()
        return _serialize_snapshot(manager.get_snapshot())

    @app.post("/home")
    def back_to_setup(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        manager.back_to_setup()
        return _serialize_snapshot(manager.get_snapshot())

    @app.post("/pick")
    def pick_student(manager: GameManager = Depends(manager_dep)) -> dict[str, object]:
        try:
            name = manager.pick_student()
        except EmptyRosterError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return {"name": name, "remaining": manager.get_roster_size()}

    return app


def start_api_server(
    game_manager: GameManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(game_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="KeywordApiServer", daemon=True)
    thread.start()
    return thread
