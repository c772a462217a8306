"""Tests for the game state machine behind the console and the API."""

from threading import Barrier, Thread

import pytest

from keyword_app.core.errors import EmptyRosterError, InvalidPositionError, InvalidSetupError
from keyword_app.core.events import GameEvent
from keyword_app.core.game_manager import GameManager
from keyword_app.core.models import GameStatus, Grade

from conftest import make_record

CORRECT = {0: "B", 1: "D"}


def reveal_all(manager):
    for position, choice in CORRECT.items():
        manager.submit_answer(position, choice)


class TestStart:
    """Setup validation and session creation."""

    def test_start_binds_normalized_keyword(self, manager, ai_records):
        snapshot = manager.start("  a i ", "11", ai_records, ["Anh"])
        assert snapshot.status == GameStatus.PLAYING
        assert snapshot.keyword_length == 2
        assert snapshot.keyword is None
        assert manager.get_keyword() == "AI"
        assert manager.get_grade() == Grade.G11
        assert [q.keyword_char for q in manager.get_questions()] == ["A", "I"]
        assert sorted(manager.get_scrambled_order()) == [0, 1]
        assert manager.get_revealed_count() == 0

    def test_integer_grade_is_accepted(self, manager, ai_records):
        manager.start("AI", 12, ai_records)
        assert manager.get_grade() == Grade.G12

    def test_too_few_questions_stays_in_setup(self, manager):
        with pytest.raises(InvalidSetupError):
            manager.start("AI", Grade.G10, [make_record()])
        assert manager.get_status() == GameStatus.SETUP
        assert manager.get_keyword() is None

    def test_blank_keyword_stays_in_setup(self, manager, ai_records):
        with pytest.raises(InvalidSetupError):
            manager.start("   ", Grade.G10, ai_records)
        assert manager.get_status() == GameStatus.SETUP

    def test_unknown_grade_is_setup_error(self, manager, ai_records):
        with pytest.raises(InvalidSetupError):
            manager.start("AI", "9", ai_records)
        assert manager.get_status() == GameStatus.SETUP

    def test_start_while_running_is_rejected(self, playing_manager, ai_records):
        with pytest.raises(RuntimeError):
            playing_manager.start("AI", Grade.G10, ai_records)
        assert playing_manager.get_status() == GameStatus.PLAYING

    def test_roster_is_kept(self, playing_manager):
        assert playing_manager.get_roster() == ["Anh", "Binh", "Chi"]
        assert playing_manager.get_roster_size() == 3


class TestEndToEnd:
    """Full play-through of keyword "AI"."""

    def test_reveal_solve_reset(self, playing_manager):
        manager = playing_manager

        outcome = manager.submit_answer(1, "D")
        assert outcome.correct and outcome.accepted
        assert manager.get_status() == GameStatus.PLAYING
        assert manager.get_revealed_positions() == frozenset({1})

        manager.submit_answer(0, "B")
        assert manager.get_revealed_positions() == frozenset({0, 1})
        assert manager.get_status() == GameStatus.REVEALED
        assert manager.is_complete()

        assert manager.solve() == GameStatus.SOLVED
        assert [manager.display_char_at(slot) for slot in range(2)] == ["A", "I"]
        assert manager.get_snapshot().keyword == "AI"

        assert manager.reset_progress() == GameStatus.PLAYING
        assert manager.get_revealed_positions() == frozenset()
        assert sorted(manager.get_scrambled_order()) == [0, 1]
        assert manager.get_keyword() == "AI"
        assert manager.get_roster_size() == 3

    def test_wrong_answer_changes_nothing(self, playing_manager):
        outcome = playing_manager.submit_answer(0, "A")
        assert outcome.accepted and not outcome.correct
        assert playing_manager.get_revealed_positions() == frozenset()
        assert playing_manager.get_status() == GameStatus.PLAYING

    def test_repeat_answer_for_revealed_tile_is_ignored(self, playing_manager):
        playing_manager.submit_answer(0, "B")
        repeat = playing_manager.submit_answer(0, "B")
        assert not repeat.accepted
        assert playing_manager.get_revealed_count() == 1

    def test_invalid_position_fails_fast(self, playing_manager):
        with pytest.raises(InvalidPositionError):
            playing_manager.submit_answer(2, "A")
        with pytest.raises(InvalidPositionError):
            playing_manager.get_question(-1)

    def test_tiles_follow_scrambled_order(self, playing_manager):
        order = playing_manager.get_scrambled_order()
        playing_manager.submit_answer(0, "B")
        tiles = playing_manager.get_tiles()
        assert [tile.position for tile in tiles] == order
        for tile in tiles:
            assert tile.revealed is (tile.position == 0)
            assert tile.char == ("A" if tile.position == 0 else None)

    def test_question_for_slot_matches_tile(self, playing_manager):
        order = playing_manager.get_scrambled_order()
        for slot, position in enumerate(order):
            assert playing_manager.get_question_for_slot(slot).position == position


class TestTransitionTable:
    """Every action from every state."""

    def test_setup_state_actions(self, manager):
        outcome = manager.submit_answer(0, "A")
        assert not outcome.accepted and outcome.status == GameStatus.SETUP
        assert manager.solve() == GameStatus.SETUP
        assert manager.reset_progress() == GameStatus.SETUP
        assert manager.back_to_setup() == GameStatus.SETUP
        with pytest.raises(EmptyRosterError):
            manager.pick_student()
        assert manager.get_status() == GameStatus.SETUP

    def test_playing_state_actions(self, playing_manager):
        assert playing_manager.solve() == GameStatus.PLAYING
        playing_manager.submit_answer(0, "B")
        assert playing_manager.reset_progress() == GameStatus.PLAYING
        assert playing_manager.get_revealed_count() == 0
        assert playing_manager.pick_student() in {"Anh", "Binh", "Chi"}
        assert playing_manager.get_status() == GameStatus.PLAYING
        assert playing_manager.back_to_setup() == GameStatus.SETUP

    def test_revealed_state_actions(self, playing_manager):
        reveal_all(playing_manager)
        outcome = playing_manager.submit_answer(0, "B")
        assert not outcome.accepted and outcome.status == GameStatus.REVEALED
        playing_manager.pick_student()
        assert playing_manager.get_status() == GameStatus.REVEALED
        assert playing_manager.reset_progress() == GameStatus.PLAYING
        reveal_all(playing_manager)
        assert playing_manager.solve() == GameStatus.SOLVED

    def test_revealed_back_to_setup(self, playing_manager):
        reveal_all(playing_manager)
        assert playing_manager.back_to_setup() == GameStatus.SETUP

    def test_solved_state_actions(self, playing_manager):
        reveal_all(playing_manager)
        playing_manager.solve()
        assert not playing_manager.submit_answer(1, "D").accepted
        assert playing_manager.solve() == GameStatus.SOLVED
        playing_manager.pick_student()
        assert playing_manager.get_status() == GameStatus.SOLVED
        assert playing_manager.reset_progress() == GameStatus.PLAYING

    def test_solved_back_to_setup_discards_session(self, playing_manager):
        reveal_all(playing_manager)
        playing_manager.solve()
        assert playing_manager.back_to_setup() == GameStatus.SETUP
        assert playing_manager.get_keyword() is None
        assert playing_manager.get_questions() == []
        assert playing_manager.get_tiles() == []
        assert playing_manager.get_roster_size() == 0

    def test_restart_after_back_to_setup(self, playing_manager, ai_records):
        playing_manager.back_to_setup()
        snapshot = playing_manager.start("AI", Grade.G10, ai_records)
        assert snapshot.status == GameStatus.PLAYING


class TestPickStudent:
    """Blind-bag draws through the manager."""

    def test_roster_depletes_then_raises(self, playing_manager):
        picked = [playing_manager.pick_student() for _ in range(3)]
        assert sorted(picked) == ["Anh", "Binh", "Chi"]
        with pytest.raises(EmptyRosterError):
            playing_manager.pick_student()
        assert playing_manager.get_status() == GameStatus.PLAYING

    def test_reset_keeps_depleted_roster(self, playing_manager):
        playing_manager.pick_student()
        playing_manager.reset_progress()
        assert playing_manager.get_roster_size() == 2

    def test_blind_bag_closes_once_solved(self, manager, playing_manager):
        assert playing_manager.get_snapshot().blind_bag_open is True
        reveal_all(playing_manager)
        assert playing_manager.get_snapshot().blind_bag_open is True
        playing_manager.solve()
        assert playing_manager.get_snapshot().blind_bag_open is False
        playing_manager.reset_progress()
        assert playing_manager.get_snapshot().blind_bag_open is True
        playing_manager.back_to_setup()
        assert manager.get_snapshot().blind_bag_open is False


class TestSeeding:
    """Repeatable layouts with a fixed seed."""

    def test_same_seed_same_layout(self):
        records = [make_record() for _ in range(8)]
        first = GameManager(shuffle_seed=5)
        second = GameManager(shuffle_seed=5)
        first.start("INTERNET", Grade.G10, records)
        second.start("INTERNET", Grade.G10, records)
        assert first.get_scrambled_order() == second.get_scrambled_order()

    def test_set_shuffle_seed_reseeds(self):
        records = [make_record() for _ in range(8)]
        manager = GameManager()
        manager.set_shuffle_seed(9)
        manager.start("INTERNET", Grade.G10, records)
        first = manager.get_scrambled_order()
        manager.back_to_setup()
        manager.set_shuffle_seed(9)
        manager.start("INTERNET", Grade.G10, records)
        assert manager.get_scrambled_order() == first


class TestNotifications:
    """Events published to listeners."""

    def _collect(self, manager):
        received = []
        for event in GameEvent:
            manager.subscribe(event, received.append)
        return received

    def test_full_game_event_sequence(self, manager, ai_records):
        received = self._collect(manager)
        manager.start("AI", Grade.G10, ai_records, ["Anh"])
        manager.submit_answer(0, "A")
        reveal_all(manager)
        manager.solve()
        manager.pick_student()
        manager.reset_progress()
        manager.back_to_setup()
        assert [n.event for n in received] == [
            GameEvent.STARTED,
            GameEvent.ANSWER_WRONG,
            GameEvent.ANSWER_CORRECT,
            GameEvent.ANSWER_CORRECT,
            GameEvent.REVEALED,
            GameEvent.SOLVED,
            GameEvent.STUDENT_PICKED,
            GameEvent.PROGRESS_RESET,
            GameEvent.RETURNED_TO_SETUP,
        ]
        assert received[1].position == 0
        assert received[6].student_name == "Anh"

    def test_ignored_actions_publish_nothing(self, playing_manager):
        received = self._collect(playing_manager)
        playing_manager.solve()
        playing_manager.submit_answer(0, "B")
        playing_manager.submit_answer(0, "B")
        assert [n.event for n in received] == [GameEvent.ANSWER_CORRECT]

    def test_listener_may_query_manager(self, manager, ai_records):
        statuses = []
        manager.subscribe(GameEvent.STARTED, lambda n: statuses.append(manager.get_status()))
        manager.start("AI", Grade.G10, ai_records)
        assert statuses == [GameStatus.PLAYING]

    def test_unsubscribe(self, manager, ai_records):
        received = []
        manager.subscribe(GameEvent.STARTED, received.append)
        manager.unsubscribe(GameEvent.STARTED, received.append)
        manager.start("AI", Grade.G10, ai_records)
        assert received == []

    def test_listener_errors_propagate(self, manager, ai_records):
        def broken(_notification):
            raise KeyError("boom")

        manager.subscribe(GameEvent.STARTED, broken)
        with pytest.raises(KeyError):
            manager.start("AI", Grade.G10, ai_records)
        assert manager.get_status() == GameStatus.PLAYING


class TestConcurrency:
    """One action at a time under concurrent callers."""

    def test_concurrent_correct_answers_reveal_once(self, playing_manager):
        barrier = Barrier(8)
        outcomes = []

        def answer():
            barrier.wait()
            outcomes.append(playing_manager.submit_answer(0, "B"))

        threads = [Thread(target=answer) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert sum(1 for outcome in outcomes if outcome.accepted) == 1
        assert playing_manager.get_revealed_count() == 1
