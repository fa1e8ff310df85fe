"""Tests for GameSession turn handling, cancellation, and save/load."""

import pytest

from Caro_AI.Board import O, X
from Caro_AI.Carogame import (
    AWAITING_AI,
    AWAITING_HUMAN,
    DRAW,
    VARIANTS,
    WON,
    GameSession,
    variants_from_settings,
)
from Caro_AI.errors import InvalidTurnError, OccupiedCellError, OutOfBoundsError


class ScriptedEngine:
    """Deterministic engine that plays a fixed move sequence."""

    difficulty = "medium"

    def __init__(self, moves):
        self._moves = list(moves)
        self._idx = 0

    def best_move(self, board, mark):
        mv = self._moves[self._idx]
        self._idx += 1
        return mv

    def hint(self, board, mark):
        return (9, 9)


def test_turns_alternate_between_human_and_ai():
    s = GameSession(VARIANTS["caro5"])
    assert s.state == AWAITING_HUMAN
    assert s.play_human(7, 7) == AWAITING_AI
    mv = s.play_ai()
    assert s.board.cells[mv[0]][mv[1]] == O
    assert s.state == AWAITING_HUMAN
    assert s.board.move_count == 2


def test_out_of_turn_calls_rejected():
    s = GameSession(VARIANTS["tictactoe"])
    with pytest.raises(InvalidTurnError):
        s.begin_ai_turn()
    s.play_human(0, 0)
    with pytest.raises(InvalidTurnError):
        s.play_human(1, 1)
    with pytest.raises(InvalidTurnError):
        s.hint()


def test_illegal_human_move_leaves_state_untouched():
    s = GameSession(VARIANTS["tictactoe"])
    s.play_human(0, 0)
    s.play_ai()
    before = s.to_state()
    with pytest.raises(OccupiedCellError):
        s.play_human(0, 0)
    with pytest.raises(OutOfBoundsError):
        s.play_human(3, 3)
    assert s.to_state() == before


def test_human_win_records_cells_and_score():
    s = GameSession(VARIANTS["tictactoe"], engine=ScriptedEngine([(1, 0), (1, 1)]))
    s.tick(100)
    s.play_human(0, 0)
    s.play_ai()
    s.play_human(0, 1)
    s.play_ai()
    assert s.play_human(0, 2) == WON
    assert s.winner == X
    assert s.winning_cells == {(0, 0), (0, 1), (0, 2)}
    assert s.score == 1500
    s.tick(50)
    assert s.time_spent == 100


def test_ai_win_scores_nothing():
    s = GameSession(VARIANTS["tictactoe"], engine=ScriptedEngine([(1, 0), (1, 1), (1, 2)]))
    for mv in [(0, 0), (0, 1), (2, 2)]:
        s.play_human(*mv)
        s.play_ai()
    assert s.state == WON
    assert s.winner == O
    assert s.score == 0


def test_full_board_without_line_is_a_draw():
    human = [(0, 0), (0, 2), (1, 0), (2, 1), (2, 2)]
    ai = [(0, 1), (1, 1), (2, 0), (1, 2)]
    s = GameSession(VARIANTS["tictactoe"], engine=ScriptedEngine(ai))
    for i, mv in enumerate(human):
        s.play_human(*mv)
        if i < len(ai):
            s.play_ai()
    assert s.state == DRAW
    assert s.winner is None
    with pytest.raises(InvalidTurnError):
        s.play_human(0, 0)


def test_stale_ai_turn_is_discarded_after_reset():
    s = GameSession(VARIANTS["caro4"])
    s.play_human(5, 5)
    turn = s.begin_ai_turn()
    s.reset()
    assert s.finish_ai_turn(turn) is None
    assert s.board.is_blank()
    assert s.state == AWAITING_HUMAN
    assert s.generation == 1


def test_ai_moves_first_when_human_plays_o():
    s = GameSession(VARIANTS["caro5"], human_mark=O)
    assert s.state == AWAITING_AI
    assert s.play_ai() == (7, 7)
    assert s.state == AWAITING_HUMAN
    s.reset()
    assert s.state == AWAITING_AI


def test_hint_uses_engine_for_human():
    s = GameSession(VARIANTS["caro5"])
    assert s.hint() == (7, 7)
    s = GameSession(VARIANTS["caro5"], engine=ScriptedEngine([]))
    assert s.hint() == (9, 9)


def test_board_property_is_a_copy():
    s = GameSession(VARIANTS["tictactoe"])
    s.board.place(0, 0, X)
    assert s.board.is_blank()


def test_state_round_trip():
    s = GameSession(VARIANTS["caro4"], difficulty="hard")
    s.play_human(5, 5)
    s.play_ai()
    s.tick(12)
    restored = GameSession.from_state(s.to_state())
    assert restored.board.cells == s.board.cells
    assert restored.state == AWAITING_HUMAN
    assert restored.to_move == X
    assert restored.difficulty == "hard"
    assert restored.time_spent == 12
    restored.play_human(0, 0)
    assert restored.state == AWAITING_AI


def test_from_state_rejects_mismatched_variant():
    state = GameSession(VARIANTS["caro4"]).to_state()
    state["variant"] = "tictactoe"
    with pytest.raises(ValueError):
        GameSession.from_state(state)


def test_variants_from_settings_adds_and_overrides():
    variants = variants_from_settings(
        {"variants": {"caro4": {"rows": 12, "win_length": 4}, "gomoku19": {"rows": 19, "cols": 19, "win_length": 5}}}
    )
    assert (variants["caro4"].rows, variants["caro4"].cols) == (12, 12)
    assert variants["gomoku19"].win_length == 5
    assert variants["tictactoe"] == VARIANTS["tictactoe"]


def test_from_state_rejects_to_move_against_move_parity():
    s = GameSession(VARIANTS["caro4"])
    s.play_human(5, 5)
    state = s.to_state()
    state["to_move"] = X
    state["state"] = AWAITING_HUMAN
    with pytest.raises(ValueError):
        GameSession.from_state(state)


def test_from_state_rejects_state_that_disagrees_with_side_to_move():
    s = GameSession(VARIANTS["caro4"])
    s.play_human(5, 5)
    state = s.to_state()
    state["state"] = AWAITING_HUMAN
    with pytest.raises(ValueError):
        GameSession.from_state(state)
    state = s.to_state()
    state["to_move"] = 0
    with pytest.raises(ValueError):
        GameSession.from_state(state)
