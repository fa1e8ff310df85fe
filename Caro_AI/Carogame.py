"""Game session: turn state machine around one Board and the move engine."""

from dataclasses import dataclass
import logging

from .Board import Board, O, X
from .ai.move_engine import MoveEngine
from .engine import referee
from .errors import InvalidTurnError, NoLegalMoveError


LOGGER = logging.getLogger(__name__)

AWAITING_HUMAN = "awaiting_human"
AWAITING_AI = "awaiting_ai"
WON = "won"
DRAW = "draw"
TERMINAL_STATES = (WON, DRAW)

WIN_BASE_SCORE = 1000
WIN_TIME_BONUS = 600  # seconds; bonus shrinks by one point per second played


@dataclass(frozen=True)
class GameVariant:
    name: str
    rows: int
    cols: int
    win_length: int

    def new_board(self):
        return Board(self.rows, self.cols, self.win_length)


VARIANTS = {
    "caro5": GameVariant("caro5", 15, 15, 5),
    "caro4": GameVariant("caro4", 10, 10, 4),
    "tictactoe": GameVariant("tictactoe", 3, 3, 3),
}


def variants_from_settings(settings):
    """Merge the `variants` table from settings over the built-in variants."""
    variants = dict(VARIANTS)
    for name, cfg in (settings.get("variants") or {}).items():
        rows = int(cfg["rows"])
        variants[name] = GameVariant(
            name=name,
            rows=rows,
            cols=int(cfg.get("cols", rows)),
            win_length=int(cfg["win_length"]),
        )
    return variants


def get_variant(name, variants=None):
    variants = variants or VARIANTS
    try:
        return variants[name]
    except KeyError:
        raise ValueError(f"Unknown variant '{name}'. Expected {'|'.join(variants)}") from None


@dataclass(frozen=True)
class AiTurn:
    """Token for a pending AI move; stale once the session is reset."""
    generation: int


class GameSession:
    def __init__(self, variant, difficulty="medium", human_mark=X, engine=None, rng=None, logger=None):
        if human_mark not in (X, O):
            raise ValueError("human_mark must be -1 (X) or 1 (O)")
        self.variant = variant
        self.human_mark = human_mark
        self.ai_mark = -human_mark
        self.engine = engine or MoveEngine(difficulty=difficulty, rng=rng)
        self.logger = logger or (lambda message: None)
        self.generation = 0
        self._new_game()

    def _new_game(self):
        self._board = self.variant.new_board()
        self.to_move = X
        self.state = AWAITING_HUMAN if self.human_mark == X else AWAITING_AI
        self.winner = None
        self.winning_cells = None
        self.last_move = None
        self.time_spent = 0
        self.score = 0

    @property
    def board(self):
        """Copy of the board; the session keeps the only mutable instance."""
        return self._board.clone()

    @property
    def difficulty(self):
        return self.engine.difficulty

    @property
    def is_over(self):
        return self.state in TERMINAL_STATES

    def reset(self):
        """Start a fresh game; pending AI turns from the old game become stale."""
        self.generation += 1
        self._new_game()
        LOGGER.debug("session reset (generation=%d)", self.generation)

    def tick(self, seconds):
        if not self.is_over:
            self.time_spent += seconds

    def play_human(self, row, col):
        """Apply the human move. Occupied/out-of-bounds raise without changing state."""
        self._require(AWAITING_HUMAN)
        referee.check_move((row, col), self._board)
        self._apply(row, col, self.human_mark)
        return self.state

    def hint(self):
        """Best move for the human, using the same evaluation as the AI."""
        self._require(AWAITING_HUMAN)
        return self.engine.hint(self._board, self.human_mark)

    def begin_ai_turn(self):
        self._require(AWAITING_AI)
        return AiTurn(self.generation)

    def finish_ai_turn(self, turn):
        """
        Compute and apply the AI move for a pending turn.
        Returns the move, or None if the turn went stale (reset) before it was applied.
        """
        if turn.generation != self.generation:
            LOGGER.info("discarding stale AI turn (generation %d != %d)", turn.generation, self.generation)
            return None
        self._require(AWAITING_AI)
        try:
            move = self.engine.best_move(self._board, self.ai_mark)
        except NoLegalMoveError:
            self._finish(DRAW)
            return None
        self._apply(*move, self.ai_mark)
        return move

    def play_ai(self):
        """Begin and finish an AI turn with no pause in between."""
        return self.finish_ai_turn(self.begin_ai_turn())

    def _require(self, state):
        if self.state != state:
            raise InvalidTurnError(f"expected state {state}, session is {self.state}")

    def _apply(self, row, col, mark):
        self._board.place(row, col, mark)
        self.last_move = (row, col)
        self.logger(f"Move {self._board.move_count}: {'X' if mark == X else 'O'} {(row, col)}")

        winning = referee.is_win_after_move(self._board, row, col, mark)
        if winning:
            self.winner = mark
            self.winning_cells = winning
            if mark == self.human_mark:
                self.score = WIN_BASE_SCORE + max(0, WIN_TIME_BONUS - int(self.time_spent))
            self._finish(WON)
        elif referee.is_draw(self._board):
            self._finish(DRAW)
        else:
            self.to_move = -mark
            self.state = AWAITING_HUMAN if self.to_move == self.human_mark else AWAITING_AI

    def _finish(self, state):
        self.state = state
        if state == WON:
            self.logger(f"Winner: {'X' if self.winner == X else 'O'}")
        else:
            self.logger("Result: Draw (board full)")

    def to_state(self):
        """Structured snapshot for an external session store."""
        return {
            "variant": self.variant.name,
            "board": self._board.snapshot(),
            "to_move": self.to_move,
            "state": self.state,
            "human_mark": self.human_mark,
            "difficulty": self.difficulty,
            "time_spent": self.time_spent,
            "score": self.score,
            "winner": self.winner,
            "winning_cells": sorted(list(c) for c in self.winning_cells) if self.winning_cells else None,
        }

    @classmethod
    def from_state(cls, state, variants=None, rng=None, logger=None):
        variant = get_variant(state["variant"], variants)
        session = cls(
            variant,
            difficulty=state.get("difficulty", "medium"),
            human_mark=state.get("human_mark", X),
            rng=rng,
            logger=logger,
        )
        board = Board.from_snapshot(state["board"])
        if (board.rows, board.cols, board.win_length) != (variant.rows, variant.cols, variant.win_length):
            raise ValueError(f"saved board does not match variant '{variant.name}'")
        session._board = board
        session.to_move = state.get("to_move", X)
        session.state = state.get("state") or (
            AWAITING_HUMAN if session.to_move == session.human_mark else AWAITING_AI
        )
        if session.state not in (AWAITING_HUMAN, AWAITING_AI) + TERMINAL_STATES:
            raise ValueError(f"unknown session state '{session.state}'")
        if session.to_move not in (X, O):
            raise ValueError(f"unknown mark to move '{session.to_move}'")
        if not session.is_over:
            # X moves first, so the side to move follows the move count parity
            if session.to_move != (X if board.move_count % 2 == 0 else O):
                raise ValueError("to_move does not match the number of marks on the board")
            expected = AWAITING_HUMAN if session.to_move == session.human_mark else AWAITING_AI
            if session.state != expected:
                raise ValueError(f"state '{session.state}' does not match the side to move")
        session.time_spent = state.get("time_spent", 0)
        session.score = state.get("score", 0)
        session.winner = state.get("winner")
        cells = state.get("winning_cells")
        session.winning_cells = {tuple(c) for c in cells} if cells else None
        return session
