"""Single-ply move engine: candidates -> evaluation -> difficulty policy."""

import logging

from ..errors import NoLegalMoveError
from . import heuristic
from . import move_selector
from .difficulty import DEFAULT_DIFFICULTY, DifficultyPolicy


LOGGER = logging.getLogger(__name__)


class MoveEngine:
    """Answers "best move for mark" for both the AI turn and the hint feature."""

    def __init__(
        self,
        difficulty=DEFAULT_DIFFICULTY,
        rng=None,
        tiers=None,
        radius=move_selector.DEFAULT_RADIUS,
        defense_weight=heuristic.DEFENSE_WEIGHT,
        center_weight=heuristic.CENTER_WEIGHT,
    ):
        self.policy = DifficultyPolicy(difficulty, rng=rng)
        self.tiers = tiers or heuristic.DEFAULT_TIERS
        self.radius = radius
        self.defense_weight = defense_weight
        self.center_weight = center_weight

    @property
    def difficulty(self):
        return self.policy.difficulty

    @property
    def depth(self):
        return self.policy.config.depth

    def rank_moves(self, board, mark):
        """Return every candidate scored for `mark`, best first."""
        candidates = move_selector.generate_candidates(board, radius=self.radius)
        return heuristic.score_candidates(
            board,
            mark,
            candidates,
            tiers=self.tiers,
            defense_weight=self.defense_weight,
            center_weight=self.center_weight,
        )

    def best_move(self, board, mark):
        """Return (row, col) for `mark`; raises NoLegalMoveError on a full board. Board is not mutated."""
        if board.is_full():
            raise NoLegalMoveError("board is full")
        if board.is_blank():
            return board.center

        ranked = self.rank_moves(board, mark)
        if not ranked:
            raise RuntimeError("board move_count is out of sync with its cells")
        choice = self.policy.select(ranked)
        LOGGER.debug(
            "best_move mark=%s difficulty=%s pick=%s score=%.1f (top=%s, %d candidates)",
            mark, self.difficulty, choice.cell, choice.score, ranked[0].cell, len(ranked),
        )
        return choice.cell

    def hint(self, board, mark):
        """Suggested move for a human holding `mark`; same evaluation as the AI's own turn."""
        return self.best_move(board, mark)


def choose_move(board, mark, difficulty=DEFAULT_DIFFICULTY, rng=None, tiers=None):
    """Convenience wrapper for one-off queries."""
    return MoveEngine(difficulty=difficulty, rng=rng, tiers=tiers).best_move(board, mark)
