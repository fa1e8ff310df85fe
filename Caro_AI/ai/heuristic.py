"""Line assessment and move scoring (threat tiers, defense weight, center bias)."""

from dataclasses import dataclass
from pathlib import Path
import logging

import yaml

from ..Board import DIRECTIONS, EMPTY


LOGGER = logging.getLogger(__name__)

DEFENSE_WEIGHT = 0.9
CENTER_WEIGHT = 0.1


@dataclass(frozen=True)
class ScoreTiers:
    win: float = 10000          # placement completes a line
    open_threat: float = 1000   # one short, both ends open
    closed_threat: float = 100  # one short, one end open
    open_build: float = 50      # two short, both ends open
    per_stone: float = 10       # anything else, per existing stone

    def validate(self):
        if not (self.win > self.open_threat > self.closed_threat > self.open_build > 0):
            raise ValueError("score tiers must satisfy win > open_threat > closed_threat > open_build > 0")
        if self.per_stone <= 0:
            raise ValueError("per_stone must be positive")
        return self


DEFAULT_TIERS = ScoreTiers()


@dataclass(frozen=True)
class LineAssessment:
    run_length: int
    open_ends: int


@dataclass(frozen=True)
class CandidateScore:
    cell: tuple
    score: float


def load_tiers(path="config/scoring.yaml"):
    """Load score tiers from YAML; fallback to defaults when the file is missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Caro_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        LOGGER.debug("No scoring file at %s; using default tiers", path)
        return DEFAULT_TIERS

    tiers = data.get("tiers", {}) or {}
    unknown = set(tiers) - set(ScoreTiers.__dataclass_fields__)
    if unknown:
        raise ValueError(f"unknown score tiers: {', '.join(sorted(unknown))}")
    return ScoreTiers(**{k: float(v) for k, v in tiers.items()}).validate()


def assess_line(board, row, col, direction, mark):
    """
    Measure the run `mark` would have through (row, col) along `direction`.
    (row, col) is treated as holding `mark`; callers only pass empty cells.
    """
    dr, dc = direction
    run_length = 1
    open_ends = 0
    for sign in (1, -1):
        count, is_open = _walk_side(board, row, col, dr * sign, dc * sign, mark)
        run_length += count
        open_ends += is_open
    return LineAssessment(run_length, open_ends)


def _walk_side(board, row, col, dr, dc, mark):
    """Count same-mark cells on one side; an end is open if it stops on empty or runs out of steps in bounds."""
    count = 0
    for step in range(1, board.win_length):
        r, c = row + dr * step, col + dc * step
        if not board.in_bounds(r, c):
            return count, False
        value = board.cells[r][c]
        if value == mark:
            count += 1
        elif value == EMPTY:
            return count, True
        else:
            return count, False
    return count, True


def line_score(run_length, open_ends, win_length, tiers=None):
    """Step function over threat tiers; closer to winning and more open always ranks higher."""
    tiers = tiers or DEFAULT_TIERS
    missing = win_length - run_length
    if missing <= 0:
        return tiers.win
    if missing == 1 and open_ends >= 2:
        return tiers.open_threat
    if missing == 1 and open_ends == 1:
        return tiers.closed_threat
    if missing == 2 and open_ends >= 2:
        return tiers.open_build
    stones = run_length - 1
    if stones >= 1:
        # longest run reaching here has win_length - 3 stones; keep it below open_build
        step = min(tiers.per_stone, tiers.open_build / (win_length - 2))
        return step * stones
    return 0


def evaluate_move(board, row, col, mark, tiers=None, defense_weight=DEFENSE_WEIGHT, center_weight=CENTER_WEIGHT):
    """
    Score a hypothetical placement of `mark` at (row, col).
    Offense in all four directions, plus weighted value of blocking the opponent there,
    plus a small center-proximity bonus that only breaks near-ties.
    """
    tiers = tiers or DEFAULT_TIERS
    win_length = board.win_length
    score = 0.0
    for direction in DIRECTIONS:
        own = assess_line(board, row, col, direction, mark)
        score += line_score(own.run_length, own.open_ends, win_length, tiers)
        opp = assess_line(board, row, col, direction, -mark)
        score += line_score(opp.run_length, opp.open_ends, win_length, tiers) * defense_weight

    center_row, center_col = board.center
    distance = abs(row - center_row) + abs(col - center_col)
    score += (max(board.rows, board.cols) - distance) * center_weight
    return score


def score_candidates(board, mark, candidates, tiers=None, defense_weight=DEFENSE_WEIGHT, center_weight=CENTER_WEIGHT):
    """Evaluate candidates in the given order and return them sorted best-first (stable)."""
    scored = [
        CandidateScore((r, c), evaluate_move(board, r, c, mark, tiers, defense_weight, center_weight))
        for r, c in candidates
    ]
    scored.sort(key=lambda cs: cs.score, reverse=True)
    return scored
