"""Move engine: candidate filter, line scoring, difficulty policy."""

from . import difficulty, heuristic, move_engine, move_selector
from .move_engine import MoveEngine, choose_move

__all__ = ["difficulty", "heuristic", "move_engine", "move_selector", "MoveEngine", "choose_move"]
