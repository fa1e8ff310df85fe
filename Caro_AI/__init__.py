"""Caro_AI package exports."""

from .Board import Board, EMPTY, O, X
from .Carogame import GameSession, GameVariant, VARIANTS
from .Player import Player, HumanPlayer
from .errors import CaroError, InvalidTurnError, NoLegalMoveError, OccupiedCellError, OutOfBoundsError

# Subpackages for the move engine, rule helpers, and CLI utilities
from . import ai, engine, utils

__all__ = [
    "Board",
    "EMPTY",
    "X",
    "O",
    "GameSession",
    "GameVariant",
    "VARIANTS",
    "Player",
    "HumanPlayer",
    "CaroError",
    "InvalidTurnError",
    "NoLegalMoveError",
    "OccupiedCellError",
    "OutOfBoundsError",
    "ai",
    "engine",
    "utils",
]
