"""Exception types raised by the board, move engine, and game session."""


class CaroError(Exception):
    """Base class for Caro engine errors."""


class OutOfBoundsError(CaroError, ValueError):
    """Coordinate lies outside the grid."""

    def __init__(self, row, col):
        super().__init__(f"move ({row}, {col}) out of bounds")
        self.row = row
        self.col = col


class OccupiedCellError(CaroError, ValueError):
    """Target cell already holds a mark."""

    def __init__(self, row, col):
        super().__init__(f"cell ({row}, {col}) already occupied")
        self.row = row
        self.col = col


class NoLegalMoveError(CaroError):
    """Board is full; callers treat this as a draw."""


class InvalidTurnError(CaroError):
    """Session operation requested out of turn (or after the game ended)."""
