"""Move validation and end-of-move outcome checks."""

from ..errors import OccupiedCellError, OutOfBoundsError


def check_move(move, board):
    """
    Validate a move against bounds and occupancy before it is placed.
    Raises OutOfBoundsError/OccupiedCellError (both ValueError) on invalid moves.
    """
    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBoundsError(row, col)
    if not board.is_empty(row, col):
        raise OccupiedCellError(row, col)
    return True


def is_win_after_move(board, row, col, mark):
    """Assumes mark is already placed. Returns the winning cells or None."""
    return board.check_win(row, col, mark)


def is_draw(board):
    return board.is_full()
