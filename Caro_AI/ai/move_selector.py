"""Candidate move generation (empty cells near existing marks)."""

from ..Board import EMPTY


DEFAULT_RADIUS = 2


def _has_neighbor(board, row, col, radius):
    """True if any mark lies within Chebyshev distance `radius` of (row, col)."""
    cells = board.cells
    for r in range(max(0, row - radius), min(board.rows, row + radius + 1)):
        for c in range(max(0, col - radius), min(board.cols, col + radius + 1)):
            if (r, c) != (row, col) and cells[r][c] != EMPTY:
                return True
    return False


def generate_candidates(board, radius=DEFAULT_RADIUS):
    """
    Return empty cells with a mark inside the (2*radius+1)^2 neighbourhood, in row-major order.
    - If board is blank: return center only (the opening move is not evaluated).
    - If board is full: return an empty list.
    Row-major order is the tie-break order downstream, so keep it stable.
    """
    if board.is_blank():
        return [board.center]

    cells = board.cells
    return [
        (r, c)
        for r in range(board.rows)
        for c in range(board.cols)
        if cells[r][c] == EMPTY and _has_neighbor(board, r, c, radius)
    ]
