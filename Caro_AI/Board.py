"""Board state container and win detection for k-in-a-row games."""

from .errors import OccupiedCellError, OutOfBoundsError


EMPTY = 0
X = -1  # moves first
O = 1

MARK_SYMBOLS = {EMPTY: ".", X: "X", O: "O"}

# horizontal, vertical, diagonal-down, diagonal-up
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


class Board:
    def __init__(self, rows=15, cols=None, win_length=5):
        # Store cells as -1 (X), 0 (empty), 1 (O)
        cols = rows if cols is None else cols
        if rows < 1 or cols < 1:
            raise ValueError("board needs at least one row and one column")
        if not 1 <= win_length <= max(rows, cols):
            raise ValueError(f"win_length must be between 1 and {max(rows, cols)}")
        self.rows = rows
        self.cols = cols
        self.win_length = win_length
        self.cells = [[EMPTY] * cols for _ in range(rows)]
        self.move_count = 0
        self.history = []

    @property
    def center(self):
        return self.rows // 2, self.cols // 2

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def is_full(self):
        return self.move_count >= self.rows * self.cols

    def is_blank(self):
        return self.move_count == 0

    def place(self, row, col, mark):
        """Place a mark; raise if out of bounds or occupied."""
        if mark not in (X, O):
            raise ValueError("mark must be -1 (X) or 1 (O)")
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        if self.cells[row][col] != EMPTY:
            raise OccupiedCellError(row, col)
        self.cells[row][col] = mark
        self.move_count += 1
        self.history.append((row, col))

    def clone(self):
        new_board = Board(self.rows, self.cols, self.win_length)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def check_win(self, row, col, mark):
        """
        Return the cells of a winning run through (row, col) for `mark`, or None.
        Walks at most win_length - 1 steps each way from the origin.
        """
        if not self.in_bounds(row, col) or self.cells[row][col] != mark:
            return None
        for dr, dc in DIRECTIONS:
            forward = self._walk(row, col, dr, dc, mark)
            backward = self._walk(row, col, -dr, -dc, mark)
            if 1 + len(forward) + len(backward) >= self.win_length:
                return {(row, col), *forward, *backward}
        return None

    def _walk(self, row, col, dr, dc, mark):
        """Cells holding `mark` from (row, col) (exclusive) in (dr, dc), at most win_length - 1."""
        cells = []
        r, c = row + dr, col + dc
        while len(cells) < self.win_length - 1 and self.in_bounds(r, c) and self.cells[r][c] == mark:
            cells.append((r, c))
            r += dr
            c += dc
        return cells

    def snapshot(self):
        """Return a plain-dict copy of the board for session storage."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "win_length": self.win_length,
            "cells": [row[:] for row in self.cells],
            "move_count": self.move_count,
            "history": [list(mv) for mv in self.history],
        }

    @classmethod
    def from_snapshot(cls, state):
        """Rebuild a board from snapshot(); raises ValueError on malformed state."""
        board = cls(state["rows"], state["cols"], state["win_length"])
        cells = state["cells"]
        if len(cells) != board.rows or any(len(row) != board.cols for row in cells):
            raise ValueError("snapshot cells do not match board dimensions")
        if any(v not in MARK_SYMBOLS for row in cells for v in row):
            raise ValueError("snapshot contains an unknown mark")
        board.cells = [list(row) for row in cells]
        board.move_count = sum(1 for row in cells for v in row if v != EMPTY)
        history = [tuple(mv) for mv in state.get("history", [])]
        board.history = history if len(history) == board.move_count else []
        return board

    def render(self):
        """Text grid with row/column indices, used by the CLI."""
        width = len(str(max(self.rows, self.cols) - 1))
        header = " " * (width + 1) + " ".join(str(c).rjust(width) for c in range(self.cols))
        lines = [header]
        for r, row in enumerate(self.cells):
            marks = " ".join(MARK_SYMBOLS[v].rjust(width) for v in row)
            lines.append(f"{str(r).rjust(width)} {marks}")
        return "\n".join(lines)
