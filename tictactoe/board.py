from enum import Enum

from .config import BOARD_SIZE
from .errors import InvalidCoordinate


class Mark(Enum):
    """
    what a cell holds
    """
    EMPTY = ''
    X = 'X'             # player one
    O = 'O'             # player two

    def __str__(self):
        return self.value


class Board:
    """
    3x3 grid of marks, row 0 top, col 0 left
    """
    def __init__(self):
        self.size = BOARD_SIZE
        self._cells = [[Mark.EMPTY for _ in range(self.size)]
                       for _ in range(self.size)]  # empty cells

    def _check(self, row, col):
        # out of range is a caller bug
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidCoordinate(row, col)

    def place(self, row, col, mark):
        """
        put mark on an empty cell
        returns: True if placed, False if cell already taken
        """
        self._check(row, col)
        if mark is Mark.EMPTY:
            raise ValueError("cannot place an empty mark")
        if self._cells[row][col] is not Mark.EMPTY:
            return False
        self._cells[row][col] = mark
        return True

    def get(self):
        """
        read-only snapshot of the grid
        """
        return tuple(tuple(row) for row in self._cells)

    def cell(self, row, col):
        self._check(row, col)
        return self._cells[row][col]

    def empty_cells(self):
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self._cells[r][c] is Mark.EMPTY]

    def is_full(self):
        return not self.empty_cells()
