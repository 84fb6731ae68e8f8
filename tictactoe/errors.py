"""
errors raised by the game core
"""


class TicTacToeError(Exception):
    """base for all tictactoe errors"""


class InvalidCoordinate(TicTacToeError, ValueError):
    """
    row or col outside the board; a caller bug, not a user action
    """
    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"invalid position ({row}, {col}), must be 0-2")
