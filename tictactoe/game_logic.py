import logging
from dataclasses import dataclass
from enum import Enum

from .board import Board, Mark
from .config import PLAYER_ONE_NAME, PLAYER_TWO_NAME

log = logging.getLogger(__name__)

# all 8 lines, checked in this order: rows, cols, diags
WINNING_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


@dataclass(frozen=True)
class Player:
    """name and mark, fixed for the whole game"""
    name: str
    mark: Mark


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveOutcome(Enum):
    """
    what a single play_turn did
    """
    CONTINUE = "continue"       # placed, next player's turn
    WIN = "win"
    DRAW = "draw"
    OCCUPIED = "occupied"       # no-op, cell taken
    GAME_OVER = "game_over"     # no-op, game already finished


def find_winning_line(grid):
    """
    first line holding three of the same mark, or None
    """
    for line in WINNING_LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        mark = grid[r0][c0]
        if mark is not Mark.EMPTY and mark == grid[r1][c1] == grid[r2][c2]:
            return line
    return None


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self, player_one=PLAYER_ONE_NAME, player_two=PLAYER_TWO_NAME):
        """
        init board and players; names or Player objects accepted
        """
        if not isinstance(player_one, Player):
            player_one = Player(player_one, Mark.X)
        if not isinstance(player_two, Player):
            player_two = Player(player_two, Mark.O)
        if Mark.EMPTY in (player_one.mark, player_two.mark):
            raise ValueError("players need a non-empty mark")
        if player_one.mark == player_two.mark:
            raise ValueError("players must use different marks")
        self.players = (player_one, player_two)
        self.reset_game()

    def reset_game(self):
        """
        fresh board, player one to move
        """
        self._board = Board()
        self._active = 0                  # index into self.players
        self._status = GameStatus.IN_PROGRESS
        self._winner = None               # winning Mark or None
        self._winning_line = None
        self._move_count = 0
        log.debug("new game: %s (%s) vs %s (%s)",
                  self.players[0].name, self.players[0].mark,
                  self.players[1].name, self.players[1].mark)

    reset = reset_game

    @property
    def board(self):
        return self._board.get()

    @property
    def board_size(self):
        return self._board.size

    @property
    def status(self):
        return self._status

    @property
    def winner(self):
        return self._winner

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def move_count(self):
        return self._move_count

    @property
    def active_player(self):
        return self.players[self._active]

    @property
    def game_over(self):
        return self.status is not GameStatus.IN_PROGRESS

    @property
    def winning_player(self):
        if self.winner is None:
            return None
        return next(p for p in self.players if p.mark == self.winner)

    def play_turn(self, row, col):
        """
        place the active player's mark and settle the result
        raises InvalidCoordinate for positions off the board
        """
        if self.game_over:
            log.info("move (%s, %s) ignored, game is over", row, col)
            return MoveOutcome.GAME_OVER

        player = self.active_player
        if not self._board.place(row, col, player.mark):
            log.info("move (%s, %s) ignored, cell taken", row, col)
            return MoveOutcome.OCCUPIED
        self._move_count += 1
        log.debug("%s plays %s at (%s, %s)", player.name, player.mark, row, col)

        line = find_winning_line(self._board.get())
        if line is not None:
            # winner stays active
            self._status = GameStatus.WON
            self._winner = player.mark
            self._winning_line = line
            log.info("%s (%s) wins on %s", player.name, player.mark, line)
            return MoveOutcome.WIN
        if self._board.is_full():
            self._status = GameStatus.DRAW
            log.info("draw after %d moves", self._move_count)
            return MoveOutcome.DRAW

        self._active = 1 - self._active   # two players only
        return MoveOutcome.CONTINUE

    def is_cell_empty(self, row, col):
        # raises InvalidCoordinate off the board, like play_turn
        return self._board.cell(row, col) is Mark.EMPTY

    def turn_message(self):
        return f"{self.active_player.name}'s turn"

    def result_message(self):
        """
        banner text for a finished game, None while still playing
        """
        if self.status is GameStatus.WON:
            p = self.winning_player
            return f"{p.name} ({p.mark}) wins!"
        if self.status is GameStatus.DRAW:
            return "It's a draw!"
        return None
