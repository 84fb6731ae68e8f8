import os
import unittest

# headless Qt before anything imports PySide6
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from tictactoe.board import Mark  # noqa: E402
from tictactoe.game_logic import GameStatus  # noqa: E402
from tictactoe.ui.main_window import TicTacToeWindow  # noqa: E402


def _app():
    return QApplication.instance() or QApplication([])


class TestBoardWidget(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def setUp(self):
        self.window = TicTacToeWindow("Ann", "Bob")
        self.widget = self.window.board_widget
        self.widget.resize(300, 300)

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def test_given_square_widget_when_mapping_points_then_cells_returned(self):
        self.assertEqual(self.widget.cell_at(10, 10), (0, 0))
        self.assertEqual(self.widget.cell_at(150, 150), (1, 1))
        self.assertEqual(self.widget.cell_at(299, 5), (0, 2))
        self.assertEqual(self.widget.cell_at(5, 299), (2, 0))

    def test_given_wide_widget_when_clicking_margin_then_no_cell(self):
        self.widget.resize(500, 300)
        # grid is centered: x offset of 100
        self.assertIsNone(self.widget.cell_at(50, 150))
        self.assertEqual(self.widget.cell_at(110, 10), (0, 0))

    def test_given_finished_game_when_checking_input_then_clicks_refused(self):
        for r, c in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
            self.widget.cell_clicked.emit(r, c)
        self.assertFalse(self.widget.accepts_clicks())

    def test_given_marks_on_board_when_painting_then_no_error(self):
        for r, c in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
            self.widget.cell_clicked.emit(r, c)
        self.widget.grab()


class TestMainWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def setUp(self):
        self.window = TicTacToeWindow("Ann", "Bob")

    def tearDown(self):
        self.window.close()
        self.window.deleteLater()

    def _click(self, r, c):
        self.window.board_widget.cell_clicked.emit(r, c)

    def test_given_new_window_when_shown_then_player_one_turn_message(self):
        self.assertEqual(self.window.message_label.text(), "Ann's turn")
        self.assertEqual(self.window.player_one_input.text(), "Ann")

    def test_given_click_when_cell_empty_then_mark_placed_and_turn_passes(self):
        self._click(1, 1)
        self.assertIs(self.window.game_logic.board[1][1], Mark.X)
        self.assertEqual(self.window.message_label.text(), "Bob's turn")

    def test_given_click_when_cell_taken_then_prompt_and_same_turn(self):
        self._click(1, 1)
        self._click(1, 1)
        self.assertEqual(self.window.message_label.text(), "cell taken, pick another")
        self.assertEqual(self.window.game_logic.active_player.name, "Bob")

    def test_given_winning_clicks_when_done_then_banner_and_input_disabled(self):
        for r, c in [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]:
            self._click(r, c)
        self.assertEqual(self.window.message_label.text(), "Ann (X) wins!")
        self.assertFalse(self.window.board_widget.accepts_clicks())
        # late click is ignored
        self._click(2, 0)
        self.assertIs(self.window.game_logic.board[2][0], Mark.EMPTY)

    def test_given_draw_clicks_when_done_then_draw_banner(self):
        for r, c in [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0),
                     (1, 2), (2, 1), (2, 0), (2, 2)]:
            self._click(r, c)
        self.assertEqual(self.window.message_label.text(), "It's a draw!")
        self.assertIs(self.window.game_logic.status, GameStatus.DRAW)

    def test_given_new_names_when_reset_then_fresh_game_uses_them(self):
        self._click(0, 0)
        old = self.window.game_logic
        self.window.player_one_input.setText("Cy")
        self.window.player_two_input.setText("   ")
        self.window.reset_game()
        game = self.window.game_logic
        self.assertIsNot(game, old)
        self.assertIs(self.window.board_widget.game_logic, game)
        self.assertEqual([p.name for p in game.players], ["Cy", "Player 2"])
        self.assertEqual(game.move_count, 0)
        self.assertEqual(self.window.message_label.text(), "Cy's turn")
        self.assertTrue(self.window.board_widget.accepts_clicks())


if __name__ == "__main__":
    unittest.main()
