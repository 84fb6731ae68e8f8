import sys
import argparse

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .config import PLAYER_ONE_NAME, PLAYER_TWO_NAME, LOG_LEVELS
from .observability import setup_logging
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
BASE_COLOR = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
HIGHLIGHT_COLOR = QColor(42, 130, 218)
PLACEHOLDER_TEXT_COLOR = QColor(160, 160, 160)
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Dark Fusion palette shared by every widget.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, WINDOW_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    for role in (QPalette.WindowText, QPalette.Text,
                 QPalette.ButtonText, QPalette.HighlightedText):
        palette.setColor(role, Qt.white)
    palette.setColor(QPalette.PlaceholderText, PLACEHOLDER_TEXT_COLOR)
    # greyed out when disabled
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe")
    parser.add_argument("--player-one", default=PLAYER_ONE_NAME,
                        help="name of the X player (moves first)")
    parser.add_argument("--player-two", default=PLAYER_TWO_NAME,
                        help="name of the O player")
    parser.add_argument("--log-level", default=None,
                        type=str.upper, choices=LOG_LEVELS,
                        help="defaults to TICTACTOE_LOG_LEVEL or WARNING")
    # Qt consumes its own flags from the rest
    return parser.parse_known_args(argv)


def run(argv=None):
    args, qt_args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.log_level)

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(args.player_one, args.player_two)
    window.show()
    return app.exec()
