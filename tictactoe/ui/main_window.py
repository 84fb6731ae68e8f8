import logging

from ..game_logic import GameLogic, MoveOutcome
from ..config import PLAYER_ONE_NAME, PLAYER_TWO_NAME, WINDOW_TITLE
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QGroupBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

log = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, player_one=PLAYER_ONE_NAME, player_two=PLAYER_TWO_NAME):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic(player_one, player_two)
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self.player_one_input.setText(player_one)
        self.player_two_input.setText(player_two)
        self._update_message(self.game_logic.turn_message(), is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_player_controls()     # name inputs
        self.main_layout.addWidget(self.player_controls_group)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_player_controls(self):
        '''player name inputs, applied on new game'''
        self.player_controls_group = QGroupBox("Players")
        layout = QHBoxLayout()
        self.player_one_input = QLineEdit()
        self.player_one_input.setPlaceholderText(PLAYER_ONE_NAME)
        self.player_two_input = QLineEdit()
        self.player_two_input.setPlaceholderText(PLAYER_TWO_NAME)
        for label, edit in (("X:", self.player_one_input), ("O:", self.player_two_input)):
            layout.addWidget(QLabel(label)); layout.addWidget(edit)
        self.player_controls_group.setLayout(layout)

    def _create_bottom_controls(self):
        # status label + new game button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("New Game"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _handle_game_over(self):
        # end game UI updates
        self._update_message(self.game_logic.result_message(), is_success=True)
        self.board_widget.set_accept_clicks(False)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        res = self.game_logic.play_turn(r, c)
        if res is MoveOutcome.GAME_OVER:
            return  # input should already be off
        if res is MoveOutcome.OCCUPIED:
            self._update_message("cell taken, pick another", is_error=True)
            return
        self.board_widget.update()
        if res in (MoveOutcome.WIN, MoveOutcome.DRAW):
            self._handle_game_over()
        else:
            self._update_message(self.game_logic.turn_message(), is_turn=True)

    def _player_names(self):
        # blank inputs fall back to defaults
        one = self.player_one_input.text().strip() or PLAYER_ONE_NAME
        two = self.player_two_input.text().strip() or PLAYER_TWO_NAME
        return one, two

    @Slot()
    def reset_game(self):
        # brand new engine, player one first
        self.game_logic = GameLogic(*self._player_names())
        self.board_widget.set_game_logic(self.game_logic)
        self.board_widget.set_accept_clicks(True)
        log.info("new game started")
        self._update_message(self.game_logic.turn_message(), is_turn=True)
