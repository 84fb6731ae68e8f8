from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import Mark
from ..config import BOARD_BACKGROUND, GRID_COLOR, X_COLOR, O_COLOR, WIN_LINE_COLOR

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_game_logic(self, game_logic):
        # new game replaces the whole engine
        self.game_logic = game_logic
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks and not self.game_logic.game_over

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # side, x offset, y offset of the centered square grid
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w-side)/2, (h-side)/2

    def cell_at(self, x, y):
        """
        map widget coords to (row, col), None outside the grid
        """
        side, ox, oy = self._geometry()
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        if cell <= 0: return None
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, size-1)); col = max(0, min(col, size-1))
        return row, col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND))
            size = self.game_logic.board_size
            cell_size = side / size
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))

            def center(r, c):
                return QPointF(offset_x + c*cell_size + cell_size/2,
                               offset_y + r*cell_size + cell_size/2)

            # draw marks
            grid = self.game_logic.board
            for r in range(size):
                for c in range(size):
                    mark = grid[r][c]
                    if mark is Mark.EMPTY: continue
                    p = center(r, c)
                    rad = cell_size/2 * 0.7
                    if mark is Mark.X:
                        painter.setPen(QPen(QColor(X_COLOR), 4))
                        # two crossing lines
                        painter.drawLine(QPointF(p.x()-rad, p.y()-rad), QPointF(p.x()+rad, p.y()+rad))
                        painter.drawLine(QPointF(p.x()+rad, p.y()-rad), QPointF(p.x()-rad, p.y()+rad))
                    else:
                        painter.setPen(QPen(QColor(O_COLOR), 4))
                        painter.drawEllipse(p, rad, rad)
            # strike through the winning three
            line = self.game_logic.winning_line
            if line:
                pen = QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)
                painter.setPen(pen)
                painter.drawLine(center(*line[0]), center(*line[-1]))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self.accepts_clicks():
            return
        pos = event.position()
        cell = self.cell_at(pos.x(), pos.y())
        # only inside grid
        if cell is None:
            return
        self.cell_clicked.emit(*cell)  # notify main window
