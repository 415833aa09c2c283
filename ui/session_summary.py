# ui/session_summary.py
from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout
import pyqtgraph as pg

from app.calculation import smooth
from app.state import GameResult
from app.themes import Theme, THEMES
from utils.graph_helper import setup_wpm_plot, update_curve


def play_again_hint(start_key: str) -> str:
    return f"Press {start_key} to play again"


class SessionSummary(QFrame):
    """
    Final stats for a finished session: WPM, accuracy, character counts,
    and the per-second WPM samples recorded while it ran.
    """

    def __init__(self, start_key: str = "Enter", parent=None):
        super().__init__(parent)
        self.setObjectName("SessionSummary")
        self._theme: Theme = THEMES[0]

        root = QVBoxLayout(self)
        root.setContentsMargins(40, 30, 40, 30)
        root.setSpacing(18)

        title = QLabel("Analytics", self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 22px;")
        root.addWidget(title)

        cards = QHBoxLayout()
        cards.setSpacing(40)
        self.lblWPM = self._card(cards, "WPM", "words per minute")
        self.lblAcc = self._card(cards, "Accuracy", "accuracy")
        self.lblChars = self._card(cards, "Characters", "correct / incorrect / total")
        root.addLayout(cards)

        self.plot = pg.PlotWidget()
        self._curve = setup_wpm_plot(self.plot, self._theme.accent)
        root.addWidget(self.plot, stretch=1)

        self.lblHint = QLabel(play_again_hint(start_key), self)
        self.lblHint.setAlignment(Qt.AlignCenter)
        root.addWidget(self.lblHint)

    def _card(self, layout: QHBoxLayout, caption: str, tooltip: str) -> QLabel:
        box = QVBoxLayout()
        cap = QLabel(caption, self)
        cap.setAlignment(Qt.AlignCenter)
        val = QLabel("-", self)
        val.setAlignment(Qt.AlignCenter)
        val.setToolTip(tooltip)
        val.setStyleSheet("font-family: monospace; font-size: 26px;")
        box.addWidget(cap)
        box.addWidget(val)
        layout.addLayout(box)
        return val

    def set_theme(self, theme: Theme):
        self._theme = theme
        self.plot.clear()
        self._curve = setup_wpm_plot(self.plot, theme.accent)

    def show_result(self, result: GameResult, wpm_samples: list[float]):
        self.lblWPM.setText(str(result.wpm))
        self.lblAcc.setText(f"{result.accuracy}%")
        th = self._theme
        self.lblChars.setText(
            f'<span style="color:{th.accent}">{result.correct}</span> / '
            f'<span style="color:{th.error}">{result.incorrect}</span> / '
            f"{result.total}"
        )
        update_curve(self._curve, smooth(wpm_samples))
