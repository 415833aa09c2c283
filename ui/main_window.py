# ui/main_window.py
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QComboBox, QLabel, QPushButton, QStackedWidget
)
from PySide6.QtCore import Qt
import logging

from app.config import Settings
from app.state import GameResult, SessionState
from app.themes import theme_by_name
from app.validation import KeyEvent, coerce_text_size, coerce_time_limit
from core.chrono import QtScheduler
from services.text_generator import TextGenerator
from services.typing_engine import TypingEngine
from ui.session_summary import SessionSummary
from ui.widgets import TypingArea, normalize_key

log = logging.getLogger(__name__)


def format_clock(seconds: int) -> str:
    return f"{seconds // 60:02d} : {seconds % 60:02d}"


class MainWindow(QMainWindow):
    def __init__(self, settings: Settings):
        super().__init__()
        self.settings = settings
        self.theme = theme_by_name(settings.theme)
        self.setWindowTitle("Keystrike")
        self.resize(1200, 720)
        self.setFocusPolicy(Qt.StrongFocus)

        self.text_size = coerce_text_size(settings.default_text_size)
        self.time_limit = coerce_time_limit(settings.default_time_limit)
        self._wpm_samples: list[float] = []
        self._last_elapsed = 0

        generator = TextGenerator.from_file(settings.words_file)
        self.scheduler = QtScheduler(parent=self)
        self.engine = TypingEngine(
            generator.generate_text,
            self.scheduler,
            abort_key=settings.abort_key,
        )
        self.engine.subscribe_state_change(self._on_state_changed)
        self.engine.subscribe_game_over(self._on_game_over)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 24, 16, 16)
        root_v.setSpacing(16)
        self._build_top_bar(root_v)

        self.typing = TypingArea(self)
        self.typing.keyPressed.connect(self._on_key)
        self.summary = SessionSummary(settings.start_key, self)

        self.stack = QStackedWidget(self)
        self.stack.addWidget(self.typing)
        self.stack.addWidget(self.summary)
        root_v.addWidget(self.stack, 1)
        self.setCentralWidget(root)

        self._apply_theme()
        self._new_game()

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 12, 14, 12)
        h.setSpacing(12)

        self.lblTimer = QLabel(format_clock(0), bar)
        self.lblTimer.setObjectName("lblTimer")
        h.addWidget(self.lblTimer)

        self.cmbTime = QComboBox(bar)
        self.cmbTime.setToolTip("Set time limit")
        self.cmbTime.addItem("Unlimited", None)
        for opt in self.settings.time_limit_options:
            self.cmbTime.addItem(f"{opt}s", opt)
        idx = self.cmbTime.findData(self.time_limit)
        self.cmbTime.setCurrentIndex(max(0, idx))
        self.cmbTime.currentIndexChanged.connect(self._on_time_limit_selected)
        h.addWidget(self.cmbTime)

        h.addStretch(1)
        self.lblHint = QLabel(f"Press {self.settings.start_key} to start", bar)
        h.addWidget(self.lblHint)
        self.btnStart = QPushButton("Start", bar)
        self.btnStart.clicked.connect(self._start)
        h.addWidget(self.btnStart)
        h.addStretch(1)

        self.lblWPM = QLabel("0 WPM", bar)
        self.lblWPM.setObjectName("lblWPM")
        self.lblAcc = QLabel("0 %", bar)
        self.lblAcc.setObjectName("lblAcc")
        h.addWidget(self.lblWPM)
        h.addWidget(self.lblAcc)

        self.cmbSize = QComboBox(bar)
        self.cmbSize.setToolTip("Set word limit")
        for opt in self.settings.text_size_options:
            self.cmbSize.addItem(f"{opt} words", opt)
        idx = self.cmbSize.findData(self.text_size)
        self.cmbSize.setCurrentIndex(max(0, idx))
        self.cmbSize.currentIndexChanged.connect(self._on_text_size_selected)
        h.addWidget(self.cmbSize)

        # keyboard focus stays on the typing area
        for w in (self.cmbTime, self.cmbSize, self.btnStart):
            w.setFocusPolicy(Qt.NoFocus)

        parent_layout.addWidget(bar)

    def _apply_theme(self):
        th = self.theme
        self.setStyleSheet(
            f"""
            QWidget {{ background: {th.background}; color: {th.primary}; }}
            QLabel#lblTimer {{ color: {th.caret}; font-size: 18px; }}
            QLabel#lblWPM, QLabel#lblAcc {{ color: {th.accent}; }}
            """
        )
        self.typing.set_theme(th)
        self.summary.set_theme(th)

    # ---------------- Options ----------------
    def _on_time_limit_selected(self, _index):
        if self.engine.get_state().is_running:
            return
        self.time_limit = coerce_time_limit(self.cmbTime.currentData())
        self.engine.set_time_limit(self.time_limit)

    def _on_text_size_selected(self, _index):
        if self.engine.get_state().is_running:
            return
        self.text_size = coerce_text_size(self.cmbSize.currentData(), self.text_size)
        self._new_game()

    # ---------------- Session flow ----------------
    def _new_game(self):
        self._wpm_samples.clear()
        self._last_elapsed = 0
        self.engine.create_new_game(self.text_size, self.time_limit)
        self.stack.setCurrentWidget(self.typing)
        self.typing.setFocus()

    def _start(self):
        state = self.engine.get_state()
        if state.is_running:
            return
        if state.is_over or not state.is_ready:
            self._new_game()
        log.info("Starting session: %d words, time limit %s", self.text_size, self.time_limit)
        self.engine.start()
        self.typing.setFocus()

    def _on_key(self, event: KeyEvent):
        state = self.engine.get_state()
        if not state.is_running:
            if event.key == self.settings.start_key:
                self._start()
            return
        self.engine.handle_key(event)

    def _on_state_changed(self, state: SessionState):
        result = self.engine.get_result()
        if state.elapsed_seconds > self._last_elapsed:
            self._last_elapsed = state.elapsed_seconds
            self._wpm_samples.append(float(result.wpm))

        self.lblTimer.setText(format_clock(state.elapsed_seconds))
        self.lblWPM.setText(f"{result.wpm} WPM")
        self.lblAcc.setText(f"{result.accuracy} %")
        for w in (self.cmbTime, self.cmbSize, self.btnStart, self.lblHint):
            w.setEnabled(not state.is_running)
        self.typing.show_state(state)

    def _on_game_over(self, result: GameResult):
        self.summary.show_result(result, list(self._wpm_samples))
        self.stack.setCurrentWidget(self.summary)
        self.setWindowTitle(f"Keystrike - {result.wpm} WPM")
        self.setFocus()

    def keyPressEvent(self, ev):
        # the summary page has no key handling of its own
        event = normalize_key(ev)
        if event is None:
            return super().keyPressEvent(ev)
        self._on_key(event)
