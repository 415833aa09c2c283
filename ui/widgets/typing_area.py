# ui/widgets/typing_area.py
from __future__ import annotations
from html import escape

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import QLabel, QSizePolicy, QVBoxLayout, QWidget

from app.state import LetterStatus, SessionState
from app.themes import Theme, THEMES
from app.validation import KeyEvent


def normalize_key(ev) -> KeyEvent | None:
    """Qt key press -> KeyEvent, or None for modifier chords and non-text keys."""
    t = ev.text()
    # AltGr reports as Ctrl+Alt on some layouts; trust the produced character
    if len(t) == 1 and t.isprintable() and t != " ":
        return KeyEvent(t)
    if ev.modifiers() & (Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier):
        return None
    key = ev.key()
    if key == Qt.Key_Backspace:
        return KeyEvent("Backspace")
    if key == Qt.Key_Escape:
        return KeyEvent("Escape")
    if key in (Qt.Key_Return, Qt.Key_Enter):
        return KeyEvent("Enter")
    if key == Qt.Key_Space:
        return KeyEvent(" ", code="Space")
    return None


class TypingArea(QWidget):
    """
    Renders the character grid as rich text and forwards key presses.
    Owns no game logic: the window decides what each KeyEvent means.
    """

    keyPressed = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)
        self._theme: Theme = THEMES[0]
        self._state: SessionState | None = None

        root = QVBoxLayout(self)
        root.setContentsMargins(40, 40, 40, 40)

        self.lblText = QLabel("", self)
        self.lblText.setObjectName("lblText")
        self.lblText.setTextFormat(Qt.RichText)
        self.lblText.setWordWrap(True)
        self.lblText.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.lblText.setMinimumHeight(160)
        self.lblText.setStyleSheet("font-family: monospace; font-size: 30px;")
        root.addWidget(self.lblText)

        self._caret_on = True
        self._caret_timer = QTimer(self)
        self._caret_timer.setInterval(500)
        self._caret_timer.timeout.connect(self._toggle_caret)
        self._caret_timer.start()

    def set_theme(self, theme: Theme):
        self._theme = theme
        self._render()

    def show_state(self, state: SessionState):
        self._state = state
        self._caret_on = True
        self._render()

    def keyPressEvent(self, ev):
        event = normalize_key(ev)
        if event is None:
            return super().keyPressEvent(ev)
        self.keyPressed.emit(event)
        ev.accept()

    def _toggle_caret(self):
        self._caret_on = not self._caret_on
        if self._state is not None and self._state.is_running:
            self._render()

    def _render(self):
        s = self._state
        if s is None:
            self.lblText.setText("")
            return
        th = self._theme
        caret_color = th.caret if self._caret_on else "transparent"
        caret_html = f'<span style="color:{caret_color}">|</span>'

        parts: list[str] = []
        for w, word in enumerate(s.grid):
            for i, slot in enumerate(word):
                if s.is_running and s.caret.word == w and s.caret.letter == i:
                    parts.append(caret_html)
                ch = " " if slot.is_placeholder else escape(slot.letter)
                if slot.status is LetterStatus.CORRECT:
                    parts.append(f'<span style="color:{th.correct}">{ch}</span>')
                elif slot.status is LetterStatus.INCORRECT:
                    parts.append(f'<span style="color:{th.error}; text-decoration:underline">{ch}</span>')
                else:
                    parts.append(f'<span style="color:{th.muted}">{ch}</span>')
            # caret past the word's last slot (end of the final word)
            if s.is_running and s.caret.word == w and s.caret.letter >= len(word):
                parts.append(caret_html)

        self.lblText.setText("".join(parts))
