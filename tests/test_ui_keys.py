"""Tests for the Qt key mapping and summary hint (no widgets created)."""

from PySide6.QtCore import Qt

from app.validation import KeyEvent
from ui.session_summary import play_again_hint
from ui.widgets import normalize_key


class FakeKeyPress:
    def __init__(self, key, text="", modifiers=Qt.NoModifier):
        self._key = key
        self._text = text
        self._modifiers = modifiers

    def key(self):
        return self._key

    def text(self):
        return self._text

    def modifiers(self):
        return self._modifiers


class TestNormalizeKey:
    def test_plain_letter(self):
        assert normalize_key(FakeKeyPress(Qt.Key_A, "a")) == KeyEvent("a")

    def test_altgr_characters(self):
        altgr = Qt.ControlModifier | Qt.AltModifier
        assert normalize_key(FakeKeyPress(Qt.Key_At, "@", altgr)) == KeyEvent("@")
        assert normalize_key(FakeKeyPress(Qt.Key_BraceLeft, "{", altgr)) == KeyEvent("{")
        assert normalize_key(FakeKeyPress(Qt.Key_E, "€", altgr)) == KeyEvent("€")

    def test_control_shortcut_is_dropped(self):
        assert normalize_key(FakeKeyPress(Qt.Key_A, "\x01", Qt.ControlModifier)) is None

    def test_named_keys(self):
        assert normalize_key(FakeKeyPress(Qt.Key_Backspace, "\b")) == KeyEvent("Backspace")
        assert normalize_key(FakeKeyPress(Qt.Key_Escape, "\x1b")) == KeyEvent("Escape")
        assert normalize_key(FakeKeyPress(Qt.Key_Return, "\r")) == KeyEvent("Enter")
        assert normalize_key(FakeKeyPress(Qt.Key_Space, " ")) == KeyEvent(" ", code="Space")

    def test_ctrl_space_is_dropped(self):
        assert normalize_key(FakeKeyPress(Qt.Key_Space, " ", Qt.ControlModifier)) is None

    def test_shift_alone_is_dropped(self):
        assert normalize_key(FakeKeyPress(Qt.Key_Shift, "")) is None


def test_play_again_hint_uses_start_key():
    assert play_again_hint("Enter") == "Press Enter to play again"
    assert play_again_hint("F5") == "Press F5 to play again"
