# services/input_processor.py
from enum import Enum

from app.state import Caret, SessionState
from app.validation import KeyEvent, KeyKind, classify_key


class KeyOutcome(Enum):
    IGNORED = "ignored"    # nothing changed
    UPDATED = "updated"    # caret and/or grid changed
    FINISHED = "finished"  # changed, and the caret reached the terminal position
    END = "end"            # end the session, nothing changed


def process_key(event: KeyEvent, state: SessionState, abort_key: str = "Escape") -> KeyOutcome:
    """
    Apply one key press to the grid and caret of `state`.
    Never touches the timer fields; the caller decides what END/FINISHED mean.
    """
    if not state.grid or state.is_over or not state.is_running:
        return KeyOutcome.IGNORED

    kind = classify_key(event, abort_key)
    if kind is KeyKind.ABORT:
        return KeyOutcome.END
    if kind is KeyKind.BACKSPACE:
        return _backspace(state)
    if kind is KeyKind.SPACE:
        return _space(state)
    if kind is KeyKind.CHARACTER:
        return _character(event.key, state)
    return KeyOutcome.IGNORED


def _backspace(state: SessionState) -> KeyOutcome:
    word, letter = state.caret.word, state.caret.letter
    if letter == 0:
        if word == 0:
            return KeyOutcome.IGNORED
        word -= 1
        letter = len(state.grid[word]) - 1
    else:
        letter -= 1

    slot = state.slot_at(word, letter)
    if slot is not None:
        slot.clear()
    state.caret = Caret(word, letter)
    return KeyOutcome.UPDATED


def _space(state: SessionState) -> KeyOutcome:
    # leading space in a word does nothing, unless the word is only a
    # separator (double space in the text)
    current = state.slot_at(state.caret.word, state.caret.letter)
    if state.caret.letter == 0 and not (current is not None and current.is_placeholder):
        return KeyOutcome.IGNORED
    next_word = min(state.caret.word + 1, len(state.grid) - 1)
    state.caret = Caret(next_word, 0)
    if state.at_terminal():
        # trailing space in the text leaves an empty last word
        return KeyOutcome.FINISHED
    return KeyOutcome.UPDATED


def _character(key: str, state: SessionState) -> KeyOutcome:
    word, letter = state.caret.word, state.caret.letter

    if 0 <= word < len(state.grid) and letter == len(state.grid[word]):
        word, letter = word + 1, 0
        if word >= len(state.grid):
            return KeyOutcome.END

    slot = state.slot_at(word, letter)
    if slot is None or slot.is_placeholder:
        # desynced caret, or sitting on a separator: only Space consumes those
        return KeyOutcome.IGNORED

    slot.mark(key)
    state.caret = Caret(word, letter + 1)
    if state.at_terminal():
        return KeyOutcome.FINISHED
    return KeyOutcome.UPDATED
