from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class KeyEvent:
    key: str
    code: str = ""


class KeyKind(Enum):
    ABORT = "abort"
    BACKSPACE = "backspace"
    SPACE = "space"
    CHARACTER = "character"
    IGNORED = "ignored"


def classify_key(event: KeyEvent, abort_key: str = "Escape") -> KeyKind:
    key = event.key or ""
    if key == abort_key:
        return KeyKind.ABORT
    if key == "Backspace":
        return KeyKind.BACKSPACE
    if key == " " or event.code == "Space":
        return KeyKind.SPACE
    if len(key) == 1 and key.isprintable():
        return KeyKind.CHARACTER
    return KeyKind.IGNORED


def coerce_time_limit(value) -> Optional[int]:
    # None / "Unlimited" / 0 / garbage all mean no limit
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def coerce_text_size(value, default: int = 100) -> int:
    try:
        size = int(value)
    except (TypeError, ValueError):
        return default
    return size if size > 0 else default
