# app/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class LetterStatus(Enum):
    UNSET = "unset"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass
class CharacterSlot:
    letter: str
    typed: bool = False
    status: LetterStatus = LetterStatus.UNSET

    @property
    def is_placeholder(self) -> bool:
        # empty letter == the space that followed the word
        return self.letter == ""

    def mark(self, key: str):
        self.typed = True
        self.status = LetterStatus.CORRECT if key == self.letter else LetterStatus.INCORRECT

    def clear(self):
        self.typed = False
        self.status = LetterStatus.UNSET


Grid = List[List[CharacterSlot]]


@dataclass
class Caret:
    word: int = 0
    letter: int = 0


@dataclass
class SessionState:
    text: str = ""
    grid: Grid = field(default_factory=list)
    time_limit: Optional[int] = None
    elapsed_seconds: int = 0
    is_running: bool = False
    is_over: bool = False
    caret: Caret = field(default_factory=Caret)

    @property
    def is_ready(self) -> bool:
        return self.text != "" and len(self.grid) > 0

    def slot_at(self, word: int, letter: int) -> Optional[CharacterSlot]:
        if not (0 <= word < len(self.grid)):
            return None
        slots = self.grid[word]
        if not (0 <= letter < len(slots)):
            return None
        return slots[letter]

    def at_terminal(self) -> bool:
        """True when the caret sits one past the last slot of the last word."""
        if not self.grid:
            return False
        last = len(self.grid) - 1
        return self.caret.word == last and self.caret.letter >= len(self.grid[last])


@dataclass
class GameResult:
    correct: int = 0
    incorrect: int = 0
    total: int = 0
    wpm: int = 0
    accuracy: int = 0


def build_grid(text: str) -> Grid:
    if not text:
        return []
    words = text.split(" ")
    grid: Grid = []
    for idx, word in enumerate(words):
        slots = [CharacterSlot(ch) for ch in word]
        if idx != len(words) - 1:
            slots.append(CharacterSlot(""))
        grid.append(slots)
    return grid
