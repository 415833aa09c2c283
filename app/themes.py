# app/themes.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List


@dataclass
class Theme:
    name: str
    background: str
    primary: str
    muted: str
    correct: str
    error: str
    caret: str
    accent: str


# -------- Built-in themes --------
THEMES: List[Theme] = [
    Theme(
        name="Dark",
        background="#171717",
        primary="#e5e7eb",
        muted="#6b7280",
        correct="#e5e7eb",
        error="#ef4444",
        caret="#f97316",
        accent="#22c55e",
    ),
    Theme(
        name="Light",
        background="#fafafa",
        primary="#111111",
        muted="#9ca3af",
        correct="#111111",
        error="#dc2626",
        caret="#ea580c",
        accent="#16a34a",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        primary="#eceff4",
        muted="#4c566a",
        correct="#88c0d0",
        error="#bf616a",
        caret="#ebcb8b",
        accent="#a3be8c",
    ),
]


def theme_by_name(name: str) -> Theme:
    for t in THEMES:
        if t.name.lower() == (name or "").lower():
            return t
    return THEMES[0]
