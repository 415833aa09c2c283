import math
from typing import List, Sequence

from app.state import GameResult, Grid, LetterStatus


def round_half_up(value: float) -> int:
    """Nearest integer, ties away from zero (round() in Python is banker's)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def compute_result(grid: Grid, elapsed_seconds: int, text: str = "") -> GameResult:
    """
    Net WPM and accuracy over the character grid.
    Placeholder slots never count. WPM = (correct chars / 5) / minutes,
    with at least one second of elapsed time.
    """
    correct = incorrect = total = 0
    for word in grid:
        for slot in word:
            if slot.is_placeholder:
                continue
            total += 1
            if slot.status is LetterStatus.CORRECT:
                correct += 1
            elif slot.status is LetterStatus.INCORRECT:
                incorrect += 1

    if total == 0:
        # empty grid: count the text's characters, separators excluded
        total = sum(1 for ch in text if ch != " ")

    minutes = max(1, elapsed_seconds) / 60.0
    wpm = max(0, round_half_up((correct / 5.0) / minutes))

    attempted = correct + incorrect
    accuracy = 0 if attempted == 0 else round_half_up(correct * 100 / attempted)

    return GameResult(
        correct=correct,
        incorrect=incorrect,
        total=total,
        wpm=wpm,
        accuracy=accuracy,
    )


def smooth(values: Sequence[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
