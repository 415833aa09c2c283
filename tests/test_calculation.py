"""Tests for app.calculation – result metrics."""

import pytest

from app.calculation import compute_result, round_half_up, smooth
from app.state import LetterStatus, build_grid


def typed_grid(text, statuses):
    """Mark the non-placeholder slots in order with the given statuses."""
    grid = build_grid(text)
    it = iter(statuses)
    for word in grid:
        for slot in word:
            if slot.is_placeholder:
                continue
            status = next(it, None)
            if status is not None:
                slot.typed = True
                slot.status = status
    return grid


C, I = LetterStatus.CORRECT, LetterStatus.INCORRECT


class TestRoundHalfUp:
    @pytest.mark.parametrize("value,expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (0.0, 0), (-0.5, -1),
    ])
    def test_ties_away_from_zero(self, value, expected):
        assert round_half_up(value) == expected


class TestComputeResult:
    def test_all_correct_one_minute(self):
        r = compute_result(typed_grid("cat dog", [C] * 6), 60, "cat dog")
        assert (r.correct, r.incorrect, r.total) == (6, 0, 6)
        assert r.accuracy == 100
        assert r.wpm == 1

    def test_placeholders_are_not_counted(self):
        r = compute_result(build_grid("a b c"), 10, "a b c")
        assert r.total == 3

    def test_nothing_typed(self):
        r = compute_result(build_grid("cat dog"), 0, "cat dog")
        assert r.accuracy == 0
        assert r.wpm == 0
        assert r.total == 6

    def test_zero_elapsed_uses_one_second(self):
        # 5 correct chars in "1 second" -> 1 word / (1/60 min) = 60
        r = compute_result(typed_grid("hello", [C] * 5), 0, "hello")
        assert r.wpm == 60

    def test_net_wpm_ignores_incorrect(self):
        r = compute_result(typed_grid("hello world", [C] * 5 + [I] * 5), 60, "")
        assert r.wpm == 1
        assert r.accuracy == 50

    def test_accuracy_rounding(self):
        # 2 of 3 -> 66.67 -> 67
        r = compute_result(typed_grid("abc", [C, C, I]), 60, "abc")
        assert r.accuracy == 67

    def test_empty_grid_falls_back_to_text_without_spaces(self):
        r = compute_result([], 0, "cat dog")
        assert r.total == 6
        assert r.correct == r.incorrect == 0

    def test_bounds(self):
        for statuses in ([C] * 6, [I] * 6, [C, I, C], []):
            r = compute_result(typed_grid("cat dog", statuses), 7, "cat dog")
            assert 0 <= r.accuracy <= 100
            assert r.wpm >= 0


def test_smooth_keeps_length():
    vals = [10.0, 20.0, 30.0]
    out = smooth(vals)
    assert len(out) == 3
    assert out[0] == 10.0
    assert 10.0 < out[2] < 30.0
