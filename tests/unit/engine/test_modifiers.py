"""Tests for attribute modifier calculation."""

from __future__ import annotations

import pytest

from charsheet.engine.modifiers import modifier


class TestModifier:
    """Tests for the modifier function."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (10, 0),
            (11, 0),
            (12, 1),
            (14, 2),
            (20, 5),
            (9, -1),
            (8, -1),
            (7, -2),
            (1, -5),
            (0, -5),
        ],
    )
    def test_modifier_values(self, score: int, expected: int) -> None:
        """Test modifier uses floor division around a baseline of 10."""
        assert modifier(score) == expected

    def test_odd_negative_rounds_down(self) -> None:
        """Test that a score of 9 rounds toward negative infinity, not zero."""
        assert modifier(9) == -1
        assert modifier(9) != int((9 - 10) / 2)
