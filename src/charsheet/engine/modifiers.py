"""Attribute modifier calculation."""

from __future__ import annotations

from charsheet.core.constants import MODIFIER_BASELINE


def modifier(score: int) -> int:
    """Return the modifier derived from an attribute score.

    Floor division rounds odd negative differences down, so a score of 9
    yields -1 rather than 0.

    Args:
        score: The attribute score.

    Returns:
        ``floor((score - 10) / 2)``.

    Example:
        >>> modifier(14)
        2
        >>> modifier(9)
        -1
    """
    return (score - MODIFIER_BASELINE) // 2


__all__ = [
    "modifier",
]
