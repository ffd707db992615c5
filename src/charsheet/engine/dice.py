"""Random sources for skill checks.

The skill check resolver never touches a random generator directly: it is
handed a ``RandomSource`` and asks it for one d20 draw. Production code
uses ``D20RandomSource``, backed by the d20 dice library; tests and
replays use ``FixedRandomSource``.
"""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import d20

from charsheet.core.constants import D20_SIDES
from charsheet.core.exceptions import DiceRollError
from charsheet.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Capability producing uniformly distributed d20 draws."""

    def roll_d20(self) -> int:
        """Return an integer in [1, 20]."""
        ...


class D20RandomSource:
    """Random source rolling ``1d20`` with the d20 library.

    Example:
        >>> source = D20RandomSource()
        >>> 1 <= source.roll_d20() <= 20
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the source.

        Args:
            seed: Optional seed for reproducible rolls. d20 draws from the
                module-level ``random`` generator, so seeding is global.
        """
        if seed is not None:
            random.seed(seed)
        logger.debug("D20RandomSource initialized", seed=seed)

    def roll_d20(self) -> int:
        result = d20.roll(f"1d{D20_SIDES}")
        return int(result.total)


class FixedRandomSource:
    """Random source replaying a predetermined sequence of draws.

    Raises ``DiceRollError`` once the sequence is exhausted.

    Example:
        >>> source = FixedRandomSource([15, 3])
        >>> source.roll_d20(), source.roll_d20()
        (15, 3)
    """

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = deque(draws)

    @property
    def remaining(self) -> int:
        return len(self._draws)

    def roll_d20(self) -> int:
        if not self._draws:
            raise DiceRollError("FixedRandomSource has no draws left")
        return self._draws.popleft()


__all__ = [
    "RandomSource",
    "D20RandomSource",
    "FixedRandomSource",
]
