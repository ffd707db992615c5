"""Skill check resolution and the transient skill check session.

A skill check rolls one d20 and adds the skill's rank plus the modifier of
its governing attribute. The check succeeds when that total meets or
exceeds the difficulty. This is the only place randomness enters the rules
engine, and it comes in through an injected ``RandomSource``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from charsheet.core.constants import D20_SIDES, DEFAULT_DIFFICULTY
from charsheet.core.exceptions import DiceRollError
from charsheet.core.logging import get_logger
from charsheet.engine.dice import RandomSource
from charsheet.engine.skills import SkillLedger
from charsheet.models.catalog import SKILL_LIST


logger = get_logger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class SkillCheckResult:
    """Outcome of a single skill check.

    Attributes:
        skill: The skill that was checked.
        difficulty: Threshold the total had to reach.
        roll: The raw d20 draw.
        modifier_total: Skill rank plus governing attribute modifier.
        total: ``roll + modifier_total``.
        success: Whether ``total >= difficulty``.
    """

    skill: str
    difficulty: int
    roll: int
    modifier_total: int
    total: int
    success: bool


class SkillCheckResolver:
    """Resolve skill checks against live ledger state.

    Example:
        >>> resolver = SkillCheckResolver(skills)
        >>> result = resolver.resolve("Arcana", 15, FixedRandomSource([12]))
        >>> result.roll
        12
    """

    def __init__(self, skills: SkillLedger) -> None:
        self._skills = skills

    def resolve(
        self,
        skill: str,
        difficulty: int,
        random_source: RandomSource,
    ) -> SkillCheckResult:
        """Roll a skill check.

        Args:
            skill: Name of the skill being checked.
            difficulty: Total required for success.
            random_source: Source of the d20 draw.

        Returns:
            The roll, modifier total, total and success verdict.

        Raises:
            UnknownSkillError: If the skill is not in the catalog.
            DiceRollError: If the random source returns a value outside [1, 20].
        """
        modifier_total = self._skills.skill_total(skill)

        roll = random_source.roll_d20()
        if not 1 <= roll <= D20_SIDES:
            raise DiceRollError(f"d{D20_SIDES} draw out of range", value=roll)

        total = roll + modifier_total
        result = SkillCheckResult(
            skill=skill,
            difficulty=difficulty,
            roll=roll,
            modifier_total=modifier_total,
            total=total,
            success=total >= difficulty,
        )
        logger.info(
            "Skill check resolved",
            skill=skill,
            roll=roll,
            total=total,
            difficulty=difficulty,
            success=result.success,
        )
        return result


def parse_difficulty(text: str) -> int:
    """Parse a difficulty typed by the user.

    Leading integer digits are used and anything after them is ignored;
    input without a leading integer becomes 0.

    Example:
        >>> parse_difficulty("15"), parse_difficulty("12abc"), parse_difficulty("")
        (15, 12, 0)
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class SkillCheckSession:
    """Transient skill check state shown by the UI. Never persisted."""

    selected_skill: str = field(default_factory=lambda: SKILL_LIST[0].name)
    difficulty: int = DEFAULT_DIFFICULTY
    last_roll: int | None = None
    last_success: bool | None = None

    def record(self, result: SkillCheckResult) -> None:
        """Overwrite the last outcome with ``result``."""
        self.last_roll = result.roll
        self.last_success = result.success

    def perform(
        self,
        resolver: SkillCheckResolver,
        random_source: RandomSource,
    ) -> SkillCheckResult:
        """Resolve a check for the selected skill and difficulty, then record it."""
        result = resolver.resolve(self.selected_skill, self.difficulty, random_source)
        self.record(result)
        return result


__all__ = [
    "SkillCheckResult",
    "SkillCheckResolver",
    "SkillCheckSession",
    "parse_difficulty",
]
