"""Character rules engine.

This package holds the invariant-preserving state model and the rules
built on top of it. Everything here is synchronous and deterministic
given ledger state, except for the d20 draw, which comes from an injected
random source.

Submodules:
    modifiers: Attribute score to modifier
    attributes: Attribute ledger and its total point budget
    skills: Skill ledger and its Intelligence-derived budget
    classes: Class eligibility against attribute minimums
    dice: Random sources for d20 draws (d20 library)
    checks: Skill check resolution and session state
    sheet: Aggregate owning both ledgers and the check session

Example:
    >>> from charsheet.engine import CharacterSheet, FixedRandomSource
    >>> sheet = CharacterSheet(random_source=FixedRandomSource([15]))
    >>> sheet.skills.adjust("Arcana", 2)
    True
    >>> sheet.roll_skill_check().roll
    15
"""

from __future__ import annotations

from charsheet.engine.attributes import AttributeLedger, default_attribute_scores
from charsheet.engine.checks import (
    SkillCheckResolver,
    SkillCheckResult,
    SkillCheckSession,
    parse_difficulty,
)
from charsheet.engine.classes import ClassEligibilityEvaluator
from charsheet.engine.dice import D20RandomSource, FixedRandomSource, RandomSource
from charsheet.engine.modifiers import modifier
from charsheet.engine.sheet import CharacterSheet, SaveOutcome
from charsheet.engine.skills import SkillLedger, default_skill_ranks


__all__ = [
    # Modifiers
    "modifier",
    # Ledgers
    "AttributeLedger",
    "SkillLedger",
    "default_attribute_scores",
    "default_skill_ranks",
    # Classes
    "ClassEligibilityEvaluator",
    # Dice
    "RandomSource",
    "D20RandomSource",
    "FixedRandomSource",
    # Checks
    "SkillCheckResolver",
    "SkillCheckResult",
    "SkillCheckSession",
    "parse_difficulty",
    # Sheet
    "CharacterSheet",
    "SaveOutcome",
]
