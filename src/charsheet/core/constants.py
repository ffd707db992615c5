"""Rules constants for the character sheet editor.

These values are fixed by the game rules and are not configurable.
"""

from __future__ import annotations

# =============================================================================
# Attribute Constants
# =============================================================================

ATTRIBUTE_POINT_BUDGET = 70
"""Maximum sum of all attribute scores."""

DEFAULT_ATTRIBUTE_SCORE = 10
"""Score every attribute starts with."""

MIN_ATTRIBUTE_SCORE = 0
"""Floor applied to a single attribute score after an adjustment."""

MODIFIER_BASELINE = 10
"""Score whose modifier is zero."""

# =============================================================================
# Skill Constants
# =============================================================================

DEFAULT_SKILL_RANK = 0
"""Rank every skill starts with."""

BASE_SKILL_POINTS = 10
"""Skill points available with an Intelligence modifier of zero."""

SKILL_POINTS_PER_INT_MODIFIER = 4
"""Skill points gained (or lost) per point of Intelligence modifier."""

# =============================================================================
# Skill Check Constants
# =============================================================================

D20_SIDES = 20
"""Faces on the die rolled for a skill check."""

DEFAULT_DIFFICULTY = 10
"""Difficulty a new skill check session starts with."""


__all__ = [
    "ATTRIBUTE_POINT_BUDGET",
    "DEFAULT_ATTRIBUTE_SCORE",
    "MIN_ATTRIBUTE_SCORE",
    "MODIFIER_BASELINE",
    "DEFAULT_SKILL_RANK",
    "BASE_SKILL_POINTS",
    "SKILL_POINTS_PER_INT_MODIFIER",
    "D20_SIDES",
    "DEFAULT_DIFFICULTY",
]
