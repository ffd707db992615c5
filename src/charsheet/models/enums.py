"""Enumeration types for the character sheet editor."""

from __future__ import annotations

from enum import StrEnum


class Attribute(StrEnum):
    """The six core character attributes.

    Values are the display names, which are also the keys used by the
    remote character store.
    """

    STRENGTH = "Strength"
    DEXTERITY = "Dexterity"
    CONSTITUTION = "Constitution"
    INTELLIGENCE = "Intelligence"
    WISDOM = "Wisdom"
    CHARISMA = "Charisma"


__all__ = [
    "Attribute",
]
