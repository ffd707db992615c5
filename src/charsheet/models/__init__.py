"""Data models: attribute enum, rules catalogs and the wire snapshot."""

from __future__ import annotations

from charsheet.models.catalog import (
    ATTRIBUTE_LIST,
    CLASS_LIST,
    SKILL_LIST,
    SKILLS_BY_NAME,
    SkillDefinition,
)
from charsheet.models.character import CharacterSnapshot
from charsheet.models.enums import Attribute


__all__ = [
    "Attribute",
    "ATTRIBUTE_LIST",
    "SkillDefinition",
    "SKILL_LIST",
    "SKILLS_BY_NAME",
    "CLASS_LIST",
    "CharacterSnapshot",
]
