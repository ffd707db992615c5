"""Static rules catalogs: attributes, skills and class requirements.

These catalogs are process-wide constants. The ledgers and evaluators
read them but never modify them; the class catalog is exposed through
read-only mappings to make accidental mutation fail loudly.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from charsheet.models.enums import Attribute


# =============================================================================
# Attributes
# =============================================================================

ATTRIBUTE_LIST: tuple[str, ...] = tuple(attribute.value for attribute in Attribute)


# =============================================================================
# Skills
# =============================================================================


class SkillDefinition(BaseModel):
    """A skill and the attribute whose modifier contributes to it.

    Attributes:
        name: Skill name, also the key used by the remote store.
        attribute_modifier: Name of the governing attribute.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(min_length=1, description="Skill name")
    attribute_modifier: Attribute = Field(description="Governing attribute")


SKILL_LIST: tuple[SkillDefinition, ...] = (
    SkillDefinition(name="Acrobatics", attribute_modifier=Attribute.DEXTERITY),
    SkillDefinition(name="Animal Handling", attribute_modifier=Attribute.WISDOM),
    SkillDefinition(name="Arcana", attribute_modifier=Attribute.INTELLIGENCE),
    SkillDefinition(name="Athletics", attribute_modifier=Attribute.STRENGTH),
    SkillDefinition(name="Deception", attribute_modifier=Attribute.CHARISMA),
    SkillDefinition(name="History", attribute_modifier=Attribute.INTELLIGENCE),
    SkillDefinition(name="Insight", attribute_modifier=Attribute.WISDOM),
    SkillDefinition(name="Intimidation", attribute_modifier=Attribute.CHARISMA),
    SkillDefinition(name="Investigation", attribute_modifier=Attribute.INTELLIGENCE),
    SkillDefinition(name="Medicine", attribute_modifier=Attribute.WISDOM),
    SkillDefinition(name="Nature", attribute_modifier=Attribute.INTELLIGENCE),
    SkillDefinition(name="Perception", attribute_modifier=Attribute.WISDOM),
    SkillDefinition(name="Performance", attribute_modifier=Attribute.CHARISMA),
    SkillDefinition(name="Persuasion", attribute_modifier=Attribute.CHARISMA),
    SkillDefinition(name="Religion", attribute_modifier=Attribute.INTELLIGENCE),
    SkillDefinition(name="Sleight of Hand", attribute_modifier=Attribute.DEXTERITY),
    SkillDefinition(name="Stealth", attribute_modifier=Attribute.DEXTERITY),
    SkillDefinition(name="Survival", attribute_modifier=Attribute.WISDOM),
)

SKILLS_BY_NAME: Mapping[str, SkillDefinition] = MappingProxyType(
    {skill.name: skill for skill in SKILL_LIST}
)


# =============================================================================
# Classes
# =============================================================================


def _requirements(**minimums: int) -> Mapping[str, int]:
    return MappingProxyType(
        {Attribute[key.upper()].value: value for key, value in minimums.items()}
    )


CLASS_LIST: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {
        "Barbarian": _requirements(
            strength=14, dexterity=9, constitution=9,
            intelligence=9, wisdom=9, charisma=9,
        ),
        "Wizard": _requirements(
            strength=9, dexterity=9, constitution=9,
            intelligence=14, wisdom=9, charisma=9,
        ),
        "Bard": _requirements(
            strength=9, dexterity=9, constitution=9,
            intelligence=9, wisdom=9, charisma=14,
        ),
    }
)


__all__ = [
    "ATTRIBUTE_LIST",
    "SkillDefinition",
    "SKILL_LIST",
    "SKILLS_BY_NAME",
    "CLASS_LIST",
]
