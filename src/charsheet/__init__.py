"""Character sheet editor for a tabletop RPG.

Tracks a character's attributes, derived skill points and class
eligibility, enforces the point budgets, resolves d20 skill checks and
synchronizes the character with a remote store.

Example:
    >>> from charsheet import CharacterSheet
    >>>
    >>> sheet = CharacterSheet()
    >>> sheet.attributes.adjust("Intelligence", 4)
    True
    >>> sheet.skills.available_points()
    18
    >>> sheet.eligible_classes()
    ['Wizard']

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Attribute enum, rules catalogs and the wire snapshot.
    engine: Ledgers, class eligibility and skill checks.
    sync: Remote character store gateway (httpx).
    ui: Streamlit character sheet page.
"""

from __future__ import annotations

# Core
from charsheet.core.config import Settings, get_settings
from charsheet.core.exceptions import CharsheetError
from charsheet.core.logging import configure_logging, get_logger

# Rules engine
from charsheet.engine import (
    AttributeLedger,
    CharacterSheet,
    ClassEligibilityEvaluator,
    D20RandomSource,
    FixedRandomSource,
    RandomSource,
    SaveOutcome,
    SkillCheckResolver,
    SkillCheckResult,
    SkillCheckSession,
    SkillLedger,
    modifier,
)

# Models
from charsheet.models import (
    ATTRIBUTE_LIST,
    CLASS_LIST,
    SKILL_LIST,
    Attribute,
    CharacterSnapshot,
    SkillDefinition,
)

# Sync
from charsheet.sync import CharacterSyncGateway


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "CharsheetError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Rules engine
    "modifier",
    "AttributeLedger",
    "SkillLedger",
    "ClassEligibilityEvaluator",
    "RandomSource",
    "D20RandomSource",
    "FixedRandomSource",
    "SkillCheckResolver",
    "SkillCheckResult",
    "SkillCheckSession",
    "CharacterSheet",
    "SaveOutcome",
    # Models
    "Attribute",
    "ATTRIBUTE_LIST",
    "SkillDefinition",
    "SKILL_LIST",
    "CLASS_LIST",
    "CharacterSnapshot",
    # Sync
    "CharacterSyncGateway",
]
