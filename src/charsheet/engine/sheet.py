"""Character sheet aggregate owning both ledgers and the check session.

``CharacterSheet`` is the object the UI keeps per session. It wires the
skill ledger to the attribute ledger, derives read-only views on demand,
and translates between the ledgers and the wire snapshot used by the
sync gateway.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from charsheet.core.logging import get_logger
from charsheet.engine.attributes import AttributeLedger
from charsheet.engine.checks import SkillCheckResolver, SkillCheckResult, SkillCheckSession
from charsheet.engine.classes import ClassEligibilityEvaluator
from charsheet.engine.dice import D20RandomSource, RandomSource
from charsheet.engine.skills import SkillLedger
from charsheet.models.character import CharacterSnapshot


if TYPE_CHECKING:
    from charsheet.sync.gateway import CharacterSyncGateway


logger = get_logger(__name__)

SAVE_SUCCESS_MESSAGE = "Character saved successfully!"
SAVE_FAILURE_MESSAGE = "Failed to save character"


@dataclass(frozen=True)
class SaveOutcome:
    """Result of a save, ready to be shown as a notification."""

    success: bool
    message: str


class CharacterSheet:
    """A character's attributes, skills and skill check session.

    Example:
        >>> sheet = CharacterSheet()
        >>> sheet.attributes.adjust("Intelligence", 4)
        True
        >>> sheet.skills.available_points()
        18
    """

    def __init__(
        self,
        *,
        evaluator: ClassEligibilityEvaluator | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.attributes = AttributeLedger()
        self.skills = SkillLedger(self.attributes)
        self.check_session = SkillCheckSession()
        self.evaluator = evaluator or ClassEligibilityEvaluator()
        self.resolver = SkillCheckResolver(self.skills)
        self._random_source = random_source or D20RandomSource()

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def is_eligible(self, class_name: str) -> bool:
        return self.evaluator.is_eligible(class_name, self.attributes.scores)

    def eligible_classes(self) -> list[str]:
        return self.evaluator.eligible_classes(self.attributes.scores)

    # -------------------------------------------------------------------------
    # Skill checks
    # -------------------------------------------------------------------------

    def roll_skill_check(self) -> SkillCheckResult:
        """Roll the session's selected skill against its difficulty."""
        return self.check_session.perform(self.resolver, self._random_source)

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def snapshot(self) -> CharacterSnapshot:
        """Full snapshot of both ledgers."""
        return CharacterSnapshot(
            attributes=self.attributes.scores,
            skills=self.skills.ranks,
        )

    def apply_snapshot(self, snapshot: CharacterSnapshot) -> None:
        """Replace both ledgers from a snapshot without re-validating budgets."""
        self.attributes.load(snapshot.attributes)
        self.skills.load(snapshot.skills)

    def reset(self) -> None:
        """Return both ledgers to the default character."""
        self.attributes.reset()
        self.skills.reset()

    # -------------------------------------------------------------------------
    # Sync
    # -------------------------------------------------------------------------

    async def load_from(self, gateway: CharacterSyncGateway) -> bool:
        """Populate the sheet from the remote store.

        Falls back to the default character when nothing usable is loaded.

        Returns:
            True if a stored character was applied, False if defaults were used.
        """
        snapshot = await gateway.load()
        if snapshot is None:
            logger.info("Using default character")
            self.reset()
            return False

        self.apply_snapshot(snapshot)
        return True

    async def save_to(self, gateway: CharacterSyncGateway) -> SaveOutcome:
        """Post the current snapshot and describe the outcome for the user."""
        if await gateway.save(self.snapshot()):
            return SaveOutcome(success=True, message=SAVE_SUCCESS_MESSAGE)
        return SaveOutcome(success=False, message=SAVE_FAILURE_MESSAGE)


__all__ = [
    "CharacterSheet",
    "SaveOutcome",
    "SAVE_SUCCESS_MESSAGE",
    "SAVE_FAILURE_MESSAGE",
]
