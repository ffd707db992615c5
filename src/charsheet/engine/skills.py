"""Skill ledger enforcing the Intelligence-derived skill point budget."""

from __future__ import annotations

from collections.abc import Mapping

from charsheet.core.constants import (
    BASE_SKILL_POINTS,
    DEFAULT_SKILL_RANK,
    SKILL_POINTS_PER_INT_MODIFIER,
)
from charsheet.core.exceptions import UnknownSkillError
from charsheet.core.logging import get_logger
from charsheet.engine.attributes import AttributeLedger
from charsheet.models.catalog import SKILL_LIST, SKILLS_BY_NAME, SkillDefinition
from charsheet.models.enums import Attribute


logger = get_logger(__name__)


def default_skill_ranks() -> dict[str, int]:
    """Return a fresh mapping with every skill at rank zero."""
    return {skill.name: DEFAULT_SKILL_RANK for skill in SKILL_LIST}


class SkillLedger:
    """Sole mutable owner of the character's skill ranks.

    The spend budget is derived live from the attribute ledger's
    Intelligence score, so it is recomputed on every call.

    Increases are gated once per call: any positive delta is rejected when
    the spent points already reach the available points, regardless of the
    delta's size. Decreases are applied whenever the rank stays
    non-negative. This differs from ``AttributeLedger``, which checks the
    budget against the full delta and clamps instead of rejecting.
    """

    def __init__(
        self,
        attributes: AttributeLedger,
        ranks: Mapping[str, int] | None = None,
    ) -> None:
        """Initialize the ledger.

        Args:
            attributes: Attribute ledger supplying the Intelligence score.
            ranks: Optional initial ranks; defaults to 0 per skill.
        """
        self._attributes = attributes
        self._ranks = default_skill_ranks()
        if ranks is not None:
            self.load(ranks)

    @property
    def ranks(self) -> dict[str, int]:
        """Copy of the current ranks in catalog order."""
        return dict(self._ranks)

    def definition(self, skill: str) -> SkillDefinition:
        """Return the catalog definition of a skill.

        Raises:
            UnknownSkillError: If the skill is not in the catalog.
        """
        try:
            return SKILLS_BY_NAME[skill]
        except KeyError:
            raise UnknownSkillError(f"Unknown skill: {skill}", skill_name=skill) from None

    def rank(self, skill: str) -> int:
        """Return the current rank of a skill."""
        self.definition(skill)
        return self._ranks[skill]

    def attribute_modifier(self, skill: str) -> int:
        """Return the modifier of the skill's governing attribute."""
        return self._attributes.modifier_for(self.definition(skill).attribute_modifier)

    def skill_total(self, skill: str) -> int:
        """Rank plus governing attribute modifier."""
        return self.rank(skill) + self.attribute_modifier(skill)

    def available_points(self) -> int:
        """Skill points granted by the current Intelligence modifier."""
        int_modifier = self._attributes.modifier_for(Attribute.INTELLIGENCE)
        return BASE_SKILL_POINTS + SKILL_POINTS_PER_INT_MODIFIER * int_modifier

    def spent_points(self) -> int:
        """Sum of all current ranks."""
        return sum(self._ranks.values())

    def remaining_points(self) -> int:
        """Available minus spent; negative after Intelligence is lowered."""
        return self.available_points() - self.spent_points()

    def adjust(self, skill: str, delta: int) -> bool:
        """Change a skill rank by ``delta``.

        Args:
            skill: Name of the skill to change.
            delta: Signed change to apply.

        Returns:
            True if applied; False if rejected for overspending or for
            driving the rank below zero.

        Raises:
            UnknownSkillError: If the skill is not in the catalog.
        """
        current = self.rank(skill)

        if delta > 0:
            available = self.available_points()
            spent = self.spent_points()
            if spent >= available:
                logger.debug(
                    "Skill adjustment rejected: no points left",
                    skill=skill,
                    delta=delta,
                    spent=spent,
                    available=available,
                )
                return False

        new_rank = current + delta
        if new_rank < 0:
            logger.debug(
                "Skill adjustment rejected: negative rank",
                skill=skill,
                delta=delta,
                rank=current,
            )
            return False

        self._ranks[skill] = new_rank
        logger.debug("Skill adjusted", skill=skill, rank=new_rank)
        return True

    def load(self, ranks: Mapping[str, int]) -> None:
        """Replace all ranks at once.

        Supplied values are trusted: the spend budget is not re-checked.
        Catalog skills missing from ``ranks`` fall back to rank zero and
        names outside the catalog are dropped.

        Args:
            ranks: Skill name to rank.
        """
        unknown = sorted(set(ranks) - set(SKILLS_BY_NAME))
        if unknown:
            logger.warning("Ignoring unknown skills on load", skills=unknown)

        replacement = default_skill_ranks()
        for name in replacement:
            if name in ranks:
                replacement[name] = int(ranks[name])
        self._ranks = replacement

    def reset(self) -> None:
        """Restore every skill to rank zero."""
        self._ranks = default_skill_ranks()

    def __repr__(self) -> str:
        return f"SkillLedger({self._ranks!r})"


__all__ = [
    "SkillLedger",
    "default_skill_ranks",
]
