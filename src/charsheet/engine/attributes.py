"""Attribute ledger enforcing the total attribute point budget."""

from __future__ import annotations

from collections.abc import Mapping

from charsheet.core.constants import (
    ATTRIBUTE_POINT_BUDGET,
    DEFAULT_ATTRIBUTE_SCORE,
    MIN_ATTRIBUTE_SCORE,
)
from charsheet.core.exceptions import UnknownAttributeError
from charsheet.core.logging import get_logger
from charsheet.engine.modifiers import modifier
from charsheet.models.catalog import ATTRIBUTE_LIST


logger = get_logger(__name__)


def default_attribute_scores() -> dict[str, int]:
    """Return a fresh mapping with every attribute at the default score."""
    return {attribute: DEFAULT_ATTRIBUTE_SCORE for attribute in ATTRIBUTE_LIST}


class AttributeLedger:
    """Sole mutable owner of the character's attribute scores.

    Adjustments are checked against ``ATTRIBUTE_POINT_BUDGET`` using the raw
    delta, and only then is the adjusted score clamped at zero. A rejected
    adjustment leaves the ledger untouched and returns ``False``.

    Example:
        >>> ledger = AttributeLedger()
        >>> ledger.adjust("Strength", 10)
        True
        >>> ledger.adjust("Strength", 1)
        False
    """

    def __init__(self, scores: Mapping[str, int] | None = None) -> None:
        """Initialize the ledger.

        Args:
            scores: Optional initial scores; defaults to 10 per attribute.
        """
        self._scores = default_attribute_scores()
        if scores is not None:
            self.load(scores)

    @property
    def scores(self) -> dict[str, int]:
        """Copy of the current scores in catalog order."""
        return dict(self._scores)

    def score(self, attribute: str) -> int:
        """Return the current score of an attribute.

        Raises:
            UnknownAttributeError: If the attribute is not in the catalog.
        """
        self._require(attribute)
        return self._scores[attribute]

    def modifier_for(self, attribute: str) -> int:
        """Return the modifier of an attribute's current score."""
        return modifier(self.score(attribute))

    def total_assigned(self) -> int:
        """Sum of all current scores."""
        return sum(self._scores.values())

    def remaining_budget(self) -> int:
        """Points left before the attribute budget is reached."""
        return ATTRIBUTE_POINT_BUDGET - self.total_assigned()

    def adjust(self, attribute: str, delta: int) -> bool:
        """Change an attribute score by ``delta``.

        Args:
            attribute: Name of the attribute to change.
            delta: Signed change to apply.

        Returns:
            True if the adjustment was applied, False if it was rejected
            because the new total would exceed the budget.

        Raises:
            UnknownAttributeError: If the attribute is not in the catalog.
        """
        self._require(attribute)

        prospective_total = self.total_assigned() + delta
        if prospective_total > ATTRIBUTE_POINT_BUDGET:
            logger.debug(
                "Attribute adjustment rejected",
                attribute=attribute,
                delta=delta,
                prospective_total=prospective_total,
                budget=ATTRIBUTE_POINT_BUDGET,
            )
            return False

        self._scores[attribute] = max(MIN_ATTRIBUTE_SCORE, self._scores[attribute] + delta)
        logger.debug("Attribute adjusted", attribute=attribute, score=self._scores[attribute])
        return True

    def load(self, scores: Mapping[str, int]) -> None:
        """Replace all scores at once.

        Supplied values are trusted: neither the budget nor the zero floor is
        re-checked. Catalog attributes missing from ``scores`` fall back to the
        default score and names outside the catalog are dropped.

        Args:
            scores: Attribute name to score.
        """
        unknown = sorted(set(scores) - set(ATTRIBUTE_LIST))
        if unknown:
            logger.warning("Ignoring unknown attributes on load", attributes=unknown)

        replacement = default_attribute_scores()
        for attribute in ATTRIBUTE_LIST:
            if attribute in scores:
                replacement[attribute] = int(scores[attribute])
        self._scores = replacement

    def reset(self) -> None:
        """Restore every attribute to the default score."""
        self._scores = default_attribute_scores()

    def _require(self, attribute: str) -> None:
        if attribute not in self._scores:
            raise UnknownAttributeError(
                f"Unknown attribute: {attribute}",
                attribute_name=attribute,
            )

    def __repr__(self) -> str:
        return f"AttributeLedger({self._scores!r})"


__all__ = [
    "AttributeLedger",
    "default_attribute_scores",
]
