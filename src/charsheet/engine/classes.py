"""Class eligibility evaluation against attribute minimums."""

from __future__ import annotations

from collections.abc import Mapping

from charsheet.core.exceptions import UnknownClassError
from charsheet.models.catalog import CLASS_LIST


class ClassEligibilityEvaluator:
    """Decide which classes a set of attribute scores qualifies for.

    Example:
        >>> evaluator = ClassEligibilityEvaluator()
        >>> evaluator.is_eligible("Barbarian", AttributeLedger().scores)
        False
        >>> evaluator.requirements_of("Barbarian")[0]
        ('Strength', 14)
    """

    def __init__(self, catalog: Mapping[str, Mapping[str, int]] | None = None) -> None:
        """Initialize the evaluator.

        Args:
            catalog: Class name to attribute minimums; defaults to ``CLASS_LIST``.
        """
        self._catalog = CLASS_LIST if catalog is None else catalog

    def class_names(self) -> list[str]:
        """Class names in catalog order."""
        return list(self._catalog)

    def requirements_of(self, class_name: str) -> list[tuple[str, int]]:
        """Return ``(attribute, minimum)`` pairs in declaration order.

        Raises:
            UnknownClassError: If the class is not in the catalog.
        """
        return list(self._lookup(class_name).items())

    def is_eligible(self, class_name: str, scores: Mapping[str, int]) -> bool:
        """Check whether every requirement of a class is met.

        An attribute absent from ``scores`` counts as not meeting its minimum.

        Args:
            class_name: Name of the class to check.
            scores: Attribute name to current score.

        Returns:
            True iff each required attribute's score is at least its minimum.

        Raises:
            UnknownClassError: If the class is not in the catalog.
        """
        return all(
            attribute in scores and scores[attribute] >= minimum
            for attribute, minimum in self._lookup(class_name).items()
        )

    def eligible_classes(self, scores: Mapping[str, int]) -> list[str]:
        """Names of all classes the scores qualify for, in catalog order."""
        return [name for name in self._catalog if self.is_eligible(name, scores)]

    def _lookup(self, class_name: str) -> Mapping[str, int]:
        try:
            return self._catalog[class_name]
        except KeyError:
            raise UnknownClassError(
                f"Unknown class: {class_name}",
                class_name=class_name,
            ) from None


__all__ = [
    "ClassEligibilityEvaluator",
]
