"""Tests for class eligibility evaluation."""

from __future__ import annotations

import pytest

from charsheet.core.exceptions import UnknownClassError
from charsheet.engine.attributes import default_attribute_scores
from charsheet.engine.classes import ClassEligibilityEvaluator


@pytest.fixture
def evaluator() -> ClassEligibilityEvaluator:
    """Evaluator over a small custom catalog."""
    return ClassEligibilityEvaluator(
        {
            "Knight": {"Strength": 15, "Charisma": 11},
            "Scholar": {"Intelligence": 12},
        }
    )


class TestIsEligible:
    """Tests for per-class eligibility."""

    def test_one_point_short_is_ineligible(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test Strength 14 fails a Strength 15 requirement."""
        scores = default_attribute_scores() | {"Strength": 14, "Charisma": 11}

        assert evaluator.is_eligible("Knight", scores) is False

    def test_exact_minimum_is_eligible(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test Strength 15 meets a Strength 15 requirement."""
        scores = default_attribute_scores() | {"Strength": 15, "Charisma": 11}

        assert evaluator.is_eligible("Knight", scores) is True

    def test_every_requirement_must_hold(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test failing any one requirement makes the class ineligible."""
        scores = default_attribute_scores() | {"Strength": 18, "Charisma": 10}

        assert evaluator.is_eligible("Knight", scores) is False

    def test_missing_attribute_is_ineligible(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test an attribute absent from the scores does not count as met."""
        assert evaluator.is_eligible("Scholar", {"Strength": 18}) is False

    def test_unknown_class_raises(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test that a class outside the catalog fails fast."""
        with pytest.raises(UnknownClassError):
            evaluator.is_eligible("Paladin", default_attribute_scores())


class TestRequirementsOf:
    """Tests for requirement lookup."""

    def test_declaration_order(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test requirements are returned in catalog declaration order."""
        assert evaluator.requirements_of("Knight") == [("Strength", 15), ("Charisma", 11)]

    def test_unknown_class_raises(self, evaluator: ClassEligibilityEvaluator) -> None:
        """Test lookup of an unknown class fails fast."""
        with pytest.raises(UnknownClassError):
            evaluator.requirements_of("Paladin")


class TestDefaultCatalog:
    """Tests against the built-in class catalog."""

    def test_class_names(self) -> None:
        """Test the built-in classes in declaration order."""
        assert ClassEligibilityEvaluator().class_names() == ["Barbarian", "Wizard", "Bard"]

    def test_default_character_is_eligible_for_nothing(self) -> None:
        """Test all-10 scores miss every 14 requirement."""
        assert ClassEligibilityEvaluator().eligible_classes(default_attribute_scores()) == []

    def test_wizard_needs_intelligence(self) -> None:
        """Test Intelligence 14 unlocks Wizard only."""
        scores = default_attribute_scores() | {"Intelligence": 14}

        assert ClassEligibilityEvaluator().eligible_classes(scores) == ["Wizard"]

    def test_barbarian_requirements(self) -> None:
        """Test Barbarian requirements are listed Strength first."""
        requirements = ClassEligibilityEvaluator().requirements_of("Barbarian")

        assert requirements[0] == ("Strength", 14)
        assert len(requirements) == 6
