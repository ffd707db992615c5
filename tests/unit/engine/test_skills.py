"""Tests for the skill ledger."""

from __future__ import annotations

import pytest

from charsheet.core.exceptions import UnknownSkillError
from charsheet.engine.attributes import AttributeLedger
from charsheet.engine.skills import SkillLedger, default_skill_ranks
from charsheet.models.catalog import SKILL_LIST


def spend_all(ledger: SkillLedger, skill: str = "Arcana") -> None:
    """Spend every available point on one skill, one point at a time."""
    while ledger.adjust(skill, 1):
        pass


class TestSkillBudget:
    """Tests for available and spent points."""

    def test_available_points_at_int_ten(self, skill_ledger: SkillLedger) -> None:
        """Test Intelligence 10 grants 10 points."""
        assert skill_ledger.available_points() == 10

    def test_available_points_at_int_fourteen(
        self,
        attribute_ledger: AttributeLedger,
        skill_ledger: SkillLedger,
    ) -> None:
        """Test Intelligence 14 (modifier +2) grants 18 points."""
        attribute_ledger.adjust("Intelligence", 4)

        assert skill_ledger.available_points() == 18

    def test_available_points_tracks_live_intelligence(
        self,
        attribute_ledger: AttributeLedger,
        skill_ledger: SkillLedger,
    ) -> None:
        """Test the budget is recomputed after Intelligence drops."""
        attribute_ledger.adjust("Intelligence", -2)

        assert skill_ledger.available_points() == 6

    def test_spent_and_remaining(self, skill_ledger: SkillLedger) -> None:
        """Test spent and remaining points follow adjustments."""
        skill_ledger.adjust("Stealth", 1)
        skill_ledger.adjust("Stealth", 1)
        skill_ledger.adjust("History", 1)

        assert skill_ledger.spent_points() == 3
        assert skill_ledger.remaining_points() == 7


class TestSkillAdjust:
    """Tests for budget-checked skill adjustments."""

    def test_increase_rejected_when_budget_spent(self, skill_ledger: SkillLedger) -> None:
        """Test any positive adjust is rejected once spent equals available."""
        spend_all(skill_ledger)

        assert skill_ledger.spent_points() == skill_ledger.available_points()
        assert skill_ledger.adjust("Stealth", 1) is False
        assert skill_ledger.rank("Stealth") == 0

    def test_negative_rank_rejected(self, skill_ledger: SkillLedger) -> None:
        """Test a decrease below zero is rejected without change."""
        skill_ledger.adjust("Medicine", 1)

        assert skill_ledger.adjust("Medicine", -2) is False
        assert skill_ledger.rank("Medicine") == 1

    def test_decrease_allowed_when_overspent(
        self,
        attribute_ledger: AttributeLedger,
        skill_ledger: SkillLedger,
    ) -> None:
        """Test decreases apply even after Intelligence drops below what was spent."""
        spend_all(skill_ledger)
        attribute_ledger.adjust("Intelligence", -4)

        assert skill_ledger.remaining_points() < 0
        assert skill_ledger.adjust("Arcana", -1) is True
        assert skill_ledger.rank("Arcana") == 9

    def test_large_increase_gated_once_per_call(self, skill_ledger: SkillLedger) -> None:
        """Test the gate checks spent < available, not spent + delta.

        With one point left a +5 still passes, overshooting the budget.
        """
        for _ in range(9):
            skill_ledger.adjust("Arcana", 1)

        assert skill_ledger.adjust("Nature", 5) is True
        assert skill_ledger.spent_points() == 14
        assert skill_ledger.adjust("Nature", 1) is False

    def test_zero_delta_accepted(self, skill_ledger: SkillLedger) -> None:
        """Test a zero delta is a no-op that is accepted."""
        assert skill_ledger.adjust("Insight", 0) is True
        assert skill_ledger.rank("Insight") == 0

    def test_unknown_skill_raises(self, skill_ledger: SkillLedger) -> None:
        """Test that a skill outside the catalog fails fast."""
        with pytest.raises(UnknownSkillError):
            skill_ledger.adjust("Juggling", 1)


class TestSkillTotals:
    """Tests for per-skill totals."""

    def test_skill_total_includes_governing_modifier(
        self,
        attribute_ledger: AttributeLedger,
        skill_ledger: SkillLedger,
    ) -> None:
        """Test total is rank plus governing attribute modifier."""
        attribute_ledger.adjust("Strength", 4)
        skill_ledger.adjust("Athletics", 3)

        assert skill_ledger.attribute_modifier("Athletics") == 2
        assert skill_ledger.skill_total("Athletics") == 5

    def test_negative_modifier_total(
        self,
        attribute_ledger: AttributeLedger,
        skill_ledger: SkillLedger,
    ) -> None:
        """Test a low attribute drags the total below the rank."""
        attribute_ledger.adjust("Charisma", -3)

        assert skill_ledger.skill_total("Deception") == -2


class TestSkillLoad:
    """Tests for wholesale replacement."""

    def test_defaults_cover_catalog(self, skill_ledger: SkillLedger) -> None:
        """Test every catalog skill starts at rank zero."""
        assert skill_ledger.ranks == {skill.name: 0 for skill in SKILL_LIST}

    def test_load_trusts_ranks(self, skill_ledger: SkillLedger) -> None:
        """Test loaded ranks are not checked against the budget."""
        ranks = default_skill_ranks()
        ranks["Survival"] = 40

        skill_ledger.load(ranks)

        assert skill_ledger.rank("Survival") == 40
        assert skill_ledger.spent_points() == 40

    def test_load_fills_missing_and_drops_unknown(self, skill_ledger: SkillLedger) -> None:
        """Test missing catalog skills get rank zero and extras are dropped."""
        skill_ledger.load({"Stealth": 4, "Juggling": 2})

        assert skill_ledger.rank("Stealth") == 4
        assert skill_ledger.rank("Arcana") == 0
        assert "Juggling" not in skill_ledger.ranks

    def test_reset(self, skill_ledger: SkillLedger) -> None:
        """Test reset restores rank zero everywhere."""
        skill_ledger.adjust("Stealth", 2)
        skill_ledger.reset()

        assert skill_ledger.spent_points() == 0
