"""Tests for the wire-level character snapshot."""

from __future__ import annotations

from typing import Any

import pytest

from charsheet.core.exceptions import SyncLoadError
from charsheet.models.character import CharacterSnapshot


class TestFromWire:
    """Tests for parsing fetch responses."""

    def test_nested_body(self, sample_wire_payload: dict[str, Any]) -> None:
        """Test attributes and skills are read from the nested body."""
        snapshot = CharacterSnapshot.from_wire(sample_wire_payload)

        assert snapshot.attributes == sample_wire_payload["body"]["attributes"]
        assert snapshot.skills == sample_wire_payload["body"]["skills"]

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            {},
            {"body": None},
            {"body": "character"},
            {"body": {"attributes": {"Strength": 10}}},
            {"body": {"skills": {"Arcana": 1}}},
            {"body": {"attributes": {}, "skills": {"Arcana": 1}}},
        ],
    )
    def test_missing_shape_rejected(self, payload: Any) -> None:
        """Test payloads without a body holding attributes and skills are rejected."""
        with pytest.raises(SyncLoadError):
            CharacterSnapshot.from_wire(payload)

    def test_non_integer_values_rejected(self) -> None:
        """Test values that cannot be integers are rejected."""
        payload = {"body": {"attributes": {"Strength": "strong"}, "skills": {"Arcana": 1}}}

        with pytest.raises(SyncLoadError):
            CharacterSnapshot.from_wire(payload)


class TestToWire:
    """Tests for the save shape."""

    def test_flat_shape(self) -> None:
        """Test saves are posted as a flat attributes/skills object."""
        snapshot = CharacterSnapshot(attributes={"Strength": 12}, skills={"Athletics": 1})

        assert snapshot.to_wire() == {
            "attributes": {"Strength": 12},
            "skills": {"Athletics": 1},
        }

    def test_save_payload_reloads_identically(self, sample_wire_payload: dict[str, Any]) -> None:
        """Test a saved payload wrapped as the store returns it parses back unchanged."""
        original = CharacterSnapshot.from_wire(sample_wire_payload)

        reloaded = CharacterSnapshot.from_wire({"body": original.to_wire()})

        assert reloaded == original
