"""Wire-level character snapshot exchanged with the remote store.

The remote store answers a fetch with the character nested under a
``body`` key and accepts saves as the flat object::

    GET  -> {"body": {"attributes": {...}, "skills": {...}}, ...}
    POST <- {"attributes": {...}, "skills": {...}}

Only the shape is checked here. Scores and ranks are trusted as-is: no
budget or sign validation is performed on data coming back from the store.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from charsheet.core.exceptions import SyncLoadError


class CharacterSnapshot(BaseModel):
    """Full snapshot of both ledgers.

    Attributes:
        attributes: Attribute name to score.
        skills: Skill name to rank.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    attributes: dict[str, int] = Field(description="Attribute name to score")
    skills: dict[str, int] = Field(description="Skill name to rank")

    @classmethod
    def from_wire(cls, payload: Any) -> Self:
        """Build a snapshot from a fetch response body.

        Args:
            payload: Decoded JSON returned by the remote store.

        Returns:
            The parsed snapshot.

        Raises:
            SyncLoadError: If the payload has no usable ``body``, or the body
                lacks non-empty ``attributes`` and ``skills`` mappings.
        """
        body = payload.get("body") if isinstance(payload, dict) else None
        if not isinstance(body, dict):
            raise SyncLoadError("Character payload has no body")

        if not body.get("attributes") or not body.get("skills"):
            raise SyncLoadError(
                "Character payload is missing attributes or skills",
                details={"keys": sorted(body)},
            )

        try:
            return cls.model_validate(
                {"attributes": body["attributes"], "skills": body["skills"]}
            )
        except PydanticValidationError as exc:
            raise SyncLoadError(
                "Character payload is malformed",
                details={"errors": exc.error_count()},
            ) from exc

    def to_wire(self) -> dict[str, dict[str, int]]:
        """Serialize to the flat shape the store accepts on save."""
        return {
            "attributes": dict(self.attributes),
            "skills": dict(self.skills),
        }


__all__ = [
    "CharacterSnapshot",
]
