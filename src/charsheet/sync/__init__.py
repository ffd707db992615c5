"""Synchronization with the remote character store."""

from __future__ import annotations

from charsheet.sync.gateway import CharacterSyncGateway


__all__ = [
    "CharacterSyncGateway",
]
