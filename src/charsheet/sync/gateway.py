"""Load and save the character against the remote character store.

Both operations are one-shot coroutines. Neither raises on remote
failure: ``load`` returns ``None`` so the caller can fall back to a fresh
character, and ``save`` returns ``False`` so the caller can tell the user.
Retries and backoff are not attempted.
"""

from __future__ import annotations

from typing import Any

import httpx

from charsheet.core.config import SyncSettings, get_settings
from charsheet.core.exceptions import SyncError, SyncLoadError, SyncSaveError
from charsheet.core.logging import get_logger
from charsheet.models.character import CharacterSnapshot


logger = get_logger(__name__)


class CharacterSyncGateway:
    """HTTP gateway to the remote character store.

    Example:
        >>> gateway = CharacterSyncGateway()
        >>> snapshot = await gateway.load()
        >>> if snapshot is not None:
        ...     await gateway.save(snapshot)
    """

    def __init__(
        self,
        settings: SyncSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            settings: Sync settings; defaults to the application settings.
            client: Optional pre-built client. When omitted a short-lived
                client is created per call.
        """
        self._settings = settings or get_settings().sync
        self._client = client

    @property
    def url(self) -> str:
        return self._settings.character_url

    async def load(self) -> CharacterSnapshot | None:
        """Fetch the stored character.

        Returns:
            The snapshot, or None if the store is unreachable, answers with
            an error status, or returns a payload without attributes and skills.
        """
        try:
            payload = await self._fetch()
            snapshot = CharacterSnapshot.from_wire(payload)
        except SyncLoadError as exc:
            logger.warning("Character load failed", url=self.url, error=exc.message, details=exc.details)
            return None

        logger.info(
            "Character loaded",
            url=self.url,
            attributes=len(snapshot.attributes),
            skills=len(snapshot.skills),
        )
        return snapshot

    async def save(self, snapshot: CharacterSnapshot) -> bool:
        """Post the full snapshot to the store.

        Returns:
            True if the store accepted the snapshot, False otherwise.
        """
        try:
            await self._post(snapshot.to_wire())
        except SyncSaveError as exc:
            logger.warning("Character save failed", url=self.url, error=exc.message, details=exc.details)
            return False

        logger.info("Character saved", url=self.url)
        return True

    async def _fetch(self) -> Any:
        try:
            response = await self._request("GET")
        except SyncError as exc:
            raise SyncLoadError(exc.message, details=exc.details) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise SyncLoadError(
                "Character store returned invalid JSON",
                url=self.url,
                status_code=response.status_code,
            ) from exc

    async def _post(self, body: dict[str, Any]) -> None:
        try:
            await self._request(
                "POST",
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except SyncError as exc:
            raise SyncSaveError(exc.message, details=exc.details) from exc

    async def _request(self, method: str, **kwargs: Any) -> httpx.Response:
        logger.debug("Character store request", method=method, url=self.url)
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, self.url, timeout=self._settings.timeout_seconds, **kwargs
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.request(
                        method, self.url, timeout=self._settings.timeout_seconds, **kwargs
                    )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise SyncError("Character store timed out", url=self.url) from exc
        except httpx.HTTPStatusError as exc:
            raise SyncError(
                f"Character store returned HTTP {exc.response.status_code}",
                url=self.url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise SyncError(f"Failed to reach character store: {exc}", url=self.url) from exc
        return response


__all__ = [
    "CharacterSyncGateway",
]
