"""Pytest configuration and shared fixtures.

This module provides common fixtures for the character sheet test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import pytest
import pytest_asyncio


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from charsheet.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "CHARSHEET_DEBUG": "true",
        "CHARSHEET_LOG_LEVEL": "DEBUG",
        "CHARSHEET_SYNC_API_BASE_URL": "https://store.test/api/",
        "CHARSHEET_SYNC_USERNAME": "tester",
        "CHARSHEET_SYNC_TIMEOUT_SECONDS": "2.5",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def sync_settings() -> Any:
    """Sync settings pointing at the fake character store."""
    from charsheet.core.config import SyncSettings

    return SyncSettings(api_base_url="https://store.test/api", username="tester")


# =============================================================================
# Rules Engine Fixtures
# =============================================================================


@pytest.fixture
def attribute_ledger() -> Any:
    """A fresh attribute ledger with every score at 10."""
    from charsheet.engine.attributes import AttributeLedger

    return AttributeLedger()


@pytest.fixture
def skill_ledger(attribute_ledger: Any) -> Any:
    """A fresh skill ledger tied to ``attribute_ledger``."""
    from charsheet.engine.skills import SkillLedger

    return SkillLedger(attribute_ledger)


@pytest.fixture
def sheet() -> Any:
    """A default character sheet whose d20 always rolls 15."""
    from charsheet.engine.dice import FixedRandomSource
    from charsheet.engine.sheet import CharacterSheet

    return CharacterSheet(random_source=FixedRandomSource([15] * 10))


@pytest.fixture
def sample_wire_payload() -> dict[str, Any]:
    """A fetch response body as returned by the remote store."""
    from charsheet.engine.skills import default_skill_ranks

    skills = default_skill_ranks()
    skills.update({"Arcana": 3, "Stealth": 2})
    return {
        "statusCode": 200,
        "body": {
            "attributes": {
                "Strength": 12,
                "Dexterity": 11,
                "Constitution": 10,
                "Intelligence": 14,
                "Wisdom": 9,
                "Charisma": 8,
            },
            "skills": skills,
        },
    }


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def make_gateway(sync_settings: Any) -> AsyncGenerator[Callable[..., Any], None]:
    """Build a gateway whose client is served by an ``httpx.MockTransport``.

    The returned factory takes a request handler and returns
    ``(gateway, requests)``, where ``requests`` collects every request sent.
    Every client the factory creates is closed on teardown.
    """
    from charsheet.sync.gateway import CharacterSyncGateway

    clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> tuple[Any, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        clients.append(client)
        return CharacterSyncGateway(sync_settings, client=client), requests

    yield factory

    for client in clients:
        await client.aclose()

