"""Session state management for the character sheet page.

Streamlit reruns the page script on every interaction, so the character
sheet and gateway live in ``st.session_state`` and are created once per
browser session.
"""

from __future__ import annotations

import asyncio
from uuid import uuid4

import streamlit as st

from charsheet.core.exceptions import SessionStateError
from charsheet.core.logging import bind_context, get_logger
from charsheet.engine.checks import SkillCheckResult, parse_difficulty
from charsheet.engine.sheet import CharacterSheet, SaveOutcome
from charsheet.sync.gateway import CharacterSyncGateway


logger = get_logger(__name__)


# =============================================================================
# Session State Management
# =============================================================================


def init_session_state() -> None:
    """Create the sheet and gateway and load the stored character, once."""
    if "session_id" not in st.session_state:
        st.session_state.session_id = uuid4().hex[:8]
    bind_context(session_id=st.session_state.session_id)

    if "gateway" not in st.session_state:
        st.session_state.gateway = CharacterSyncGateway()

    if "sheet" not in st.session_state:
        sheet = CharacterSheet()
        loaded = asyncio.run(sheet.load_from(st.session_state.gateway))
        logger.info("Character sheet initialized", loaded_from_store=loaded)
        st.session_state.sheet = sheet

    if "selected_class" not in st.session_state:
        st.session_state.selected_class = None

    if "sheet_message" not in st.session_state:
        st.session_state.sheet_message = None


def get_sheet() -> CharacterSheet:
    """Return the session's character sheet.

    Raises:
        SessionStateError: If ``init_session_state`` has not run.
    """
    sheet = st.session_state.get("sheet")
    if sheet is None:
        raise SessionStateError("Character sheet accessed before session init")
    return sheet


def get_gateway() -> CharacterSyncGateway:
    """Return the session's sync gateway.

    Raises:
        SessionStateError: If ``init_session_state`` has not run.
    """
    gateway = st.session_state.get("gateway")
    if gateway is None:
        raise SessionStateError("Sync gateway accessed before session init")
    return gateway


def save_character() -> SaveOutcome:
    """Save the sheet and queue the outcome for display on the next render."""
    outcome = asyncio.run(get_sheet().save_to(get_gateway()))
    st.session_state.sheet_message = ("success" if outcome.success else "error", outcome.message)
    return outcome


def roll_check() -> SkillCheckResult:
    """Roll the skill check with the skill and DC currently in the widgets.

    Button callbacks run before the script body, so the widget values are
    copied into the check session here rather than during rendering.
    """
    sheet = get_sheet()
    session = sheet.check_session
    session.selected_skill = st.session_state.check_skill
    session.difficulty = parse_difficulty(st.session_state.check_dc)
    return sheet.roll_skill_check()


def select_class(class_name: str | None) -> None:
    """Show (or with None, hide) the requirements of a class."""
    st.session_state.selected_class = class_name


__all__ = [
    "init_session_state",
    "get_sheet",
    "get_gateway",
    "save_character",
    "roll_check",
    "select_class",
]
