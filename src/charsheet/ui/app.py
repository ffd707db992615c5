"""Character Sheet - Main Application Entry Point.

Single-page Streamlit app: skill check, attributes, classes, skills and
save. Run with:

    streamlit run src/charsheet/ui/app.py
"""

from __future__ import annotations

import streamlit as st

from charsheet.core.config import get_settings
from charsheet.core.logging import configure_from_settings
from charsheet.ui.components import (
    render_attributes,
    render_classes,
    render_save,
    render_skill_check,
    render_skills,
)
from charsheet.ui.state import init_session_state


# =============================================================================
# Main Page
# =============================================================================


def main() -> None:
    """Render the character sheet page."""
    settings = get_settings()

    st.set_page_config(
        page_title=settings.ui.page_title,
        layout=settings.ui.layout,
    )
    configure_from_settings(settings)
    init_session_state()

    st.title(settings.app_name)

    render_skill_check()
    st.divider()
    render_attributes()
    st.divider()
    render_classes()
    st.divider()
    render_skills()
    st.divider()
    render_save()


main()
