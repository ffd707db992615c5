"""Render functions for the sections of the character sheet page.

Each section reads the session's ``CharacterSheet`` and routes user
actions back through the ledgers' budget-checked APIs via button
callbacks, so every rerun renders the post-action state.
"""

from __future__ import annotations

import streamlit as st

from charsheet.engine.checks import parse_difficulty
from charsheet.models.catalog import ATTRIBUTE_LIST, SKILL_LIST
from charsheet.ui.state import get_sheet, roll_check, save_character, select_class


SKILL_NAMES = [skill.name for skill in SKILL_LIST]


# =============================================================================
# Skill Check
# =============================================================================


def render_skill_check() -> None:
    """Skill selector, difficulty input, roll button and last result."""
    sheet = get_sheet()
    session = sheet.check_session

    st.header("Skill Check")
    col_skill, col_dc, col_roll = st.columns([3, 1, 1])

    st.session_state.setdefault("check_skill", session.selected_skill)
    st.session_state.setdefault("check_dc", str(session.difficulty))

    session.selected_skill = col_skill.selectbox("Skill", SKILL_NAMES, key="check_skill")
    dc_text = col_dc.text_input("DC", key="check_dc")
    session.difficulty = parse_difficulty(dc_text)

    col_roll.button("Roll", key="check_roll", on_click=roll_check)

    if session.last_roll is not None:
        st.markdown(f"Roll: **{session.last_roll}**")
        st.markdown("Result: Successful" if session.last_success else "Result: Fail")


# =============================================================================
# Attributes
# =============================================================================


def render_attributes() -> None:
    """Attribute scores with modifiers and +/- controls."""
    sheet = get_sheet()

    st.header("Attributes")
    st.caption(f"Points assigned: {sheet.attributes.total_assigned()}")
    for attribute in ATTRIBUTE_LIST:
        col_label, col_inc, col_dec = st.columns([6, 1, 1])
        col_label.markdown(
            f"{attribute}: **{sheet.attributes.score(attribute)}** "
            f"(Modifier: {sheet.attributes.modifier_for(attribute)})"
        )
        col_inc.button(
            "+", key=f"attr_inc_{attribute}",
            on_click=sheet.attributes.adjust, args=(attribute, 1),
        )
        col_dec.button(
            "-", key=f"attr_dec_{attribute}",
            on_click=sheet.attributes.adjust, args=(attribute, -1),
        )


# =============================================================================
# Classes
# =============================================================================


def render_classes() -> None:
    """Class list with eligible classes highlighted and a requirements view."""
    sheet = get_sheet()

    st.header("Classes")
    col_list, col_detail = st.columns(2)

    with col_list:
        for class_name in sheet.evaluator.class_names():
            label = f":red[{class_name}]" if sheet.is_eligible(class_name) else class_name
            st.button(
                label, key=f"class_{class_name}",
                on_click=select_class, args=(class_name,),
            )

    selected = st.session_state.selected_class
    if selected:
        with col_detail:
            st.subheader(f"{selected} Minimum Requirements:")
            for attribute, minimum in sheet.evaluator.requirements_of(selected):
                st.markdown(f"{attribute}: {minimum}")
            st.button(
                "Close Requirements View", key="class_close",
                on_click=select_class, args=(None,),
            )


# =============================================================================
# Skills
# =============================================================================


def render_skills() -> None:
    """Skill ranks with governing modifiers, totals and +/- controls."""
    sheet = get_sheet()

    st.header("Skills")
    st.markdown(f"Total skill points available: **{sheet.skills.remaining_points()}**")
    for skill in SKILL_LIST:
        col_label, col_inc, col_dec, col_total = st.columns([6, 1, 1, 2])
        col_label.markdown(
            f"{skill.name}: points: {sheet.skills.rank(skill.name)} "
            f"(Modifier: {skill.attribute_modifier.value}): "
            f"{sheet.skills.attribute_modifier(skill.name)}"
        )
        col_inc.button(
            "+", key=f"skill_inc_{skill.name}",
            on_click=sheet.skills.adjust, args=(skill.name, 1),
        )
        col_dec.button(
            "-", key=f"skill_dec_{skill.name}",
            on_click=sheet.skills.adjust, args=(skill.name, -1),
        )
        col_total.markdown(f"total: {sheet.skills.skill_total(skill.name)}")


# =============================================================================
# Save
# =============================================================================


def render_save() -> None:
    """Save button and the notification from the last save."""
    message = st.session_state.sheet_message
    if message:
        kind, text = message
        if kind == "success":
            st.success(text)
        else:
            st.error(text)
        st.session_state.sheet_message = None

    st.button("Save Character", key="save_character", on_click=save_character)


__all__ = [
    "render_skill_check",
    "render_attributes",
    "render_classes",
    "render_skills",
    "render_save",
]
