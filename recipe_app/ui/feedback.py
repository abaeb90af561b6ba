"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, and loading indicators
across all pages in a consistent manner.
"""

from contextlib import contextmanager
from typing import Optional

import streamlit as st

from recipe_app.utils.i18n import Translator, t

NO_RESULTS_SUFFIX = "에 대한 검색 결과가 없습니다."
NO_RECIPES_MESSAGE = "표시할 레시피가 없습니다."


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def empty_state_message(search_term: Optional[str], translate: Translator = t) -> str:
    """
    Text shown when the derived recipe list is empty.

    A non-empty search term gets the search-specific variant, otherwise the
    generic "no recipes" message.
    """
    if search_term:
        return f'"{search_term}" {translate(NO_RESULTS_SUFFIX)}'
    return translate(NO_RECIPES_MESSAGE)


def show_empty_state(message: str) -> None:
    """Display a centered empty-state message."""
    st.markdown(
        f'<p class="rh-empty-state">📭 {message}</p>',
        unsafe_allow_html=True,
    )


@contextmanager
def working_spinner(label: str):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner(t("맛있는 레시피를 불러오는 중...")):
            state.load(fetch_recipes)
    """
    with st.spinner(label):
        yield
