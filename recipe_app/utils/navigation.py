"""
Navigation helpers shared by the home page and the secondary pages.

Page paths are relative to the entry script (recipe_app/app.py), as expected by
st.switch_page.
"""

from typing import Optional

import streamlit as st

HOME_PAGE = "app.py"
RECIPE_DETAIL_PAGE = "pages/01_📖_Recipe_Detail.py"
ADD_RECIPE_PAGE = "pages/02_✨_Add_Recipe.py"

SELECTED_RECIPE_KEY = "selected_recipe_id"


def go_to_recipe(recipe_id: str) -> None:
    """Open the detail page for `recipe_id`."""
    st.session_state[SELECTED_RECIPE_KEY] = str(recipe_id)
    st.switch_page(RECIPE_DETAIL_PAGE)


def go_to_add_recipe() -> None:
    st.switch_page(ADD_RECIPE_PAGE)


def go_home() -> None:
    st.switch_page(HOME_PAGE)


def get_selected_recipe_id() -> Optional[str]:
    return st.session_state.get(SELECTED_RECIPE_KEY)
