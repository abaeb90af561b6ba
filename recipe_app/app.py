"""
Recipe Home - Streamlit Frontend Main Entry Point.

This is the home page: it loads the recipe collection once per session, shows a
randomly chosen featured recipe and tip of the day, and renders a searchable,
sortable grid of recipe cards.

Run with:
    streamlit run recipe_app/app.py

Note: Secondary pages (recipe detail, add recipe) live in the `pages/` folder and
are reached through recipe_app.utils.navigation.
"""

import sys
from pathlib import Path

# Add project root to path so `recipe_app` imports work when run as a script
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_app.config import configure_logging

import streamlit as st

from recipe_app.ui import (
    empty_state_message,
    load_global_styles,
    page_header,
    random_recipe_panel,
    recipe_card,
    section,
    show_empty_state,
    working_spinner,
)
from recipe_app.utils.api_client import fetch_recipes
from recipe_app.utils.i18n import t
from recipe_app.utils.navigation import go_to_add_recipe, go_to_recipe
from recipe_app.utils.recipes import SORT_OPTIONS
from recipe_app.utils.state import get_home_state

GRID_COLUMNS = 4

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title=t("오늘 뭐 먹지?"),
    page_icon="🍳",
    layout="wide",
)

load_global_styles()

state = get_home_state()

# Loading: only the status message is shown while the fetch is in flight
if not state.loaded:
    with working_spinner(t("맛있는 레시피를 불러오는 중...")):
        state.load(fetch_recipes)

page_header(
    t("오늘 뭐 먹지?"),
    subtitle=t("버튼을 눌러 오늘의 특별한 레시피를 추천받아보세요!"),
)

if state.tip:
    st.markdown(f'<div class="rh-tip">💡 {t("오늘의 팁")}: {state.tip}</div>', unsafe_allow_html=True)

if state.featured is not None:
    featured = state.featured
    random_recipe_panel(featured, on_click=lambda: go_to_recipe(featured.id))

# Action buttons
_, randomize_col, add_col, _ = st.columns([1, 2, 2, 1], gap="medium")
with randomize_col:
    if st.button(f"🔄 {t('다른 레시피 추천!')}", width="stretch", type="primary"):
        state.randomize()
        st.rerun()
with add_col:
    if st.button(f"✨ {t('레시피 추가하기')}", width="stretch"):
        go_to_add_recipe()

st.divider()

# Search and sort controls
title_col, search_col, sort_col = st.columns([2, 1, 1], gap="medium")
with title_col:
    section(t("모든 레시피"))
with search_col:
    search_term = st.text_input(
        t("검색"),
        value=state.search_term,
        placeholder=t("레시피 이름으로 검색..."),
        label_visibility="collapsed",
        key="recipe_search",
    )
    state.set_search(search_term)
with sort_col:
    sort_keys = [key for key, _ in SORT_OPTIONS]
    sort_labels = dict(SORT_OPTIONS)
    sort_order = st.selectbox(
        t("정렬"),
        options=sort_keys,
        index=sort_keys.index(state.sort_order) if state.sort_order in sort_keys else 0,
        format_func=lambda key: t(sort_labels[key]),
        label_visibility="collapsed",
        key="recipe_sort",
    )
    state.set_sort(sort_order)

recipes = state.view()

if recipes:
    cols = st.columns(GRID_COLUMNS, gap="large")
    for idx, recipe in enumerate(recipes):
        with cols[idx % GRID_COLUMNS]:
            recipe_card(
                recipe,
                on_click=lambda recipe_id=recipe.id: go_to_recipe(recipe_id),
                key=f"{idx}_{recipe.id}",
            )
else:
    show_empty_state(empty_state_message(state.search_term))
