"""
Recipe card components.

`recipe_card` renders one grid item, `random_recipe_panel` the featured recipe
above the grid. Both take the Recipe to show and a click callback; the callback
runs during the rerun in which the card's button was pressed.
"""

from typing import Callable, Optional

import streamlit as st

from recipe_app.ui.layout import card
from recipe_app.utils.i18n import t
from recipe_app.utils.recipes import Recipe

IMAGE_FIELDS = ("image", "imageUrl", "image_url", "thumbnail")


def recipe_image(recipe: Recipe) -> Optional[str]:
    """First non-empty image URL among the known image fields."""
    for name in IMAGE_FIELDS:
        value = recipe.extra.get(name)
        if value:
            return str(value)
    return None


def _summary(recipe: Recipe, limit: int = 100) -> Optional[str]:
    description = recipe.extra.get("description")
    if not description:
        return None
    description = str(description)
    return description[:limit] + "..." if len(description) > limit else description


def recipe_card(recipe: Recipe, on_click: Callable[[], None], key: str) -> None:
    """Render a compact recipe card for the grid. `key` must be unique on the page."""
    with card():
        image = recipe_image(recipe)
        if image:
            st.image(image, width="stretch")
        st.markdown(f"**{recipe.recipe_name}**")
        summary = _summary(recipe)
        if summary:
            st.caption(summary)
        if st.button(t("레시피 보기"), key=f"recipe_card_{key}", width="stretch"):
            on_click()


def random_recipe_panel(recipe: Recipe, on_click: Callable[[], None]) -> None:
    """Render the featured recipe panel."""
    with card(f"🍽️ {t('오늘의 추천 레시피')}"):
        image_col, text_col = st.columns([1, 2], gap="large")
        with image_col:
            image = recipe_image(recipe)
            if image:
                st.image(image, width="stretch")
            else:
                st.markdown("# 🍲")
        with text_col:
            st.markdown(f"## {recipe.recipe_name}")
            summary = _summary(recipe, limit=240)
            if summary:
                st.write(summary)
            if st.button(t("레시피 보기"), key="featured_recipe_view", type="primary"):
                on_click()
