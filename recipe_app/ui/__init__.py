"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Recipe Home Streamlit app.
"""

from recipe_app.ui.cards import random_recipe_panel, recipe_card
from recipe_app.ui.feedback import empty_state_message, show_empty_state, show_error, working_spinner
from recipe_app.ui.layout import card, page_header, section
from recipe_app.ui.styles import load_global_styles

__all__ = [
    "card",
    "empty_state_message",
    "load_global_styles",
    "page_header",
    "random_recipe_panel",
    "recipe_card",
    "section",
    "show_empty_state",
    "show_error",
    "working_spinner",
]
