"""
Global CSS Styling for Recipe Home.

This module provides load_global_styles() to inject consistent styling
across all pages.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Home app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Sets heading and header styles
    - Styles buttons as rounded pills
    - Centers empty-state and tip text
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700;800&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 700 !important;
            letter-spacing: 0.02em !important;
        }

        .rh-page-header {
            text-align: center;
            margin-bottom: 2rem;
        }

        .rh-page-header h1 {
            font-size: 2.75rem !important;
            font-weight: 800 !important;
        }

        .rh-page-header .subtitle {
            color: #6b7280;
            font-size: 1.1rem;
            margin-top: 0.5rem;
        }

        .rh-section-caption {
            color: #6b7280;
            font-size: 0.95rem;
        }

        .rh-tip {
            text-align: center;
            color: #9a3412;
            background-color: #fff7ed;
            border-radius: 999px;
            padding: 0.4rem 1rem;
            margin: 0 auto 1.5rem auto;
            max-width: 40rem;
        }

        .rh-empty-state {
            text-align: center;
            color: #6b7280;
            padding: 4rem 0;
        }

        .stButton > button {
            border-radius: 999px !important;
            font-weight: 700 !important;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
