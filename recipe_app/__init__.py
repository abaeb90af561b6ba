"""Recipe Home - Streamlit front end for browsing and sharing recipes."""

__version__ = "0.1.0"
