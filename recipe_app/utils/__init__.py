"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Recipe API communication
- recipes: Recipe model, filtering and sorting
- state: Home page session state and transitions
- navigation: Page switching helpers
- i18n: Translation lookup
"""
