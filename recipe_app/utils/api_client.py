"""
Recipe API Client Module.

This module is the **single source of truth** for communication with the recipe
storage API. All HTTP calls go through functions in this module.

Key principles:
- One exception type per call, wrapping every requests/JSON failure
- Timeout taken from configuration on every request
- No Streamlit calls here; pages decide what the user sees on failure
"""

import logging
from typing import Any, Dict, List

import requests

from recipe_app.config import ApiConfig

logger = logging.getLogger(__name__)


class RecipeFetchError(Exception):
    """Raised when the recipe collection cannot be fetched or parsed."""


class RecipeCreateError(Exception):
    """Raised when a new recipe cannot be stored."""


def fetch_recipes() -> List[Dict[str, Any]]:
    """
    Fetch the full recipe collection with a single GET.

    Returns:
        List of recipe records exactly as returned by the API.

    Raises:
        RecipeFetchError: On timeout, connection error, non-2xx response,
            invalid JSON, or a JSON body that is not a list.
    """
    url = ApiConfig.get_recipes_url()
    logger.debug("Fetching recipes from %s", url)
    try:
        response = requests.get(url, timeout=ApiConfig.get_timeout())
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        raise RecipeFetchError(f"Request to {url} timed out") from e
    except requests.exceptions.ConnectionError as e:
        raise RecipeFetchError(f"Could not connect to {url}") from e
    except requests.exceptions.HTTPError as e:
        raise RecipeFetchError(f"API returned an error: {e.response.status_code}") from e
    except requests.exceptions.JSONDecodeError as e:
        raise RecipeFetchError("API returned invalid JSON") from e
    except requests.exceptions.RequestException as e:
        raise RecipeFetchError(f"Request failed: {e}") from e

    if not isinstance(data, list):
        raise RecipeFetchError(f"Expected a list of recipes, got {type(data).__name__}")
    return data


def create_recipe(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Store a new recipe with a single POST to the collection endpoint.

    Args:
        payload: Recipe record in API shape (at least `recipeName`)

    Returns:
        The stored record as echoed by the API (an empty dict if the body is empty).

    Raises:
        RecipeCreateError: On any transport, HTTP or JSON failure.
    """
    url = ApiConfig.get_recipes_url()
    try:
        response = requests.post(url, json=payload, timeout=ApiConfig.get_timeout())
        response.raise_for_status()
        if not response.content:
            return {}
        data = response.json()
    except requests.exceptions.HTTPError as e:
        raise RecipeCreateError(f"API returned an error: {e.response.status_code}") from e
    except requests.exceptions.JSONDecodeError as e:
        raise RecipeCreateError("API returned invalid JSON") from e
    except requests.exceptions.RequestException as e:
        raise RecipeCreateError(f"Request failed: {e}") from e

    logger.info("Created recipe %r", payload.get("recipeName"))
    return data if isinstance(data, dict) else {}
