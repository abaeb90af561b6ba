"""
Recipe Data Module.

This module holds the Recipe data model and the pure functions the home page uses
to derive what it shows: filtering by name, ordering by sort key, and the
newest-first default ordering applied right after a load.

Recipes come from the storage API as JSON records. Only `id`, `recipeName` and
`tip` are interpreted here; every other field is kept in `Recipe.extra` and
passed through untouched to the card renderers.

# NOTE: The `popularity` and `reviews` sort keys scale both sides of the id
    comparison by the same factor, so they order exactly like `latest` and
    `rating`. Kept as-is until product decides what those keys should rank by.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

SORT_LATEST = "latest"
SORT_POPULARITY = "popularity"
SORT_RATING = "rating"
SORT_REVIEWS = "reviews"

DEFAULT_SORT_ORDER = SORT_LATEST

# sort key -> (id weight, descending)
SORT_RULES: Dict[str, Tuple[int, bool]] = {
    SORT_LATEST: (1, True),
    SORT_POPULARITY: (2, True),
    SORT_RATING: (1, False),
    SORT_REVIEWS: (2, False),
}

# Display order for the sort selector, with the default-language labels
SORT_OPTIONS: List[Tuple[str, str]] = [
    (SORT_LATEST, "최신순"),
    (SORT_POPULARITY, "인기순"),
    (SORT_RATING, "평점순"),
    (SORT_REVIEWS, "리뷰 많은 순"),
]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Recipe:
    """
    Recipe data model.

    Attributes:
        id: String-encoded integer; identity and ordering key
        recipe_name: Display name, also the search key
        tip: Optional free-text cooking tip
        extra: All other fields of the API record (image, description, ...)
    """
    id: str
    recipe_name: str
    tip: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Recipe":
        """
        Build a Recipe from an API record.

        `id` is coerced to str (JSON servers often return it as a number) and a
        missing `recipeName` becomes an empty string.
        """
        extra = {k: v for k, v in data.items() if k not in ("id", "recipeName", "tip")}
        raw_id = data.get("id")
        tip = data.get("tip")
        return cls(
            id="" if raw_id is None else str(raw_id),
            recipe_name=str(data.get("recipeName") or ""),
            tip=None if tip is None else str(tip),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the record in its API shape."""
        data: Dict[str, Any] = dict(self.extra)
        data["id"] = self.id
        data["recipeName"] = self.recipe_name
        if self.tip is not None:
            data["tip"] = self.tip
        return data


def numeric_id(recipe: Recipe) -> int:
    """
    Integer value of the leading digits of `recipe.id`.

    "12" -> 12, "12abc" -> 12, "abc" -> 0.
    """
    match = _LEADING_INT.match(recipe.id)
    return int(match.group(1)) if match else 0


def parse_recipes(records: Iterable[Dict[str, Any]]) -> List[Recipe]:
    """Convert API records into Recipe objects, skipping non-dict entries."""
    return [Recipe.from_dict(r) for r in records if isinstance(r, dict)]


def sort_newest_first(recipes: Iterable[Recipe]) -> List[Recipe]:
    """Default ordering after a load: descending by numeric id (stable)."""
    return sorted(recipes, key=numeric_id, reverse=True)


def filter_recipes(recipes: Iterable[Recipe], search_term: Optional[str] = None) -> List[Recipe]:
    """
    Keep recipes whose name contains `search_term`, case-insensitively.

    An empty or None search term keeps everything.
    """
    if not search_term:
        return list(recipes)
    needle = search_term.lower()
    return [r for r in recipes if needle in r.recipe_name.lower()]


def sort_recipes(recipes: Iterable[Recipe], sort_order: Optional[str] = None) -> List[Recipe]:
    """
    Order recipes by sort key. Unknown keys order like `latest`.

    Python's sort is stable in both directions, so recipes with equal ids keep
    their relative order.
    """
    weight, descending = SORT_RULES.get(sort_order or DEFAULT_SORT_ORDER, SORT_RULES[DEFAULT_SORT_ORDER])
    return sorted(recipes, key=lambda r: numeric_id(r) * weight, reverse=descending)


def derive_view(
    recipes: Iterable[Recipe],
    search_term: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> List[Recipe]:
    """
    Compute the visible, ordered subset of the collection.

    Args:
        recipes: Loaded collection
        search_term: Case-insensitive substring matched against recipe names
        sort_order: One of SORT_RULES keys; anything else behaves as `latest`

    Returns:
        New list; the input is never modified.
    """
    return sort_recipes(filter_recipes(recipes, search_term), sort_order)


def split_lines(value: Any) -> List[str]:
    """Normalize a list field or a newline-separated string to non-empty lines."""
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [line.strip() for line in str(value).splitlines() if line.strip()]


def build_new_recipe_payload(
    name: str,
    description: str = "",
    tip: str = "",
    ingredients: str = "",
    steps: str = "",
) -> Optional[Dict[str, Any]]:
    """
    Build the API record for a new recipe from form input.

    Returns:
        Record dict, or None when the name is blank. The storage API assigns `id`.
    """
    name = (name or "").strip()
    if not name:
        return None
    payload: Dict[str, Any] = {"recipeName": name}
    if description and description.strip():
        payload["description"] = description.strip()
    if tip and tip.strip():
        payload["tip"] = tip.strip()
    payload["ingredients"] = split_lines(ingredients)
    payload["steps"] = split_lines(steps)
    return payload
