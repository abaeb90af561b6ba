"""
Home Page State Management Module.

The home page owns one HomePageState per browser session, stored in
st.session_state. It holds the loaded collection, the featured recipe, the tip
of the day, the loading flags and the two user inputs (search text and sort key).
All changes go through its transition methods: load, randomize, set_search,
set_sort and unmount.

# NOTE: Streamlit reruns the page script on every interaction, so "mount" here
    means the lifetime of the state object in the session. The collection is
    fetched once per state; reset_home_state() starts a new one.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import streamlit as st

from recipe_app.utils.api_client import RecipeFetchError
from recipe_app.utils.i18n import Translator, t
from recipe_app.utils.recipes import (
    DEFAULT_SORT_ORDER,
    Recipe,
    derive_view,
    parse_recipes,
    sort_newest_first,
)

logger = logging.getLogger(__name__)

# Session state key for the home page state
HOME_STATE_KEY = "home_page_state"

DEFAULT_TIP = "오늘의 요리 팁을 확인해보세요!"
FETCH_FAILED_MESSAGE = "레시피 데이터를 불러오는 데 실패했습니다."

Fetcher = Callable[[], List[Dict[str, Any]]]


@dataclass
class HomePageState:
    """
    Page-scoped view state.

    Attributes:
        recipes: Loaded collection, newest first
        featured: Featured recipe, always an element of `recipes` when set
        tip: Tip of the day ("" until a non-empty collection is loaded)
        search_term: Current search text
        sort_order: Current sort key
        loading: True while the fetch is in flight
        loaded: True once the load finished (success or failure)
        mounted: False after unmount(); late load results are discarded
    """
    recipes: List[Recipe] = field(default_factory=list)
    featured: Optional[Recipe] = None
    tip: str = ""
    search_term: str = ""
    sort_order: str = DEFAULT_SORT_ORDER
    loading: bool = False
    loaded: bool = False
    mounted: bool = True

    def load(
        self,
        fetch: Fetcher,
        rng: Optional[random.Random] = None,
        translate: Translator = t,
    ) -> None:
        """
        Fetch the collection once and pick the featured recipe and tip.

        A fetch failure is logged and leaves the collection empty. Calling
        load() again after it finished does nothing.
        """
        if self.loaded or self.loading:
            return
        rng = rng or random.Random()
        self.loading = True
        try:
            records = fetch()
            recipes = sort_newest_first(parse_recipes(records))
            if not self.mounted:
                logger.debug("Discarding %d recipes loaded after unmount", len(recipes))
                return
            featured = None
            tip = self.tip
            if recipes:
                featured = recipes[rng.randrange(len(recipes))]
                tip = recipes[rng.randrange(len(recipes))].tip or translate(DEFAULT_TIP)
            self.recipes, self.featured, self.tip = recipes, featured, tip
            logger.info("Loaded %d recipes", len(recipes))
        except RecipeFetchError as e:
            logger.error("%s %s", translate(FETCH_FAILED_MESSAGE), e)
        finally:
            self.loading = False
            if self.mounted:
                self.loaded = True

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Pick a new featured recipe. No-op on an empty collection."""
        if not self.recipes:
            return
        rng = rng or random.Random()
        self.featured = self.recipes[rng.randrange(len(self.recipes))]

    def set_search(self, search_term: Optional[str]) -> None:
        self.search_term = search_term or ""
        logger.debug("Search term set to %r", self.search_term)

    def set_sort(self, sort_order: Optional[str]) -> None:
        self.sort_order = sort_order or DEFAULT_SORT_ORDER
        logger.debug("Sort order set to %r", self.sort_order)

    def unmount(self) -> None:
        self.mounted = False

    def view(self) -> List[Recipe]:
        """Filtered and sorted recipes for the current inputs."""
        return derive_view(self.recipes, self.search_term, self.sort_order)

    def find(self, recipe_id: Optional[str]) -> Optional[Recipe]:
        """Look up a loaded recipe by id."""
        if recipe_id is None:
            return None
        for recipe in self.recipes:
            if recipe.id == str(recipe_id):
                return recipe
        return None


def get_home_state() -> HomePageState:
    """
    Get the session's HomePageState, creating an empty one if needed.

    Call this at the start of any page that reads the loaded collection.
    """
    if HOME_STATE_KEY not in st.session_state:
        st.session_state[HOME_STATE_KEY] = HomePageState()
    return st.session_state[HOME_STATE_KEY]


def reset_home_state() -> None:
    """Detach the current state so the next home visit loads a fresh collection."""
    state = st.session_state.get(HOME_STATE_KEY)
    if state is not None:
        state.unmount()
    st.session_state[HOME_STATE_KEY] = HomePageState()
