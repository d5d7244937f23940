"""Session state for the recipe finder page.

The page keeps one AppState per browser session. Searches and detail
lookups each run through a begin/complete pair: `begin_*` bumps a sequence
number and marks the concern as loading, `complete_*` applies a response
only if it belongs to the latest request of that concern. Anything older is
dropped, so a slow first search can never overwrite a newer one.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from src.recipe_finder.details import load_meal_detail
from src.recipe_finder.errors import NoResultsError, RecipeFinderError
from src.recipe_finder.favorites import toggle_favorite
from src.recipe_finder.models import MealDetail, MealSummary
from src.recipe_finder.search import SearchMode, search_meals

logger = logging.getLogger(__name__)


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESULTS = "results"
    EMPTY = "empty"
    ERROR = "error"


class DetailStatus(str, Enum):
    NONE = "none"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass
class AppState:
    query: str = ""
    mode: SearchMode = SearchMode.INGREDIENT
    results: List[MealSummary] = field(default_factory=list)
    search_status: SearchStatus = SearchStatus.IDLE
    error_message: Optional[str] = None
    selected_meal: Optional[MealDetail] = None
    detail_status: DetailStatus = DetailStatus.NONE
    detail_error: Optional[str] = None
    favorites: List[MealSummary] = field(default_factory=list)
    favorites_loaded: bool = False
    dark_mode: bool = False
    search_seq: int = 0
    detail_seq: int = 0

    @property
    def is_loading(self) -> bool:
        return (self.search_status is SearchStatus.LOADING
                or self.detail_status is DetailStatus.LOADING)


def begin_search(state: AppState, query: str, mode) -> int:
    state.search_seq += 1
    state.query = query
    state.mode = SearchMode.parse(mode)
    state.search_status = SearchStatus.LOADING
    state.error_message = None
    return state.search_seq


def complete_search(state: AppState, seq: int, meals: Optional[List[MealSummary]] = None,
                    error: Optional[RecipeFinderError] = None) -> bool:
    """Apply a search outcome. Returns False if `seq` is stale."""
    if seq != state.search_seq:
        logger.debug("Dropping stale search response %s (latest %s)", seq, state.search_seq)
        return False
    if error is not None:
        state.results = []
        state.error_message = error.message
        state.search_status = (SearchStatus.EMPTY if isinstance(error, NoResultsError)
                               else SearchStatus.ERROR)
    else:
        state.results = list(meals or [])
        state.error_message = None
        state.search_status = SearchStatus.RESULTS if state.results else SearchStatus.EMPTY
    return True


def run_search(state: AppState, client, query: str, mode) -> None:
    seq = begin_search(state, query, mode)
    try:
        meals = search_meals(query, state.mode, client)
    except RecipeFinderError as e:
        complete_search(state, seq, error=e)
    else:
        complete_search(state, seq, meals=meals)


def begin_detail(state: AppState) -> int:
    state.detail_seq += 1
    state.selected_meal = None
    state.detail_error = None
    state.detail_status = DetailStatus.LOADING
    return state.detail_seq


def complete_detail(state: AppState, seq: int, meal: Optional[MealDetail] = None,
                    error: Optional[RecipeFinderError] = None) -> bool:
    if seq != state.detail_seq:
        logger.debug("Dropping stale detail response %s (latest %s)", seq, state.detail_seq)
        return False
    if error is not None:
        state.selected_meal = None
        state.detail_error = error.message
        state.detail_status = DetailStatus.ERROR
    else:
        state.selected_meal = meal
        state.detail_status = DetailStatus.LOADED
    return True


def open_meal_details(state: AppState, client, meal_id: str) -> None:
    seq = begin_detail(state)
    try:
        meal = load_meal_detail(meal_id, client)
    except RecipeFinderError as e:
        complete_detail(state, seq, error=e)
    else:
        complete_detail(state, seq, meal=meal)


def sync_favorites(state: AppState, store) -> None:
    """Read favorites from `store` until it has delivered a stored value.

    Browser storage answers a run or two after the session starts, so an
    empty first read is not final. After a stored value arrives, or after
    the first toggle, the in-memory list is authoritative.
    """
    if state.favorites_loaded:
        return
    favorites = store.load()
    if favorites or store.has_value():
        state.favorites = favorites
        state.favorites_loaded = True


def toggle_and_save(state: AppState, store, meal) -> None:
    """Toggle `meal` in the favorites and write the whole list back."""
    sync_favorites(state, store)
    if isinstance(meal, MealDetail):
        meal = meal.summary()
    state.favorites = toggle_favorite(state.favorites, meal)
    store.save(state.favorites)
    state.favorites_loaded = True


def initial_state(store, settings, client) -> AppState:
    """Fresh session: favorites from storage plus the default search."""
    state = AppState()
    sync_favorites(state, store)
    run_search(state, client, settings.default_query, settings.default_mode)
    return state
