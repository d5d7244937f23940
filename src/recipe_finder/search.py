import logging
from enum import Enum
from typing import List, Optional

from src.recipe_finder.api_client import MealDBClient
from src.recipe_finder.errors import EmptyQueryError, NoResultsError, RecipeServiceError
from src.recipe_finder.models import MealSummary, parse_summary

logger = logging.getLogger(__name__)


class SearchMode(str, Enum):
    INGREDIENT = "ingredient"
    NAME = "name"
    CATEGORY = "category"

    @property
    def label(self) -> str:
        return {"ingredient": "Ingredient", "name": "Meal Name", "category": "Category"}[self.value]

    @classmethod
    def parse(cls, value) -> "SearchMode":
        """Resolve a mode, falling back to ingredient for anything unknown."""
        if isinstance(value, cls):
            return value
        value = str(value or "").strip().lower()
        if value == "meal":
            return cls.NAME
        try:
            return cls(value)
        except ValueError:
            return cls.INGREDIENT


def search_meals(query: str, mode=SearchMode.INGREDIENT,
                 client: Optional[MealDBClient] = None) -> List[MealSummary]:
    query = (query or "").strip()
    if not query:
        raise EmptyQueryError()

    client = client or MealDBClient()
    mode = SearchMode.parse(mode)
    fetch = {
        SearchMode.INGREDIENT: client.search_by_ingredient,
        SearchMode.NAME: client.search_by_name,
        SearchMode.CATEGORY: client.search_by_category,
    }[mode]

    meals = fetch(query)
    if not meals:
        logger.info("No %s matches for %r", mode.value, query)
        raise NoResultsError()
    try:
        return [parse_summary(m) for m in meals]
    except (KeyError, TypeError) as e:
        logger.warning("Malformed search response for %r: %s", query, e)
        raise RecipeServiceError() from e
