import logging
from typing import Optional

from src.recipe_finder.api_client import MealDBClient
from src.recipe_finder.errors import MealNotFoundError, RecipeServiceError
from src.recipe_finder.models import MealDetail, parse_detail

logger = logging.getLogger(__name__)


def load_meal_detail(meal_id: str, client: Optional[MealDBClient] = None) -> MealDetail:
    """Get full details for a meal"""
    client = client or MealDBClient()
    meals = client.lookup_by_id(meal_id)
    if not meals:
        logger.info("Meal %s not found", meal_id)
        raise MealNotFoundError()
    try:
        return parse_detail(meals[0])
    except (KeyError, TypeError) as e:
        logger.warning("Malformed detail for meal %s: %s", meal_id, e)
        raise RecipeServiceError("Failed to load details.") from e
