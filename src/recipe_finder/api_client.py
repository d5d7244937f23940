import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import requests
from requests.exceptions import RequestException

from src.recipe_finder.config import DEFAULT_BASE_URL
from src.recipe_finder.errors import RecipeServiceError

logger = logging.getLogger(__name__)


class MealDBClient:
    BASE_URL = DEFAULT_BASE_URL
    TIMEOUT = 10

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout if timeout is not None else self.TIMEOUT

    def search_by_ingredient(self, ingredient: str) -> Optional[List[Dict]]:
        return self._get_meals(f"filter.php?i={quote(ingredient, safe='')}")

    def search_by_name(self, name: str) -> Optional[List[Dict]]:
        return self._get_meals(f"search.php?s={quote(name, safe='')}")

    def search_by_category(self, category: str) -> Optional[List[Dict]]:
        return self._get_meals(f"filter.php?c={quote(category, safe='')}")

    def lookup_by_id(self, meal_id: str) -> Optional[List[Dict]]:
        return self._get_meals(
            f"lookup.php?i={quote(str(meal_id), safe='')}",
            error_message="Failed to load details.",
        )

    def _get_meals(self, path: str, error_message: Optional[str] = None) -> Optional[List[Dict]]:
        """GET `path` and return the body's `meals` field.

        `None` means the API had no match. Any transport, HTTP or JSON
        failure is raised as RecipeServiceError.
        """
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            response = requests.get(url, timeout=self.timeout)
            if not response.ok:
                logger.warning("%s answered %s", url, response.status_code)
                raise RecipeServiceError(error_message)
            body = response.json()
        except (RequestException, ValueError) as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise RecipeServiceError(error_message) from e
        if not isinstance(body, dict):
            logger.warning("Unexpected body from %s: %r", url, body)
            raise RecipeServiceError(error_message)
        return body.get("meals")
