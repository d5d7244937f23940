import json
import logging
from typing import Dict, Iterable, List, Optional

from src.recipe_finder.models import MealSummary

logger = logging.getLogger(__name__)

FAVORITES_KEY = "favorites"


def _safe_json_loads(data) -> list:
    if isinstance(data, list):
        return data
    try:
        loaded = json.loads(data) if data else []
    except (json.JSONDecodeError, TypeError):
        logger.warning("Discarding unreadable stored value")
        return []
    return loaded if isinstance(loaded, list) else []


class InMemoryStorage:
    """Dict-backed stand-in for the browser's localStorage."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items = dict(items or {})

    def getItem(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def setItem(self, key: str, value: str) -> None:
        self.items[key] = value


class FavoritesStore:
    """Favorites persisted as one JSON array under a single storage key.

    `storage` is anything with `getItem`/`setItem`, e.g.
    `streamlit_local_storage.LocalStorage` or InMemoryStorage.
    """

    def __init__(self, storage, key: str = FAVORITES_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> List[MealSummary]:
        try:
            raw = self.storage.getItem(self.key)
        except Exception:
            logger.warning("Could not read %r from storage", self.key, exc_info=True)
            return []
        favorites = []
        seen = set()
        for record in _safe_json_loads(raw):
            meal = MealSummary.from_dict(record)
            if meal is None or meal.id in seen:
                continue
            seen.add(meal.id)
            favorites.append(meal)
        return favorites

    def has_value(self) -> bool:
        """True once the backend holds something under our key."""
        try:
            return self.storage.getItem(self.key) is not None
        except Exception:
            return False

    def save(self, favorites: Iterable[MealSummary]) -> None:
        self.storage.setItem(self.key, json.dumps([f.to_dict() for f in favorites]))
