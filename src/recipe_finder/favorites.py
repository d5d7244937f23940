from typing import Iterable, List


def is_favorite(favorites: Iterable, meal_id: str) -> bool:
    return any(f.id == meal_id for f in favorites)


def toggle_favorite(favorites: List, meal) -> List:
    """Return a new list with `meal` removed if its id is present, appended otherwise."""
    if is_favorite(favorites, meal.id):
        return [f for f in favorites if f.id != meal.id]
    return [*favorites, meal]
