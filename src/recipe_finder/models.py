from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

INGREDIENT_SLOTS = 20


@dataclass(frozen=True)
class MealSummary:
    id: str
    name: str
    thumbnail_url: str = ""

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "thumbnail_url": self.thumbnail_url}

    @classmethod
    def from_dict(cls, data: dict) -> Optional["MealSummary"]:
        """Read a stored record; API-shaped records (`idMeal`...) are accepted too."""
        if not isinstance(data, dict):
            return None
        meal_id = data.get("id") or data.get("idMeal")
        if not meal_id:
            return None
        return cls(
            id=str(meal_id),
            name=data.get("name") or data.get("strMeal") or "",
            thumbnail_url=data.get("thumbnail_url") or data.get("strMealThumb") or "",
        )


@dataclass(frozen=True)
class MealDetail:
    id: str
    name: str
    thumbnail_url: str = ""
    category: str = ""
    area: str = ""
    instructions: str = ""
    ingredients: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    def summary(self) -> MealSummary:
        return MealSummary(id=self.id, name=self.name, thumbnail_url=self.thumbnail_url)


def _text(raw: Dict, key: str) -> str:
    value = raw.get(key)
    return value.strip() if isinstance(value, str) else ""


def parse_ingredients(raw: Dict) -> Tuple[Tuple[str, str], ...]:
    """Collapse the flat `strIngredientN`/`strMeasureN` slots into ordered pairs.

    Slots with a blank ingredient are dropped; slot order is kept.
    """
    pairs = []
    for i in range(1, INGREDIENT_SLOTS + 1):
        ingredient = _text(raw, f"strIngredient{i}")
        if ingredient:
            pairs.append((ingredient, _text(raw, f"strMeasure{i}")))
    return tuple(pairs)


def parse_summary(raw: Dict) -> MealSummary:
    return MealSummary(
        id=str(raw["idMeal"]),
        name=raw.get("strMeal") or "",
        thumbnail_url=raw.get("strMealThumb") or "",
    )


def parse_detail(raw: Dict) -> MealDetail:
    return MealDetail(
        id=str(raw["idMeal"]),
        name=raw.get("strMeal") or "",
        thumbnail_url=raw.get("strMealThumb") or "",
        category=_text(raw, "strCategory"),
        area=_text(raw, "strArea"),
        instructions=raw.get("strInstructions") or "",
        ingredients=parse_ingredients(raw),
    )
