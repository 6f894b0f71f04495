"""Meal domain entity: one planned dish with its ingredient usages."""
from typing import List, Optional

from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.errors import InvalidIngredientUsageError


def _int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class Meal:
    def __init__(self, name: str = "", type: str = "dinner", day_of_week: int = 0,
                 instructions: str = "", prep_time: int = 0, cook_time: int = 0,
                 servings: int = 1, calories: int = 0,
                 ingredients: Optional[List[IngredientUsage]] = None):
        self.name = name
        self.type = type
        self.day_of_week = day_of_week
        self.instructions = instructions
        self.prep_time = prep_time
        self.cook_time = cook_time
        self.servings = servings
        self.calories = calories
        self.ingredients = ingredients[:] if ingredients else []

    @property
    def total_time(self) -> int:
        return (self.prep_time or 0) + (self.cook_time or 0)

    def __str__(self) -> str:
        return f"{self.name} ({self.type}, day {self.day_of_week}) - {self.calories} kcal - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''
        Creates a Meal from either the AI payload (camelCase keys) or the stored
        format (snake_case keys). Invalid ingredients raise InvalidIngredientUsageError
        with their position inside this meal.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        raw_ingredients = d.get("ingredients", d.get("meal_ingredients")) or []
        ingredients = []
        for i, raw in enumerate(raw_ingredients):
            try:
                ingredients.append(raw if isinstance(raw, IngredientUsage) else IngredientUsage.from_dict(raw))
            except InvalidIngredientUsageError as e:
                raise e.with_index(i) from e
        return Meal(
            name=str(d.get("name", "")).strip(),
            type=str(d.get("type", d.get("meal_type", "dinner")) or "dinner").lower(),
            day_of_week=_int(d.get("day_of_week", d.get("dayOfWeek")), 0),
            instructions=d.get("instructions", d.get("recipe_instructions", "")) or "",
            prep_time=_int(d.get("prep_time", d.get("prepTime")), 0),
            cook_time=_int(d.get("cook_time", d.get("cookTime")), 0),
            servings=_int(d.get("servings"), 1),
            calories=_int(d.get("calories", d.get("calories_per_serving")), 0),
            ingredients=ingredients,
        )

    def to_dict(self):
        return {
            "name": self.name,
            "type": self.type,
            "day_of_week": self.day_of_week,
            "instructions": self.instructions,
            "prep_time": self.prep_time,
            "cook_time": self.cook_time,
            "servings": self.servings,
            "calories": self.calories,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
