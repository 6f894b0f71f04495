"""Deterministic meal plan used when the AI generator is unavailable or returns garbage."""
import logging
from typing import List

from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan

logger = logging.getLogger(__name__)

BREAKFASTS = [
    "Greek Yogurt Parfait with Berries",
    "Scrambled Eggs with Spinach",
    "Overnight Oats with Banana",
    "Avocado Toast with Egg",
    "Protein Berry Smoothie",
    "Whole Grain Pancakes",
    "Breakfast Burrito Bowl",
]
LUNCHES = [
    "Grilled Chicken Caesar Salad",
    "Quinoa Buddha Bowl",
    "Turkey and Avocado Wrap",
    "Asian Chicken Stir-fry",
    "Mediterranean Tuna Salad",
    "Black Bean and Rice Bowl",
    "Salmon Poke Bowl",
]
DINNERS = [
    "Baked Salmon with Roasted Vegetables",
    "Lean Beef Stir-fry with Brown Rice",
    "Chicken Fajita Bowls",
    "Mediterranean Chicken Skillet",
    "Turkey Meatballs with Pasta",
    "Cod Fish Tacos",
    "Chicken Teriyaki with Vegetables",
]

# (name, quantity, unit, category, cost)
_BASE = [
    ("olive oil", 1, "tbsp", "Pantry", 0.25),
    ("garlic", 1, "clove", "Produce", 0.15),
    ("onion", 0.25, "cup", "Produce", 0.30),
]
_BY_TYPE = {
    "breakfast": [("eggs", 2, "large", "Dairy", 0.50), ("spinach", 1, "cup", "Produce", 0.75)],
    "lunch": [("chicken breast", 4, "oz", "Meat", 3.00), ("mixed greens", 2, "cups", "Produce", 1.00)],
    "dinner": [("salmon fillet", 6, "oz", "Meat", 5.00), ("broccoli", 1, "cup", "Produce", 0.80)],
}
# (prep, cook, calories)
_TIMING = {"breakfast": (10, 15, 350), "lunch": (15, 20, 450), "dinner": (20, 25, 550)}


def default_ingredients(meal_type: str) -> List[IngredientUsage]:
    rows = _BY_TYPE.get(meal_type, _BY_TYPE["dinner"]) + _BASE
    return [IngredientUsage(name, qty, unit, category, cost) for name, qty, unit, category, cost in rows]


def _meal(name: str, meal_type: str, day: int) -> Meal:
    prep, cook, calories = _TIMING[meal_type]
    return Meal(
        name=name,
        type=meal_type,
        day_of_week=day,
        instructions=f"Prepare {name} with fresh grocery-store ingredients",
        prep_time=prep,
        cook_time=cook,
        servings=1,
        calories=calories,
        ingredients=default_ingredients(meal_type),
    )


def generate_fallback_meal_plan(duration: int, name: str = "") -> MealPlan:
    """Breakfast, lunch and dinner for each day, rotating through the option lists."""
    meals = []
    for day in range(max(duration, 1)):
        meals.append(_meal(BREAKFASTS[day % len(BREAKFASTS)], "breakfast", day % 7))
        meals.append(_meal(LUNCHES[day % len(LUNCHES)], "lunch", day % 7))
        meals.append(_meal(DINNERS[day % len(DINNERS)], "dinner", day % 7))
    logger.info("Generated fallback meal plan with %d meals", len(meals))
    return MealPlan(name=name or f"{max(duration, 1)}-Day Meal Plan", meals=meals)


__all__ = ['generate_fallback_meal_plan', 'default_ingredients']
