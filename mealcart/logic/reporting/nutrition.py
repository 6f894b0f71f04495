"""Nutrition targets and meal plan calorie aggregation.

Profiles use imperial inputs (weight in lbs, height in inches), converted to
metric before applying the equations.
"""
from collections import defaultdict
from typing import Any, Dict

from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.UserProfile import UserProfile
from mealcart.utilities.constants import ACTIVITY_MULTIPLIERS

LB_TO_KG = 0.453592
IN_TO_CM = 2.54


def calculate_bmr(age: int, weight: float, height: float) -> float:
    """Harris-Benedict basal metabolic rate (male formula)."""
    return 88.362 + (13.397 * weight * LB_TO_KG) + (4.799 * height * IN_TO_CM) - (5.677 * age)


def calculate_daily_calories(bmr: float, activity_level: str, goal: str) -> int:
    # unknown activity levels count as sedentary
    calories = bmr * ACTIVITY_MULTIPLIERS.get(activity_level, ACTIVITY_MULTIPLIERS['sedentary'])
    if goal == 'lose-weight':
        calories -= 500
    elif goal in ('gain-weight', 'build-muscle'):
        calories += 300
    return round(calories)


def calculate_personalized_calories(profile: UserProfile) -> int:
    """Mifflin-St Jeor estimate with a percentage adjustment per goal."""
    weight_kg = profile.weight * LB_TO_KG
    height_cm = profile.height * IN_TO_CM
    bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * profile.age) + 5
    tdee = bmr * ACTIVITY_MULTIPLIERS.get(profile.activity_level, ACTIVITY_MULTIPLIERS['moderate'])
    factors = {'lose-weight': 0.8, 'gain-weight': 1.2, 'build-muscle': 1.15}
    return round(tdee * factors.get(profile.goal, 1.0))


def calculate_bmi(weight: float, height: float) -> float:
    height_m = height * IN_TO_CM / 100
    if height_m <= 0:
        return 0.0
    return (weight * LB_TO_KG) / (height_m * height_m)


def macro_strategy(goal: str) -> Dict[str, Any]:
    """Macro split (percent of calories) for a goal."""
    if goal == 'lose-weight':
        return {'description': 'Higher protein, moderate carbs, lower fat for weight loss',
                'protein': 35, 'carbs': 40, 'fat': 25}
    if goal in ('gain-weight', 'build-muscle'):
        return {'description': 'High protein, moderate carbs and fats for muscle building',
                'protein': 30, 'carbs': 45, 'fat': 25}
    return {'description': 'Balanced macronutrients for weight maintenance',
            'protein': 25, 'carbs': 50, 'fat': 25}


def nutrition_targets(profile: UserProfile, target_calories: int | None = None) -> Dict[str, Any]:
    """Everything the planner needs to know about a profile's energy budget."""
    bmr = calculate_bmr(profile.age, profile.weight, profile.height)
    daily = target_calories or calculate_daily_calories(bmr, profile.activity_level, profile.goal)
    return {
        'bmr': round(bmr, 1),
        'daily_calories': daily,
        'personalized_calories': calculate_personalized_calories(profile),
        'bmi': round(calculate_bmi(profile.weight, profile.height), 1),
        'macros': macro_strategy(profile.goal),
        'meal_split': {
            'breakfast': round(daily * 0.25),
            'lunch': round(daily * 0.35),
            'dinner': round(daily * 0.40),
        },
    }


def compute_plan_nutrition(plan: MealPlan) -> Dict[str, Any]:
    """Aggregate calories for the given meal plan.

    Returns structure:
    {
      'days': { 0: {'calories': int, 'meals': {'breakfast': {'name': str, 'calories': int}, ...}}, ... },
      'plan_totals': {'calories': int, 'average_daily_calories': int}
    }
    """
    if not plan or not plan.meals:
        return {'days': {}, 'plan_totals': {'calories': 0, 'average_daily_calories': 0}}

    days: Dict[int, Dict[str, Any]] = defaultdict(lambda: {'calories': 0, 'meals': {}})
    total = 0
    for meal in plan.meals:
        cals = meal.calories or 0  # per serving
        day = days[meal.day_of_week]
        day['meals'][meal.type] = {'name': meal.name, 'calories': cals}
        day['calories'] += cals
        total += cals

    return {
        'days': dict(sorted(days.items())),
        'plan_totals': {
            'calories': total,
            'average_daily_calories': round(total / len(days)) if days else 0,
        },
    }


__all__ = [
    "calculate_bmr", "calculate_daily_calories", "calculate_personalized_calories",
    "calculate_bmi", "macro_strategy", "nutrition_targets", "compute_plan_nutrition",
]
