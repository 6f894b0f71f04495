"""Meal plan sanity checks: variety and quick breakfasts."""
import logging
from typing import Dict

from mealcart.domain.MealPlan import MealPlan
from mealcart.utilities.constants import MAX_QUICK_BREAKFAST_MINUTES

logger = logging.getLogger(__name__)


def validate_meal_plan(plan: MealPlan) -> Dict[str, int]:
    """Count distinct meal names and breakfasts that fit in the quick-breakfast window."""
    names = [m.name.lower() for m in plan.meals]
    unique = len(set(names))
    breakfasts = [m for m in plan.meals if m.type == 'breakfast']
    quick = [m for m in breakfasts if m.total_time <= MAX_QUICK_BREAKFAST_MINUTES]

    logger.info("Meal diversity check: %d unique meals out of %d total meals", unique, len(names))
    logger.info("Breakfast compliance: %d/%d breakfasts are %d minutes or less",
                len(quick), len(breakfasts), MAX_QUICK_BREAKFAST_MINUTES)
    return {
        'total_meals': len(plan.meals),
        'unique_meals': unique,
        'breakfast_compliance': len(quick),
    }


__all__ = ['validate_meal_plan']
