from typing import Final

FALLBACK_PACKAGE_COST: Final[float] = 2.99
PACKAGE_UNIT: Final[str] = "package"
DEFAULT_UNIT: Final[str] = "item"
DEFAULT_CATEGORY: Final[str] = "Other"

PACKAGING_BASIS_TOTAL: Final[str] = "total"
PACKAGING_BASIS_FIRST_USAGE: Final[str] = "first_usage"
PACKAGING_BASES: Final[tuple] = (PACKAGING_BASIS_TOTAL, PACKAGING_BASIS_FIRST_USAGE)

MEAL_TYPES: Final[tuple] = ("breakfast", "lunch", "dinner", "snack")
MAX_QUICK_BREAKFAST_MINUTES: Final[int] = 20

ACTIVITY_MULTIPLIERS: Final[dict[str, float]] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "very": 1.725,
    "extra": 1.9,
}

PROMPT_TEMPLATE: Final[str] = (
    """
    Respond with ONLY valid JSON in the following format, no markdown, no explanations:

    """
)
MEAL_PLAN_JSON_FORMAT: Final[str] = (
    """
{
  "meals": [
    {
      "name": str,
      "type": "breakfast|lunch|dinner|snack",
      "dayOfWeek": int (0-6),
      "instructions": str,
      "prepTime": int,
      "cookTime": int,
      "servings": int,
      "calories": int,
      "ingredients": [
        {
          "name": str,
          "quantity": float,
          "unit": str,
          "category": "Produce|Meat|Dairy|Pantry|Bakery",
          "estimatedCost": float
        }
      ]
    }
  ]
}
    """
)
