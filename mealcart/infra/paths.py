from pathlib import Path
from mealcart.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR, CATALOG_FILE as _CONFIGURED_CATALOG_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
CATALOG_FILE = Path(_CONFIGURED_CATALOG_FILE).resolve()
MEAL_PLANS_FILE = DATA_DIR / 'meal_plans.json'
SHOPPING_LISTS_FILE = DATA_DIR / 'shopping_lists.json'
AI_LAST_RAW_FILE = DATA_DIR / 'ai_last_raw.txt'

__all__ = ['DATA_DIR', 'CATALOG_FILE', 'MEAL_PLANS_FILE', 'SHOPPING_LISTS_FILE', 'AI_LAST_RAW_FILE']
