"""Shopping list builder.

Turns the ingredient usages of a set of meals into purchasable line items:
usages are flattened in meal order, consolidated by (name, unit), priced in
store packages and summed into a grand total.

Provides assemble_shopping_list(meals, ...) and build_shopping_list_for_plan(plan, ...).
"""
import logging
from typing import Any, Iterable, List, Optional

from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.ConsolidatedIngredient import ConsolidatedIngredient
from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.ShoppingList import ShoppingList, ShoppingListItem
from mealcart.domain.errors import InvalidIngredientUsageError, NoPurchasableItemsError
from mealcart.logic.shopping.consolidator import consolidate_ingredients
from mealcart.utilities.constants import PACKAGE_UNIT, PACKAGING_BASIS_TOTAL

logger = logging.getLogger(__name__)


def _meal_ingredients(meal: Any) -> List[Any]:
    if isinstance(meal, Meal):
        return meal.ingredients
    if isinstance(meal, dict):
        return meal.get('ingredients', meal.get('meal_ingredients')) or []
    raise TypeError(f"Unsupported meal type: {type(meal).__name__}")


def flatten_usages(meals: Iterable[Any]) -> List[IngredientUsage]:
    """Collect every ingredient usage, meal order first, then ingredient order.

    Raw dict ingredients are parsed here so that a malformed one is reported
    with its position in the flattened sequence.
    """
    flat: List[IngredientUsage] = []
    for meal in meals or []:
        for raw in _meal_ingredients(meal):
            if isinstance(raw, IngredientUsage):
                flat.append(raw)
                continue
            try:
                flat.append(IngredientUsage.from_dict(raw))
            except InvalidIngredientUsageError as e:
                raise e.with_index(len(flat)) from e
    return flat


def to_line_item(ingredient: ConsolidatedIngredient) -> ShoppingListItem:
    packaging = ingredient.packaging
    if packaging is not None:
        return ShoppingListItem(
            ingredient_name=ingredient.name,
            quantity=packaging.packages_needed,
            unit=PACKAGE_UNIT,
            category=ingredient.category,
            estimated_cost=packaging.estimated_cost,
            is_purchased=False,
            notes=packaging.package_description,
        )
    return ShoppingListItem(
        ingredient_name=ingredient.name,
        quantity=ingredient.total_quantity,
        unit=ingredient.unit,
        category=ingredient.category,
        estimated_cost=ingredient.estimated_cost,
        is_purchased=False,
        notes="",
    )


def assemble_shopping_list(meals: Iterable[Any], *, name: Optional[str] = None,
                           meal_plan_id: Optional[str] = None,
                           basis: str = PACKAGING_BASIS_TOTAL, apply_packaging: bool = True,
                           catalog: Optional[Iterable[CatalogEntry]] = None) -> ShoppingList:
    """Build an unsaved shopping list from meals.

    Args:
        meals: Meal objects or dicts carrying an 'ingredients' (or 'meal_ingredients') list.
        name: list name; defaults to "Shopping List".
        meal_plan_id: id of the plan the meals came from, if any.
        basis: packaging basis, see consolidate_ingredients.
        apply_packaging: False keeps each ingredient's own quantity, unit and cost.
        catalog: catalog entries to price against (defaults to the bundled catalog).

    Returns:
        ShoppingList without an id; the caller persists it.

    Raises:
        NoPurchasableItemsError: no meals or no ingredient usages.
        InvalidIngredientUsageError: a usage is malformed.
    """
    meals = list(meals or [])
    if not meals:
        raise NoPurchasableItemsError("no purchasable items: no meals given")

    usages = flatten_usages(meals)
    logger.info("Collected %d ingredient usages from %d meals", len(usages), len(meals))
    if not usages:
        raise NoPurchasableItemsError("no purchasable items: meals have no ingredients")

    consolidated = consolidate_ingredients(usages, basis=basis, resolve=apply_packaging, catalog=catalog)
    logger.info("Consolidated to %d unique ingredients", len(consolidated))

    items = [to_line_item(c) for c in consolidated]
    return ShoppingList(name=name or "Shopping List", items=items, meal_plan_id=meal_plan_id)


def build_shopping_list_for_plan(plan: MealPlan, *, name: Optional[str] = None, **kwargs) -> ShoppingList:
    """Assemble the shopping list of a stored meal plan, named after the plan."""
    list_name = name or f"{plan.name or 'Meal Plan'} - Shopping List"
    logger.info("Building shopping list for plan %s: %d meals, %d ingredients",
                plan.id, len(plan.meals), plan.ingredient_count())
    return assemble_shopping_list(plan.meals, name=list_name, meal_plan_id=plan.id, **kwargs)


__all__ = ['assemble_shopping_list', 'build_shopping_list_for_plan', 'flatten_usages', 'to_line_item']
