import unittest
from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.Meal import Meal
from mealcart.domain.MealPlan import MealPlan
from mealcart.domain.errors import InvalidIngredientUsageError, NoPurchasableItemsError
from mealcart.logic.shopping.list_builder import (
    assemble_shopping_list, build_shopping_list_for_plan, flatten_usages
)

CATALOG = (
    CatalogEntry("chicken breast", "Meat", "1 lb package", 1, "lb", 4.99, "lb"),
    CatalogEntry("brown rice", "Pantry", "2 lb bag", 2, "lb", 2.49, "bag"),
)


def meals():
    return [
        Meal(name="Chicken Bowl", type="lunch", day_of_week=0, ingredients=[
            IngredientUsage("chicken breast", 0.5, "lb", "Meat", 2.50),
            IngredientUsage("brown rice", 1, "cup", "Pantry", 0.40),
        ]),
        Meal(name="Chicken Stir-fry", type="dinner", day_of_week=0, ingredients=[
            IngredientUsage("Chicken Breast", 1.0, "lb", "Meat", 5.00),
            IngredientUsage("dragon fruit", 2, "each", "Produce", 3.00),
        ]),
    ]


class TestShoppingListAssembly(unittest.TestCase):

    def test_packaged_line_items(self):
        shopping_list = assemble_shopping_list(meals(), catalog=CATALOG)
        items = {i.ingredient_name: i for i in shopping_list.items}
        self.assertEqual(list(items), ["chicken breast", "brown rice", "dragon fruit"])

        chicken = items["chicken breast"]
        self.assertEqual(chicken.quantity, 2)
        self.assertEqual(chicken.unit, "package")
        self.assertEqual(chicken.notes, "2 × 1 lb package")
        self.assertAlmostEqual(chicken.estimated_cost, 9.98)
        self.assertEqual(chicken.category, "Meat")
        self.assertFalse(chicken.is_purchased)

        rice = items["brown rice"]
        self.assertEqual(rice.quantity, 1)
        self.assertEqual(rice.notes, "1 × 2 lb bag")

        fruit = items["dragon fruit"]
        self.assertEqual(fruit.notes, "2 each")
        self.assertEqual(fruit.estimated_cost, 2.99)

        self.assertAlmostEqual(shopping_list.total_estimated_cost, 9.98 + 2.49 + 2.99)

    def test_first_usage_basis(self):
        shopping_list = assemble_shopping_list(meals(), basis="first_usage", catalog=CATALOG)
        chicken = shopping_list.items[0]
        self.assertEqual(chicken.quantity, 1)
        self.assertEqual(chicken.notes, "1 × 1 lb package")
        self.assertAlmostEqual(chicken.estimated_cost, 4.99)

    def test_without_packaging_keeps_ingredient_amounts(self):
        shopping_list = assemble_shopping_list(meals(), apply_packaging=False, catalog=CATALOG)
        chicken = shopping_list.items[0]
        self.assertAlmostEqual(chicken.quantity, 1.5)
        self.assertEqual(chicken.unit, "lb")
        self.assertAlmostEqual(chicken.estimated_cost, 7.50)
        self.assertEqual(chicken.notes, "")

    def test_total_is_sum_of_items(self):
        shopping_list = assemble_shopping_list(meals(), catalog=CATALOG)
        self.assertAlmostEqual(shopping_list.total_estimated_cost,
                               sum(i.estimated_cost for i in shopping_list.items))

    def test_same_input_gives_same_list(self):
        first = assemble_shopping_list(meals(), catalog=CATALOG)
        second = assemble_shopping_list(meals(), catalog=CATALOG)
        self.assertEqual([i.to_dict() for i in first.items], [i.to_dict() for i in second.items])

    def test_no_meals_raises(self):
        with self.assertRaises(NoPurchasableItemsError):
            assemble_shopping_list([], catalog=CATALOG)

    def test_meals_without_ingredients_raise(self):
        with self.assertRaises(NoPurchasableItemsError):
            assemble_shopping_list([Meal(name="Water")], catalog=CATALOG)

    def test_dict_meals_are_accepted(self):
        raw = [{"name": "Rice", "ingredients": [{"name": "brown rice", "quantity": 3, "unit": "lb"}]},
               {"name": "More Rice", "meal_ingredients": [{"ingredient_name": "Brown Rice", "quantity": 2, "unit": "lb"}]}]
        shopping_list = assemble_shopping_list(raw, name="Rice Week", catalog=CATALOG)
        self.assertEqual(shopping_list.name, "Rice Week")
        self.assertEqual(len(shopping_list.items), 1)
        self.assertEqual(shopping_list.items[0].quantity, 1)  # rice is sold by the bag, not by lb

    def test_invalid_usage_index_counts_across_meals(self):
        raw = [{"name": "A", "ingredients": [{"name": "rice", "quantity": 1}, {"name": "beans", "quantity": 1}]},
               {"name": "B", "ingredients": [{"name": "", "quantity": 1}]}]
        with self.assertRaises(InvalidIngredientUsageError) as ctx:
            flatten_usages(raw)
        self.assertEqual(ctx.exception.index, 2)
        self.assertEqual(ctx.exception.field, "name")

    def test_unsupported_meal_type(self):
        with self.assertRaises(TypeError):
            flatten_usages(["not a meal"])

    def test_build_for_plan_names_the_list_after_the_plan(self):
        plan = MealPlan(name="Week 1", meals=meals(), id="plan-1")
        shopping_list = build_shopping_list_for_plan(plan, catalog=CATALOG)
        self.assertEqual(shopping_list.name, "Week 1 - Shopping List")
        self.assertEqual(shopping_list.meal_plan_id, "plan-1")
        self.assertIsNone(shopping_list.id)

    def test_build_for_plan_logs_plan_size(self):
        plan = MealPlan(name="Week 1", meals=meals(), id="plan-1")
        self.assertEqual(plan.ingredient_count(), 4)
        with self.assertLogs("mealcart.logic.shopping.list_builder", level="INFO") as logs:
            build_shopping_list_for_plan(plan, catalog=CATALOG)
        self.assertIn("plan plan-1: 2 meals, 4 ingredients", logs.output[0])

    def test_bundled_catalog_prices_chicken(self):
        shopping_list = assemble_shopping_list(meals(), basis="first_usage")
        self.assertAlmostEqual(shopping_list.items[0].estimated_cost, 4.99)
