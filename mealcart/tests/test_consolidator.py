import unittest
from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.domain.IngredientUsage import IngredientUsage
from mealcart.domain.errors import InvalidIngredientUsageError
from mealcart.logic.shopping.consolidator import consolidate_ingredients

CATALOG = (
    CatalogEntry("chicken breast", "Meat", "1 lb package", 1, "lb", 4.99, "lb"),
    CatalogEntry("spinach", "Produce", "5 oz bag", 5, "oz", 2.49, "bag"),
)


def chicken_usages():
    return [
        IngredientUsage("chicken breast", 0.5, "lb", "Meat", 2.50),
        IngredientUsage("Chicken Breast", 1.0, "lb", "Meat", 5.00),
    ]


class TestConsolidator(unittest.TestCase):

    def test_same_name_and_unit_are_merged(self):
        result = consolidate_ingredients(chicken_usages(), resolve=False, catalog=CATALOG)
        self.assertEqual(len(result), 1)
        merged = result[0]
        self.assertEqual(merged.name, "chicken breast")  # first-seen spelling
        self.assertAlmostEqual(merged.total_quantity, 1.5)
        self.assertAlmostEqual(merged.estimated_cost, 7.50)
        self.assertEqual(merged.usage_count, 2)
        self.assertIsNone(merged.packaging)

    def test_different_units_stay_separate(self):
        usages = [
            IngredientUsage("tomato", 1, "lb"),
            IngredientUsage("Tomato", 2, "cup"),
            IngredientUsage("tomato", 3, "LB"),
        ]
        result = consolidate_ingredients(usages, resolve=False, catalog=CATALOG)
        self.assertEqual([(c.name, c.unit, c.total_quantity) for c in result],
                         [("tomato", "lb", 4.0), ("Tomato", "cup", 2.0)])

    def test_order_of_first_occurrence_is_kept(self):
        usages = [
            IngredientUsage("rice", 1, "cup"),
            IngredientUsage("beans", 1, "cup"),
            IngredientUsage("rice", 1, "cup"),
            IngredientUsage("corn", 1, "cup"),
        ]
        result = consolidate_ingredients(usages, resolve=False, catalog=CATALOG)
        self.assertEqual([c.name for c in result], ["rice", "beans", "corn"])

    def test_quantities_and_costs_are_conserved(self):
        usages = [IngredientUsage("oats", q, "cup", "Pantry", c) for q, c in ((0.5, 0.2), (1, 0.4), (0.25, 0.1))]
        usages.append(IngredientUsage("milk", 1, "cup", "Dairy", 0.3))
        result = consolidate_ingredients(usages, resolve=False, catalog=CATALOG)
        self.assertAlmostEqual(sum(c.total_quantity for c in result), sum(u.quantity for u in usages))
        self.assertAlmostEqual(sum(c.estimated_cost for c in result), sum(u.estimated_cost for u in usages))

    def test_total_basis_packages_from_merged_quantity(self):
        merged = consolidate_ingredients(chicken_usages(), catalog=CATALOG)[0]
        self.assertEqual(merged.packaging.packages_needed, 2)
        self.assertAlmostEqual(merged.packaging.estimated_cost, 9.98)
        self.assertEqual(merged.packaging.package_description, "2 × 1 lb package")

    def test_first_usage_basis_packages_from_first_quantity(self):
        merged = consolidate_ingredients(chicken_usages(), basis="first_usage", catalog=CATALOG)[0]
        self.assertAlmostEqual(merged.total_quantity, 1.5)
        self.assertEqual(merged.packaging.packages_needed, 1)
        self.assertAlmostEqual(merged.packaging.estimated_cost, 4.99)
        self.assertEqual(merged.packaging.package_description, "1 × 1 lb package")

    def test_unknown_basis_is_rejected(self):
        with self.assertRaises(ValueError):
            consolidate_ingredients(chicken_usages(), basis="average", catalog=CATALOG)

    def test_accepts_dicts(self):
        usages = [
            {"name": "spinach", "quantity": 3, "unit": "oz", "category": "Produce", "estimatedCost": 1.0},
            {"ingredient_name": "spinach", "quantity": 4, "unit": "oz", "category": "Produce", "estimated_cost": 1.0},
        ]
        merged = consolidate_ingredients(usages, catalog=CATALOG)[0]
        self.assertEqual(merged.total_quantity, 7)
        self.assertEqual(merged.packaging.packages_needed, 2)

    def test_invalid_usage_reports_its_position(self):
        usages = [
            {"name": "rice", "quantity": 1, "unit": "cup"},
            {"name": "beans", "quantity": -2, "unit": "cup"},
        ]
        with self.assertRaises(InvalidIngredientUsageError) as ctx:
            consolidate_ingredients(usages, catalog=CATALOG)
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.field, "quantity")
        self.assertEqual(ctx.exception.name, "beans")

    def test_empty_input_gives_empty_result(self):
        self.assertEqual(consolidate_ingredients([], catalog=CATALOG), [])

    def test_does_not_mutate_input(self):
        usages = chicken_usages()
        before = [u.to_dict() for u in usages]
        consolidate_ingredients(usages, catalog=CATALOG)
        self.assertEqual([u.to_dict() for u in usages], before)
