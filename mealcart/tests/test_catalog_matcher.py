import unittest
from mealcart.domain.CatalogEntry import CatalogEntry
from mealcart.logic.shopping.catalog_matcher import find_catalog_entry


def entry(name, size=1, size_unit="lb", price=1.0, unit="lb", description="1 lb package"):
    return CatalogEntry(name, "Test", description, size, size_unit, price, unit)


class TestCatalogMatcher(unittest.TestCase):

    def setUp(self):
        self.catalog = (
            entry("garlic"),
            entry("garlic powder"),
            entry("chicken breast"),
            entry("Greek yogurt"),
        )

    def test_exact_name_matches_case_insensitively(self):
        self.assertEqual(find_catalog_entry("Chicken Breast", self.catalog).name, "chicken breast")

    def test_catalog_name_inside_ingredient_name(self):
        found = find_catalog_entry("boneless chicken breast", self.catalog)
        self.assertEqual(found.name, "chicken breast")

    def test_ingredient_name_inside_catalog_name(self):
        found = find_catalog_entry("yogurt", self.catalog)
        self.assertEqual(found.name, "Greek yogurt")

    def test_first_match_in_catalog_order_wins(self):
        # "garlic powder" contains "garlic", which is declared first
        self.assertEqual(find_catalog_entry("garlic powder", self.catalog).name, "garlic")
        reordered = (self.catalog[1], self.catalog[0])
        self.assertEqual(find_catalog_entry("garlic powder", reordered).name, "garlic powder")

    def test_no_match_returns_none(self):
        self.assertIsNone(find_catalog_entry("dragon fruit", self.catalog))

    def test_blank_name_never_matches(self):
        self.assertIsNone(find_catalog_entry("  ", self.catalog))

    def test_bundled_catalog_is_used_by_default(self):
        found = find_catalog_entry("chicken breast")
        self.assertIsNotNone(found)
        self.assertEqual(found.unit_price, 4.99)
