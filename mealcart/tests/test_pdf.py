import unittest
from mealcart.domain.ShoppingList import ShoppingList, ShoppingListItem
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list


class TestShoppingListPdf(unittest.TestCase):

    def test_generates_pdf_bytes(self):
        shopping_list = ShoppingList(name="Weekly", items=[
            ShoppingListItem("chicken breast", 2, "package", "Meat", 9.98, notes="2 × 1 lb package"),
            ShoppingListItem("spinach", 1, "package", "Produce", 2.49, is_purchased=True, notes="1 × 5 oz bag"),
            ShoppingListItem("dragon fruit", 1, "package", "Produce", 2.99, notes="2 each"),
        ])
        pdf = generate_pdf_for_shopping_list(shopping_list)
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_empty_list(self):
        self.assertTrue(generate_pdf_for_shopping_list(ShoppingList.create_empty("Empty")).startswith(b"%PDF"))
