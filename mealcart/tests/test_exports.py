import unittest
from datetime import date
from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.infra.csv_export import CSV_COLUMNS, shopping_list_from_csv, shopping_list_to_csv
from mealcart.infra.pdf_utils import generate_pdf_for_shopping_list

WEEK = date(2024, 1, 15)


class TestExports(unittest.TestCase):

    def setUp(self):
        self.items = [
            ShoppingListItem(WEEK, "Flour", 2.5, "cup", "pantry", 1.25),
            ShoppingListItem(WEEK, "Paper towels", 1, "", "other", None, checked=True, manual=True),
        ]

    def test_csv_uses_text_flags_and_blank_prices(self):
        text = shopping_list_to_csv(self.items)
        lines = text.splitlines()
        self.assertEqual(lines[0], ",".join(CSV_COLUMNS))
        self.assertEqual(lines[1], "2024-01-15,Flour,2.5,cup,pantry,1.25,FALSE,FALSE")
        self.assertEqual(lines[2], "2024-01-15,Paper towels,1,,other,,TRUE,TRUE")

    def test_csv_rows_read_back(self):
        items = shopping_list_from_csv(shopping_list_to_csv(self.items))
        self.assertIsNone(items[1].estimated_price)
        self.assertTrue(items[1].checked)
        self.assertEqual(items[0].estimated_price, 1.25)

    def test_pdf_bytes(self):
        pdf = generate_pdf_for_shopping_list(WEEK, self.items)
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_pdf_for_empty_list(self):
        self.assertTrue(generate_pdf_for_shopping_list(WEEK, []).startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
