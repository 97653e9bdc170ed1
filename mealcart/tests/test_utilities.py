import unittest
from datetime import date, datetime
from pydantic import ValidationError
from mealcart.utilities.dates import (
    day_label, format_date, is_current_week, parse_week_start, previous_week, week_end, week_label, week_start_for
)
from mealcart.utilities.format import format_cook_time, format_currency
from mealcart.utilities.validators import IngredientInput, InventoryItemInput, ManualShoppingItemInput


class TestDates(unittest.TestCase):

    def test_week_start_is_monday(self):
        self.assertEqual(week_start_for(date(2024, 1, 21)), date(2024, 1, 15))
        self.assertEqual(week_start_for(date(2024, 1, 15)), date(2024, 1, 15))
        self.assertEqual(week_start_for(datetime(2024, 1, 17, 23, 59)), date(2024, 1, 15))
        self.assertEqual(parse_week_start("2024-01-17"), date(2024, 1, 15))

    def test_week_bounds_and_labels(self):
        monday = date(2024, 1, 15)
        self.assertEqual(week_end(monday), date(2024, 1, 22))
        self.assertEqual(format_date(previous_week(monday)), "2024-01-08")
        self.assertEqual(week_label(monday), "Week of Jan 15")
        self.assertEqual(day_label("wednesday"), "Wednesday")
        self.assertTrue(is_current_week(monday, today=date(2024, 1, 20)))
        self.assertFalse(is_current_week(monday, today=date(2024, 1, 22)))

    def test_bad_date_raises(self):
        with self.assertRaises(ValueError):
            parse_week_start("15/01/2024")


class TestFormat(unittest.TestCase):

    def test_currency(self):
        self.assertEqual(format_currency(1234.5), "$1,234.50")
        self.assertEqual(format_currency(None), "$0.00")
        self.assertEqual(format_currency(-2), "-$2.00")

    def test_cook_time(self):
        self.assertEqual(format_cook_time(None), "")
        self.assertEqual(format_cook_time(45), "45 min")
        self.assertEqual(format_cook_time(120), "2 hr")
        self.assertEqual(format_cook_time(95), "1 hr 35 min")


class TestValidators(unittest.TestCase):

    def test_ingredient_category_falls_back(self):
        ing = IngredientInput(item="  salt ", quantity="1/2", unit=" tsp ", category="Spices")
        self.assertEqual((ing.item, ing.unit, ing.category), ("salt", "tsp", "other"))

    def test_inventory_status_checked(self):
        self.assertEqual(InventoryItemInput(item="milk", status=" LOW ").status, "low")
        with self.assertRaises(ValidationError):
            InventoryItemInput(item="milk", status="plenty")
        with self.assertRaises(ValidationError):
            InventoryItemInput(item="   ")

    def test_blank_price_is_unknown(self):
        self.assertIsNone(InventoryItemInput(item="milk", typical_price="").typical_price)
        with self.assertRaises(ValidationError):
            ManualShoppingItemInput(item="milk", estimated_price=-1)


if __name__ == '__main__':
    unittest.main()
