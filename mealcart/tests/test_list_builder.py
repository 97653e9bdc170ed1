import unittest
from datetime import date
from mealcart.domain.Ingredient import Ingredient
from mealcart.domain.Inventory import Inventory
from mealcart.domain.InventoryItem import InventoryItem
from mealcart.domain.MealPlanEntry import MealPlanEntry
from mealcart.domain.Recipe import Recipe
from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.domain.Snapshot import PlannerSnapshot
from mealcart.logic.shopping.aggregator import AggregatedLine, NoMealsPlanned
from mealcart.logic.shopping.list_builder import (
    estimate_price, filter_and_price, generate_shopping_list, group_by_category, merge_regenerated
)

WEEK = date(2024, 1, 15)


def _lines(*rows):
    lines = {}
    for item, qty, unit, category in rows:
        line = AggregatedLine(item, unit, category)
        line.add(qty)
        lines[item.lower()] = line
    return lines


class TestFilterAndPrice(unittest.TestCase):

    def test_have_is_the_only_exclusion(self):
        lines = _lines(("Milk", 1, "cup", "dairy"), ("Eggs", 2, "", "dairy"),
                       ("Bread", 1, "", "bakery"), ("Basil", 1, "bunch", "produce"))
        inventory = Inventory([
            InventoryItem("milk", "have"),
            InventoryItem("EGGS", "low"),
            InventoryItem("bread", "out"),
        ])
        items = filter_and_price(lines, inventory, WEEK)
        self.assertEqual([i.item for i in items], ["Eggs", "Bread", "Basil"])

    def test_price_estimate_from_typical_price(self):
        lines = _lines(("Chicken", 1.5, "lb", "protein"))
        inventory = Inventory([InventoryItem("chicken", "out", "protein", typical_price=3.99)])
        item = filter_and_price(lines, inventory)[0]
        self.assertEqual(item.estimated_price, round(3.99 * 1.5, 2))

    def test_unknown_price_stays_none(self):
        lines = _lines(("Chicken", 1.5, "lb", "protein"), ("Rice", 1, "cup", "pantry"))
        inventory = Inventory([InventoryItem("chicken", "low")])
        items = filter_and_price(lines, inventory)
        self.assertTrue(all(i.estimated_price is None for i in items))

    def test_zero_price_is_kept_as_zero(self):
        lines = _lines(("Herbs", 1, "", "produce"))
        inventory = Inventory([InventoryItem("herbs", "low", typical_price=0.0)])
        self.assertEqual(filter_and_price(lines, inventory)[0].estimated_price, 0.0)

    def test_price_past_float_range_is_unknown(self):
        self.assertIsNone(estimate_price(1_000_000.0, 1e303))
        self.assertEqual(estimate_price(2.0, 1.25), 2.5)

    def test_new_items_are_unchecked_and_generated(self):
        items = filter_and_price(_lines(("Oats", 1, "cup", "pantry")), Inventory(), WEEK)
        self.assertFalse(items[0].checked)
        self.assertFalse(items[0].manual)
        self.assertEqual(items[0].week_start, WEEK)

    def test_quantity_rounded_to_two_decimals(self):
        line = AggregatedLine("Oats", "cup", "pantry")
        for _ in range(3):
            line.add(1 / 3)
        item = filter_and_price({"oats": line}, Inventory())[0]
        self.assertEqual(item.quantity, 1.0)


class TestGenerateShoppingList(unittest.TestCase):

    def _snapshot(self, inventory):
        return PlannerSnapshot(
            recipes=[Recipe("ra", "Recipe A", 4), Recipe("rb", "Recipe B", 2)],
            ingredients=[
                Ingredient("ra", "flour", "2", "cup", "pantry"),
                Ingredient("rb", "flour", "1", "cup", "pantry"),
                Ingredient("rb", "egg", "1", "", "dairy"),
            ],
            inventory_items=inventory,
            meal_plan=[MealPlanEntry(WEEK, "tuesday", "rb"), MealPlanEntry(WEEK, "monday", "ra")],
        )

    def test_end_to_end_example(self):
        snapshot = self._snapshot([InventoryItem("flour", "out"), InventoryItem("egg", "have")])
        items = generate_shopping_list(snapshot, WEEK, 2.5)
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].item, "flour")
        self.assertEqual(items[0].quantity, 2.5)
        self.assertEqual(items[0].unit, "cup")

    def test_item_needed_by_several_recipes_still_excluded_when_have(self):
        snapshot = self._snapshot([InventoryItem("Flour", "have")])
        self.assertEqual([i.item for i in generate_shopping_list(snapshot, WEEK)], ["egg"])

    def test_everything_in_stock_returns_empty_list(self):
        snapshot = self._snapshot([InventoryItem("flour", "have"), InventoryItem("egg", "have")])
        self.assertEqual(generate_shopping_list(snapshot, WEEK), [])

    def test_week_without_meals_raises(self):
        snapshot = self._snapshot([])
        with self.assertRaises(NoMealsPlanned) as ctx:
            generate_shopping_list(snapshot, date(2024, 1, 22))
        self.assertEqual(ctx.exception.week_start, date(2024, 1, 22))


class TestMergeRegenerated(unittest.TestCase):

    def setUp(self):
        self.manual = ShoppingListItem(WEEK, "Paper towels", 1, "", "other", manual=True)
        self.old_generated = ShoppingListItem(WEEK, "Milk", 1, "cup", "dairy", checked=True)
        self.generated = [
            ShoppingListItem(WEEK, "Flour", 2.5, "cup", "pantry"),
            ShoppingListItem(WEEK, "paper towels", 2, "", "other"),
        ]

    def test_preserve_manual_keeps_user_items(self):
        merged = merge_regenerated([self.manual, self.old_generated], self.generated, preserve_manual=True)
        self.assertEqual([i.item for i in merged], ["Paper towels", "Flour"])
        self.assertTrue(merged[0].manual)

    def test_wipe_replaces_everything(self):
        merged = merge_regenerated([self.manual, self.old_generated], self.generated, preserve_manual=False)
        self.assertEqual([i.item for i in merged], ["Flour", "paper towels"])
        self.assertFalse(any(i.manual for i in merged))


class TestGroupByCategory(unittest.TestCase):

    def test_category_order_and_unchecked_first(self):
        items = [
            ShoppingListItem(WEEK, "Bread", category="bakery"),
            ShoppingListItem(WEEK, "Apples", category="produce", checked=True),
            ShoppingListItem(WEEK, "Kale", category="produce"),
            ShoppingListItem(WEEK, "Mystery", category="not-a-section"),
        ]
        grouped = group_by_category(items)
        self.assertEqual(list(grouped), ["produce", "bakery", "other"])
        self.assertEqual([i.item for i in grouped["produce"]], ["Kale", "Apples"])


if __name__ == '__main__':
    unittest.main()
