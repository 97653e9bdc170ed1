"""CSV export of a week's shopping list in the spreadsheet row format.

Flags are written as "TRUE"/"FALSE" and an unknown estimated price as an
empty cell, so a spreadsheet host can read the rows back unchanged.
"""
import csv
import io
from typing import Iterable

from mealcart.domain.ShoppingListItem import ShoppingListItem

CSV_COLUMNS = ["week_start", "item", "quantity", "unit", "category", "estimated_price", "checked", "manual"]


def shopping_list_to_csv(items: Iterable[ShoppingListItem]) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for item in items:
        writer.writerow(item.to_dict(text_flags=True))
    return buf.getvalue()


def shopping_list_from_csv(text: str):
    return [ShoppingListItem.from_dict(row) for row in csv.DictReader(io.StringIO(text))]


__all__ = ['CSV_COLUMNS', 'shopping_list_to_csv', 'shopping_list_from_csv']
