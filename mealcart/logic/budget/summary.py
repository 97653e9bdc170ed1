"""Budget and price-history aggregation.

Estimated spend comes from a week's shopping list, actual spend from the
append-only price history log.
"""
from datetime import date
from typing import Any, Dict, Iterable, List

from mealcart.domain.PriceHistoryEntry import PriceHistoryEntry
from mealcart.domain.ShoppingListItem import ShoppingListItem
from mealcart.utilities.constants import RECENT_HISTORY_LIMIT
from mealcart.utilities.dates import format_date, previous_week, week_end

__all__ = ["estimated_total", "actual_total_for_week", "recent_history", "week_budget_summary"]


def estimated_total(items: Iterable[ShoppingListItem]) -> float:
    """Sum of known estimated prices; unknown prices count as 0 here only."""
    return round(sum(i.estimated_price for i in items if i.estimated_price is not None), 2)


def entries_in_week(history: Iterable[PriceHistoryEntry], week_start: date) -> List[PriceHistoryEntry]:
    """Entries dated in [week_start, week_start + 7 days)."""
    end = week_end(week_start)
    return [e for e in history if week_start <= e.date < end]


def actual_total_for_week(history: Iterable[PriceHistoryEntry], week_start: date) -> float:
    return round(sum(e.price for e in entries_in_week(history, week_start) if e.price), 2)


def recent_history(history: Iterable[PriceHistoryEntry], limit: int = RECENT_HISTORY_LIMIT) -> List[PriceHistoryEntry]:
    """Newest entries first; ties keep log order reversed (latest logged first)."""
    indexed = list(enumerate(history))
    indexed.sort(key=lambda pair: (pair[1].date, pair[0]), reverse=True)
    return [entry for _, entry in indexed[:limit]]


def week_budget_summary(items: Iterable[ShoppingListItem], history: Iterable[PriceHistoryEntry],
                        week_start: date, *, limit: int = RECENT_HISTORY_LIMIT) -> Dict[str, Any]:
    """Compare this week's estimate with last week's actual spend.

    Returns structure:
    {
      'week_start': 'YYYY-MM-DD',
      'estimated_total': float,
      'unpriced_items': int,            # items whose estimate is unknown
      'last_week_start': 'YYYY-MM-DD',
      'last_week_actual': float,
      'difference': float,              # estimate - last week's actual
      'recent_history': [ {date, item, price, store}, ... ]
    }
    """
    items = list(items)
    history = list(history)
    estimate = estimated_total(items)
    last_week = previous_week(week_start)
    last_actual = actual_total_for_week(history, last_week)
    return {
        'week_start': format_date(week_start),
        'estimated_total': estimate,
        'unpriced_items': sum(1 for i in items if i.estimated_price is None),
        'last_week_start': format_date(last_week),
        'last_week_actual': last_actual,
        'difference': round(estimate - last_actual, 2),
        'recent_history': [e.to_dict() for e in recent_history(history, limit)],
    }
