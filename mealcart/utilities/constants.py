from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
)

# Store sections, in the order the shopping list is walked
CATEGORIES: Final[tuple[str, ...]] = (
    "produce", "protein", "dairy", "pantry", "frozen", "bakery", "other"
)
DEFAULT_CATEGORY: Final[str] = "other"

STOCK_STATUSES: Final[tuple[str, ...]] = ("have", "low", "out")
STATUS_HAVE: Final[str] = "have"
STATUS_OUT: Final[str] = "out"

DEFAULT_TARGET_SERVINGS: Final[float] = 2.5
DEFAULT_RECIPE_SERVINGS: Final[int] = 4

FLAG_TRUE: Final[str] = "TRUE"
FLAG_FALSE: Final[str] = "FALSE"

RECENT_HISTORY_LIMIT: Final[int] = 10

# Longest free-form quantity text accepted for an ingredient ("1 1/2", "3/4")
MAX_QUANTITY_LENGTH: Final[int] = 20
# Upper bound for hand-entered prices and quantities
MAX_AMOUNT: Final[float] = 1_000_000.0
