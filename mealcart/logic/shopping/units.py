"""Unit, quantity and item-name normalization.

Source data is user-entered, so everything here is best-effort and never
raises: unknown units pass through, unparseable quantities read as 0.
"""
import math
import re
from typing import Dict, Union

UNIT_SYNONYMS: Dict[str, str] = {
    # Volume
    'tsp': 'tsp', 'teaspoon': 'tsp', 'teaspoons': 'tsp',
    'tbsp': 'tbsp', 'tablespoon': 'tbsp', 'tablespoons': 'tbsp',
    'cup': 'cup', 'cups': 'cup', 'c': 'cup',
    'fl oz': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'pt': 'pt', 'pint': 'pt', 'pints': 'pt',
    'qt': 'qt', 'quart': 'qt', 'quarts': 'qt',
    'gal': 'gal', 'gallon': 'gal', 'gallons': 'gal',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml',
    'l': 'l', 'liter': 'l', 'liters': 'l',
    # Weight
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz',
    'lb': 'lb', 'lbs': 'lb', 'pound': 'lb', 'pounds': 'lb',
    'g': 'g', 'gram': 'g', 'grams': 'g',
    'kg': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    # Count
    'piece': 'piece', 'pieces': 'piece',
    'whole': 'whole', 'count': 'count', 'each': 'each',
    # Other
    'clove': 'clove', 'cloves': 'clove',
    'can': 'can', 'cans': 'can',
    'package': 'package', 'packages': 'package',
    'bunch': 'bunch', 'bunches': 'bunch',
}

_MIXED_RE = re.compile(r'^(\d+)\s+(\d+)/(\d+)$')
_FRACTION_RE = re.compile(r'^(\d+)/(\d+)$')
# Leading number, read the way a browser parseFloat reads "2 cups"
_DECIMAL_RE = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def normalize_unit(raw) -> str:
    """Map a unit spelling to its canonical token; unknown units pass through."""
    if not raw:
        return ''
    unit = str(raw).strip().lower()
    return UNIT_SYNONYMS.get(unit, unit)


def _divide(numerator: str, denominator: str) -> float:
    den = int(denominator)
    if den == 0:
        return 0.0
    return int(numerator) / den


def _parse_text(text: str) -> float:
    mixed = _MIXED_RE.match(text)
    if mixed:
        return int(mixed.group(1)) + _divide(mixed.group(2), mixed.group(3))

    fraction = _FRACTION_RE.match(text)
    if fraction:
        return _divide(fraction.group(1), fraction.group(2))

    decimal = _DECIMAL_RE.match(text)
    if not decimal:
        return 0.0
    return float(decimal.group(0))


def parse_quantity(raw: Union[str, int, float, None]) -> float:
    """Parse '1 1/2', '3/4', '2.5' (in that priority). Anything else is 0."""
    if isinstance(raw, bool) or raw is None:
        return 0.0
    try:
        if isinstance(raw, (int, float)):
            value = float(raw)
        else:
            value = _parse_text(str(raw).strip())
    except (OverflowError, ValueError):
        # digits beyond what a float (or int conversion) can hold
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def normalize_item_name(raw) -> str:
    """Identity key for an item: lowercase and trimmed, no stemming."""
    if raw is None:
        return ''
    return str(raw).lower().strip()


def format_quantity(quantity) -> str:
    """Round to 2 decimals and drop trailing zeros ('1.50' -> '1.5')."""
    if not quantity:
        return '0'
    rounded = round(float(quantity), 2)
    text = f"{rounded:.2f}".rstrip('0').rstrip('.')
    return text or '0'


__all__ = [
    'UNIT_SYNONYMS', 'normalize_unit', 'parse_quantity', 'normalize_item_name',
    'format_quantity',
]
