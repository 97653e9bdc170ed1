"""Display formatting helpers shared by exports and API payloads."""
from typing import Optional, Union


def format_currency(amount: Optional[Union[float, str]]) -> str:
    """Format an amount as dollars; empty or invalid values render as $0.00."""
    if amount is None or amount == '':
        return '$0.00'
    try:
        num = float(amount)
    except (TypeError, ValueError):
        return '$0.00'
    sign = '-' if num < 0 else ''
    return f"{sign}${abs(num):,.2f}"


def format_cook_time(minutes: Optional[Union[int, str]]) -> str:
    if not minutes:
        return ''
    try:
        num = int(minutes)
    except (TypeError, ValueError):
        return ''
    if num < 60:
        return f"{num} min"
    hours, mins = divmod(num, 60)
    if mins == 0:
        return f"{hours} hr"
    return f"{hours} hr {mins} min"
