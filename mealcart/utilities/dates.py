"""Week helpers: every planning week is identified by its ISO Monday."""
from datetime import date, datetime, timedelta
from typing import Union

from mealcart.utilities.constants import DATE_FORMAT


def week_start_for(day: date) -> date:
    """Return the Monday of the ISO week containing ``day``."""
    if isinstance(day, datetime):
        day = day.date()
    return day - timedelta(days=day.weekday())


def parse_date(value: Union[str, date]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), DATE_FORMAT).date()


def parse_week_start(value: Union[str, date]) -> date:
    """Parse an ISO date and snap it to the Monday of its week."""
    return week_start_for(parse_date(value))


def format_date(day: date) -> str:
    return day.strftime(DATE_FORMAT)


def previous_week(week_start: date) -> date:
    return week_start - timedelta(days=7)


def next_week(week_start: date) -> date:
    return week_start + timedelta(days=7)


def week_end(week_start: date) -> date:
    """Exclusive end of the week (the following Monday)."""
    return week_start + timedelta(days=7)


def day_label(day: str) -> str:
    return day[:1].upper() + day[1:]


def week_label(week_start: date) -> str:
    return f"Week of {week_start.strftime('%b')} {week_start.day}"


def is_current_week(week_start: date, today: date = None) -> bool:
    return week_start == week_start_for(today or date.today())


__all__ = [
    'week_start_for', 'parse_date', 'parse_week_start', 'format_date',
    'previous_week', 'next_week', 'week_end', 'day_label',
    'week_label', 'is_current_week',
]
