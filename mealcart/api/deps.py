"""Shared request helpers for the API routers."""
from datetime import date
from pathlib import Path

from fastapi import HTTPException

from mealcart.utilities.config import DATA_DIR
from mealcart.utilities.dates import parse_week_start


def get_data_dir() -> Path:
    """Data directory for the request; tests override this dependency."""
    return DATA_DIR


def week_or_400(week: str) -> date:
    """Parse a YYYY-MM-DD path segment and snap it to its Monday."""
    try:
        return parse_week_start(week)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid week date '{week}', expected YYYY-MM-DD")
