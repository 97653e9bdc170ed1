from fastapi import FastAPI, Query
from datetime import date as _date
from typing import Optional
import logging

from mealcart.events.web_observers import start as start_event_observers, get_events as get_web_events
from mealcart.utilities import config
from mealcart.utilities.constants import CATEGORIES, DAYS_OF_WEEK, STOCK_STATUSES
from mealcart.utilities.dates import format_date, week_label, week_start_for

# Routers
from mealcart.api.routes import budget, inventory, plan, recipes, shopping

# Logging
logger = logging.getLogger("mealcart_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Cart: Meal Planning & Shopping List API", debug=config.DEBUG)

# Include routers
app.include_router(recipes.router)
app.include_router(inventory.router)
app.include_router(plan.router)
app.include_router(shopping.router)
app.include_router(budget.router)


@app.on_event("startup")
def _startup_web_observers():
    """Register event bus subscribers for change notifications when the app starts."""
    start_event_observers()
    logger.info("Web observers for data-change events started (data dir: %s)", config.DATA_DIR)


@app.get('/api/meta')
def api_meta():
    """Fixed vocabularies and the current week, for clients building forms."""
    current = week_start_for(_date.today())
    return {
        "categories": list(CATEGORIES),
        "statuses": list(STOCK_STATUSES),
        "days": list(DAYS_OF_WEEK),
        "target_servings": config.TARGET_SERVINGS,
        "preserve_manual_items": config.PRESERVE_MANUAL_ITEMS,
        "current_week": format_date(current),
        "current_week_label": week_label(current),
    }


@app.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
):
    """
    Return recent data-change events.

    Client polling strategy:
        1. First call without 'since' to load the backlog (optional).
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    return get_web_events(since)
