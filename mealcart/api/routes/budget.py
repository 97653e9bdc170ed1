from datetime import date
from pathlib import Path

from fastapi import APIRouter, Depends, Query

from mealcart.api.deps import get_data_dir, week_or_400
from mealcart.domain.PriceHistoryEntry import PriceHistoryEntry
from mealcart.events.event_helpers import publish_prices_logged
from mealcart.infra.PriceHistory_Repository import PriceHistoryRepository
from mealcart.infra.snapshot_loader import load_snapshot
from mealcart.logic.budget.summary import recent_history, week_budget_summary
from mealcart.utilities.validators import PriceLogInput

router = APIRouter(tags=["budget"])


@router.get("/api/budget/{week}")
def get_budget(week: str, data_dir: Path = Depends(get_data_dir)):
    """This week's estimate against last week's logged spend."""
    week_start = week_or_400(week)
    snapshot = load_snapshot(data_dir)
    return week_budget_summary(snapshot.shopping_list_for(week_start), snapshot.price_history, week_start)


@router.get("/api/price-history")
def get_price_history(limit: int = Query(50, ge=1), data_dir: Path = Depends(get_data_dir)):
    history = PriceHistoryRepository(data_dir).list_price_history()
    return {"count": len(history), "entries": [e.to_dict() for e in recent_history(history, limit)]}


@router.post("/api/price-history", status_code=201)
def log_prices(payload: PriceLogInput, data_dir: Path = Depends(get_data_dir)):
    today = date.today()
    entries = [
        PriceHistoryEntry(date=p.date or today, item=p.item, price=p.price, store=p.store)
        for p in payload.prices
    ]
    PriceHistoryRepository(data_dir).log_prices(entries)
    total = round(sum(e.price for e in entries), 2)
    publish_prices_logged(len(entries), total)
    return {"logged": len(entries), "total": total, "entries": [e.to_dict() for e in entries]}
