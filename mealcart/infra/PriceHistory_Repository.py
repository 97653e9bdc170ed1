"""Price history persistence. The log is append-only: nothing here edits or deletes rows."""
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from mealcart.domain.PriceHistoryEntry import PriceHistoryEntry
from mealcart.infra.json_store import JsonCollection
from mealcart.infra.paths import PRICE_HISTORY_FILENAME, data_path

logger = logging.getLogger(__name__)


class PriceHistoryRepository:
    def __init__(self, data_dir: Optional[Path] = None):
        self.store = JsonCollection(data_path(PRICE_HISTORY_FILENAME, data_dir))

    def list_price_history(self) -> List[PriceHistoryEntry]:
        entries = []
        for row in self.store.load():
            try:
                entries.append(PriceHistoryEntry.from_dict(row))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed price history row {row!r}: {e}")
        return entries

    def log_prices(self, entries: Iterable[PriceHistoryEntry]) -> List[PriceHistoryEntry]:
        entries = list(entries)
        self.store.append([e.to_dict() for e in entries])
        logger.info("Logged %d prices", len(entries))
        return entries
