"""JSON file persistence for one collection (a list of row dicts)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


class JsonCollection:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        """Read all rows; a missing or unreadable file reads as empty."""
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {self.path.name}: {e}")
            return []
        except OSError as e:
            logger.error(f"Error reading {self.path.name}: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Expected a list in {self.path.name}, got {type(data).__name__}")
            return []
        return data

    def save(self, rows: List[Dict[str, Any]]) -> None:
        """Write rows atomically (temp file in the same directory, then move)."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(rows, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def append(self, rows: List[Dict[str, Any]]) -> None:
        if not rows:
            return
        self.save(self.load() + list(rows))

    def __repr__(self) -> str:
        return f"JsonCollection({str(self.path)!r})"
