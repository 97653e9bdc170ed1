"""Web-facing observers for data-change events.

Subscribes to every event on GLOBAL_EVENT_BUS and keeps a lightweight
in-memory ring buffer that the API exposes for polling, so a client can
refresh the views affected by a change.

Design:
  * Each event gets an auto-increment integer id (cursor); clients ask only
    for newer events with since=<last_id_seen>.
  * A Lock guards the buffer (uvicorn may serve requests from a threadpool);
    with several processes each keeps its own buffer.
  * MAX_EVENTS caps memory.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            evt.update({k: v for k, v in payload.items() if k not in evt})
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for event_name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(event_name, _record)
    _started = True
    logger.debug("Web observers subscribed to %d events", len(ALL_EVENTS))


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the buffered backlog (up to MAX_EVENTS).
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
