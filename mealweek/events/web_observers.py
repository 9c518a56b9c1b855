"""Web-facing observers for meal plan and recipe events.

Subscribes to every event in ALL_EVENTS on the GLOBAL_EVENT_BUS and keeps a
lightweight in-memory ring buffer of recent events that the web layer serves
from /api/events, so a client can refresh its plan view after another tab
re-rolled a day or ticked an item.

  * Each event gets an auto-increment integer id (cursor); clients ask for
    since=<last_id_seen> to receive only newer ones.
  * A Lock guards the buffer (uvicorn may run sync handlers in a threadpool).
    The buffer is per-process.
  * MAX_EVENTS caps memory.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

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
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
        }
        if isinstance(payload, dict):
            for k, v in payload.items():
                evt.setdefault(k, v)
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


def get_events(since: Optional[int] = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive), or the whole buffer when since is None.

    next_cursor is the largest id seen so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
