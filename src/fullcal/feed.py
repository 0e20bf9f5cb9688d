from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
import json
import logging

from .config import JsonConfig
from .errors import EncodingFailure
from .models import EventData

log = logging.getLogger(__name__)

class EventJSONEncoder(json.JSONEncoder):
    """Encode ``EventData`` wherever it appears inside a JSON document."""

    def default(self, o: Any) -> Any:
        if isinstance(o, EventData):
            return o.json_serialize()
        return super().default(o)

def events_to_dicts(events: Iterable[EventData]) -> List[Dict[str, Any]]:
    return [e.to_dict() for e in events]

def dump_events(events: Iterable[EventData], json_config: Optional[JsonConfig] = None) -> str:
    """Encode events as a FullCalendar event feed (a JSON array, input order kept)."""
    cfg = json_config or JsonConfig()
    items = list(events)
    log.debug("Encoding feed of %d events", len(items))
    try:
        return json.dumps(items, cls=EventJSONEncoder, **cfg.dumps_kwargs())
    except (TypeError, ValueError) as exc:
        raise EncodingFailure(f"Event feed could not be encoded as JSON: {exc}") from exc
