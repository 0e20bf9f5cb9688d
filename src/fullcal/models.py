"""FullCalendar event value object.

``EventData`` carries everything the FullCalendar frontend needs to
render one event and projects it into the sparse, camelCase mapping the
library expects. Instances are validated once and never change.
"""

from __future__ import annotations
from dataclasses import KW_ONLY, dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union
import json
import logging

from .config import JsonConfig
from .errors import EncodingFailure, InvalidConfiguration
from .formatting import format_atom, is_aware

log = logging.getLogger(__name__)

EventId = Union[int, str]

ALL_DAY_WITH_END_MESSAGE = (
    "An all-day event cannot define an end. Set allDay to false or end to absent."
)

def _copy_mapping(value: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    return dict(value)

@dataclass(frozen=True)
class EventData:
    id: EventId
    title: str
    start: datetime                         # timezone-aware
    _: KW_ONLY
    end: Optional[datetime] = None          # timezone-aware, never set for all-day events
    all_day: bool = False
    resource_ids: Sequence[EventId] = ()
    group_id: Optional[EventId] = None
    url: Optional[str] = None
    open_url_in_new_tab: bool = False
    text_color: Optional[str] = None
    background_color: Optional[str] = None
    border_color: Optional[str] = None
    extended_props: Optional[Mapping[str, Any]] = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.all_day and self.end is not None:
            raise InvalidConfiguration(ALL_DAY_WITH_END_MESSAGE)
        if not is_aware(self.start):
            raise InvalidConfiguration(
                f"Event start must be a timezone-aware datetime, got {self.start!r}."
            )
        if self.end is not None and not is_aware(self.end):
            raise InvalidConfiguration(
                f"Event end must be a timezone-aware datetime, got {self.end!r}."
            )
        if isinstance(self.resource_ids, (str, bytes)):
            raise InvalidConfiguration(
                f"Event resource_ids must be a sequence of ids, got {self.resource_ids!r}."
            )

        # Snapshot caller-owned containers; later changes to them must not leak in.
        object.__setattr__(self, "resource_ids", tuple(self.resource_ids))
        object.__setattr__(self, "extended_props", _copy_mapping(self.extended_props))
        object.__setattr__(self, "options", _copy_mapping(self.options or {}))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "allDay": self.all_day,
            "start": format_atom(self.start),
        }

        if self.end is not None:
            data["end"] = format_atom(self.end)

        resource_ids: Tuple[EventId, ...] = tuple(self.resource_ids)
        if len(resource_ids) == 1:
            data["resourceId"] = resource_ids[0]
        elif len(resource_ids) > 1:
            data["resourceIds"] = list(resource_ids)

        if self.group_id is not None:
            data["groupId"] = self.group_id

        if self.url is not None:
            data["url"] = self.url
            data["shouldOpenUrlInNewTab"] = self.open_url_in_new_tab

        if self.extended_props is not None:
            data["extendedProps"] = dict(self.extended_props)

        if self.text_color is not None:
            data["textColor"] = self.text_color
        if self.background_color is not None:
            data["backgroundColor"] = self.background_color
        if self.border_color is not None:
            data["borderColor"] = self.border_color

        overridden = [key for key in self.options if key in data]
        if overridden:
            log.debug("Event %r: options override computed keys %s", self.id, overridden)
        data.update(self.options)
        return data

    def json_serialize(self) -> Dict[str, Any]:
        """Hook used by ``fullcal.feed.EventJSONEncoder``."""
        return self.to_dict()

    def to_json(self, json_config: Optional[JsonConfig] = None) -> str:
        cfg = json_config or JsonConfig()
        try:
            return json.dumps(self.to_dict(), **cfg.dumps_kwargs())
        except (TypeError, ValueError) as exc:
            raise EncodingFailure(f"Event {self.id!r} could not be encoded as JSON: {exc}") from exc

    def __str__(self) -> str:
        return self.to_json()
