from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.datetime_utils import parse_client_date
from ..common.validators import parse_id, require_fields, require_non_empty, require_url
from ..core.exceptions import NotFoundError, ValidationError
from .model import Event
from .repository import EventRepository

logger = logging.getLogger(__name__)


class EventService:
    def __init__(self, events: EventRepository):
        self._events = events

    def list_events(self) -> Sequence[Event]:
        return sorted(self._events.list_all(), key=lambda e: (e.event_date, e.event_id))

    def create_event(self, *, title: Any, description: Any = "", on: Any = None, url: Any = None) -> Event:
        require_fields({"title": title, "date": on, "url": url}, ["title", "date", "url"])
        title = require_non_empty(title, "Title")
        url = require_url(url)
        event_date = parse_client_date(on)
        description = str(description or "").strip()

        event_id = self._events.create(title=title, description=description, event_date=event_date, url=url)
        logger.info("Event created - id=%s title=%s", event_id, title)
        return Event(event_id=event_id, title=title, description=description, event_date=event_date, url=url)

    def delete_event(self, event_id: Any) -> None:
        eid = parse_id(event_id, "Event")
        if not self._events.get_by_id(eid):
            raise NotFoundError("Event not found")
        if not self._events.delete_by_id(eid):
            raise ValidationError("Failed to delete event")
        logger.info("Event deleted - id=%s", eid)
