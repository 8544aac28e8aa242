from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Event


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        """Ordered by event date, oldest first."""

        raise NotImplementedError

    def get_by_id(self, event_id: int) -> Optional[Event]:
        raise NotImplementedError

    def create(self, *, title: str, description: str, event_date: date, url: str) -> int:
        raise NotImplementedError

    def delete_by_id(self, event_id: int) -> bool:
        raise NotImplementedError
