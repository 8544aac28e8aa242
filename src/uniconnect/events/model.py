from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Event:
    event_id: int
    title: str
    description: str
    event_date: date
    url: str

    def to_json(self) -> dict:
        return {
            "_id": self.event_id,
            "title": self.title,
            "description": self.description,
            "date": self.event_date.strftime("%Y-%m-%d"),
            "url": self.url,
        }
