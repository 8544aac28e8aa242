from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Event
from .repository import EventRepository


def _to_event(r: dict) -> Event:
    return Event(
        event_id=int(r["event_id"]),
        title=r["title"],
        description=r.get("description") or "",
        event_date=normalize_mysql_date(r["event_date"]),
        url=r["url"],
    )


class MySQLEventRepository(EventRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT event_id, title, description, event_date, url
                FROM events
                ORDER BY event_date ASC, event_id ASC
                """
            )
            return [_to_event(r) for r in fetchall(cur)]

    def get_by_id(self, event_id: int) -> Optional[Event]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT event_id, title, description, event_date, url FROM events WHERE event_id=%s",
                (int(event_id),),
            )
            r = fetchone(cur)
            return _to_event(r) if r else None

    def create(self, *, title: str, description: str, event_date: date, url: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO events(title, description, event_date, url) VALUES(%s,%s,%s,%s)",
                (title, description, event_date, url),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, event_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM events WHERE event_id=%s", (int(event_id),))
            return cur.rowcount > 0
