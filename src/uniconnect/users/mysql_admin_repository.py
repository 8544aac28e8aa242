from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, name, email, password_hash FROM admins WHERE email=%s",
                (email,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Admin(
                admin_id=int(r["admin_id"]),
                name=r["name"],
                email=r["email"],
                password_hash=r["password_hash"],
            )
