from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, placeholders
from .model import Branch, BranchYear
from .repository import BranchRepository


class MySQLBranchRepository(BranchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _load_years(self, cur, branch_ids: Sequence[int]) -> dict[int, tuple[BranchYear, ...]]:
        if not branch_ids:
            return {}
        cur.execute(
            f"""
            SELECT branch_id, year, subject
            FROM branch_subjects
            WHERE branch_id IN ({placeholders(len(branch_ids))})
            ORDER BY branch_id ASC, year ASC, position ASC, branch_subject_id ASC
            """,
            tuple(branch_ids),
        )
        grouped: dict[int, dict[int, list[str]]] = {}
        for r in fetchall(cur):
            grouped.setdefault(int(r["branch_id"]), {}).setdefault(int(r["year"]), []).append(r["subject"])

        return {
            bid: tuple(BranchYear(year=y, subjects=tuple(subjects)) for y, subjects in years.items())
            for bid, years in grouped.items()
        }

    def _fetch(self, where: str = "", params: tuple = ()) -> list[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT branch_id, branch_name
                FROM branches
                {where}
                ORDER BY branch_name ASC
                """,
                params,
            )
            rows = fetchall(cur)
            years = self._load_years(cur, [int(r["branch_id"]) for r in rows])
            return [
                Branch(
                    branch_id=int(r["branch_id"]),
                    branch_name=r["branch_name"],
                    years=years.get(int(r["branch_id"]), ()),
                )
                for r in rows
            ]

    def list_all(self) -> Sequence[Branch]:
        return self._fetch()

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        rows = self._fetch("WHERE branch_id=%s", (int(branch_id),))
        return rows[0] if rows else None

    def get_by_name(self, branch_name: str) -> Optional[Branch]:
        rows = self._fetch("WHERE branch_name=%s", (branch_name,))
        return rows[0] if rows else None

    def create(self, *, branch_name: str, years: Sequence[BranchYear]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO branches(branch_name) VALUES(%s)", (branch_name,))
            branch_id = int(cur.lastrowid)
            rows = [
                (branch_id, y.year, subject, position)
                for y in years
                for position, subject in enumerate(y.subjects)
            ]
            if rows:
                cur.executemany(
                    "INSERT INTO branch_subjects(branch_id, year, subject, position) VALUES(%s,%s,%s,%s)",
                    rows,
                )
            return branch_id

    def delete_by_id(self, branch_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM branches WHERE branch_id=%s", (int(branch_id),))
            return cur.rowcount > 0
