from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from werkzeug.security import generate_password_hash

from .connection import DBConfig, DatabaseConnection

logger = logging.getLogger(__name__)

# schema.sql and seed.sql ship inside the package.
SQL_DIR = Path(__file__).resolve().parent

# Matches the placeholders shown on the login screen.
DEMO_ACCOUNTS = {
    "admin": ("Jack", "jack@gmail.com", "jack@123"),
    "teacher": ("Sparrow", "sparrow@gmail.com", "sparrow@123"),
    "student": ("Gibbs", "gibbs@gmail.com", "gibbs@123"),
}


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_script(conn_factory: DatabaseConnection, path: Path) -> None:
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    conn_factory = DatabaseConnection(DBConfig.from_dict(db_config))
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(schema_path))
    logger.info("Applied schema %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_script(DatabaseConnection(DBConfig.from_dict(db_config)), Path(seed_path))
    logger.info("Applied seed %s", seed_path)


def ensure_demo_users(db_config: dict) -> None:
    """Upsert one demo account per role (student goes into the first branch, year 1)."""

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)

        name, email, password = DEMO_ACCOUNTS["admin"]
        cur.execute(
            """
            INSERT INTO admins (name, email, password_hash) VALUES (%s, %s, %s)
            ON DUPLICATE KEY UPDATE name=VALUES(name), password_hash=VALUES(password_hash)
            """,
            (name, email, generate_password_hash(password)),
        )

        cur.execute("SELECT branch_id FROM branches ORDER BY branch_id ASC LIMIT 1")
        branch = cur.fetchone()
        if not branch:
            raise RuntimeError("Seed branches before creating demo users")
        branch_id = int(branch["branch_id"])

        name, email, password = DEMO_ACCOUNTS["teacher"]
        cur.execute(
            """
            INSERT INTO teachers (name, email, password_hash) VALUES (%s, %s, %s)
            ON DUPLICATE KEY UPDATE name=VALUES(name), password_hash=VALUES(password_hash)
            """,
            (name, email, generate_password_hash(password)),
        )
        cur.execute("SELECT teacher_id FROM teachers WHERE email=%s", (email,))
        teacher_id = int(cur.fetchone()["teacher_id"])
        cur.execute(
            """
            INSERT IGNORE INTO teacher_assignments (teacher_id, branch_id, year, subject)
            SELECT %s, branch_id, year, subject FROM branch_subjects WHERE branch_id=%s AND year=1
            """,
            (teacher_id, branch_id),
        )

        name, email, password = DEMO_ACCOUNTS["student"]
        cur.execute(
            """
            INSERT INTO students (name, register_number, email, password_hash, branch_id, year)
            VALUES (%s, %s, %s, %s, %s, 1)
            ON DUPLICATE KEY UPDATE name=VALUES(name), password_hash=VALUES(password_hash)
            """,
            (name, "DEMO001", email, generate_password_hash(password), branch_id),
        )

        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
