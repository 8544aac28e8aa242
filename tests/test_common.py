from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from uniconnect.common.datetime_utils import parse_client_date
from uniconnect.common.validators import parse_year, require_fields, unique_in_order
from uniconnect.core.exceptions import ValidationError
from uniconnect.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2025-02-28", date(2025, 2, 28)),
        ("2025-02-28T23:59:59.999Z", date(2025, 2, 28)),
        ("2025-02-28T08:00:00+05:30", date(2025, 2, 28)),
    ],
)
def test_parse_client_date(value, expected):
    assert parse_client_date(value) == expected


def test_parse_client_date_default_and_errors():
    assert parse_client_date(None, default=date(2025, 1, 1)) == date(2025, 1, 1)
    with pytest.raises(ValidationError):
        parse_client_date(None)
    with pytest.raises(ValidationError):
        parse_client_date("yesterday")


def test_parse_year_bounds():
    assert parse_year("4") == 4
    for bad in ("0", 5, "two", None):
        with pytest.raises(ValidationError):
            parse_year(bad)


def test_require_fields_treats_blank_as_missing():
    require_fields({"a": "x", "b": 0}, ["a", "b"])
    with pytest.raises(ValidationError):
        require_fields({"a": "  "}, ["a"])


def test_unique_in_order():
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_sql_splitter_keeps_semicolons_inside_quotes():
    sql = _strip_create_db_and_use(
        "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nINSERT INTO t VALUES ('a;b');\nSELECT 1;"
    )

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


IST = timezone(timedelta(hours=5, minutes=30))


def test_parse_client_date_uses_the_local_calendar_day():
    # 23:30 UTC on the 28th is already the 1st in India.
    assert parse_client_date("2025-02-28T23:30:00.000Z", tz=IST) == date(2025, 3, 1)
    assert parse_client_date("2025-02-28T23:30:00.000Z", tz=timezone.utc) == date(2025, 2, 28)
    assert parse_client_date(datetime(2025, 2, 28, 23, 30, tzinfo=timezone.utc), tz=IST) == date(2025, 3, 1)


def test_parse_client_date_leaves_naive_timestamps_alone():
    assert parse_client_date("2025-02-28T23:30:00", tz=IST) == date(2025, 2, 28)


def test_parse_client_date_falls_back_to_local_zone(monkeypatch):
    from uniconnect.common import datetime_utils

    monkeypatch.setattr(datetime_utils, "LOCAL_TZ", IST)

    assert parse_client_date("2025-02-28T23:30:00.000Z") == date(2025, 3, 1)


def test_configure_logging_installs_one_named_handler():
    import logging

    from uniconnect.logging_config import HANDLER_NAME, configure_logging

    configure_logging("INFO")
    configure_logging("DEBUG")

    named = [h for h in logging.getLogger("uniconnect").handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logging.getLogger("uniconnect").level == logging.DEBUG


def test_sql_files_ship_with_the_package():
    from uniconnect.database.bootstrap import SQL_DIR

    schema = (SQL_DIR / "schema.sql").read_text(encoding="utf-8")
    assert "CREATE TABLE IF NOT EXISTS attendance" in schema
    assert (SQL_DIR / "seed.sql").is_file()
