from __future__ import annotations

from datetime import date

import pytest

from uniconnect.core.enums import AttendanceStatus
from uniconnect.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_mark_accepts_js_date_and_keeps_calendar_day(container, repos, seeded):
    record = container.attendance_service.mark(
        student_id=seeded.alice, status="Present", on="2025-03-01T09:15:00.000Z"
    )

    assert record.attendance_date == date(2025, 3, 1)
    assert repos.attendance.get_for_student_and_date(seeded.alice, date(2025, 3, 1)).status == AttendanceStatus.PRESENT


def test_mark_defaults_to_today(container, seeded, monkeypatch):
    monkeypatch.setattr("uniconnect.attendance.service.today_local", lambda: date(2025, 1, 6))

    record = container.attendance_service.mark(student_id=seeded.alice, status="absent")

    assert record.attendance_date == date(2025, 1, 6)
    assert record.status == AttendanceStatus.ABSENT


def test_remarking_same_day_overwrites(container, repos, seeded):
    container.attendance_service.mark(student_id=seeded.alice, status="Absent", on="2025-03-01")
    container.attendance_service.mark(student_id=seeded.alice, status="Present", on="2025-03-01")

    records, summary = container.attendance_service.history(seeded.alice)
    assert len(records) == 1
    assert records[0].status == AttendanceStatus.PRESENT
    assert summary.total == 1


def test_student_is_required(container, seeded):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.mark(student_id="", status="Present")

    assert str(exc.value) == "Please select a student."


def test_unknown_status_is_rejected(container, seeded):
    with pytest.raises(ValidationError):
        container.attendance_service.mark(student_id=seeded.alice, status="Late", on="2025-03-01")


def test_teacher_outside_class_is_rejected(container, seeded):
    with pytest.raises(AuthorizationError):
        container.attendance_service.mark(
            student_id=seeded.bob, status="Present", on="2025-03-01", teacher_id=seeded.teacher
        )


def test_history_summary_newest_first(container, seeded):
    for day, status in [("2025-03-01", "Present"), ("2025-03-03", "Absent"), ("2025-03-02", "Present")]:
        container.attendance_service.mark(student_id=seeded.alice, status=status, on=day)

    records, summary = container.attendance_service.history(seeded.alice)

    assert [r.to_json()["date"] for r in records] == ["2025-03-03", "2025-03-02", "2025-03-01"]
    assert summary.to_json() == {"total": 3, "present": 2, "absent": 1, "percentage": 66.67}


def test_history_unknown_student(container, seeded):
    with pytest.raises(NotFoundError):
        container.attendance_service.history(999)
