from __future__ import annotations

import pytest

from uniconnect.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from uniconnect.marks.service import parse_marks


def test_assign_marks_writes_batch(container, repos, seeded):
    count = container.marks_service.assign_marks(
        [
            {"teacherId": seeded.teacher, "studentId": seeded.alice, "subject": "Maths", "year": "1", "marks": "78"},
            {"teacherId": seeded.teacher, "studentId": seeded.alice, "subject": "Physics", "year": 1, "marks": 42},
        ]
    )

    assert count == 2
    marks = container.marks_service.marks_for_student(seeded.alice)
    assert [m.to_json() for m in marks] == [
        {"subject": "Maths", "year": 1, "marks": 78, "passed": True},
        {"subject": "Physics", "year": 1, "marks": 42, "passed": False},
    ]
    assert marks[0].teacher_id == seeded.teacher


def test_reassigning_overwrites_previous_mark(container, repos, seeded):
    container.marks_service.assign_marks([{"studentId": seeded.alice, "subject": "Maths", "year": 1, "marks": 30}])
    container.marks_service.assign_marks([{"studentId": seeded.alice, "subject": "Maths", "year": 1, "marks": 65}])

    assert [m.marks for m in container.marks_service.marks_for_student(seeded.alice)] == [65]


def test_empty_batch_is_rejected(container, seeded):
    with pytest.raises(ValidationError) as exc:
        container.marks_service.assign_marks([])

    assert str(exc.value) == "Please enter marks for at least one student."


def test_missing_subject_is_rejected(container, seeded):
    with pytest.raises(ValidationError) as exc:
        container.marks_service.assign_marks([{"studentId": seeded.alice, "subject": "", "year": 1, "marks": 10}])

    assert str(exc.value) == "Please select a subject!"


def test_bad_entry_stops_whole_batch(container, repos, seeded):
    with pytest.raises(ValidationError):
        container.marks_service.assign_marks(
            [
                {"studentId": seeded.alice, "subject": "Maths", "year": 1, "marks": 50},
                {"studentId": seeded.alice, "subject": "Physics", "year": 1, "marks": 101},
            ]
        )

    assert repos.marks.writes == 0


def test_teacher_must_hold_subject_for_class(container, seeded):
    with pytest.raises(AuthorizationError):
        container.marks_service.assign_marks(
            [{"teacherId": seeded.teacher, "studentId": seeded.bob, "subject": "Data Structures", "year": 2, "marks": 70}]
        )


def test_missing_year_falls_back_to_student_year(container, seeded):
    container.marks_service.assign_marks([{"studentId": seeded.bob, "subject": "Data Structures", "marks": 55}])

    assert container.marks_service.marks_for_student(seeded.bob)[0].year == 2


def test_marks_for_unknown_student(container, seeded):
    with pytest.raises(NotFoundError):
        container.marks_service.marks_for_student(404)


@pytest.mark.parametrize("value", ["abc", None, 12.5, True, -1, 101])
def test_parse_marks_rejects(value):
    with pytest.raises(ValidationError):
        parse_marks(value)


def test_parse_marks_accepts_numeric_strings_and_whole_floats():
    assert parse_marks(" 87 ") == 87
    assert parse_marks(90.0) == 90
    assert parse_marks(0) == 0
