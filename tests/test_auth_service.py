from __future__ import annotations

import pytest

from uniconnect.core.enums import Role
from uniconnect.core.exceptions import AuthenticationError


def test_student_login_returns_profile(container, seeded):
    user = container.auth_service.authenticate(" Alice@Uni.edu ", "alice@123", "student")

    assert user.role == Role.STUDENT
    assert user.to_json() == {
        "_id": seeded.alice,
        "name": "Alice",
        "email": "alice@uni.edu",
        "role": "student",
        "registerNumber": "CSE001",
        "branchId": seeded.cse,
        "year": 1,
    }


def test_teacher_and_admin_login(container, seeded):
    assert container.auth_service.authenticate("sparrow@uni.edu", "sparrow@123", "teacher").user_id == seeded.teacher
    assert container.auth_service.authenticate("jack@uni.edu", "jack@123", "admin").role == Role.ADMIN


def test_role_picks_the_account_table(container, seeded):
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("alice@uni.edu", "alice@123", "teacher")


@pytest.mark.parametrize(
    "email,password,role",
    [
        ("alice@uni.edu", "wrong", "student"),
        ("nobody@uni.edu", "alice@123", "student"),
        ("alice@uni.edu", "alice@123", "janitor"),
        ("", "", "student"),
    ],
)
def test_bad_credentials_share_one_message(container, seeded, email, password, role):
    with pytest.raises(AuthenticationError) as exc:
        container.auth_service.authenticate(email, password, role)

    assert str(exc.value) == "Invalid email or password"
