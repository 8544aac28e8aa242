from __future__ import annotations

import pytest

from uniconnect.core.exceptions import NotFoundError, ValidationError


def test_events_listed_by_date(container):
    container.event_service.create_event(title="Hackathon", on="2025-05-10", url="https://uni.edu/hack")
    container.event_service.create_event(
        title="Orientation", description="Welcome", on="2025-04-01T00:00:00.000Z", url="http://uni.edu/o"
    )

    events = [e.to_json() for e in container.event_service.list_events()]

    assert [e["title"] for e in events] == ["Orientation", "Hackathon"]
    assert events[0]["date"] == "2025-04-01"
    assert events[1]["description"] == ""


def test_event_requires_title_date_url(container):
    with pytest.raises(ValidationError) as exc:
        container.event_service.create_event(title="Fest", on="", url="https://uni.edu")

    assert str(exc.value) == "All fields are required!"


def test_event_url_must_be_http(container):
    with pytest.raises(ValidationError):
        container.event_service.create_event(title="Fest", on="2025-01-01", url="javascript:alert(1)")


def test_delete_unknown_event(container):
    with pytest.raises(NotFoundError):
        container.event_service.delete_event(3)
