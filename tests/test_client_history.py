"""
Tests for client visit history lookup.
"""

from __future__ import annotations

from datetime import date

import pytest

from barberbook.application.use_cases.client_history import lookup_client_history
from barberbook.domain.entities.appointment import Appointment, AppointmentStatus


def _visit(client: str, day: date, value: float, services=("1",), completed: bool = True) -> Appointment:
    return Appointment(
        id=f"{client}-{day.isoformat()}-{value}",
        client_name=client,
        service_ids=tuple(services),
        date=day,
        start_time="09:00",
        end_time="09:30",
        total_value=value,
        total_duration=30,
        status=AppointmentStatus.COMPLETED if completed else AppointmentStatus.SCHEDULED,
    )


def _john_visits() -> list[Appointment]:
    return [
        _visit("John", date(2026, 1, 10), 30),
        _visit("John", date(2026, 2, 20), 45),
        _visit("John", date(2026, 1, 25), 20),
    ]


def test_two_character_fragment_returns_none():
    assert lookup_client_history("Jo", _john_visits()) is None


def test_three_character_fragment_finds_history():
    history = lookup_client_history("Joh", _john_visits())

    assert history is not None
    assert history.last_visit == date(2026, 2, 20)
    assert history.average_ticket == pytest.approx(95 / 3)
    assert history.total_visits == 3


def test_match_is_case_insensitive_substring():
    appointments = [_visit("Maria Oliveira", date(2026, 4, 1), 50)]
    history = lookup_client_history("OLIV", appointments)
    assert history is not None
    assert history.last_visit == date(2026, 4, 1)


def test_scheduled_appointments_are_ignored():
    appointments = [
        _visit("Paulo", date(2026, 4, 1), 30),
        _visit("Paulo", date(2026, 6, 1), 100, completed=False),
    ]
    history = lookup_client_history("Paulo", appointments)
    assert history.last_visit == date(2026, 4, 1)
    assert history.average_ticket == 30
    assert history.total_visits == 1


def test_no_completed_match_returns_none():
    appointments = [_visit("Paulo", date(2026, 4, 1), 30, completed=False)]
    assert lookup_client_history("Paulo", appointments) is None
    assert lookup_client_history("Xavier", _john_visits()) is None


def test_empty_fragment_returns_none():
    assert lookup_client_history("", _john_visits()) is None
    assert lookup_client_history(None, _john_visits()) is None


def test_frequent_services_most_selected_first():
    appointments = [
        _visit("Rafael", date(2026, 1, 1), 30, services=("cut",)),
        _visit("Rafael", date(2026, 1, 8), 50, services=("beard", "cut")),
        _visit("Rafael", date(2026, 1, 15), 20, services=("beard",)),
        _visit("Rafael", date(2026, 1, 22), 30, services=("cut", "wash", "brow")),
    ]
    history = lookup_client_history("Rafa", appointments)
    assert history.frequent_services == ("cut", "beard", "wash")
