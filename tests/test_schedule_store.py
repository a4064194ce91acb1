"""
Tests for the in-memory schedule.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from barberbook.application.exceptions import DuplicateIdError, NotFoundError
from barberbook.domain.entities.appointment import Appointment, AppointmentStatus
from barberbook.infrastructure.store.schedule_store import ScheduleStore


def _appointment(appointment_id: str, day: date, start: str, value: float = 30, completed: bool = False) -> Appointment:
    return Appointment(
        id=appointment_id,
        client_name=f"Client {appointment_id}",
        service_ids=("1",),
        date=day,
        start_time=start,
        end_time=None,
        total_value=value,
        total_duration=30,
        status=AppointmentStatus.COMPLETED if completed else AppointmentStatus.SCHEDULED,
    )


def test_add_rejects_duplicate_id():
    store = ScheduleStore([_appointment("a", date(2026, 5, 1), "09:00")])
    with pytest.raises(DuplicateIdError):
        store.add(_appointment("a", date(2026, 5, 2), "10:00"))
    assert len(store) == 1
    assert store.get("a").date == date(2026, 5, 1)


def test_update_keeps_position():
    store = ScheduleStore(
        [
            _appointment("a", date(2026, 5, 1), "09:00"),
            _appointment("b", date(2026, 5, 1), "10:00"),
            _appointment("c", date(2026, 5, 1), "11:00"),
        ]
    )
    store.update(replace(store.get("b"), client_name="Renamed"))
    assert [a.id for a in store.all()] == ["a", "b", "c"]
    assert store.get("b").client_name == "Renamed"


def test_update_missing_raises():
    store = ScheduleStore()
    with pytest.raises(NotFoundError):
        store.update(_appointment("x", date(2026, 5, 1), "09:00"))
    assert len(store) == 0


def test_remove():
    store = ScheduleStore([_appointment("a", date(2026, 5, 1), "09:00")])
    store.remove("a")
    assert store.get("a") is None
    with pytest.raises(NotFoundError):
        store.remove("a")


def test_complete_is_idempotent():
    store = ScheduleStore([_appointment("a", date(2026, 5, 1), "09:00")])
    once = store.complete("a")
    snapshot = store.all()
    twice = store.complete("a")

    assert once.status == AppointmentStatus.COMPLETED
    assert twice == once
    assert store.all() == snapshot


def test_complete_missing_leaves_collection_unchanged():
    store = ScheduleStore([_appointment("a", date(2026, 5, 1), "09:00")])
    before = store.all()
    with pytest.raises(NotFoundError):
        store.complete("nope")
    assert store.all() == before


def test_for_date_filters_and_sorts_by_start_time():
    day = date(2026, 5, 1)
    store = ScheduleStore(
        [
            _appointment("late", day, "15:30"),
            _appointment("other", date(2026, 5, 2), "08:00"),
            _appointment("early", day, "08:45"),
            _appointment("mid", day, "10:00"),
        ]
    )
    assert [a.id for a in store.for_date(day)] == ["early", "mid", "late"]


def test_for_window_only_completed_in_range_in_insertion_order():
    store = ScheduleStore(
        [
            _appointment("b", date(2026, 5, 3), "09:00", completed=True),
            _appointment("a", date(2026, 5, 1), "09:00", completed=True),
            _appointment("pending", date(2026, 5, 2), "09:00"),
            _appointment("after", date(2026, 5, 8), "09:00", completed=True),
        ]
    )
    assert [a.id for a in store.for_window(date(2026, 5, 1), date(2026, 5, 7))] == ["b", "a"]
