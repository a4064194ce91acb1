from __future__ import annotations

from dataclasses import replace
from datetime import date

from barberbook.application.exceptions import DuplicateIdError, NotFoundError
from barberbook.domain.entities.appointment import Appointment, AppointmentStatus


class ScheduleStore:
    """
    Canonical in-memory collection of appointments, in insertion order.

    Records are frozen; update and complete swap the stored record for a new
    one at the same position. No overlap or double-booking checks are made.
    """

    def __init__(self, appointments: list[Appointment] | None = None) -> None:
        self._appointments: dict[str, Appointment] = {}
        for appointment in appointments or ():
            self.add(appointment)

    def __len__(self) -> int:
        return len(self._appointments)

    def all(self) -> list[Appointment]:
        return list(self._appointments.values())

    def get(self, appointment_id: str) -> Appointment | None:
        return self._appointments.get(appointment_id)

    def add(self, appointment: Appointment) -> None:
        if appointment.id in self._appointments:
            raise DuplicateIdError("appointment", appointment.id)
        self._appointments[appointment.id] = appointment

    def update(self, appointment: Appointment) -> None:
        if appointment.id not in self._appointments:
            raise NotFoundError("appointment", appointment.id)
        self._appointments[appointment.id] = appointment

    def remove(self, appointment_id: str) -> None:
        if appointment_id not in self._appointments:
            raise NotFoundError("appointment", appointment_id)
        del self._appointments[appointment_id]

    def complete(self, appointment_id: str) -> Appointment:
        current = self._appointments.get(appointment_id)
        if current is None:
            raise NotFoundError("appointment", appointment_id)
        if current.is_completed:
            return current
        completed = replace(current, status=AppointmentStatus.COMPLETED)
        self._appointments[appointment_id] = completed
        return completed

    def for_date(self, day: date) -> list[Appointment]:
        # HH:MM strings sort chronologically
        return sorted(
            (a for a in self._appointments.values() if a.date == day),
            key=lambda a: a.start_time,
        )

    def for_window(self, start: date, end: date) -> list[Appointment]:
        return [
            a
            for a in self._appointments.values()
            if a.is_completed and start <= a.date <= end
        ]
