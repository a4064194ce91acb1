from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date

from barberbook.application.exceptions import ValidationError
from barberbook.application.ports.service_catalog import ServiceCatalogPort
from barberbook.application.utils.time_math import add_minutes, format_time_24h, parse_time_24h
from barberbook.domain.entities.appointment import Appointment, AppointmentStatus

DEFAULT_START_TIME = "09:00"


@dataclass(frozen=True)
class AppointmentQuote:
    total_value: float
    total_duration: int
    end_time: str | None


@dataclass(frozen=True)
class BuildResult:
    appointment: Appointment | None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.appointment is not None


def quote(
    service_ids: list[str] | tuple[str, ...],
    start_time: str | None,
    catalog: ServiceCatalogPort,
) -> AppointmentQuote:
    """
    Running totals for a selection.

    Ids that no longer resolve in the catalog add nothing to either sum.
    end_time is None until there is both a start time and a non-zero duration.
    """
    total_value: float = 0
    total_duration = 0
    for service_id in service_ids:
        service = catalog.get_service(service_id)
        if service is None:
            continue
        total_value += service.price
        total_duration += service.duration

    end_time = None
    if parse_time_24h(start_time) and total_duration > 0:
        end_time = add_minutes(start_time, total_duration)
    return AppointmentQuote(total_value=total_value, total_duration=total_duration, end_time=end_time)


def build_appointment(
    client_name: str | None,
    service_ids: list[str] | tuple[str, ...],
    appointment_date: date,
    start_time: str | None,
    catalog: ServiceCatalogPort,
    existing: Appointment | None = None,
) -> BuildResult:
    """
    Compose a priced, time-blocked appointment from a form submission.

    Validation problems come back on the result instead of being raised.
    When existing is given the id and status are carried over (edit mode).
    """
    name = (client_name or "").strip()
    if not name:
        return BuildResult(None, ValidationError("Client name is required.", field="client_name"))
    if not service_ids:
        return BuildResult(None, ValidationError("Select at least one service.", field="service_ids"))
    if not start_time:
        return BuildResult(None, ValidationError("Start time is required.", field="start_time"))
    parsed_start = parse_time_24h(start_time)
    if parsed_start is None:
        return BuildResult(None, ValidationError(f"Invalid start time {start_time!r}.", field="start_time"))
    start_time = format_time_24h(*parsed_start)

    totals = quote(service_ids, start_time, catalog)
    appointment = Appointment(
        id=existing.id if existing else uuid.uuid4().hex,
        client_name=name,
        service_ids=tuple(service_ids),
        date=appointment_date,
        start_time=start_time,
        end_time=totals.end_time,
        total_value=totals.total_value,
        total_duration=totals.total_duration,
        status=existing.status if existing else AppointmentStatus.SCHEDULED,
    )
    return BuildResult(appointment)


def suggest_start_time(
    appointment_date: date,
    appointments: list[Appointment],
    fallback: str = DEFAULT_START_TIME,
) -> str:
    """Default start time for a new booking: right after the day's last appointment."""
    same_day = sorted(
        (a for a in appointments if a.date == appointment_date),
        key=lambda a: a.start_time,
    )
    if same_day and same_day[-1].end_time:
        return same_day[-1].end_time
    return fallback
