from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class AppointmentStatus(str, Enum):
    SCHEDULED = "scheduled"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Appointment:
    id: str
    client_name: str
    service_ids: tuple[str, ...]
    date: date
    start_time: str  # HH:MM
    end_time: str | None  # HH:MM, derived from start_time + total_duration
    total_value: float
    total_duration: int
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    @property
    def is_completed(self) -> bool:
        return self.status == AppointmentStatus.COMPLETED
