from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ClientHistory:
    last_visit: date
    average_ticket: float
    total_visits: int
    frequent_services: tuple[str, ...] = ()
