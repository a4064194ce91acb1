from __future__ import annotations

from collections import Counter

from barberbook.domain.entities.appointment import Appointment
from barberbook.domain.entities.client_history import ClientHistory

MIN_QUERY_LENGTH = 3
FREQUENT_SERVICES_LIMIT = 3


def lookup_client_history(name_fragment: str | None, appointments: list[Appointment]) -> ClientHistory | None:
    """
    Visit history for clients whose name contains name_fragment (case-insensitive).

    Only completed appointments count. Fragments shorter than three characters
    return None so that initials do not pull in unrelated clients.
    """
    if not name_fragment or len(name_fragment) < MIN_QUERY_LENGTH:
        return None

    needle = name_fragment.lower()
    matches = [
        a for a in appointments
        if a.is_completed and needle in a.client_name.lower()
    ]
    if not matches:
        return None

    total = sum(a.total_value for a in matches)
    last_visit = max(a.date for a in matches)
    return ClientHistory(
        last_visit=last_visit,
        average_ticket=total / len(matches),
        total_visits=len(matches),
        frequent_services=_frequent_services(matches),
    )


def _frequent_services(matches: list[Appointment]) -> tuple[str, ...]:
    counts: Counter[str] = Counter()
    for appointment in matches:
        counts.update(appointment.service_ids)
    # most_common keeps first-seen order among equal counts
    return tuple(service_id for service_id, _ in counts.most_common(FREQUENT_SERVICES_LIMIT))
