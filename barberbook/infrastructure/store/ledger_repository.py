from __future__ import annotations

import json
import logging
from typing import Any

from barberbook.application.exceptions import StorageError
from barberbook.application.ports.key_value_store import KeyValueStorePort
from barberbook.application.utils.time_math import format_iso_date, parse_iso_date
from barberbook.domain.entities.appointment import Appointment, AppointmentStatus
from barberbook.domain.entities.service import Service
from barberbook.infrastructure.catalog.seed_data import SEED_SERVICES

logger = logging.getLogger(__name__)

DEFAULT_SERVICES_KEY = "barbershop_services"
DEFAULT_APPOINTMENTS_KEY = "barbershop_appointments"


class LedgerRepository:
    """
    Loads and saves the two persisted collections.

    Each save replaces the whole slot with the full collection. Field names on
    disk are camelCase, dates are YYYY-MM-DD and times HH:MM.
    """

    def __init__(
        self,
        store: KeyValueStorePort,
        services_key: str = DEFAULT_SERVICES_KEY,
        appointments_key: str = DEFAULT_APPOINTMENTS_KEY,
    ) -> None:
        self._store = store
        self._services_key = services_key
        self._appointments_key = appointments_key

    def load_services(self) -> list[Service]:
        records = self._load_records(self._services_key)
        if records is None:
            logger.info("Services slot empty, using seed catalog", extra={"slot": self._services_key})
            return list(SEED_SERVICES)
        return [self._deserialize_service(record) for record in records]

    def save_services(self, services: list[Service]) -> None:
        self._save_records(self._services_key, [self._serialize_service(s) for s in services])

    def load_appointments(self) -> list[Appointment]:
        records = self._load_records(self._appointments_key)
        if records is None:
            return []
        return [self._deserialize_appointment(record) for record in records]

    def save_appointments(self, appointments: list[Appointment]) -> None:
        self._save_records(self._appointments_key, [self._serialize_appointment(a) for a in appointments])

    def _load_records(self, key: str) -> list[dict[str, Any]] | None:
        text = self._store.load(key)
        if text is None:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"Slot {key!r} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"Slot {key!r} must hold a list, got {type(data).__name__}")
        return data

    def _save_records(self, key: str, records: list[dict[str, Any]]) -> None:
        self._store.save(key, json.dumps(records, indent=2, ensure_ascii=False))
        logger.debug("Slot saved", extra={"slot": key, "count": len(records)})

    def _serialize_service(self, service: Service) -> dict[str, Any]:
        return {
            "id": service.id,
            "name": service.name,
            "price": service.price,
            "duration": service.duration,
        }

    def _deserialize_service(self, data: dict[str, Any]) -> Service:
        try:
            return Service(
                id=str(data["id"]),
                name=data["name"],
                price=data["price"],
                duration=int(data["duration"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Malformed service record: {data!r}") from e

    def _serialize_appointment(self, appointment: Appointment) -> dict[str, Any]:
        return {
            "id": appointment.id,
            "clientName": appointment.client_name,
            "serviceIds": list(appointment.service_ids),
            "date": format_iso_date(appointment.date),
            "startTime": appointment.start_time,
            "endTime": appointment.end_time or "",
            "totalValue": appointment.total_value,
            "totalDuration": appointment.total_duration,
            "status": appointment.status.value,
        }

    def _deserialize_appointment(self, data: dict[str, Any]) -> Appointment:
        try:
            return Appointment(
                id=str(data["id"]),
                client_name=data["clientName"],
                service_ids=tuple(str(s) for s in data["serviceIds"]),
                date=parse_iso_date(data["date"]),
                start_time=data["startTime"],
                end_time=data.get("endTime") or None,
                total_value=data["totalValue"],
                total_duration=int(data["totalDuration"]),
                status=AppointmentStatus(data.get("status", AppointmentStatus.SCHEDULED.value)),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Malformed appointment record: {data!r}") from e
