from __future__ import annotations

import logging
from datetime import date

from barberbook.application.exceptions import DuplicateIdError, NotFoundError, StorageError
from barberbook.application.use_cases.build_appointment import (
    DEFAULT_START_TIME,
    AppointmentQuote,
    build_appointment,
    quote,
    suggest_start_time,
)
from barberbook.application.use_cases.client_history import lookup_client_history
from barberbook.application.use_cases.message_template import build_share_url, compose_confirmation_message
from barberbook.application.use_cases.reporting import daily_total, standard_report, summarize
from barberbook.domain.entities.appointment import Appointment
from barberbook.domain.entities.client_history import ClientHistory
from barberbook.domain.entities.report import RevenueSummary
from barberbook.domain.entities.service import Service
from barberbook.infrastructure.catalog.service_catalog_store import ServiceCatalogStore, create_service
from barberbook.infrastructure.store.ledger_repository import LedgerRepository
from barberbook.infrastructure.store.schedule_store import ScheduleStore


class Ledger:
    """
    Operator-facing entry point tying catalog, schedule and storage together.

    Every mutation is applied to a copy of the affected collection, written
    through to the repository, and only then swapped in. A failure at any
    step leaves both memory and storage as they were.
    """

    def __init__(
        self,
        catalog: ServiceCatalogStore,
        schedule: ScheduleStore,
        repository: LedgerRepository,
        default_start_time: str = DEFAULT_START_TIME,
        business_name: str = "",
        currency: str = "R$",
        language: str = "pt",
    ) -> None:
        self._catalog = catalog
        self._schedule = schedule
        self._repository = repository
        self._default_start_time = default_start_time
        self._business_name = business_name
        self._currency = currency
        self._language = language
        self._logger = logging.getLogger(__name__)

    @classmethod
    def load(cls, repository: LedgerRepository, **options) -> "Ledger":
        try:
            catalog = ServiceCatalogStore(repository.load_services())
            schedule = ScheduleStore(repository.load_appointments())
        except DuplicateIdError as e:
            raise StorageError(f"Stored {e.entity}s contain duplicate id {e.entity_id!r}") from e
        return cls(catalog=catalog, schedule=schedule, repository=repository, **options)

    @property
    def catalog(self) -> ServiceCatalogStore:
        return self._catalog

    # Catalog

    def services(self) -> list[Service]:
        return self._catalog.list_services()

    def save_service(self, name: str, price: float, duration: int, existing_id: str | None = None) -> Service:
        service = create_service(name, price, duration, existing_id=existing_id)
        catalog = ServiceCatalogStore(self._catalog.list_services())
        if existing_id:
            catalog.update(service)
        else:
            catalog.add(service)
        self._commit_catalog(catalog)
        self._logger.info("Service saved", extra={"service_id": service.id})
        return service

    def delete_service(self, service_id: str) -> None:
        catalog = ServiceCatalogStore(self._catalog.list_services())
        catalog.remove(service_id)
        self._commit_catalog(catalog)

    # Schedule

    def appointments(self) -> list[Appointment]:
        return self._schedule.all()

    def get_appointment(self, appointment_id: str) -> Appointment:
        appointment = self._schedule.get(appointment_id)
        if appointment is None:
            raise NotFoundError("appointment", appointment_id)
        return appointment

    def quote(self, service_ids: list[str], start_time: str | None) -> AppointmentQuote:
        return quote(service_ids, start_time, self._catalog)

    def suggest_start_time(self, appointment_date: date) -> str:
        return suggest_start_time(appointment_date, self._schedule.all(), self._default_start_time)

    def save_appointment(
        self,
        client_name: str,
        service_ids: list[str],
        appointment_date: date,
        start_time: str | None,
        existing_id: str | None = None,
    ) -> Appointment:
        """Create a booking, or rewrite an existing one when existing_id is given."""
        existing = self.get_appointment(existing_id) if existing_id else None
        result = build_appointment(
            client_name,
            service_ids,
            appointment_date,
            start_time,
            self._catalog,
            existing=existing,
        )
        if not result.ok:
            self._logger.info("Appointment rejected", extra={"reason": str(result.error)})
            raise result.error

        appointment = result.appointment
        schedule = ScheduleStore(self._schedule.all())
        if existing:
            schedule.update(appointment)
        else:
            schedule.add(appointment)
        self._commit_schedule(schedule)
        self._logger.info(
            "Appointment saved",
            extra={"appointment_id": appointment.id, "client": appointment.client_name},
        )
        return appointment

    def complete(self, appointment_id: str) -> Appointment:
        current = self.get_appointment(appointment_id)
        if current.is_completed:
            return current
        schedule = ScheduleStore(self._schedule.all())
        completed = schedule.complete(appointment_id)
        self._commit_schedule(schedule)
        self._logger.info("Appointment completed", extra={"appointment_id": appointment_id})
        return completed

    def delete_appointment(self, appointment_id: str) -> None:
        schedule = ScheduleStore(self._schedule.all())
        schedule.remove(appointment_id)
        self._commit_schedule(schedule)
        self._logger.info("Appointment deleted", extra={"appointment_id": appointment_id})

    def agenda(self, day: date) -> list[Appointment]:
        return self._schedule.for_date(day)

    # Derived views

    def daily_total(self, day: date) -> float:
        return daily_total(self._schedule.all(), day)

    def summarize(self, window_start: date, window_end: date) -> RevenueSummary:
        return summarize(self._schedule.all(), window_start, window_end)

    def report(self, today: date) -> dict[str, RevenueSummary]:
        return standard_report(self._schedule.all(), today)

    def client_history(self, name_fragment: str) -> ClientHistory | None:
        return lookup_client_history(name_fragment, self._schedule.all())

    def confirmation_message(self, appointment_id: str) -> str:
        appointment = self.get_appointment(appointment_id)
        return compose_confirmation_message(
            appointment,
            self._catalog.resolve_names(appointment.service_ids),
            business_name=self._business_name,
            currency=self._currency,
            language=self._language,
        )

    def share_url(self, appointment_id: str) -> str:
        return build_share_url(self.confirmation_message(appointment_id))

    def _commit_catalog(self, catalog: ServiceCatalogStore) -> None:
        self._repository.save_services(catalog.list_services())
        self._catalog = catalog

    def _commit_schedule(self, schedule: ScheduleStore) -> None:
        self._repository.save_appointments(schedule.all())
        self._schedule = schedule
