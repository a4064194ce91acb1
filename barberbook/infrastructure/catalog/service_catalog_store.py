from __future__ import annotations

import logging
import uuid

from barberbook.application.exceptions import DuplicateIdError, NotFoundError, ValidationError
from barberbook.application.ports.service_catalog import ServiceCatalogPort
from barberbook.domain.entities.service import Service

logger = logging.getLogger(__name__)


class ServiceCatalogStore(ServiceCatalogPort):
    def __init__(self, services: list[Service] | tuple[Service, ...] | None = None) -> None:
        # dicts keep insertion order, which is the catalog's display order
        self._services: dict[str, Service] = {}
        for service in services or ():
            self.add(service)

    def get_service(self, service_id: str) -> Service | None:
        return self._services.get(service_id)

    def list_services(self) -> list[Service]:
        return list(self._services.values())

    def add(self, service: Service) -> None:
        if service.id in self._services:
            raise DuplicateIdError("service", service.id)
        self._services[service.id] = service

    def update(self, service: Service) -> None:
        if service.id not in self._services:
            raise NotFoundError("service", service.id)
        self._services[service.id] = service

    def remove(self, service_id: str) -> None:
        """Delete a service. Appointments that reference it are left as they are."""
        if service_id not in self._services:
            raise NotFoundError("service", service_id)
        del self._services[service_id]
        logger.info("Service removed", extra={"service_id": service_id})


def create_service(name: str, price: float, duration: int, existing_id: str | None = None) -> Service:
    """Validate form input and produce a Service, keeping existing_id when editing."""
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError("Service name is required.", field="name")
    if price is None or price < 0:
        raise ValidationError("Price must be zero or more.", field="price")
    if duration is None or int(duration) != duration or duration <= 0:
        raise ValidationError("Duration must be a positive number of minutes.", field="duration")
    return Service(
        id=existing_id or uuid.uuid4().hex,
        name=clean_name,
        price=price,
        duration=int(duration),
    )
