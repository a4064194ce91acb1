from __future__ import annotations

from abc import ABC, abstractmethod

from barberbook.domain.entities.service import Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id, or None if it is not (or no longer) in the catalog."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[Service]:
        """All services in insertion order."""
        raise NotImplementedError

    def resolve_names(self, service_ids: list[str] | tuple[str, ...]) -> list[str]:
        """Names for the given ids. Ids missing from the catalog are omitted."""
        names = []
        for service_id in service_ids:
            service = self.get_service(service_id)
            if service:
                names.append(service.name)
        return names
