from __future__ import annotations

from barberbook.domain.entities.service import Service

SEED_SERVICES: tuple[Service, ...] = (
    Service(id="1", name="Corte Social", price=30, duration=30),
    Service(id="2", name="Barba", price=20, duration=20),
    Service(id="3", name="Corte + Barba", price=45, duration=50),
)
