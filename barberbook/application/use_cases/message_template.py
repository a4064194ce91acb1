from __future__ import annotations

from urllib.parse import quote

from barberbook.domain.entities.appointment import Appointment

SHARE_BASE_URL = "https://wa.me/"

_TEMPLATES = {
    "pt": (
        "Olá {client}! Passando para confirmar seu horário na {business}!\n\n"
        "⏰ Hora: {start}\n"
        "💈 Serviços: {services}\n"
        "💰 Valor: {currency} {value}\n\n"
        "Até logo!"
    ),
    "en": (
        "Hi {client}! Just confirming your appointment at {business}!\n\n"
        "⏰ Time: {start}\n"
        "💈 Services: {services}\n"
        "💰 Total: {currency} {value}\n\n"
        "See you soon!"
    ),
}


def compose_confirmation_message(
    appointment: Appointment,
    service_names: list[str],
    business_name: str,
    currency: str = "R$",
    language: str = "pt",
) -> str:
    template = _TEMPLATES.get(language, _TEMPLATES["en"])
    return template.format(
        client=appointment.client_name,
        business=business_name,
        start=appointment.start_time,
        services=" + ".join(service_names),
        currency=currency,
        value=f"{appointment.total_value:.2f}",
    )


def build_share_url(text: str) -> str:
    return f"{SHARE_BASE_URL}?text={quote(text, safe='')}"
