from __future__ import annotations

from datetime import date

from barberbook.application.use_cases.message_template import build_share_url, compose_confirmation_message
from barberbook.domain.entities.appointment import Appointment


def _appointment() -> Appointment:
    return Appointment(
        id="x1",
        client_name="Ana",
        service_ids=("1", "2"),
        date=date(2026, 10, 19),
        start_time="14:30",
        end_time="15:20",
        total_value=50,
        total_duration=50,
    )


def test_message_contains_booking_details():
    text = compose_confirmation_message(_appointment(), ["Corte Social", "Barba"], "Barbearia Sousa")

    assert "Ana" in text
    assert "14:30" in text
    assert "Corte Social + Barba" in text
    assert "R$ 50.00" in text
    assert "Barbearia Sousa" in text


def test_english_template_and_currency():
    text = compose_confirmation_message(_appointment(), ["Cut"], "Main St Barbers", currency="$", language="en")
    assert text.startswith("Hi Ana!")
    assert "$ 50.00" in text


def test_unknown_language_falls_back_to_english():
    text = compose_confirmation_message(_appointment(), [], "Shop", language="xx")
    assert text.startswith("Hi Ana!")


def test_share_url():
    assert build_share_url("Olá Ana!\n") == "https://wa.me/?text=Ol%C3%A1%20Ana%21%0A"
