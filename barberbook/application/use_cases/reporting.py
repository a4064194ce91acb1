from __future__ import annotations

from datetime import date

from barberbook.application.utils.time_math import month_bounds, week_bounds
from barberbook.domain.entities.appointment import Appointment
from barberbook.domain.entities.report import ReportWindow, RevenueSummary


def summarize(appointments: list[Appointment], window_start: date, window_end: date) -> RevenueSummary:
    """Revenue over completed appointments dated within [window_start, window_end]."""
    window = ReportWindow(window_start, window_end)
    values = [a.total_value for a in appointments if a.is_completed and window.contains(a.date)]
    if not values:
        return RevenueSummary()
    total = sum(values)
    return RevenueSummary(total=total, count=len(values), average=total / len(values))


def today_window(today: date) -> ReportWindow:
    return ReportWindow(today, today)


def week_window(today: date) -> ReportWindow:
    return ReportWindow(*week_bounds(today))


def month_window(today: date) -> ReportWindow:
    return ReportWindow(*month_bounds(today))


def standard_report(appointments: list[Appointment], today: date) -> dict[str, RevenueSummary]:
    windows = {
        "today": today_window(today),
        "week": week_window(today),
        "month": month_window(today),
    }
    return {
        name: summarize(appointments, window.start, window.end)
        for name, window in windows.items()
    }


def daily_total(appointments: list[Appointment], day: date) -> float:
    return summarize(appointments, day, day).total
