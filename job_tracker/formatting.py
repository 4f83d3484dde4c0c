"""Display helpers for the list view."""
from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

from job_tracker.models import JobRecord, JobStatus, parse_day

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# (text colour, chip background)
STATUS_COLORS: dict[JobStatus, tuple[str, str]] = {
    JobStatus.APPLIED: ("#2196f3", "#e3f2fd"),
    JobStatus.INTERVIEW: ("#ff9800", "#fff3e0"),
    JobStatus.OFFER: ("#4caf50", "#e8f5e9"),
    JobStatus.REJECTED: ("#f44336", "#ffebee"),
}
_NEUTRAL = ("#757575", "#f5f5f5")


def normalize_link(link: str | None) -> str | None:
    """Openable URL for a stored link; bare hosts get ``https://``."""
    if link is None or not link.strip():
        return None
    link = link.strip()
    if link.startswith("http"):
        return link
    return f"https://{link}"


def format_date(value: Any) -> str:
    """``Jan 10, 2024`` for anything ``parse_day`` understands."""
    day = parse_day(value)
    if day is None:
        return "Unknown date"
    return f"{_MONTHS[day.month - 1]} {day.day}, {day.year}"


def status_colors(status: Any) -> tuple[str, str]:
    try:
        return STATUS_COLORS[JobStatus(status)]
    except ValueError:
        return _NEUTRAL


def summarize(records: Iterable[JobRecord]) -> dict[JobStatus, int]:
    counts = Counter(r.status for r in records)
    return {status: counts.get(status, 0) for status in JobStatus}
