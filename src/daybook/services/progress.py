"""Progress and calendar helpers derived from a project's entries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from src.daybook.models import Entry, Project


@dataclass(frozen=True)
class Progress:
    completed: int
    total: int
    percent: int


def progress(project: Project, entries: Iterable[Entry]) -> Progress:
    """Derive completion from the distinct in-range days that have an entry.

    ``percent`` rounds half up (1 of 8 days is 13%) and stays within 0..100.
    """
    total = project.duration_days
    days = {e.day_number for e in entries if 1 <= e.day_number <= total}
    completed = len(days)
    if total <= 0:
        return Progress(completed=completed, total=total, percent=0)

    # Integer half-up rounding of completed / total * 100
    percent = (completed * 200 + total) // (2 * total)
    return Progress(completed=completed, total=total, percent=max(0, min(100, percent)))


def date_for_day(project: Project, day: int) -> date:
    """Calendar date of a day number; day 1 is the project's start date."""
    return project.start_date + timedelta(days=day - 1)


def day_for_date(project: Project, on: date) -> int | None:
    """Day number for a calendar date, or None outside the project window."""
    day = (on - project.start_date).days + 1
    if 1 <= day <= project.duration_days:
        return day
    return None
