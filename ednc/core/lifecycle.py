# ednc/core/lifecycle.py
from datetime import date
from enum import Enum
from typing import Optional


class CourseStatus(str, Enum):
    OPEN = "open"          # no date range, registration always available
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    CLOSED = "closed"


def derive_status(
    start_date: Optional[date],
    end_date: Optional[date],
    today: Optional[date] = None,
) -> CourseStatus:
    """Lifecycle status of a course on ``today``.

    Both ends of the range are inclusive: a course is still ongoing on its
    start and end dates.
    """
    if start_date is None or end_date is None:
        return CourseStatus.OPEN

    today = today or date.today()
    if today < start_date:
        return CourseStatus.UPCOMING
    if today > end_date:
        return CourseStatus.CLOSED
    return CourseStatus.ONGOING


def has_schedule(
    schedule: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
) -> bool:
    """A course needs a non-blank schedule text or a complete date range."""
    if schedule is not None and schedule.strip():
        return True
    return start_date is not None and end_date is not None
