from datetime import date

import pytest

from ednc.core.lifecycle import CourseStatus, derive_status, has_schedule

TODAY = date(2024, 6, 15)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2024, 7, 1), date(2024, 8, 1), CourseStatus.UPCOMING),
        (date(2024, 1, 1), date(2024, 5, 1), CourseStatus.CLOSED),
        (date(2024, 6, 1), date(2024, 7, 1), CourseStatus.ONGOING),
        (None, None, CourseStatus.OPEN),
        (date(2024, 6, 1), None, CourseStatus.OPEN),
        (None, date(2024, 6, 1), CourseStatus.OPEN),
    ],
)
def test_derive_status(start, end, expected):
    assert derive_status(start, end, today=TODAY) is expected


def test_range_bounds_are_inclusive():
    assert derive_status(TODAY, date(2024, 6, 20), today=TODAY) is CourseStatus.ONGOING
    assert derive_status(date(2024, 6, 1), TODAY, today=TODAY) is CourseStatus.ONGOING


def test_status_values_are_plain_strings():
    assert derive_status(None, None, today=TODAY).value == "open"
    assert CourseStatus.CLOSED == "closed"


@pytest.mark.parametrize(
    "schedule, start, end, expected",
    [
        ("Tue 10:00", None, None, True),
        ("   ", None, None, False),
        ("", None, None, False),
        (None, None, None, False),
        (None, date(2024, 1, 1), None, False),
        (None, date(2024, 1, 1), date(2024, 2, 1), True),
        ("Tue 10:00", date(2024, 1, 1), date(2024, 2, 1), True),
    ],
)
def test_has_schedule(schedule, start, end, expected):
    assert has_schedule(schedule, start, end) is expected
