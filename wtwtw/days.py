# wtwtw/days.py
"""
Builds the list of calendar days (in the target timezone) to evaluate.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import List, Union

from dateutil import tz

from .models import Day


WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class AnchorMode(str, Enum):
    """Where the window starts."""
    TODAY = "today"
    MONDAY_OF_WEEK = "monday"


def local_date(today: Union[datetime, date], tz_name: str) -> date:
    """
    Project an instant onto the calendar date in `tz_name`.

    Naive datetimes are taken as UTC (never the process's local timezone).
    Plain dates are returned unchanged.
    """
    if not isinstance(today, datetime):
        return today
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"unknown timezone: {tz_name}")
    if today.tzinfo is None:
        today = today.replace(tzinfo=timezone.utc)
    return today.astimezone(zone).date()


def make_day(d: date) -> Day:
    """Wrap a date with its weekday label and YYYYMMDD query key."""
    return Day(date=d, label=WEEKDAY_NAMES[d.weekday()], query_key=d.strftime("%Y%m%d"))


def build_days(
    today: Union[datetime, date],
    length: int,
    tz_name: str,
    anchor: Union[AnchorMode, str] = AnchorMode.TODAY,
) -> List[Day]:
    """
    Return `length` consecutive days.

    Args:
        today: current instant (or date) used to find "today" in tz_name.
        length: number of days (>= 1).
        tz_name: target timezone.
        anchor: TODAY starts at today; MONDAY_OF_WEEK starts at that week's Monday.
    """
    if length < 1:
        raise ValueError("length must be >= 1")

    start = local_date(today, tz_name)
    if AnchorMode(anchor) is AnchorMode.MONDAY_OF_WEEK:
        start = start - timedelta(days=start.weekday())

    return [make_day(start + timedelta(days=i)) for i in range(length)]
