# wtwtw/window.py
"""
Viewing-window overlap.

Every event is treated as lasting a fixed number of minutes and is compared,
as local minute-of-day, against a fixed local window [start, end).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from dateutil import tz

from .config import AppConfig


def as_aware(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def minute_of_day(instant: datetime, tz_name: str) -> int:
    """Return the local wall-clock minute of day (0-1439) of `instant` in `tz_name`."""
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"unknown timezone: {tz_name}")
    local = as_aware(instant).astimezone(zone)
    return local.hour * 60 + local.minute


def overlaps(
    start: datetime,
    duration_minutes: int,
    window_start_minute: int,
    window_end_minute: int,
    tz_name: str,
) -> bool:
    """
    Return True if [start, start + duration) overlaps the local window.

    The end minute may run past 1440; no day rollover is applied since only
    a same-day window matters. Both window bounds are exclusive for overlap:
    an event ending exactly at window start, or starting exactly at window
    end, does not count.
    """
    start_min = minute_of_day(start, tz_name)
    end_min = start_min + duration_minutes
    return start_min < window_end_minute and end_min > window_start_minute


def _clock(minute: int) -> str:
    h = (minute // 60) % 24
    return f"{h % 12 or 12}{'am' if h < 12 else 'pm'}"


@dataclass(frozen=True)
class ViewingWindow:
    """The fixed local viewing window plus the assumed event duration."""

    tz_name: str
    start_minute: int = 17 * 60
    end_minute: int = 20 * 60
    duration_minutes: int = 180

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "ViewingWindow":
        """Build the window from an AppConfig."""
        return cls(
            tz_name=cfg.tz,
            start_minute=cfg.window_start_minute,
            end_minute=cfg.window_end_minute,
            duration_minutes=cfg.assumed_duration_minutes,
        )

    def contains(self, start: datetime) -> bool:
        """True if an event starting at `start` overlaps this window."""
        return overlaps(start, self.duration_minutes, self.start_minute, self.end_minute, self.tz_name)

    def to_local(self, instant: datetime) -> datetime:
        """Convert an instant to the window's timezone."""
        return as_aware(instant).astimezone(tz.gettz(self.tz_name))

    def describe(self) -> str:
        """Short human description, e.g. '5–8pm'."""
        start = _clock(self.start_minute)
        end = _clock(self.end_minute)
        if start[-2:] == end[-2:]:
            start = start[:-2]
        return f"{start}–{end}"
