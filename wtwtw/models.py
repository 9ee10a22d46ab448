# wtwtw/models.py
"""
Domain models for the widget.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class FavoriteTeam:
    """A ranked team of interest plus the rule used to recognize it in a scoreboard."""
    key: str
    label: str
    league: str     # ESPN league path, e.g. "football/nfl"
    rank: int       # 0 = highest
    name_fragments: Tuple[str, ...] = ()   # lowercase substrings of displayName
    abbreviations: Tuple[str, ...] = ()    # uppercase exact codes


@dataclass(frozen=True)
class RawParticipant:
    """One competitor in an event. Missing payload fields are empty strings."""
    display_name: str = ""
    abbreviation: str = ""


@dataclass(frozen=True)
class RawEvent:
    """A normalized scoreboard event."""
    id: str
    display_name: str
    start: datetime  # tz-aware
    league: str
    participants: Tuple[RawParticipant, ...] = ()
    short_name: str = ""


@dataclass(frozen=True)
class Day:
    """One calendar date in the target timezone."""
    date: date
    label: str      # full weekday name
    query_key: str  # YYYYMMDD


@dataclass(frozen=True)
class DayBucket:
    """A day plus every event collected for it across leagues."""
    day: Day
    events: Tuple[RawEvent, ...] = ()


@dataclass(frozen=True)
class Candidate:
    """A favorite that plays in an event overlapping the viewing window."""
    rank: int
    favorite: FavoriteTeam
    event: RawEvent


@dataclass(frozen=True)
class DayResult:
    """The pick for one day (winner is None when nothing qualifies)."""
    date: date
    label: str
    query_key: str
    winner: Optional[Candidate] = None
    start_local: Optional[datetime] = None  # winner start in target tz

    @property
    def time_str(self) -> str:
        """Winner start as e.g. '5:10 PM', or '' when there is no winner."""
        if self.start_local is None:
            return ""
        return self.start_local.strftime("%-I:%M %p")


@dataclass(frozen=True)
class RunState:
    """Presentation state for one run: loading, then either results or an error."""
    loading: bool = False
    error: Optional[str] = None
    results: Sequence[DayResult] = field(default_factory=tuple)
