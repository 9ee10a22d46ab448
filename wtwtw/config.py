# wtwtw/config.py
"""
Configuration for the WTWTW (What To Watch This Week) widget.

This module centralizes all tunable settings (ESPN API base URL, HTTP timeout,
cache TTL, day window) and the fixed ranked favorites table.

Timezone, viewing window and favorites are deliberately not read from the
environment: they are fixed, but still passed around as a value so tests can
build an AppConfig with their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Sequence, Tuple

from .matching import distinct_leagues
from .models import FavoriteTeam


TARGET_TZ = "America/Los_Angeles"


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, returning default on missing/invalid values."""
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _env_str(name: str, default: str, allowed: Sequence[str] = ()) -> str:
    """
    Read a string environment variable.

    If `allowed` is given, values outside it (compared lowercase) fall back to default.
    """
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if allowed and raw not in allowed:
        return default
    return raw


def favorite(rank: int, key: str, label: str, league: str,
             names: Sequence[str], abbrs: Sequence[str] = ()) -> FavoriteTeam:
    """Build a FavoriteTeam, normalizing the match rule casing."""
    return FavoriteTeam(
        key=key,
        label=label,
        league=league,
        rank=rank,
        name_fragments=tuple(n.strip().lower() for n in names if n.strip()),
        abbreviations=tuple(a.strip().upper() for a in abbrs if a.strip()),
    )


def build_favorites(rows: Sequence[Tuple[str, str, str, Sequence[str], Sequence[str]]]) -> Tuple[FavoriteTeam, ...]:
    """
    Turn (key, label, league, names, abbrs) rows into ranked favorites.

    Rank is the row position (0 = highest).

    Raises:
        ValueError if two rows share a key.
    """
    seen: set[str] = set()
    out = []
    for rank, (key, label, league, names, abbrs) in enumerate(rows):
        if key in seen:
            raise ValueError(f"duplicate favorite key: {key}")
        seen.add(key)
        out.append(favorite(rank, key, label, league, names, abbrs))
    return tuple(out)


# Priority list (highest first).
# Giants are league-gated to MLB so the NFL Giants (NYG) never match.
DEFAULT_FAVORITES: Tuple[FavoriteTeam, ...] = build_favorites([
    ("steelers", "Steelers (NFL)", "football/nfl", ["steelers"], ["PIT"]),
    ("warriors", "Warriors (NBA)", "basketball/nba", ["warriors"], ["GS", "GSW"]),
    ("valkyries", "Valkyries (WNBA)", "basketball/wnba", ["valkyries"], ["GS", "GSV"]),
    ("cubs", "Cubs (MLB)", "baseball/mlb", ["cubs"], ["CHC"]),
    ("giants", "Giants (MLB)", "baseball/mlb", ["giants"], ["SF", "SFG"]),
])


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable app configuration.

    Notes on the day window:
      - days_ahead: number of calendar days to evaluate (window length).
      - day_anchor: "today" starts at today's date in tz; "monday" starts at
        the Monday of the current week.
    """

    # Fixed settings
    tz: str = TARGET_TZ
    window_start_minute: int = 17 * 60  # 5:00 PM
    window_end_minute: int = 20 * 60    # 8:00 PM (exclusive)
    assumed_duration_minutes: int = 180
    favorites: Tuple[FavoriteTeam, ...] = field(default_factory=lambda: DEFAULT_FAVORITES)

    # Core settings
    espn_api_base: str = os.getenv("ESPN_API_BASE", "https://site.api.espn.com")
    http_timeout_seconds: int = _env_int("HTTP_TIMEOUT_SECONDS", 10)
    fetch_workers: int = _env_int("FETCH_WORKERS", 8)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Cache controls
    scoreboard_cache_ttl_seconds: int = _env_int("SCOREBOARD_CACHE_TTL_SECONDS", 300)

    # Widget defaults
    days_ahead: int = _env_int("DAYS_AHEAD", 7)
    day_anchor: str = _env_str("DAY_ANCHOR", "today", allowed=("today", "monday"))

    def __post_init__(self):
        """Clamp numeric settings that would otherwise break a run."""
        # dataclass frozen => use object.__setattr__
        if self.days_ahead < 1:
            object.__setattr__(self, "days_ahead", 7)
        if self.fetch_workers < 1:
            object.__setattr__(self, "fetch_workers", 1)
        if self.http_timeout_seconds < 1:
            object.__setattr__(self, "http_timeout_seconds", 10)

    @property
    def leagues(self) -> Tuple[str, ...]:
        """Distinct favorite leagues, in order of first appearance."""
        return distinct_leagues(self.favorites)
