# wtwtw/services/orchestrator.py
"""
Day-by-day schedule run.

For each day in the window:
  1) fan out one scoreboard fetch per favorite league (thread pool)
  2) join: wait for every fetch of that day to settle
  3) pick the day's winner

Days run strictly in date order; the next day's fetches start only after the
previous join. Fetch failures go through an explicit FetchErrorPolicy.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..config import AppConfig
from ..days import AnchorMode, build_days
from ..matching import distinct_leagues
from ..models import Day, DayBucket, DayResult, FavoriteTeam, RawEvent
from ..window import ViewingWindow
from .selector import CandidateSelector

logger = logging.getLogger(__name__)

# (league path, YYYYMMDD) -> events
EventSource = Callable[[str, str], Sequence[RawEvent]]


class FetchErrorPolicy(str, Enum):
    """What to do when a single (league, day) fetch fails."""
    IGNORE_AND_EMPTY = "ignore-and-empty"
    RAISE = "raise"


class RunCancelled(Exception):
    """Raised when a run is abandoned; no partial results are returned."""


@dataclass
class ScheduleOrchestrator:
    """Drives DayWindowBuilder -> per-day fetch fan-out -> CandidateSelector."""

    favorites: Sequence[FavoriteTeam]
    selector: CandidateSelector
    anchor: AnchorMode = AnchorMode.TODAY
    on_fetch_error: FetchErrorPolicy = FetchErrorPolicy.IGNORE_AND_EMPTY
    max_workers: int = 8

    @classmethod
    def from_config(cls, cfg: AppConfig, on_fetch_error: FetchErrorPolicy = FetchErrorPolicy.IGNORE_AND_EMPTY) -> "ScheduleOrchestrator":
        """Wire an orchestrator from an AppConfig."""
        return cls(
            favorites=tuple(cfg.favorites),
            selector=CandidateSelector(ViewingWindow.from_config(cfg)),
            anchor=AnchorMode(cfg.day_anchor),
            on_fetch_error=on_fetch_error,
            max_workers=cfg.fetch_workers,
        )

    @property
    def window(self) -> ViewingWindow:
        return self.selector.window

    @property
    def leagues(self) -> Tuple[str, ...]:
        """Distinct favorite leagues, in order of first appearance."""
        return distinct_leagues(self.favorites)

    def _fetch_one(self, source: EventSource, league: str, date_key: str) -> List[RawEvent]:
        """Run a single fetch, applying the fetch-error policy."""
        try:
            events = list(source(league, date_key) or ())
        except Exception as e:
            if self.on_fetch_error is FetchErrorPolicy.RAISE:
                raise
            logger.warning("Fetch failed for %s on %s, treating as no events: %s", league, date_key, e)
            return []

        # Tag each event with the league it was queried under.
        return [ev if ev.league == league else dataclasses.replace(ev, league=league) for ev in events]

    def fetch_day(self, day: Day, source: EventSource) -> DayBucket:
        """Fetch every league for one day concurrently and join the results."""
        leagues = self.leagues
        if not leagues:
            return DayBucket(day=day)

        workers = max(1, min(len(leagues), self.max_workers))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="scoreboard") as executor:
            futures = [executor.submit(self._fetch_one, source, lg, day.query_key) for lg in leagues]
            per_league = [f.result() for f in futures]

        events = tuple(ev for evs in per_league for ev in evs)
        logger.debug("Fetched %d events for %s across %d leagues", len(events), day.query_key, len(leagues))
        return DayBucket(day=day, events=events)

    def pick_day(self, bucket: DayBucket) -> DayResult:
        """Select the winner for one day's bucket."""
        winner = self.selector.select_winner(((ev.league, ev) for ev in bucket.events), self.favorites)
        day = bucket.day
        return DayResult(
            date=day.date,
            label=day.label,
            query_key=day.query_key,
            winner=winner,
            start_local=self.window.to_local(winner.event.start) if winner else None,
        )

    @staticmethod
    def _check_cancelled(cancel: Optional[threading.Event]) -> None:
        if cancel is not None and cancel.is_set():
            raise RunCancelled()

    def run(
        self,
        today: Union[datetime, date],
        length: int,
        source: EventSource,
        cancel: Optional[threading.Event] = None,
    ) -> List[DayResult]:
        """
        Build the day window and pick a winner for each day, in date order.

        Raises:
            RunCancelled if `cancel` is set before the run completes.
            Any exception from day computation, selection, or (under
            FetchErrorPolicy.RAISE) a fetch.
        """
        days = build_days(today, length, self.window.tz_name, self.anchor)
        results: List[DayResult] = []

        for day in days:
            self._check_cancelled(cancel)
            bucket = self.fetch_day(day, source)
            self._check_cancelled(cancel)

            result = self.pick_day(bucket)
            if result.winner:
                logger.info("%s %s: %s (%s)", day.label, day.query_key,
                            result.winner.event.display_name, result.winner.favorite.key)
            else:
                logger.info("%s %s: no qualifying game", day.label, day.query_key)
            results.append(result)

        return results
