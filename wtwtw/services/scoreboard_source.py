# wtwtw/services/scoreboard_source.py
"""
Per-league/day event source backed by ESPN scoreboards.

Responsibilities:
  - fetch scoreboard payloads (cached per league/day)
  - normalize them into RawEvent lists

Failures are not handled here; the orchestrator's fetch-error policy decides.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..cache import TTLCache
from ..espn_client import ESPNClient
from ..models import RawEvent
from ..normalize import events_from_scoreboard


@dataclass
class ScoreboardSource:
    """Callable data source: (league, YYYYMMDD) -> list of RawEvent."""

    client: ESPNClient
    cache: TTLCache
    scoreboard_ttl: int

    def _payload(self, league: str, date_key: str) -> Dict[str, Any]:
        """Fetch a scoreboard payload using cached loading."""
        return self.cache.get_or_set(
            key=("scoreboard", league, date_key),
            ttl_seconds=self.scoreboard_ttl,
            loader=lambda: self.client.scoreboard(league, date_key),
        )

    def fetch(self, league: str, date_key: str) -> List[RawEvent]:
        """Return normalized events for one league on one day."""
        return events_from_scoreboard(self._payload(league, date_key), league)

    __call__ = fetch
