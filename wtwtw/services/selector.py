# wtwtw/services/selector.py
"""
Per-day pick logic.

An event yields at most one candidate: the first favorite (in rank order)
whose league matches, who plays in it, and whose game overlaps the viewing
window. The day's winner is the lowest rank, then the earliest start.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..matching import league_matches, matches_any
from ..models import Candidate, FavoriteTeam, RawEvent
from ..window import ViewingWindow, as_aware


@dataclass(frozen=True)
class CandidateSelector:
    """Stateless selector bound to a viewing window."""

    window: ViewingWindow

    def _candidate_for(self, league: str, event: RawEvent, favorites: Sequence[FavoriteTeam]) -> Optional[Candidate]:
        """Return the candidate for one event, attributed to its first qualifying favorite."""
        for rank, fav in enumerate(favorites):
            if not league_matches(league, fav.league):
                continue
            if matches_any(event.participants, fav, league) and self.window.contains(event.start):
                return Candidate(rank=rank, favorite=fav, event=event)
        return None

    def candidates(
        self,
        events: Iterable[Tuple[str, RawEvent]],
        favorites: Sequence[FavoriteTeam],
    ) -> List[Candidate]:
        """All candidates for a day, sorted by (rank, start)."""
        out: List[Candidate] = []
        for league, event in events:
            c = self._candidate_for(league, event, favorites)
            if c is not None:
                out.append(c)
        out.sort(key=lambda c: (c.rank, as_aware(c.event.start)))
        return out

    def select_winner(
        self,
        events: Iterable[Tuple[str, RawEvent]],
        favorites: Sequence[FavoriteTeam],
    ) -> Optional[Candidate]:
        """Return the day's winner, or None if no candidate qualifies."""
        ranked = self.candidates(events, favorites)
        return ranked[0] if ranked else None
