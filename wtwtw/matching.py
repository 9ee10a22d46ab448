# wtwtw/matching.py
"""
League-gated team matching.

Each FavoriteTeam carries its own rule (name fragments + accepted
abbreviations); this module only applies it. Adding a favorite is a config
change, never a code change here.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .models import FavoriteTeam, RawParticipant


def _norm_league(league: str) -> str:
    return (league or "").strip().strip("/").lower()


def league_matches(event_league: str, favorite_league: str) -> bool:
    """True if both league paths name the same league (case/slash-insensitive)."""
    a = _norm_league(event_league)
    return bool(a) and a == _norm_league(favorite_league)


def matches(participant: RawParticipant, favorite: FavoriteTeam, league: str) -> bool:
    """
    Decide whether `participant` is `favorite` in the given league.

    Rules:
      - league must match the favorite's league (fails closed otherwise)
      - any name fragment is a case-insensitive substring of the display name, OR
      - the abbreviation equals one of the accepted codes (case-insensitive)

    Empty/missing name or abbreviation never matches.
    """
    if not league_matches(league, favorite.league):
        return False

    name = (getattr(participant, "display_name", "") or "").strip().lower()
    abbr = (getattr(participant, "abbreviation", "") or "").strip().upper()

    if name and any(frag and frag in name for frag in favorite.name_fragments):
        return True
    return bool(abbr) and abbr in favorite.abbreviations


def matches_any(participants: Iterable[RawParticipant], favorite: FavoriteTeam, league: str) -> bool:
    """True if any participant matches the favorite."""
    return any(matches(p, favorite, league) for p in participants)


def distinct_leagues(favorites: Iterable[FavoriteTeam]) -> Tuple[str, ...]:
    """Distinct favorite leagues, in order of first appearance."""
    return tuple(dict.fromkeys(f.league for f in favorites))
