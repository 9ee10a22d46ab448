# wtwtw/normalize.py
"""
Scoreboard payload normalization.

Turns ESPN scoreboard JSON (which differs slightly per league) into RawEvent
models. Partial payloads degrade to empty strings; events without a usable
start time are dropped since they cannot be placed in a viewing window.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import parser as dtparser

from .models import RawEvent, RawParticipant

logger = logging.getLogger(__name__)


def _text(v: Any) -> str:
    """Return a stripped string, or '' for anything that isn't a non-empty string."""
    return v.strip() if isinstance(v, str) else ""


def _first_competition(event: Dict[str, Any]) -> Dict[str, Any]:
    comps = event.get("competitions")
    if isinstance(comps, list) and comps and isinstance(comps[0], dict):
        return comps[0]
    return {}


def parse_start(event: Dict[str, Any]) -> Optional[datetime]:
    """
    Parse the event start as an aware datetime.

    Tries event.date, then competitions[0].date / startDate. Naive values are UTC.
    """
    comp = _first_competition(event)
    for val in (event.get("date"), comp.get("date"), comp.get("startDate")):
        if not isinstance(val, str) or not val.strip():
            continue
        try:
            dt = dtparser.isoparse(val.strip())
        except (ValueError, OverflowError):
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt
    return None


def participant_from_payload(competitor: Any) -> RawParticipant:
    """
    Build a RawParticipant from a competitor entry.

    ESPN nests names under competitor.team; some feeds (e.g. athlete-based)
    put them on the competitor itself, so both are tried.
    """
    if not isinstance(competitor, dict):
        return RawParticipant()
    team = competitor.get("team")
    if not isinstance(team, dict):
        team = {}
    name = _text(team.get("displayName")) or _text(team.get("name")) or _text(competitor.get("displayName"))
    abbr = _text(team.get("abbreviation")) or _text(competitor.get("abbreviation"))
    return RawParticipant(display_name=name, abbreviation=abbr)


def event_from_payload(event: Any, league: str) -> Optional[RawEvent]:
    """Normalize one scoreboard event; returns None if it has no parseable start."""
    if not isinstance(event, dict):
        return None

    start = parse_start(event)
    if start is None:
        logger.debug("Dropping %s event %s without start time", league, event.get("id"))
        return None

    competitors = _first_competition(event).get("competitors")
    if not isinstance(competitors, list):
        competitors = []

    return RawEvent(
        id=str(event.get("id") or ""),
        display_name=_text(event.get("name")) or "Game",
        short_name=_text(event.get("shortName")),
        start=start,
        league=league,
        participants=tuple(participant_from_payload(c) for c in competitors),
    )


def events_from_scoreboard(payload: Any, league: str) -> List[RawEvent]:
    """Normalize a whole scoreboard payload ({"events": [...]})."""
    if not isinstance(payload, dict):
        return []
    events = payload.get("events")
    if not isinstance(events, list):
        return []

    out: List[RawEvent] = []
    for ev in events:
        item = event_from_payload(ev, league)
        if item is not None:
            out.append(item)
    return out
