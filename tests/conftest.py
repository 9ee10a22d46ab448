"""Shared fixtures."""

from datetime import datetime

import pytest
from dateutil import tz

from wtwtw.config import DEFAULT_FAVORITES
from wtwtw.models import RawEvent, RawParticipant
from wtwtw.window import ViewingWindow

PT_NAME = "America/Los_Angeles"
PT = tz.gettz(PT_NAME)


@pytest.fixture
def pt():
    return PT


@pytest.fixture
def window():
    return ViewingWindow(tz_name=PT_NAME)


@pytest.fixture
def favorites():
    return DEFAULT_FAVORITES


@pytest.fixture
def make_event():
    """Factory: make_event(league, hour, minute, *teams, day=10) -> RawEvent at PT wall-clock time."""

    counter = {"n": 0}

    def _make(league, hour, minute, *teams, day=10, month=6, name=None):
        counter["n"] += 1
        participants = tuple(RawParticipant(display_name=n, abbreviation=a) for n, a in teams)
        return RawEvent(
            id=str(counter["n"]),
            display_name=name or " at ".join(n for n, _ in teams) or "Game",
            start=datetime(2024, month, day, hour, minute, tzinfo=PT),
            league=league,
            participants=participants,
        )

    return _make
