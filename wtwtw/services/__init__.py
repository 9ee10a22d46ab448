# wtwtw/services/__init__.py
"""
Services package exports.
"""
from .orchestrator import FetchErrorPolicy, RunCancelled, ScheduleOrchestrator
from .scoreboard_source import ScoreboardSource
from .selector import CandidateSelector

__all__ = [
    "CandidateSelector",
    "FetchErrorPolicy",
    "RunCancelled",
    "ScheduleOrchestrator",
    "ScoreboardSource",
]
