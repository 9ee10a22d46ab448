# wtwtw/handlers/picks_handler.py
"""
Handler/controller responsible for running a pick and exposing it as state.

Keeps Flask routes simple by concentrating assembly logic here. A run moves
through two published states: loading, then either results or a single
run-level error. A cancelled run publishes nothing further.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Callable, Optional, Union

from ..days import AnchorMode
from ..models import RunState
from ..services.orchestrator import EventSource, RunCancelled, ScheduleOrchestrator

logger = logging.getLogger(__name__)

StateListener = Callable[[RunState], None]


@dataclass
class PicksHandler:
    """Runs the orchestrator against a data source and reports RunState transitions."""

    orchestrator: ScheduleOrchestrator
    source: EventSource
    days_ahead: int

    def _orchestrator_for(self, anchor: Optional[Union[AnchorMode, str]]) -> ScheduleOrchestrator:
        if anchor is None:
            return self.orchestrator
        return dataclasses.replace(self.orchestrator, anchor=AnchorMode(anchor))

    def run(
        self,
        today: Optional[Union[datetime, date]] = None,
        length: Optional[int] = None,
        anchor: Optional[Union[AnchorMode, str]] = None,
        on_state: Optional[StateListener] = None,
        cancel: Optional[threading.Event] = None,
    ) -> Optional[RunState]:
        """
        Execute one run.

        Args:
            today: instant used to anchor the day window (defaults to now, UTC).
            length: number of days (defaults to days_ahead).
            anchor: override the orchestrator's day anchor.
            on_state: receives RunState transitions.
            cancel: when set, the run is abandoned and nothing more is published.

        Returns:
            The final RunState, or None if the run was cancelled.
        """

        def publish(state: RunState) -> None:
            if on_state is not None and not (cancel is not None and cancel.is_set()):
                on_state(state)

        publish(RunState(loading=True))

        try:
            orchestrator = self._orchestrator_for(anchor)
            results = orchestrator.run(
                today=today or datetime.now(timezone.utc),
                length=length or self.days_ahead,
                source=self.source,
                cancel=cancel,
            )
            final = RunState(loading=False, results=tuple(results))
        except RunCancelled:
            logger.info("Run cancelled; discarding results")
            return None
        except Exception as e:
            logger.exception("Run failed")
            final = RunState(loading=False, error=str(e) or e.__class__.__name__)

        if cancel is not None and cancel.is_set():
            return None

        publish(final)
        return final

    def build_context(
        self,
        today: Optional[Union[datetime, date]] = None,
        length: Optional[int] = None,
        anchor: Optional[Union[AnchorMode, str]] = None,
    ) -> dict:
        """
        Build a plain dict suitable for render_template(**context).
        """
        state = self.run(today=today, length=length, anchor=anchor)
        window = self.orchestrator.window
        return {
            "now": window.to_local(datetime.now(timezone.utc)),
            "loading": state.loading,
            "error": state.error,
            "results": state.results,
            "window_label": window.describe(),
            "tz_name": window.tz_name,
            "duration_hours": window.duration_minutes // 60,
            "favorites": self.orchestrator.favorites,
            "leagues": self.orchestrator.leagues,
        }
