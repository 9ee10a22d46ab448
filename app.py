# app.py
"""
Flask entrypoint for the WTWTW (What To Watch This Week) widget service.

Routes:
  HTML:
    - /widget/picks

  JSON:
    - /api/picks

Query parameters (common):
  - theme=dark|light|transparent (HTML only)
  - days=N (number of days to evaluate, 1-14)
  - anchor=today|monday (start today, or on the Monday of this week)

Notes:
  - Favorites, timezone and viewing window are fixed in AppConfig.
  - Scoreboard payloads are cached per league/day (TTLCache).
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, render_template, request, redirect

from wtwtw.cache import TTLCache
from wtwtw.config import AppConfig
from wtwtw.espn_client import ESPNClient
from wtwtw.handlers.picks_handler import PicksHandler
from wtwtw.models import DayResult
from wtwtw.services.orchestrator import EventSource, ScheduleOrchestrator
from wtwtw.services.scoreboard_source import ScoreboardSource


MAX_DAYS = 14

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once (no-op if handlers already exist)."""
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def day_result_to_dict(r: DayResult) -> Dict[str, Any]:
    """
    Serialize a DayResult into JSON-safe primitives.

    pick is None when no favorite plays inside the viewing window that day.
    """
    pick = None
    if r.winner is not None:
        ev = r.winner.event
        fav = r.winner.favorite
        pick = {
            "favorite": fav.key,
            "label": fav.label,
            "rank": r.winner.rank,
            "eventId": ev.id,
            "name": ev.display_name,
            "shortName": ev.short_name,
            "league": ev.league,
            "start": r.start_local.isoformat() if r.start_local else ev.start.isoformat(),
            "time": r.time_str,
        }
    return {
        "date": r.date.isoformat(),
        "label": r.label,
        "queryKey": r.query_key,
        "pick": pick,
    }


def create_app(cfg: Optional[AppConfig] = None, source: Optional[EventSource] = None) -> Flask:
    """
    App factory.

    Builds shared dependencies (client + cache + scoreboard source + handler) once
    per process. Tests may inject their own config and event source.
    """
    cfg = cfg or AppConfig()
    configure_logging(cfg.log_level)

    if source is None:
        client = ESPNClient(cfg.espn_api_base, timeout=cfg.http_timeout_seconds)
        source = ScoreboardSource(
            client=client,
            cache=TTLCache(),
            scoreboard_ttl=cfg.scoreboard_cache_ttl_seconds,
        )

    handler = PicksHandler(
        orchestrator=ScheduleOrchestrator.from_config(cfg),
        source=source,
        days_ahead=cfg.days_ahead,
    )

    app = Flask(__name__)

    # -------------------------
    # Shared parsing helpers
    # -------------------------

    def parse_theme() -> str:
        """
        Parse theme query param with a safe default.
        Supports: dark, light, transparent
        """
        theme = (request.args.get("theme") or "dark").strip().lower()
        if theme not in ("dark", "light", "transparent"):
            theme = "dark"
        return theme

    def parse_days() -> int:
        """Parse ?days=N, clamped to 1..MAX_DAYS, with config fallback."""
        try:
            days = int(request.args.get("days", cfg.days_ahead))
        except Exception:
            return cfg.days_ahead
        return max(1, min(days, MAX_DAYS))

    def parse_anchor() -> str:
        """Parse ?anchor=today|monday with config fallback."""
        anchor = (request.args.get("anchor") or cfg.day_anchor).strip().lower()
        if anchor not in ("today", "monday"):
            anchor = cfg.day_anchor
        return anchor

    # -------------------------
    # Redirects
    # -------------------------

    @app.get("/")
    def index():
        """Root redirect to the picks widget."""
        return redirect("/widget/picks", code=302)

    @app.get("/widget")
    def widget_legacy():
        """Legacy route redirect to the picks widget."""
        return redirect("/widget/picks", code=302)

    # -------------------------
    # HTML
    # -------------------------

    @app.get("/widget/picks")
    def widget_picks():
        """
        One card per day with the best game in the viewing window.

        Query:
          - theme=dark|light|transparent
          - days=N
          - anchor=today|monday
        """
        theme = parse_theme()
        ctx = handler.build_context(length=parse_days(), anchor=parse_anchor())
        return render_template("picks/widget.html", theme=theme, **ctx)

    # -------------------------
    # JSON
    # -------------------------

    @app.get("/api/picks")
    def api_picks():
        """
        Picks JSON payload.

        Query:
          - days=N
          - anchor=today|monday

        A run-level failure is reported in "error" with empty results,
        never as a partial list.
        """
        ctx = handler.build_context(length=parse_days(), anchor=parse_anchor())
        return jsonify(
            {
                "generatedAt": ctx["now"].isoformat(),
                "timezone": ctx["tz_name"],
                "window": ctx["window_label"],
                "loading": ctx["loading"],
                "error": ctx["error"],
                "results": [day_result_to_dict(r) for r in ctx["results"]],
            }
        )

    # -------------------------
    # Health
    # -------------------------

    @app.get("/health")
    def health():
        """Simple health endpoint for Docker/monitoring checks."""
        return {"ok": True}

    return app


# WSGI entrypoint for gunicorn (Docker CMD uses: app:app)
app = create_app()

if __name__ == "__main__":
    # Dev server (not for production).
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "8000")), debug=True)
