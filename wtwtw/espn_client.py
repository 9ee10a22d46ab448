# wtwtw/espn_client.py
"""
Thin HTTP client wrapper for ESPN's public site API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class ESPNClient:
    """A minimal client for retrieving scoreboard JSON from the ESPN API base."""

    def __init__(self, base_url: str, timeout: int = 10, session: Optional[requests.Session] = None) -> None:
        """Store the base URL and build a session with request headers."""
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": "wtwtw-widget/1.0"})

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GET request to base_url + path and return parsed JSON.

        Raises:
            requests.HTTPError on non-2xx responses.
            requests.RequestException on transport failures.
        """
        url = f"{self.base_url}{path}"
        logger.debug("GET %s %s", url, params or "")
        r = self._session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def scoreboard(self, league_path: str, yyyymmdd: str) -> Dict[str, Any]:
        """Fetch the scoreboard for a league path (e.g. football/nfl) on a date (YYYYMMDD)."""
        league_path = league_path.strip("/")
        return self.get_json(f"/apis/site/v2/sports/{league_path}/scoreboard", params={"dates": yyyymmdd})
