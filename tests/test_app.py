"""Tests for the Flask routes."""

from datetime import datetime, timezone

import pytest
from dateutil import tz

from app import create_app
from wtwtw.config import AppConfig
from wtwtw.models import RawEvent, RawParticipant

PT = tz.gettz("America/Los_Angeles")


def tonight_cubs_game():
    """A Cubs game at 18:00 PT today (PT calendar), so it lands in day 0."""
    today = datetime.now(timezone.utc).astimezone(PT).date()
    start = datetime(today.year, today.month, today.day, 18, 0, tzinfo=PT)
    return today.strftime("%Y%m%d"), RawEvent(
        id="cubs-1",
        display_name="Milwaukee Brewers at Chicago Cubs",
        short_name="MIL @ CHC",
        start=start,
        league="baseball/mlb",
        participants=(RawParticipant("Chicago Cubs", "CHC"), RawParticipant("Milwaukee Brewers", "MIL")),
    )


@pytest.fixture
def client():
    key, event = tonight_cubs_game()

    def source(league, date_key):
        if league == "football/nfl":
            raise ConnectionError("nfl down")
        return [event] if (league, date_key) == ("baseball/mlb", key) else []

    app = create_app(AppConfig(days_ahead=3, day_anchor="today"), source=source)
    app.config["TESTING"] = True
    return app.test_client()


class TestApiPicks:
    """Tests for /api/picks."""

    def test_payload(self, client):
        body = client.get("/api/picks").get_json()
        assert body["timezone"] == "America/Los_Angeles"
        assert body["window"] == "5–8pm"
        assert body["loading"] is False
        assert body["error"] is None
        assert len(body["results"]) == 3

        first = body["results"][0]
        assert first["pick"]["favorite"] == "cubs"
        assert first["pick"]["shortName"] == "MIL @ CHC"
        assert first["pick"]["time"] == "6:00 PM"
        assert all(r["pick"] is None for r in body["results"][1:])

    def test_days_param(self, client):
        assert len(client.get("/api/picks?days=5").get_json()["results"]) == 5

    def test_days_param_clamped_and_defaulted(self, client):
        assert len(client.get("/api/picks?days=99").get_json()["results"]) == 14
        assert len(client.get("/api/picks?days=abc").get_json()["results"]) == 3

    def test_monday_anchor(self, client):
        body = client.get("/api/picks?anchor=monday&days=5").get_json()
        assert body["results"][0]["label"] == "Monday"

    def test_run_level_error(self):
        def broken(league, date_key):
            return ["not an event"]

        app = create_app(AppConfig(days_ahead=2), source=broken)
        body = app.test_client().get("/api/picks").get_json()
        assert body["error"]
        assert body["results"] == []


class TestWidget:
    """Tests for the HTML widget and misc routes."""

    def test_widget_renders(self, client):
        resp = client.get("/widget/picks?theme=light")
        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "Milwaukee Brewers at Chicago Cubs" in html
        assert "No qualifying game" in html
        assert 'class="light"' in html

    def test_bad_theme_falls_back(self, client):
        assert 'class="dark"' in client.get("/widget/picks?theme=neon").get_data(as_text=True)

    def test_redirects(self, client):
        for path in ("/", "/widget"):
            resp = client.get(path)
            assert resp.status_code == 302
            assert resp.headers["Location"].endswith("/widget/picks")

    def test_health(self, client):
        assert client.get("/health").get_json() == {"ok": True}
