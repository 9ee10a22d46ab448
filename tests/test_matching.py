"""Tests for league-gated team matching."""

import pytest

from wtwtw.config import DEFAULT_FAVORITES, build_favorites
from wtwtw.matching import distinct_leagues, league_matches, matches, matches_any
from wtwtw.models import RawParticipant

FAV = {f.key: f for f in DEFAULT_FAVORITES}


class TestLeagueMatches:
    """Tests for league path comparison."""

    def test_same_league(self):
        assert league_matches("baseball/mlb", "baseball/mlb")

    def test_case_and_slashes_ignored(self):
        assert league_matches("/Baseball/MLB/", "baseball/mlb")

    def test_different_league(self):
        assert not league_matches("football/nfl", "baseball/mlb")

    def test_empty_league_never_matches(self):
        assert not league_matches("", "")


class TestMatches:
    """Tests for per-favorite matching rules."""

    def test_nfl_giants_do_not_match_mlb_giants(self):
        nyg = RawParticipant(display_name="New York Giants", abbreviation="NYG")
        assert not matches(nyg, FAV["giants"], "football/nfl")

    def test_mlb_giants_by_name(self):
        sf = RawParticipant(display_name="San Francisco Giants", abbreviation="")
        assert matches(sf, FAV["giants"], "baseball/mlb")

    @pytest.mark.parametrize("abbr", ["SF", "sfg", "SFG"])
    def test_mlb_giants_by_abbreviation(self, abbr):
        assert matches(RawParticipant(display_name="", abbreviation=abbr), FAV["giants"], "baseball/mlb")

    def test_abbreviation_is_exact(self):
        assert not matches(RawParticipant(abbreviation="SFX"), FAV["giants"], "baseball/mlb")

    def test_name_is_case_insensitive_substring(self):
        assert matches(RawParticipant(display_name="PITTSBURGH STEELERS"), FAV["steelers"], "football/nfl")

    def test_warriors_and_valkyries_share_abbreviation_but_not_league(self):
        gs = RawParticipant(display_name="", abbreviation="GS")
        assert matches(gs, FAV["warriors"], "basketball/nba")
        assert not matches(gs, FAV["warriors"], "basketball/wnba")
        assert matches(gs, FAV["valkyries"], "basketball/wnba")

    def test_missing_fields_never_match(self):
        for fav in DEFAULT_FAVORITES:
            assert not matches(RawParticipant(), fav, fav.league)

    def test_none_fields_degrade(self):
        p = RawParticipant(display_name=None, abbreviation=None)
        assert not matches(p, FAV["cubs"], "baseball/mlb")

    def test_other_team_in_league(self):
        assert not matches(RawParticipant("Los Angeles Dodgers", "LAD"), FAV["giants"], "baseball/mlb")


class TestMatchesAny:
    """Tests for matching over a competitor list."""

    def test_second_participant(self):
        parts = [RawParticipant("St. Louis Cardinals", "STL"), RawParticipant("Chicago Cubs", "CHC")]
        assert matches_any(parts, FAV["cubs"], "baseball/mlb")

    def test_empty_list(self):
        assert not matches_any([], FAV["cubs"], "baseball/mlb")

    def test_table_driven_favorite(self):
        (wild,) = build_favorites([("wild", "Wild (NHL)", "hockey/nhl", ["Wild"], ["min"])])
        assert matches(RawParticipant("Minnesota Wild", ""), wild, "hockey/nhl")
        assert matches(RawParticipant("", "MIN"), wild, "hockey/nhl")


class TestDistinctLeagues:
    """Tests for the ordered league set."""

    def test_first_appearance_order(self):
        assert distinct_leagues(DEFAULT_FAVORITES) == (
            "football/nfl", "basketball/nba", "basketball/wnba", "baseball/mlb",
        )

    def test_empty(self):
        assert distinct_leagues(()) == ()
