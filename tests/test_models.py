"""
Unit tests for the data models (Team, Game, Season).
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from swiss.models import Team, Game, Season


class TestTeam:
    """Tests for the Team model."""

    def test_team_name_defaults_to_id(self):
        """Test a team without a display name uses its id."""
        team = Team(id="t1")
        assert team.name == "t1"
        assert team.placement is None

    def test_team_from_dict(self):
        """Test loading a team document."""
        team = Team.from_dict({'id': 7, 'name': 'Hammers', 'logo': 'logo.png'}, season_id='s1')
        assert team.id == "7"
        assert team.name == "Hammers"
        assert team.season_id == "s1"
        assert team.logo == "logo.png"

    def test_team_repr(self):
        """Test team string representation."""
        assert "Hammers" in repr(Team(id="t1", name="Hammers"))


class TestGame:
    """Tests for the Game model."""

    def test_completed_game(self):
        """Test a game with both teams and scores is completed."""
        game = Game(id="g1", home="A", away="B", home_score=13, away_score=7)
        assert game.is_completed()

    def test_unplayed_game(self):
        """Test a game without scores is not completed."""
        assert not Game(id="g1", home="A", away="B").is_completed()

    def test_partially_scored_game(self):
        """Test a game with one score is treated as unplayed."""
        assert not Game(id="g1", home="A", away="B", home_score=13).is_completed()
        assert not Game(id="g1", home="A", away="B", away_score=13).is_completed()

    def test_zero_scores_count(self):
        """Test 0-0 is a reported score, not a missing one."""
        assert Game(id="g1", home="A", away="B", home_score=0, away_score=0).is_completed()

    def test_tbd_team(self):
        """Test a placeholder game with an unassigned team is not completed."""
        game = Game(id="g1", home=None, away="B", home_score=13, away_score=7)
        assert not game.has_assigned_teams()
        assert not game.is_completed()

    def test_game_from_dict_defaults_to_regular(self):
        """Test loading a game document without a type."""
        game = Game.from_dict({'id': 'g1', 'home': 'A', 'away': 'B'})
        assert game.type == 'regular'
        assert game.home_score is None

    def test_game_repr(self):
        """Test game string representation."""
        repr_str = repr(Game(id="g1", home="A", away="B", home_score=13, away_score=7))
        assert "13-7" in repr_str


class TestSeason:
    """Tests for the Season model."""

    def test_team_ids_keep_join_order(self):
        """Test roster order is preserved."""
        season = Season(id="s1", teams=[Team(id="C"), Team(id="A"), Team(id="B")])
        assert season.team_ids == ["C", "A", "B"]

    def test_default_format_is_traditional(self):
        """Test seasons are traditional unless marked Swiss."""
        assert not Season(id="s1").is_swiss()
        assert Season(id="s1", format="swiss").is_swiss()
