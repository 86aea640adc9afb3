"""
Shared pytest fixtures for Swiss engine tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
os.environ.setdefault('SECRET_KEY', 'test-secret-key')

from swiss.errors import NotFoundError
from swiss.models import Team, Game, Season, GAME_TYPE_REGULAR


class FakeStore:
    """In-memory store implementing the same contract as YamlSeasonStore."""

    def __init__(self):
        self.seasons = {}
        self.games = {}
        self.writes = []

    def add_season(self, season, games=None):
        self.seasons[season.id] = season
        self.games[season.id] = list(games or [])
        return season

    def list_seasons(self):
        return [self.seasons[k] for k in sorted(self.seasons)]

    def get_season(self, season_id):
        if season_id not in self.seasons:
            raise NotFoundError(f"Season not found: {season_id}")
        return self.seasons[season_id]

    def list_teams(self, season_id):
        return self.get_season(season_id).team_ids

    def list_completed_games(self, season_id):
        self.get_season(season_id)
        return [g for g in self.games[season_id] if g.type == GAME_TYPE_REGULAR and g.is_completed()]

    def read_seeding(self, season_id):
        seeding = self.get_season(season_id).swiss_initial_seeding
        return list(seeding) if seeding else None

    def write_seeding(self, season_id, ordered_team_ids):
        self.get_season(season_id).swiss_initial_seeding = list(ordered_team_ids)
        self.writes.append((season_id, list(ordered_team_ids)))


def make_game(game_id, home, away, home_score=None, away_score=None, type=GAME_TYPE_REGULAR):
    return Game(id=game_id, season_id='s1', home=home, away=away,
                home_score=home_score, away_score=away_score, type=type)


@pytest.fixture
def four_team_games():
    """A beats B 13-7, C beats D 13-10, A beats C 13-11."""
    return [
        make_game('g1', 'A', 'B', 13, 7),
        make_game('g2', 'C', 'D', 13, 10),
        make_game('g3', 'A', 'C', 13, 11),
    ]


@pytest.fixture
def twelve_teams():
    return [chr(ord('A') + i) for i in range(12)]


@pytest.fixture
def fake_store(four_team_games):
    """Store with one Swiss season (A-D) and one traditional season."""
    store = FakeStore()
    store.add_season(
        Season(id='s1', name='Spring Swiss', format='swiss',
               teams=[Team(id=t, name=f"Team {t}") for t in ['A', 'B', 'C', 'D']]),
        games=four_team_games + [make_game('g4', 'B', 'D')],
    )
    store.add_season(
        Season(id='t1', name='Summer League', format='traditional',
               teams=[Team(id='X'), Team(id='Y')]),
    )
    return store


def write_season(data_dir, season_id, season_data, games=None):
    """Write a season directory in the YAML store layout."""
    season_dir = os.path.join(str(data_dir), 'seasons', season_id)
    os.makedirs(season_dir, exist_ok=True)
    with open(os.path.join(season_dir, 'season.yaml'), 'w', encoding='utf-8') as f:
        yaml.dump(season_data, f, default_flow_style=False)
    if games is not None:
        with open(os.path.join(season_dir, 'games.yaml'), 'w', encoding='utf-8') as f:
            yaml.dump({'games': games}, f, default_flow_style=False)
    return season_dir


@pytest.fixture
def yaml_data_dir(tmp_path):
    """Data directory with a Swiss season s1 (A-D) and a traditional season t1."""
    write_season(tmp_path, 's1', {
        'name': 'Spring Swiss',
        'format': 'swiss',
        'teams': [{'id': t, 'name': f"Team {t}"} for t in ['A', 'B', 'C', 'D']],
    }, games=[
        {'id': 'g1', 'home': 'A', 'away': 'B', 'home_score': 13, 'away_score': 7, 'type': 'regular', 'field': 1},
        {'id': 'g2', 'home': 'C', 'away': 'D', 'home_score': 13, 'away_score': 10, 'type': 'regular', 'field': 2},
        {'id': 'g3', 'home': 'A', 'away': 'C', 'home_score': 13, 'away_score': 11, 'type': 'regular', 'field': 1},
        {'id': 'g4', 'home': 'B', 'away': 'D', 'home_score': None, 'away_score': None, 'type': 'regular'},
        {'id': 'g5', 'home': 'B', 'away': 'D', 'home_score': 15, 'away_score': None, 'type': 'regular'},
        {'id': 'g6', 'home': 'D', 'away': 'A', 'home_score': 15, 'away_score': 0, 'type': 'playoff'},
        {'id': 'g7', 'home': None, 'away': 'A', 'home_score': None, 'away_score': None, 'type': 'regular'},
    ])
    write_season(tmp_path, 't1', {
        'name': 'Summer League',
        'format': 'traditional',
        'teams': [{'id': 'X'}, {'id': 'Y'}],
    })
    return tmp_path


@pytest.fixture
def client(yaml_data_dir, monkeypatch):
    """Create an admin test client over a temporary data directory."""
    import app as app_module
    monkeypatch.setattr(app_module, 'DATA_DIR', str(yaml_data_dir))
    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        with client.session_transaction() as sess:
            sess['user'] = 'admin'
            sess['admin'] = True
        yield client
