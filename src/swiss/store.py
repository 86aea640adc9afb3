"""
YAML-file document store for seasons, teams and games.

Layout:
    <data_dir>/seasons/<season_id>/season.yaml   name, format, teams, swiss_initial_seeding
    <data_dir>/seasons/<season_id>/games.yaml    games: [...]
"""
import os
import re
import logging
import tempfile
import yaml
from typing import List, Optional
from filelock import FileLock

from swiss.errors import NotFoundError
from swiss.models import Team, Game, Season, team_ref, GAME_TYPE_REGULAR, SEASON_FORMAT_TRADITIONAL

logger = logging.getLogger(__name__)

LOCK_TIMEOUT = 10
_SEASON_ID_RE = re.compile(r'^[A-Za-z0-9][A-Za-z0-9_-]*$')


class YamlSeasonStore:
    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self.seasons_dir = os.path.join(data_dir, 'seasons')

    def _season_dir(self, season_id: str) -> str:
        if not isinstance(season_id, str) or not _SEASON_ID_RE.match(season_id):
            raise NotFoundError(f"Season not found: {season_id}")
        path = os.path.join(self.seasons_dir, season_id)
        if not os.path.isfile(os.path.join(path, 'season.yaml')):
            raise NotFoundError(f"Season not found: {season_id}")
        return path

    def _lock(self, season_id: str) -> FileLock:
        return FileLock(os.path.join(self._season_dir(season_id), '.lock'), timeout=LOCK_TIMEOUT)

    def _load_season_data(self, season_id: str) -> dict:
        path = os.path.join(self._season_dir(season_id), 'season.yaml')
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not contain a season document")
        return data

    def list_seasons(self) -> List[Season]:
        """Load every season that has a season.yaml, sorted by id."""
        if not os.path.isdir(self.seasons_dir):
            return []
        seasons = []
        for season_id in sorted(os.listdir(self.seasons_dir)):
            try:
                seasons.append(self.get_season(season_id))
            except NotFoundError:
                continue
            except (yaml.YAMLError, ValueError) as e:
                logger.warning(f'Failed to parse season {season_id}: {e}')
                continue
        return seasons

    def get_season(self, season_id: str) -> Season:
        data = self._load_season_data(season_id)
        teams = [Team.from_dict(t, season_id=season_id) for t in data.get('teams') or []]
        return Season(
            id=season_id,
            name=data.get('name'),
            format=data.get('format', SEASON_FORMAT_TRADITIONAL),
            teams=teams,
            swiss_initial_seeding=self._seeding_ids(data),
        )

    def list_teams(self, season_id: str) -> List[str]:
        """Team ids in join/registration order."""
        return self.get_season(season_id).team_ids

    def list_games(self, season_id: str) -> List[Game]:
        path = os.path.join(self._season_dir(season_id), 'games.yaml')
        if not os.path.exists(path):
            return []
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        if not data:
            return []
        return [Game.from_dict(g, season_id=season_id) for g in data.get('games') or []]

    def list_completed_games(self, season_id: str) -> List[Game]:
        """Regular-season games with both teams and both scores reported."""
        return [
            game for game in self.list_games(season_id)
            if game.type == GAME_TYPE_REGULAR and game.is_completed()
        ]

    def read_seeding(self, season_id: str) -> Optional[List[str]]:
        return self._seeding_ids(self._load_season_data(season_id))

    def _seeding_ids(self, data: dict) -> Optional[List[str]]:
        seeding = data.get('swiss_initial_seeding')
        return [team_ref(team_id) for team_id in seeding] if seeding else None

    def write_seeding(self, season_id: str, ordered_team_ids: List[str]):
        """Overwrite the saved seeding. Writers for the same season are serialized by a file lock."""
        season_dir = self._season_dir(season_id)
        with self._lock(season_id):
            data = self._load_season_data(season_id)
            data['swiss_initial_seeding'] = list(ordered_team_ids)
            self._atomic_dump(os.path.join(season_dir, 'season.yaml'), data)
        logger.debug(f"Wrote seeding for {season_id}: {len(ordered_team_ids)} teams")

    def _atomic_dump(self, path: str, data: dict):
        fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
