"""
Entry point for the admin Swiss screen: rankings, seeding and pairings.

Every call re-reads the store and recomputes; nothing is cached between calls.
"""
import logging
from typing import List, Dict, Optional

from swiss.pairing import resolve_pairings, BRACKET_SIZE
from swiss.ranking import rank
from swiss.seeding import SeedingStore, effective_seeding, initial_seed
from swiss.standings import compute_standings, count_completed_games
from swiss.models import SEASON_FORMAT_SWISS

logger = logging.getLogger(__name__)


class SwissEngine:
    def __init__(self, store):
        self.store = store
        self.seeding = SeedingStore(store)

    def list_swiss_seasons(self) -> List[Dict]:
        return [
            {'id': season.id, 'name': season.name}
            for season in self.store.list_seasons()
            if season.format == SEASON_FORMAT_SWISS
        ]

    def compute_standings(self, season_id: str) -> Dict[str, Dict]:
        """Standings for a season, keyed by team id in seed order."""
        roster = self.store.list_teams(season_id)
        order = effective_seeding(roster, self.store.read_seeding(season_id))
        return compute_standings(self.store.list_completed_games(season_id), order)

    def get_rankings(self, season_id: str) -> Dict:
        """
        Current Swiss rankings for a season.

        Returns: {'season_id', 'season_name', 'format', 'rankings',
                  'games_played', 'total_teams', 'swiss_initial_seeding'}
        """
        season = self.store.get_season(season_id)
        saved = self.seeding.get_saved_seeding(season_id)
        games = self.store.list_completed_games(season_id)
        order = effective_seeding(season.team_ids, saved)
        games_played = count_completed_games(games)

        rankings = rank(compute_standings(games, order))
        for entry in rankings:
            entry['initial_seed'] = initial_seed(entry['team_id'], saved)

        logger.info(f"Swiss rankings computed: season={season_id} teams={len(order)} games_played={games_played}")
        return {
            'season_id': season_id,
            'season_name': season.name,
            'format': season.format,
            'rankings': rankings,
            'games_played': games_played,
            'total_teams': len(season.teams),
            'swiss_initial_seeding': saved,
        }

    def get_seeding(self, season_id: str) -> List[str]:
        return self.seeding.get_seeding(season_id)

    def set_seeding(self, season_id: str, ordered_team_ids) -> Dict:
        """Validate and save a seeding. Raises on failure without writing anything."""
        seeding = self.seeding.set_seeding(season_id, ordered_team_ids)
        return {
            'success': True,
            'message': f"Successfully set seeding for {len(seeding)} teams",
            'season_id': season_id,
            'teams_seeded': len(seeding),
        }

    def get_pairings(self, season_id: str, round_number: int, seeding: Optional[List[str]] = None) -> List[Dict]:
        """Pattern matchups for a round with teams substituted from the season's seeding."""
        roster = self.store.list_teams(season_id)
        if len(roster) != BRACKET_SIZE:
            logger.warning(f"Season {season_id} has {len(roster)} teams; the pairing pattern is laid out for {BRACKET_SIZE}")
        if seeding is None:
            seeding = effective_seeding(roster, self.store.read_seeding(season_id))
        return resolve_pairings(round_number, seeding)
