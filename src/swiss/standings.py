"""
Per-team Swiss statistics computed from completed games.

Swiss Score = Wins x 2 + Buchholz, where Buchholz is the sum of the wins of
every opponent a team has played.
"""
import logging
import warnings
from typing import List, Dict

from swiss.errors import DataIntegrityWarning

logger = logging.getLogger(__name__)

WIN_WEIGHT = 2


def _empty_stats() -> Dict:
    return {
        'wins': 0,
        'losses': 0,
        'points_for': 0,
        'points_against': 0,
        'point_differential': 0,
        'buchholz_score': 0,
        'swiss_score': 0,
        'opponent_ids': [],
    }


def _record(stats: Dict, own_score: int, opponent_score: int, opponent_id: str) -> None:
    stats['points_for'] += own_score
    stats['points_against'] += opponent_score
    stats['point_differential'] += own_score - opponent_score
    stats['opponent_ids'].append(opponent_id)
    if own_score > opponent_score:
        stats['wins'] += 1
    elif own_score < opponent_score:
        stats['losses'] += 1
    # A tie credits neither side


def compute_standings(games, team_ids: List[str]) -> Dict[str, Dict]:
    """
    Calculate Swiss standings for every team on the roster.

    Returns: {team_id: {'wins', 'losses', 'points_for', 'points_against',
                        'point_differential', 'buchholz_score', 'swiss_score',
                        'opponent_ids'}}
    in the same order as team_ids. Teams without games get zeroed stats.

    Games without both teams and both scores are ignored. Games involving a
    team that is not on the roster are skipped with a DataIntegrityWarning.
    """
    team_stats = {team_id: _empty_stats() for team_id in team_ids}

    for game in games:
        if not game.is_completed():
            continue

        unknown = [t for t in (game.home, game.away) if t not in team_stats]
        if unknown:
            message = f"Game {game.id} references teams not on the roster: {', '.join(str(t) for t in unknown)}; skipped"
            logger.warning(message)
            warnings.warn(message, DataIntegrityWarning, stacklevel=2)
            continue

        _record(team_stats[game.home], game.home_score, game.away_score, game.away)
        _record(team_stats[game.away], game.away_score, game.home_score, game.home)

    # Buchholz uses the full-season win totals, so it is computed after every game is counted
    team_wins = {team_id: stats['wins'] for team_id, stats in team_stats.items()}
    for stats in team_stats.values():
        stats['buchholz_score'] = sum(team_wins[opponent_id] for opponent_id in stats['opponent_ids'])
        stats['swiss_score'] = stats['wins'] * WIN_WEIGHT + stats['buchholz_score']

    return team_stats


def count_completed_games(games) -> int:
    """Count games with both teams assigned and both scores reported."""
    return sum(1 for game in games if game.is_completed())
