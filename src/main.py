# Print a season's Swiss rankings and the pattern pairings for a round

import os
import sys
from swiss.engine import SwissEngine
from swiss.errors import SwissError
from swiss.pairing import NUM_ROUNDS
from swiss.store import YamlSeasonStore


def format_differential(value):
    return f"+{value}" if value > 0 else str(value)


def print_rankings(result, team_names):
    print(f"--- {result['season_name']} ({result['games_played']} games played) ---")
    if not result['rankings']:
        print("No teams in this season.")
        return
    print(f"{'Rank':>4}  {'Team':<24} {'W':>3} {'L':>3} {'Buchholz':>8} {'Swiss':>5} {'+/-':>5}")
    for entry in result['rankings']:
        name = team_names.get(entry['team_id'], entry['team_id'])
        print(f"{entry['rank']:>4}  {name:<24} {entry['wins']:>3} {entry['losses']:>3} "
              f"{entry['buchholz_score']:>8} {entry['swiss_score']:>5} "
              f"{format_differential(entry['point_differential']):>5}")


def print_pairings(round_number, pairings, team_names):
    print(f"\nRound {round_number}")
    for pairing in pairings:
        team_a = team_names.get(pairing['team_a'], pairing['team_a']) or 'TBD'
        team_b = team_names.get(pairing['team_b'], pairing['team_b']) or 'TBD'
        print(f"  {pairing['field_name']}: Seed {pairing['seed_a']} {team_a} vs Seed {pairing['seed_b']} {team_b}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: main.py SEASON_ID [ROUND]")
        return 2

    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)
    data_dir = os.environ.get('SWISS_DATA_DIR', os.path.join(base_dir, 'data'))

    store = YamlSeasonStore(data_dir)
    engine = SwissEngine(store)
    season_id = argv[0]

    try:
        rounds = [int(argv[1])] if len(argv) > 1 else list(range(1, NUM_ROUNDS + 1))
    except ValueError:
        print(f"Invalid round: {argv[1]}")
        return 2

    try:
        team_names = {team.id: team.name for team in store.get_season(season_id).teams}
        print_rankings(engine.get_rankings(season_id), team_names)
        for round_number in rounds:
            print_pairings(round_number, engine.get_pairings(season_id, round_number), team_names)
    except SwissError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
