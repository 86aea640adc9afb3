"""
Swiss ranking policy: order teams by Swiss score.
"""
from typing import List, Dict


def rank(standings: Dict[str, Dict]) -> List[Dict]:
    """
    Convert standings into a ranked list.

    Sorted by swiss_score (desc). The sort is stable, so teams tied on Swiss
    score keep the order of the standings mapping (the seeding order when
    built by the engine). Ranks are 1..N with no gaps or shared positions.
    """
    ordered = sorted(standings.items(), key=lambda item: -item[1]['swiss_score'])
    rankings = []
    for position, (team_id, stats) in enumerate(ordered, start=1):
        entry = {'team_id': team_id, 'rank': position}
        entry.update(stats)
        entry['opponent_ids'] = list(stats.get('opponent_ids', []))
        rankings.append(entry)
    return rankings
