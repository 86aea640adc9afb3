"""
Seeding order for a Swiss season: validation, default order, persistence and
the move-up/move-down reordering used by the admin screen.
"""
import logging
from collections import Counter
from typing import List, Optional

from swiss.errors import ValidationError, PreconditionError

logger = logging.getLogger(__name__)


def validate_seeding(ordered_team_ids, roster: List[str]) -> None:
    """
    Check that a seeding is a permutation of the roster.
    Raises ValidationError naming missing, extra and duplicated teams.
    """
    if not isinstance(ordered_team_ids, (list, tuple)) \
            or not all(isinstance(team_id, str) for team_id in ordered_team_ids):
        raise ValidationError('Team seeding must be an array of team IDs')
    if len(ordered_team_ids) == 0:
        raise ValidationError('Team seeding cannot be empty')

    counts = Counter(ordered_team_ids)
    roster_set = set(roster)
    duplicates = [team_id for team_id, n in counts.items() if n > 1]
    extra = [team_id for team_id in counts if team_id not in roster_set]
    missing = [team_id for team_id in roster if team_id not in counts]

    if not (duplicates or extra or missing):
        return

    problems = []
    if missing:
        problems.append(f"missing teams: {', '.join(missing)}")
    if extra:
        problems.append(f"teams not in this season: {', '.join(extra)}")
    if duplicates:
        problems.append(f"duplicate teams: {', '.join(duplicates)}")
    raise ValidationError(
        f"Seeding must include all {len(roster_set)} teams in the season exactly once ({'; '.join(problems)})",
        missing=missing, extra=extra, duplicates=duplicates,
    )


def effective_seeding(roster: List[str], saved: Optional[List[str]]) -> List[str]:
    """
    Seed order used for display and tie ordering.

    Saved teams still on the roster keep their saved order; roster teams the
    saved seeding does not mention follow in join order.
    """
    if not saved:
        return list(roster)
    roster_set = set(roster)
    ordered = [team_id for team_id in saved if team_id in roster_set]
    seen = set(ordered)
    ordered.extend(team_id for team_id in roster if team_id not in seen)
    return ordered


def initial_seed(team_id: str, seeding: Optional[List[str]]) -> Optional[int]:
    """Get the 1-based seed of a team, or None if there is no seeding or the team is not in it."""
    if not seeding:
        return None
    try:
        return seeding.index(team_id) + 1
    except ValueError:
        return None


def move_up(order: List[str], index: int) -> List[str]:
    """Swap the entry at index with the one above it. No-op for the first entry."""
    new_order = list(order)
    if index <= 0 or index >= len(new_order):
        return new_order
    new_order[index - 1], new_order[index] = new_order[index], new_order[index - 1]
    return new_order


def move_down(order: List[str], index: int) -> List[str]:
    """Swap the entry at index with the one below it. No-op for the last entry."""
    new_order = list(order)
    if index < 0 or index >= len(new_order) - 1:
        return new_order
    new_order[index], new_order[index + 1] = new_order[index + 1], new_order[index]
    return new_order


class SeedingStore:
    """Reads and writes a season's seeding through the document store."""

    def __init__(self, store):
        self.store = store

    def get_seeding(self, season_id: str) -> List[str]:
        """Saved seeding, or the roster's join order when none has been saved (not persisted)."""
        saved = self.store.read_seeding(season_id)
        if saved:
            return list(saved)
        return list(self.store.list_teams(season_id))

    def get_saved_seeding(self, season_id: str) -> Optional[List[str]]:
        saved = self.store.read_seeding(season_id)
        return list(saved) if saved else None

    def set_seeding(self, season_id: str, ordered_team_ids) -> List[str]:
        season = self.store.get_season(season_id)
        if not season.is_swiss():
            raise PreconditionError('Season must be in Swiss format to set seeding')

        validate_seeding(ordered_team_ids, self.store.list_teams(season_id))

        seeding = list(ordered_team_ids)
        self.store.write_seeding(season_id, seeding)
        logger.info(f"Swiss seeding set: season={season_id} teams_seeded={len(seeding)}")
        return seeding
