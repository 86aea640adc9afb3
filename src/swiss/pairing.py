"""
Fixed Swiss matchup pattern for a 12-team field played on three fields.
"""
from typing import List, Dict, Tuple, Optional

from swiss.errors import ConfigurationError

FIELDS = [
    ('A', 'Red'),
    ('B', 'Blue'),
    ('C', 'Green'),
]

# Round number -> (seed, seed) per field, in FIELDS order
SWISS_MATCHUP_PATTERN = {
    1: [(1, 2), (6, 5), (7, 8)],
    2: [(1, 3), (6, 10), (7, 11)],
    3: [(2, 4), (5, 9), (8, 12)],
    4: [(3, 4), (9, 10), (11, 12)],
}

NUM_ROUNDS = len(SWISS_MATCHUP_PATTERN)
BRACKET_SIZE = 12


def field_name(field_id: str) -> str:
    """Get the display name for a field, e.g. 'Field A (Red)'."""
    for fid, color in FIELDS:
        if fid == field_id:
            return f"Field {fid} ({color})"
    raise ConfigurationError(f"Unknown field: {field_id}")


def _check_round(round_number) -> None:
    if isinstance(round_number, bool) or not isinstance(round_number, int):
        raise ConfigurationError(f"Round must be an integer, got {round_number!r}")
    if round_number not in SWISS_MATCHUP_PATTERN:
        raise ConfigurationError(f"Round must be between 1 and {NUM_ROUNDS}, got {round_number}")


def pairings_for_round(round_number: int) -> List[Tuple[str, int, int]]:
    """
    Get the seed matchups for a round.
    Returns list of (field_id, seed_a, seed_b) tuples, one per field.
    """
    _check_round(round_number)
    return [
        (field_id, seeds[0], seeds[1])
        for (field_id, _), seeds in zip(FIELDS, SWISS_MATCHUP_PATTERN[round_number])
    ]


def seed_to_team(seed: int, seeding: List[str]) -> Optional[str]:
    """Resolve a 1-based seed to a team id. Seeds past the end of the seeding are TBD (None)."""
    if 1 <= seed <= len(seeding):
        return seeding[seed - 1]
    return None


def resolve_pairings(round_number: int, seeding: List[str]) -> List[Dict]:
    """
    Substitute teams for seeds in a round of the pattern.

    Returns a list of dicts with field id, field display name, both seeds and
    the team ids occupying those seeds (None when the seed is not filled).
    """
    resolved = []
    for field_id, seed_a, seed_b in pairings_for_round(round_number):
        resolved.append({
            'field': field_id,
            'field_name': field_name(field_id),
            'seed_a': seed_a,
            'seed_b': seed_b,
            'team_a': seed_to_team(seed_a, seeding),
            'team_b': seed_to_team(seed_b, seeding),
        })
    return resolved


def pairing_pattern() -> List[Dict]:
    """Get the whole reference table, one row per round."""
    rows = []
    for round_number in sorted(SWISS_MATCHUP_PATTERN):
        row = {'round': round_number}
        for field_id, seed_a, seed_b in pairings_for_round(round_number):
            row[f"field_{field_id.lower()}"] = [seed_a, seed_b]
        rows.append(row)
    return rows
