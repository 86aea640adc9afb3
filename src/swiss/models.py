GAME_TYPE_REGULAR = 'regular'

SEASON_FORMAT_TRADITIONAL = 'traditional'
SEASON_FORMAT_SWISS = 'swiss'


def team_ref(value):
    """Team ids are strings everywhere; YAML may load numeric ids as int."""
    return None if value is None else str(value)


class Team:
    def __init__(self, id, name=None, season_id=None, logo=None, placement=None):
        self.id = id
        self.name = name if name else id
        self.season_id = season_id
        self.logo = logo
        self.placement = placement  # Final finishing position, None while the season runs

    @classmethod
    def from_dict(cls, data, season_id=None):
        return cls(
            id=str(data['id']),
            name=data.get('name'),
            season_id=season_id,
            logo=data.get('logo'),
            placement=data.get('placement'),
        )

    def __repr__(self):
        return f"Team(id={self.id}, name={self.name}, placement={self.placement})"


class Game:
    def __init__(self, id, season_id=None, home=None, away=None, field=None, date=None,
                 type=GAME_TYPE_REGULAR, home_score=None, away_score=None):
        self.id = id
        self.season_id = season_id
        self.home = home  # None until the slot is filled
        self.away = away
        self.field = field
        self.date = date
        self.type = type
        self.home_score = home_score
        self.away_score = away_score

    def has_assigned_teams(self):
        return self.home is not None and self.away is not None

    def is_completed(self):
        """A game counts as played only with both teams and both scores reported."""
        if not self.has_assigned_teams():
            return False
        return isinstance(self.home_score, int) and isinstance(self.away_score, int) \
            and not isinstance(self.home_score, bool) and not isinstance(self.away_score, bool)

    @classmethod
    def from_dict(cls, data, season_id=None):
        return cls(
            id=str(data['id']),
            season_id=season_id,
            home=team_ref(data.get('home')),
            away=team_ref(data.get('away')),
            field=data.get('field'),
            date=data.get('date'),
            type=data.get('type', GAME_TYPE_REGULAR),
            home_score=data.get('home_score'),
            away_score=data.get('away_score'),
        )

    def __repr__(self):
        return (f"Game(id={self.id}, home={self.home}, away={self.away}, "
                f"score={self.home_score}-{self.away_score}, type={self.type})")


class Season:
    def __init__(self, id, name=None, format=SEASON_FORMAT_TRADITIONAL, teams=None,
                 swiss_initial_seeding=None):
        self.id = id
        self.name = name if name else id
        self.format = format
        self.teams = teams if teams else []  # Join/registration order
        self.swiss_initial_seeding = swiss_initial_seeding

    @property
    def team_ids(self):
        return [team.id for team in self.teams]

    def is_swiss(self):
        return self.format == SEASON_FORMAT_SWISS

    def __repr__(self):
        return f"Season(id={self.id}, name={self.name}, format={self.format}, teams={len(self.teams)})"
