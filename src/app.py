"""
Flask JSON API for the admin Swiss Rankings screen.
"""
import os
import re
from functools import wraps
from flask import Flask, request, jsonify, session
from swiss.engine import SwissEngine
from swiss.errors import SwissError, ConfigurationError, ValidationError, NotFoundError, PreconditionError
from swiss.pairing import pairing_pattern
from swiss.store import YamlSeasonStore

app = Flask(__name__)


BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('SWISS_DATA_DIR', os.path.join(BASE_DIR, 'data'))


def _load_secret_key(data_dir: str) -> bytes:
    """Session signing key: SECRET_KEY from the environment, else one kept in data_dir/.secret_key."""
    configured = os.environ.get('SECRET_KEY')
    if configured:
        return configured.encode()
    key_path = os.path.join(data_dir, '.secret_key')
    if not os.path.exists(key_path):
        os.makedirs(data_dir, exist_ok=True)
        with open(key_path, 'wb') as f:
            f.write(os.urandom(24))
    with open(key_path, 'rb') as f:
        return f.read()


app.secret_key = _load_secret_key(DATA_DIR)

_ERROR_STATUS = {
    ConfigurationError: 400,
    ValidationError: 400,
    NotFoundError: 404,
    PreconditionError: 409,
}


def get_engine() -> SwissEngine:
    """Build an engine over the current data directory."""
    return SwissEngine(YamlSeasonStore(DATA_DIR))


def admin_required(f):
    """Reject callers without an admin session."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'user' not in session:
            return jsonify({'error': 'Authentication required'}), 401
        if not session.get('admin'):
            return jsonify({'error': 'Admin access required'}), 403
        return f(*args, **kwargs)
    return decorated_function


def _camel(key: str) -> str:
    return re.sub(r'_([a-z])', lambda m: m.group(1).upper(), key)


def _to_camel(obj):
    """Rename snake_case dict keys to the camelCase the admin UI reads."""
    if isinstance(obj, dict):
        return {_camel(k): _to_camel(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_to_camel(v) for v in obj]
    return obj


def _error_response(error: SwissError):
    status = _ERROR_STATUS.get(type(error), 500)
    payload = {'error': str(error)}
    if isinstance(error, ValidationError):
        payload.update({
            'missing': error.missing,
            'extra': error.extra,
            'duplicates': error.duplicates,
        })
    return jsonify(payload), status


@app.route('/api/swiss/seasons', methods=['GET'])
@admin_required
def api_swiss_seasons():
    """List Swiss-format seasons for the season selector."""
    return jsonify({'seasons': get_engine().list_swiss_seasons()})


@app.route('/api/swiss/rankings', methods=['POST'])
@admin_required
def api_swiss_rankings():
    """Get current Swiss rankings for a season."""
    data = request.get_json(silent=True) or {}
    season_id = data.get('seasonId')
    if not season_id:
        return jsonify({'error': 'Season ID is required'}), 400

    try:
        result = get_engine().get_rankings(season_id)
    except SwissError as e:
        app.logger.warning(f'Error getting Swiss rankings for {season_id}: {e}')
        return _error_response(e)

    app.logger.info(f"Swiss rankings retrieved: season={season_id} "
                    f"games_played={result['games_played']} requested_by={session['user']}")
    return jsonify({'success': True, **_to_camel(result)})


@app.route('/api/swiss/seeding', methods=['POST'])
@admin_required
def api_swiss_seeding():
    """Set or update the initial seeding for a Swiss season."""
    data = request.get_json(silent=True) or {}
    season_id = data.get('seasonId')
    team_seeding = data.get('teamSeeding')
    if not season_id:
        return jsonify({'error': 'Season ID is required'}), 400
    if not isinstance(team_seeding, list):
        return jsonify({'error': 'Team seeding must be an array of team IDs'}), 400

    try:
        result = get_engine().set_seeding(season_id, team_seeding)
    except SwissError as e:
        app.logger.warning(f'Error setting Swiss seeding for {season_id}: {e}')
        return _error_response(e)

    app.logger.info(f"Swiss seeding set: season={season_id} "
                    f"teams_seeded={result['teams_seeded']} updated_by={session['user']}")
    return jsonify(_to_camel(result))


@app.route('/api/swiss/pattern', methods=['GET'])
@admin_required
def api_swiss_pattern():
    """Reference matchup pattern for the 12-team Swiss bracket."""
    return jsonify({'pattern': _to_camel(pairing_pattern())})


@app.route('/api/swiss/pairings/<season_id>/<int:round_number>', methods=['GET'])
@admin_required
def api_swiss_pairings(season_id, round_number):
    """
    Pattern matchups for a round with seeds resolved to teams.

    ?order=rankings resolves seeds from the current Swiss rankings instead of
    the saved seeding, for re-seeding between rounds.
    """
    engine = get_engine()
    order = request.args.get('order', 'seeding')
    if order not in ('seeding', 'rankings'):
        return jsonify({'error': f'Unknown order: {order}'}), 400

    try:
        seeding = None
        if order == 'rankings':
            rankings = engine.get_rankings(season_id)['rankings']
            seeding = [entry['team_id'] for entry in rankings]
        pairings = engine.get_pairings(season_id, round_number, seeding)
    except SwissError as e:
        return _error_response(e)

    return jsonify({'round': round_number, 'order': order, 'pairings': _to_camel(pairings)})


if __name__ == '__main__':
    app.run(debug=True, port=5000)
