"""JSON API over the remote roster, for scripts and tooling."""

import logging

from flask import Blueprint, current_app, g, jsonify

from puppybowl.api import errors
from puppybowl.api.result import Result
from puppybowl.context import get_client, get_state
from puppybowl.security import log_api_request, security_headers, validate_json
from puppybowl.validation import new_player_schema

bp = Blueprint("roster_api", __name__, url_prefix="/api/v1")
logger = logging.getLogger(__name__)


def _error_response(result: Result):
    return jsonify({
        "error": result.error,
        "code": result.error_code,
    }), errors.http_status_for(result.error_code)


@bp.route("/health")
@security_headers()
@log_api_request()
def health():
    """Health check endpoint."""
    return jsonify({
        "status": "ok",
        "cohort": get_client().cohort_name,
        "api": current_app.config.get("PUPPY_BOWL_API_URL"),
    })


@bp.route("/players")
@security_headers()
@log_api_request()
def list_players():
    """List all players."""
    result = get_state().refresh_players(get_client())
    if not result:
        return _error_response(result)

    return jsonify({
        "players": [player.to_api() for player in result.value],
        "total": len(result.value)
    })


@bp.route("/players/<int:player_id>")
@security_headers()
@log_api_request()
def get_player(player_id: int):
    """Get player by ID."""
    result = get_client().get_player(player_id)
    if not result:
        return _error_response(result)

    return jsonify({"player": result.value.to_api()})


@bp.route("/teams")
@security_headers()
@log_api_request()
def list_teams():
    """List all teams with their players."""
    result = get_state().refresh_teams(get_client())
    if not result:
        return _error_response(result)

    return jsonify({
        "teams": [{
            "id": team.id,
            "name": team.name,
            "players": [player.to_api() for player in team.players],
        } for team in result.value],
        "total": len(result.value)
    })


@bp.route("/players", methods=["POST"])
@security_headers()
@log_api_request()
@validate_json(new_player_schema)
def create_player():
    """Create a new player."""
    result = get_client().create_player(g.validated_data)
    if not result:
        return _error_response(result)

    return jsonify({"player": result.value.to_api()}), 201


@bp.route("/players/<int:player_id>", methods=["DELETE"])
@security_headers()
@log_api_request()
def delete_player(player_id: int):
    """Delete a player."""
    result = get_client().delete_player(player_id)
    if not result:
        return _error_response(result)

    return "", 204
