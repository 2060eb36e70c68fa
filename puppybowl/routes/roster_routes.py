"""Web pages for the roster: list, detail, add and remove.

Every action is a one-shot call to the remote API followed by a full re-render.
Mutations redirect back to the index, which re-fetches everything.
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, url_for
from marshmallow import ValidationError

from puppybowl.api import errors
from puppybowl.context import get_client, get_state
from puppybowl.rendering import render_new_player_form, render_roster_page, render_single_player
from puppybowl.security import log_api_request, security_headers
from puppybowl.validation import FORM_FIELDS, form_to_payload, load_new_player

bp = Blueprint("roster", __name__)
logger = logging.getLogger(__name__)

# API field -> HTML form field, for mapping validation errors back onto inputs
_FORM_FIELD_FOR = {api_key: form_key for form_key, api_key in FORM_FIELDS.items()}


@bp.route("/")
@security_headers()
@log_api_request()
def index():
    """Fetch players then teams and render the list and the form."""
    client, state = get_client(), get_state()

    players = state.refresh_players(client)
    if not players:
        flash(f"Uh oh, trouble fetching players! {players.error}", "danger")

    teams = state.refresh_teams(client)
    if not teams:
        flash(f"Uh oh, trouble fetching teams! {teams.error}", "danger")

    return render_roster_page(state)


@bp.route("/players", methods=["POST"])
@security_headers()
@log_api_request()
def add_player():
    """Handle the new-player form."""
    client, state = get_client(), get_state()

    try:
        payload = load_new_player(form_to_payload(request.form))
    except ValidationError as err:
        logger.info(f"Rejected new player form: {err.messages}")
        form_errors = {
            _FORM_FIELD_FOR.get(field, field): messages if isinstance(messages, list) else [str(messages)]
            for field, messages in err.messages.items()
        }
        flash("Please fix the highlighted fields.", "danger")
        form_html = render_new_player_form(state, values=request.form.to_dict(),
                                           field_errors=form_errors)
        return render_roster_page(state, form_html=form_html), 400

    result = client.create_player(payload)
    if result:
        flash(f"Added {result.value.name} to the roster.", "success")
    else:
        flash(f"Oops, something went wrong with adding that player! {result.error}", "danger")

    return redirect(url_for("roster.index"))


@bp.route("/players/<int:player_id>/delete", methods=["POST"])
@security_headers()
@log_api_request()
def remove_player(player_id: int):
    """Remove a player, then go back to the re-fetched roster."""
    result = get_client().delete_player(player_id)
    if result:
        flash(f"Removed player #{player_id} from the roster.", "success")
    else:
        flash(f"Whoops, trouble removing player #{player_id} from the roster! {result.error}", "danger")

    return redirect(url_for("roster.index"))


@bp.route("/players/<int:player_id>")
@security_headers()
@log_api_request()
def player_detail(player_id: int):
    """Show one player with team and teammates."""
    result = render_single_player(get_client(), player_id, get_state())
    if result:
        return result.value

    if result.error_code == errors.NOT_FOUND:
        return render_template("error.html", message=f"Player #{player_id} was not found."), 404

    logger.error(f"Could not show player #{player_id}: {result.error}")
    return render_template(
        "error.html",
        message=f"Oh no, trouble fetching player #{player_id}! {result.error}",
    ), errors.http_status_for(result.error_code)
