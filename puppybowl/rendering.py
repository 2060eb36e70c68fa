"""HTML rendering for the roster pages.

Each function replaces a whole region of the page: the player list, the
single-player card and the new-player form. They read from an explicit
``RosterState`` and must run inside a Flask application context.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from flask import render_template
from markupsafe import Markup

from puppybowl.api import errors
from puppybowl.api.client import PuppyBowlClient
from puppybowl.api.result import Result
from puppybowl.domain.models import PLAYER_STATUSES, Player, Team
from puppybowl.state import RosterState
from puppybowl.validation.schemas import NO_TEAM

logger = logging.getLogger(__name__)

EMPTY_ROSTER_MESSAGE = "No players available to display."
UNASSIGNED_TEAM = "Unassigned"
NO_TEAMMATES_MESSAGE = "There are no teammates to display for this player."


def render_all_players(state: RosterState) -> Markup:
    """Render one card per player, or the empty-roster message."""
    players = state.players
    return Markup(render_template(
        "players/_list.html",
        players=players,
        empty_message=EMPTY_ROSTER_MESSAGE,
    ))


def render_new_player_form(state: RosterState, values: Optional[Mapping[str, Any]] = None,
                           field_errors: Optional[Dict[str, List[str]]] = None) -> Markup:
    """Render the add-player form with a team select built from the known teams.

    Args:
        state: roster state providing the teams
        values: previously submitted form values to refill after a failed submit
        field_errors: error messages keyed by form field name
    """
    return Markup(render_template(
        "players/_form.html",
        teams=state.teams,
        statuses=PLAYER_STATUSES,
        no_team=NO_TEAM,
        values=values or {},
        errors=field_errors or {},
    ))


def render_roster_page(state: RosterState, form_html: Optional[Markup] = None) -> str:
    """Full index page: the form followed by the player list."""
    return render_template(
        "roster.html",
        form_html=form_html if form_html is not None else render_new_player_form(state),
        players_html=render_all_players(state),
    )


def resolve_team(player: Player, state: RosterState) -> Optional[Team]:
    """Team of ``player`` from the embedded record, else from state."""
    if not player.has_team:
        return None
    if player.team is not None:
        return player.team
    return state.find_team(player.team_id)


def render_single_player(client: PuppyBowlClient, player_id: int, state: RosterState) -> Result[str]:
    """Re-fetch one player and render the detail card.

    Falls back to the state's copy of the player when the API cannot be
    reached. A player the API reports missing yields a failed result.
    """
    result = client.get_player(player_id)
    stale = False
    if result:
        player = result.value
    else:
        player = state.find_player(player_id)
        if player is None or result.error_code == errors.NOT_FOUND:
            return result
        logger.warning(f"Showing cached player #{player_id}: {result.error}")
        stale = True

    team = resolve_team(player, state)
    if not player.has_team:
        team_name = UNASSIGNED_TEAM
        teammates = NO_TEAMMATES_MESSAGE
    elif team is None:
        team_name = f"Team #{player.team_id}"
        teammates = NO_TEAMMATES_MESSAGE
    else:
        team_name = team.name
        teammates = ", ".join(team.player_names) or NO_TEAMMATES_MESSAGE

    return Result.ok(render_template(
        "players/detail.html",
        player=player,
        team_name=team_name,
        teammates=teammates,
        stale=stale,
    ))
