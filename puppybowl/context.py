"""Access to the per-application roster client and state."""

from flask import current_app

from puppybowl.api.client import PuppyBowlClient
from puppybowl.state import RosterState


def get_client() -> PuppyBowlClient:
    return current_app.extensions["roster_client"]


def get_state() -> RosterState:
    return current_app.extensions["roster_state"]
