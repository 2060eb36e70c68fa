import os
import sys

# Ensure repo root is on sys.path so tests can import the puppybowl package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
from unittest.mock import Mock

import pytest

from puppybowl import create_app
from puppybowl.api.client import PuppyBowlClient
from puppybowl.api.result import Result
from puppybowl.domain.models import Player, Team


def make_player(player_id, name, breed="Boxer", team_id=None, status="bench", team=None):
    return Player(
        id=player_id,
        name=name,
        breed=breed,
        image_url=f"https://img.example.com/{player_id}.png",
        status=status,
        team_id=team_id,
        team=team,
    )


def make_team(team_id, name, players=()):
    return Team(id=team_id, name=name, players=list(players))


@pytest.fixture
def roster_client():
    """Stand-in for the remote API; every call succeeds with an empty roster."""
    client = Mock(spec=PuppyBowlClient)
    client.cohort_name = "test-cohort"
    client.players_url = "https://api.example.com/test-cohort/players"
    client.list_players.return_value = Result.ok([])
    client.list_teams.return_value = Result.ok([])
    client.delete_player.return_value = Result.ok()
    return client


@pytest.fixture
def app(roster_client):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "RATELIMIT_ENABLED": False,
        "LOG_LEVEL": "WARNING",
        "ROSTER_CLIENT": roster_client,
    })
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def state(app):
    return app.extensions["roster_state"]
