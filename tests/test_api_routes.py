import logging

from puppybowl.api import errors
from puppybowl.api.result import Result

from conftest import make_player, make_team

NEW_PLAYER = {
    "name": "Rex",
    "breed": "Boxer",
    "imageUrl": "https://img.example.com/rex.png",
}


def test_health(client):
    r = client.get("/api/v1/health")

    assert r.status_code == 200
    assert r.get_json()["status"] == "ok"
    assert r.get_json()["cohort"] == "test-cohort"


def test_health_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="puppybowl.security.decorators")

    client.get("/api/v1/health")

    messages = [record.getMessage() for record in caplog.records]
    assert "Request: GET /api/v1/health" in messages


def test_list_players(client, roster_client):
    roster_client.list_players.return_value = Result.ok([make_player(1, "Rex", team_id=3)])

    data = client.get("/api/v1/players").get_json()

    assert data["total"] == 1
    assert data["players"][0]["name"] == "Rex"
    assert data["players"][0]["teamId"] == 3


def test_list_teams(client, roster_client):
    roster_client.list_teams.return_value = Result.ok([make_team(3, "Ruff", [make_player(1, "Rex")])])

    data = client.get("/api/v1/teams").get_json()

    assert data["teams"][0]["name"] == "Ruff"
    assert data["teams"][0]["players"][0]["id"] == 1


def test_get_player_not_found(client, roster_client):
    roster_client.get_player.return_value = Result.fail("No player", code=errors.NOT_FOUND)

    r = client.get("/api/v1/players/99")

    assert r.status_code == 404
    assert r.get_json() == {"error": "No player", "code": "not_found"}


def test_create_player(client, roster_client):
    roster_client.create_player.return_value = Result.ok(make_player(11, "Rex"))

    r = client.post("/api/v1/players", json=dict(NEW_PLAYER, teamId="none"))

    assert r.status_code == 201
    assert r.get_json()["player"]["id"] == 11
    roster_client.create_player.assert_called_once_with(dict(NEW_PLAYER, status="bench"))


def test_create_player_validation(client, roster_client):
    r = client.post("/api/v1/players", json={"name": "Rex"})

    assert r.status_code == 400
    body = r.get_json()
    assert body["code"] == errors.VALIDATION_ERROR
    assert "breed" in body["details"]
    roster_client.create_player.assert_not_called()


def test_create_player_requires_json(client):
    r = client.post("/api/v1/players", data="name=Rex")

    assert r.status_code == 400


def test_delete_player(client, roster_client):
    r = client.delete("/api/v1/players/4")

    assert r.status_code == 204
    roster_client.delete_player.assert_called_once_with(4)


def test_upstream_failure_maps_to_bad_gateway(client, roster_client):
    roster_client.list_players.return_value = Result.fail("down", code=errors.NETWORK_ERROR)

    r = client.get("/api/v1/players")

    assert r.status_code == 502
    assert r.get_json()["code"] == errors.NETWORK_ERROR
