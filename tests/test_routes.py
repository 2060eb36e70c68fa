from puppybowl.api import errors
from puppybowl.api.result import Result

from conftest import make_player, make_team

FORM = {
    "playerName": "Rex",
    "playerBreed": "Boxer",
    "playerImgUrl": "https://img.example.com/rex.png",
    "playerStatus": "bench",
    "playerTeam": "none",
}


def test_index_empty_roster(client, roster_client):
    r = client.get("/")

    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert "No players available to display." in body
    assert 'id="new-player-form"' in body
    roster_client.list_players.assert_called_once_with()
    roster_client.list_teams.assert_called_once_with()
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_index_renders_players_and_team_select(client, roster_client, state):
    roster_client.list_players.return_value = Result.ok([make_player(1, "Rex"), make_player(2, "Bella")])
    roster_client.list_teams.return_value = Result.ok([make_team(3, "Ruff")])

    body = client.get("/").get_data(as_text=True)

    assert "Name: Rex" in body
    assert "Name: Bella" in body
    assert ">Ruff</option>" in body
    assert [p.id for p in state.players] == [1, 2]


def test_index_fetch_failure_shows_message_and_last_state(client, roster_client, state):
    state.replace_players([make_player(1, "Rex")])
    roster_client.list_players.return_value = Result.fail("Could not reach the roster API",
                                                          code=errors.NETWORK_ERROR)

    body = client.get("/").get_data(as_text=True)

    assert "trouble fetching players" in body
    assert "Name: Rex" in body


def test_submit_with_none_team_omits_team_id(client, roster_client):
    roster_client.create_player.return_value = Result.ok(make_player(10, "Rex"))

    r = client.post("/players", data=FORM)

    assert r.status_code == 302
    assert r.headers["Location"].endswith("/")
    roster_client.create_player.assert_called_once_with({
        "name": "Rex",
        "breed": "Boxer",
        "imageUrl": "https://img.example.com/rex.png",
        "status": "bench",
    })


def test_submit_with_team_includes_team_id(client, roster_client):
    roster_client.create_player.return_value = Result.ok(make_player(10, "Rex", team_id=3))

    client.post("/players", data=dict(FORM, playerTeam="3"))

    payload = roster_client.create_player.call_args.args[0]
    assert payload["teamId"] == 3


def test_submit_then_roster_is_refetched_and_form_cleared(client, roster_client):
    roster_client.create_player.return_value = Result.ok(make_player(10, "Rex"))
    roster_client.list_players.return_value = Result.ok([make_player(10, "Rex")])

    r = client.post("/players", data=FORM, follow_redirects=True)

    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert "Added Rex to the roster." in body
    assert "Name: Rex" in body
    assert 'name="playerName" value=""' in body
    roster_client.list_players.assert_called_once_with()


def test_submit_invalid_form_rerenders_with_errors(client, roster_client):
    r = client.post("/players", data=dict(FORM, playerImgUrl="nope"))

    assert r.status_code == 400
    body = r.get_data(as_text=True)
    assert "Not a valid image URL" in body
    assert 'value="Rex"' in body
    roster_client.create_player.assert_not_called()


def test_submit_api_failure_is_flashed(client, roster_client):
    roster_client.create_player.return_value = Result.fail("Name taken", code=errors.API_ERROR)

    r = client.post("/players", data=FORM, follow_redirects=True)

    assert "something went wrong with adding that player! Name taken" in r.get_data(as_text=True)


def test_remove_refetches_roster_without_player(client, roster_client):
    roster_client.list_players.return_value = Result.ok([make_player(2, "Bella")])

    r = client.post("/players/1/delete", follow_redirects=True)

    body = r.get_data(as_text=True)
    roster_client.delete_player.assert_called_once_with(1)
    roster_client.list_players.assert_called_once_with()
    assert "Removed player #1 from the roster." in body
    assert 'data-player-id="1"' not in body
    assert 'data-player-id="2"' in body


def test_remove_failure_is_flashed(client, roster_client):
    roster_client.delete_player.return_value = Result.fail("No player", code=errors.NOT_FOUND)

    r = client.post("/players/9/delete", follow_redirects=True)

    assert "trouble removing player #9" in r.get_data(as_text=True)


def test_detail_shows_team_name(client, roster_client):
    team = make_team(3, "Ruff", [make_player(7, "Rex")])
    roster_client.get_player.return_value = Result.ok(make_player(7, "Rex", team_id=3, team=team))

    r = client.get("/players/7")

    assert r.status_code == 200
    assert "Team Name: Ruff" in r.get_data(as_text=True)


def test_detail_unassigned(client, roster_client):
    roster_client.get_player.return_value = Result.ok(make_player(7, "Rex"))

    assert "Team Name: Unassigned" in client.get("/players/7").get_data(as_text=True)


def test_detail_not_found(client, roster_client):
    roster_client.get_player.return_value = Result.fail("gone", code=errors.NOT_FOUND)

    r = client.get("/players/99")

    assert r.status_code == 404
    assert "Player #99 was not found." in r.get_data(as_text=True)


def test_detail_api_down_without_cached_player(client, roster_client):
    roster_client.get_player.return_value = Result.fail("slow", code=errors.TIMEOUT)

    r = client.get("/players/99")

    assert r.status_code == 504
