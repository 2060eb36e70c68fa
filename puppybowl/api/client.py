"""HTTP client for the Puppy Bowl roster API.

Wraps the remote REST endpoints with ``requests`` and turns every response into
a :class:`~puppybowl.api.result.Result`. Remote failures are logged and
returned, never raised.

Envelopes look like ``{"success": true, "error": null, "data": {...}}`` on
success and ``{"success": false, "error": {"name": ..., "message": ...}}``
(or a flat ``{"error": ..., "message": ...}``) on failure.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from puppybowl.api import errors
from puppybowl.api.result import Result
from puppybowl.domain.models import Player, Team

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class PuppyBowlClient:
    """Client for one cohort's players and teams."""

    def __init__(self, base_url: str, cohort_name: str, timeout: float = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.cohort_name = cohort_name
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def cohort_url(self) -> str:
        return f"{self.base_url}/{self.cohort_name}"

    @property
    def players_url(self) -> str:
        return f"{self.cohort_url}/players"

    @property
    def teams_url(self) -> str:
        return f"{self.cohort_url}/teams"

    # Public operations

    def list_players(self) -> Result[List[Player]]:
        """Fetch every player on the roster."""
        result = self._request("GET", self.players_url, operation="list players")
        if not result:
            return result
        try:
            players = [Player.from_api(p) for p in (result.value.get("players") or [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed players payload: {e}")
            return Result.fail("Malformed players payload", code=errors.INVALID_RESPONSE)
        return Result.ok(players)

    def get_player(self, player_id: int) -> Result[Player]:
        """Fetch a single player, including the embedded team when assigned."""
        result = self._request("GET", f"{self.players_url}/{player_id}",
                               operation=f"fetch player #{player_id}")
        if not result:
            return result
        player_data = result.value.get("player") if isinstance(result.value, dict) else None
        if not player_data:
            logger.warning(f"Player #{player_id} missing from response")
            return Result.fail(f"No player found with id {player_id}", code=errors.NOT_FOUND)
        try:
            return Result.ok(Player.from_api(player_data))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed payload for player #{player_id}: {e}")
            return Result.fail("Malformed player payload", code=errors.INVALID_RESPONSE)

    def list_teams(self) -> Result[List[Team]]:
        """Fetch every team with its players."""
        result = self._request("GET", self.teams_url, operation="list teams")
        if not result:
            return result
        try:
            teams = [Team.from_api(t) for t in (result.value.get("teams") or [])]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed teams payload: {e}")
            return Result.fail("Malformed teams payload", code=errors.INVALID_RESPONSE)
        return Result.ok(teams)

    def create_player(self, payload: Dict[str, Any]) -> Result[Player]:
        """Add a new player to the roster.

        Args:
            payload: API field names (name, breed, imageUrl, status, optional teamId)

        Returns:
            Result with the player the API created
        """
        result = self._request("POST", self.players_url, operation="add player", json=payload)
        if not result:
            return result
        new_player = result.value.get("newPlayer") if isinstance(result.value, dict) else None
        if not new_player:
            logger.error("Create response did not include the new player")
            return Result.fail("Create response did not include the new player",
                               code=errors.INVALID_RESPONSE)
        try:
            player = Player.from_api(new_player)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed payload for new player: {e}")
            return Result.fail("Malformed player payload", code=errors.INVALID_RESPONSE)
        logger.info(f"Added player #{player.id} ({player.name})")
        return Result.ok(player)

    def delete_player(self, player_id: int) -> Result[None]:
        """Remove a player from the roster."""
        result = self._request("DELETE", f"{self.players_url}/{player_id}",
                               operation=f"remove player #{player_id}", allow_empty=True)
        if not result:
            return result
        logger.info(f"Removed player #{player_id}")
        return Result.ok()

    # Internals

    def _request(self, method: str, url: str, operation: str, json: Optional[Dict[str, Any]] = None,
                 allow_empty: bool = False) -> Result[Any]:
        """Perform one HTTP call and unwrap the envelope's ``data``."""
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.Timeout:
            logger.error(f"Timed out trying to {operation} ({method} {url})")
            return Result.fail(f"Timed out trying to {operation}", code=errors.TIMEOUT)
        except requests.RequestException as e:
            logger.error(f"Trouble trying to {operation}: {e}")
            return Result.fail(f"Could not reach the roster API to {operation}", code=errors.NETWORK_ERROR)

        body = self._parse_body(response)
        if body is None and not (allow_empty and response.ok):
            logger.error(f"Invalid JSON trying to {operation} (HTTP {response.status_code})")
            if response.status_code == 404:
                return Result.fail(f"Not found trying to {operation}", code=errors.NOT_FOUND,
                                   status_code=404)
            return Result.fail(f"Invalid response trying to {operation}", code=errors.INVALID_RESPONSE,
                               status_code=response.status_code)

        envelope_error = self._envelope_error(body)
        if not response.ok or envelope_error:
            message = envelope_error or f"HTTP {response.status_code}"
            code = self._classify(response.status_code, body)
            logger.warning(f"Trouble trying to {operation}: {message} (HTTP {response.status_code})")
            return Result.fail(message, code=code, status_code=response.status_code)

        data = body.get("data") if isinstance(body, dict) else None
        return Result.ok(data if data is not None else {})

    @staticmethod
    def _parse_body(response: requests.Response) -> Optional[Any]:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _envelope_error(body: Any) -> Optional[str]:
        """Return the message of an API-reported error, or None."""
        if not isinstance(body, dict):
            return None
        error = body.get("error")
        if not error and body.get("success") is not False:
            return None
        if isinstance(error, dict):
            return error.get("message") or error.get("name") or "Unknown API error"
        if isinstance(error, str) and error:
            return body.get("message") or error
        return body.get("message") or "Unknown API error"

    @staticmethod
    def _classify(status_code: int, body: Any) -> str:
        error = body.get("error") if isinstance(body, dict) else None
        name = error.get("name", "") if isinstance(error, dict) else ""
        if status_code == 404 or name == "NotFoundError":
            return errors.NOT_FOUND
        if status_code in (400, 422) or name in ("ValidationError", "BadRequestError"):
            return errors.VALIDATION_ERROR
        return errors.API_ERROR
