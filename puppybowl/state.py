"""In-memory roster state.

One ``RosterState`` lives on each Flask application
(``app.extensions["roster_state"]``) and is handed to the renderer explicitly.
Contents are replaced wholesale on every successful fetch and left untouched
when a fetch fails.
"""

import logging
from threading import Lock
from typing import List, Optional

from puppybowl.api.client import PuppyBowlClient
from puppybowl.api.result import Result
from puppybowl.domain.models import Player, Team

logger = logging.getLogger(__name__)


class RosterState:
    """Last successfully fetched players and teams."""

    def __init__(self, players: Optional[List[Player]] = None, teams: Optional[List[Team]] = None):
        self._players: List[Player] = list(players or [])
        self._teams: List[Team] = list(teams or [])
        self._lock = Lock()

    @property
    def players(self) -> List[Player]:
        with self._lock:
            return list(self._players)

    @property
    def teams(self) -> List[Team]:
        with self._lock:
            return list(self._teams)

    def replace_players(self, players: List[Player]) -> None:
        with self._lock:
            self._players = list(players)

    def replace_teams(self, teams: List[Team]) -> None:
        with self._lock:
            self._teams = list(teams)

    def find_player(self, player_id: int) -> Optional[Player]:
        with self._lock:
            return next((p for p in self._players if p.id == player_id), None)

    def find_team(self, team_id: Optional[int]) -> Optional[Team]:
        if team_id is None:
            return None
        with self._lock:
            return next((t for t in self._teams if t.id == team_id), None)

    # Fetch helpers

    def refresh_players(self, client: PuppyBowlClient) -> Result[List[Player]]:
        """Re-fetch players, replacing state only on success."""
        result = client.list_players()
        if result:
            self.replace_players(result.value)
            logger.debug(f"Roster state now holds {len(result.value)} players")
        else:
            logger.warning(f"Keeping previous players after failed fetch: {result.error}")
        return result

    def refresh_teams(self, client: PuppyBowlClient) -> Result[List[Team]]:
        """Re-fetch teams, replacing state only on success."""
        result = client.list_teams()
        if result:
            self.replace_teams(result.value)
        else:
            logger.warning(f"Keeping previous teams after failed fetch: {result.error}")
        return result
