from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

PLAYER_STATUSES = ("bench", "field")


@dataclass
class Team:
    id: int
    name: str
    players: List["Player"] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Team":
        """Build a Team from an API record, including its embedded players."""
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            players=[Player.from_api(p) for p in (data.get("players") or [])],
        )

    @property
    def player_names(self) -> List[str]:
        return [p.name for p in self.players]


@dataclass
class Player:
    id: int
    name: str
    breed: str = ""
    image_url: str = ""
    status: str = "bench"
    team_id: Optional[int] = None
    cohort_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # only populated when the player is fetched on its own
    team: Optional[Team] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Player":
        """Build a Player from the camelCase record the API returns."""
        team_data = data.get("team")
        team_id = data.get("teamId")
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            breed=data.get("breed") or "",
            image_url=data.get("imageUrl") or "",
            status=data.get("status") or "bench",
            team_id=int(team_id) if team_id is not None else None,
            cohort_id=data.get("cohortId"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            team=Team.from_api(team_data) if isinstance(team_data, dict) else None,
        )

    @property
    def has_team(self) -> bool:
        return self.team_id is not None

    def to_api(self) -> Dict[str, Any]:
        """Serialize back to the API's field names."""
        payload = {
            "id": self.id,
            "name": self.name,
            "breed": self.breed,
            "imageUrl": self.image_url,
            "status": self.status,
            "teamId": self.team_id,
        }
        if self.cohort_id is not None:
            payload["cohortId"] = self.cohort_id
        if self.team is not None:
            payload["team"] = {
                "id": self.team.id,
                "name": self.team.name,
                "players": [p.to_api() for p in self.team.players],
            }
        return payload
