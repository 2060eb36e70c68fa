"""Domain models for the Puppy Bowl roster."""

from .models import Player, Team, PLAYER_STATUSES

__all__ = ['Player', 'Team', 'PLAYER_STATUSES']
