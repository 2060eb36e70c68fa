"""Validation module for new-player input.

Provides the Marshmallow schema shared by the HTML form and the JSON API.
"""

from .schemas import (
    NewPlayerSchema, new_player_schema,
    form_to_payload, load_new_player,
    NO_TEAM, FORM_FIELDS
)

__all__ = [
    'NewPlayerSchema', 'new_player_schema',
    'form_to_payload', 'load_new_player',
    'NO_TEAM', 'FORM_FIELDS'
]
