"""Validation schemas for new players using Marshmallow.

The same schema validates the HTML form (after its field names are mapped) and
the JSON API body.
"""

from typing import Any, Dict, Mapping

from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from puppybowl.domain.models import PLAYER_STATUSES

# Team select value meaning "no team"
NO_TEAM = "none"

# HTML form field -> API field
FORM_FIELDS = {
    "playerName": "name",
    "playerBreed": "breed",
    "playerImgUrl": "imageUrl",
    "playerStatus": "status",
    "playerTeam": "teamId",
}


class NewPlayerSchema(Schema):
    """Schema for validating player creation requests."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=100),
        error_messages={'required': 'Player name is required'}
    )

    breed = fields.Str(
        required=True,
        validate=validate.Length(min=1, max=100),
        error_messages={'required': 'Breed is required'}
    )

    image_url = fields.Url(
        data_key='imageUrl',
        required=True,
        schemes={'http', 'https'},
        require_tld=False,
        error_messages={'required': 'Image URL is required', 'invalid': 'Not a valid image URL'}
    )

    status = fields.Str(
        load_default='bench',
        validate=validate.OneOf(PLAYER_STATUSES, error='Status must be bench or field')
    )

    team_id = fields.Int(
        data_key='teamId',
        validate=validate.Range(min=1, error='Team id must be positive')
    )

    @pre_load
    def strip_values(self, data: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """Trim strings and drop the "none" team sentinel."""
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            cleaned[key] = value
        team = cleaned.get('teamId')
        if team is None or team == '' or (isinstance(team, str) and team.lower() == NO_TEAM):
            cleaned.pop('teamId', None)
        if cleaned.get('status') == '':
            cleaned.pop('status')
        return cleaned


def form_to_payload(form: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename submitted form fields to API field names."""
    return {api_key: form.get(form_key) for form_key, api_key in FORM_FIELDS.items()
            if form.get(form_key) is not None}


def load_new_player(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a new-player body and return the create payload in API field names.

    ``teamId`` is present only when a real team was chosen.

    Raises:
        marshmallow.ValidationError: If any field is invalid
    """
    loaded = new_player_schema.load(dict(data))
    return new_player_schema.dump(loaded)


# Schema instance for reuse
new_player_schema = NewPlayerSchema()
