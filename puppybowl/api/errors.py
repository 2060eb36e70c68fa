"""
Standard error codes for roster API results.

These codes let the web and JSON layers react to specific failures without
parsing error message text.

Usage:
    from puppybowl.api.errors import NOT_FOUND
    from puppybowl.api.result import Result

    return Result.fail("No player found with id 7", code=NOT_FOUND)
"""

NOT_FOUND = "not_found"
VALIDATION_ERROR = "validation_error"
NETWORK_ERROR = "network_error"
TIMEOUT = "timeout"
API_ERROR = "api_error"
INVALID_RESPONSE = "invalid_response"

# HTTP status served by the JSON API for each failure code
HTTP_STATUS_BY_CODE = {
    NOT_FOUND: 404,
    VALIDATION_ERROR: 400,
    TIMEOUT: 504,
}
DEFAULT_ERROR_STATUS = 502


def http_status_for(code):
    """Map an error code to the HTTP status the JSON API answers with."""
    return HTTP_STATUS_BY_CODE.get(code, DEFAULT_ERROR_STATUS)
