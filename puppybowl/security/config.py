"""Rate limiting configuration.

Configures a Flask-Limiter instance per application for the requests that
mutate the remote roster.
"""

from flask import Flask
from flask_limiter import Limiter

from puppybowl.security.decorators import rate_limit_key_func

# methods that add or remove players
MUTATING_METHODS = ["POST", "DELETE"]


class SecurityConfig:
    """Security configuration constants."""

    RATELIMIT_STRATEGY = 'fixed-window'
    RATELIMIT_HEADERS_ENABLED = True

    RATE_LIMITS = {
        'default': '1000 per hour',
        'mutation': '30 per minute',
    }


def init_security(app: Flask) -> Limiter:
    """Initialize rate limiting for one application.

    Args:
        app: Flask application instance

    Returns:
        The limiter bound to ``app``
    """
    limiter = Limiter(
        key_func=rate_limit_key_func,
        app=app,
        storage_uri=app.config.get('RATELIMIT_STORAGE_URL', 'memory://'),
        strategy=SecurityConfig.RATELIMIT_STRATEGY,
        headers_enabled=SecurityConfig.RATELIMIT_HEADERS_ENABLED,
    )
    app.extensions['roster_limiter'] = limiter
    return limiter


def limit_mutations(limiter: Limiter, *blueprints) -> None:
    """Apply the mutation limit to the POST/DELETE routes of each blueprint.

    Limits are held by ``limiter``, so each application counts on its own.
    """
    for blueprint in blueprints:
        limiter.limit(get_rate_limit('mutation'), methods=MUTATING_METHODS)(blueprint)


def get_rate_limit(operation: str) -> str:
    """Get rate limit for specific operation.

    Args:
        operation: Operation type (mutation)

    Returns:
        Rate limit string
    """
    return SecurityConfig.RATE_LIMITS.get(operation, SecurityConfig.RATE_LIMITS['default'])
