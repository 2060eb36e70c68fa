"""Flask blueprints: the HTML roster pages and the JSON API."""

from .roster_routes import bp as roster_bp
from .api_routes import bp as api_bp

__all__ = ['roster_bp', 'api_bp']
