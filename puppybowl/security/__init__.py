"""Security module for roster endpoints.

Provides rate limiting, request logging, security headers and input validation.
"""

from .config import init_security, limit_mutations, SecurityConfig, get_rate_limit
from .decorators import (
    validate_json, log_api_request, security_headers, rate_limit_key_func
)

__all__ = [
    'init_security',
    'limit_mutations',
    'SecurityConfig',
    'get_rate_limit',
    'validate_json',
    'log_api_request',
    'security_headers',
    'rate_limit_key_func'
]
