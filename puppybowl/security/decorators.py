"""Request decorators for roster endpoints.

Provides JSON validation, request logging, security headers and the rate limit
key function.
"""

import logging
import time
from functools import wraps
from typing import Callable

from flask import current_app, g, jsonify, request
from marshmallow import Schema, ValidationError

from puppybowl.api import errors

logger = logging.getLogger(__name__)


def validate_json(schema: Schema):
    """Decorator for validating JSON request data using Marshmallow schema.

    The validated body, dumped back to API field names, is stored in
    ``g.validated_data``.

    Args:
        schema: Marshmallow schema for validation
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not request.is_json:
                return jsonify({
                    "error": "Content-Type must be application/json",
                    "code": errors.VALIDATION_ERROR
                }), 400

            json_data = request.get_json(silent=True)
            if not isinstance(json_data, dict):
                return jsonify({
                    "error": "No JSON object provided",
                    "code": errors.VALIDATION_ERROR
                }), 400

            try:
                g.validated_data = schema.dump(schema.load(json_data))
            except ValidationError as err:
                logger.warning(
                    f"Validation error from {request.remote_addr}: {err.messages}",
                    extra={
                        "endpoint": request.endpoint,
                        "method": request.method,
                        "ip": request.remote_addr,
                        "validation_errors": err.messages
                    }
                )
                return jsonify({
                    "error": "Validation failed",
                    "code": errors.VALIDATION_ERROR,
                    "details": err.messages
                }), 400

            return f(*args, **kwargs)

        return decorated_function
    return decorator


def log_api_request(include_response_time: bool = True):
    """Decorator for request logging.

    Args:
        include_response_time: Whether to log response time
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            start_time = time.time() if include_response_time else None

            logger.info(
                f"Request: {request.method} {request.path}",
                extra={
                    "method": request.method,
                    "path": request.path,
                    "endpoint": request.endpoint,
                    "ip": request.remote_addr,
                    "user_agent": request.headers.get('User-Agent'),
                    "query_params": dict(request.args),
                }
            )

            try:
                response = f(*args, **kwargs)
            except Exception as err:
                logger.error(
                    f"Error: {request.method} {request.path} - {err}",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "endpoint": request.endpoint,
                        "ip": request.remote_addr,
                        "error": str(err),
                    },
                    exc_info=True
                )
                raise

            if include_response_time:
                duration = time.time() - start_time
                logger.info(
                    f"Response: {request.method} {request.path} - {duration:.3f}s",
                    extra={
                        "method": request.method,
                        "path": request.path,
                        "endpoint": request.endpoint,
                        "response_time": duration,
                    }
                )

            return response

        return decorated_function
    return decorator


def rate_limit_key_func():
    """Rate limit per client IP."""
    return f"ip:{request.remote_addr}"


def security_headers():
    """Decorator to add security headers to responses."""
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def decorated_function(*args, **kwargs):
            response = current_app.make_response(f(*args, **kwargs))

            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            # player images are hosted anywhere
            response.headers['Content-Security-Policy'] = "default-src 'self'; img-src * data:"

            return response

        return decorated_function
    return decorator
