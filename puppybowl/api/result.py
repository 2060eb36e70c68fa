"""
Result type returned by every roster API call.

The client never raises for remote failures; it returns a Result so callers
can tell a missing player from an unreachable API.

Usage:
    result = client.get_player(42)
    if result.success:
        render(result.value)
    elif result.error_code == NOT_FOUND:
        abort(404)
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a single API operation.

    Attributes:
        success: Whether the operation succeeded
        value: The return value if successful (None if failed or void operation)
        error: Error message if failed (None if successful)
        error_code: Error code for programmatic error handling
        status_code: HTTP status reported by the remote API, when there was one
    """

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        """Create a successful result with an optional value."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, code: Optional[str] = None, status_code: Optional[int] = None) -> "Result[T]":
        """Create a failed result with an error message and optional error code."""
        return cls(success=False, error=error, error_code=code, status_code=status_code)

    def __bool__(self) -> bool:
        return self.success

