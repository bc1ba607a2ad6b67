"""Exceptions raised by the route derivation core.

Syntax validation never raises; it returns a ``SyntaxCheck`` instead.
Absent optional values are normal "no routes" states, not errors.
"""

from __future__ import annotations


class RouteError(Exception):
    """Base class for route derivation failures."""


class ConfigurationError(RouteError):
    """A required value (e.g. the zone id) is missing for a routed domain."""


class ValidationError(RouteError):
    """A supplied value failed a format check.

    Attributes:
        value: The offending value as received.
        expected: Human-readable description of the accepted format.
    """

    def __init__(self, message: str, *, value: str, expected: str) -> None:
        super().__init__(message)
        self.value = value
        self.expected = expected
