"""BaseService — shared foundation for routectl services.

Every service receives a :class:`RouteComponents` at construction time
and reaches the mapper, builder and config through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from routectl.domain.errors import ConfigurationError, RouteError, ValidationError
from routectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from routectl.services.container import RouteComponents

logger = logging.getLogger(__name__)

_ERROR_CODES: dict[type[RouteError], str] = {
    ConfigurationError: "MISSING_ZONE_ID",
    ValidationError: "INVALID_ZONE_ID",
}


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RouteService(BaseService):
            def map_routes(self, ...) -> ServiceResult:
                result = self._components.mapper.map_domain_to_routes(...)
                ...
    """

    def __init__(self, components: RouteComponents) -> None:
        self._components = components

    @staticmethod
    def _failure(op: str, exc: RouteError) -> ServiceResult:
        """Convert a route error into a failed ServiceResult."""
        code = _ERROR_CODES.get(type(exc), "ROUTE_ERROR")
        detail: dict[str, str] = {}
        if isinstance(exc, ValidationError):
            detail = {"value": exc.value, "expected": exc.expected}
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=str(exc), detail=detail),
        )
