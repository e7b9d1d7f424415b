"""RoutingException hierarchy."""

from __future__ import annotations


class RoutingException(Exception):
    """Base for all routing exceptions."""


class ConfigurationError(RoutingException):
    """Routing configuration is invalid."""


class RoutingAbort(RoutingException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(self, detail: str, *, status_code: int = 400) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class VendorNotFound(RoutingAbort):
    """No vendor matches the resolved slug (404)."""

    def __init__(self, detail: str = "Store not found") -> None:
        super().__init__(detail, status_code=404)


class RoutingInternalError(RoutingException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause
