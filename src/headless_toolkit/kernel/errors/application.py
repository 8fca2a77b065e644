"""Application-layer errors – cross-cutting concerns at use-case level."""

from __future__ import annotations

from typing import Any

from headless_toolkit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"
    http_status = 400


class ForbiddenError(ApplicationError):
    """Caller supplied a shared secret that does not match."""

    default_code = "forbidden"
    http_status = 403

    def __init__(
        self,
        message: str = "Access denied",
        *,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.resource = resource


__all__ = [
    "ApplicationError",
    "ForbiddenError",
]
