"""FastAPI adapter – UnitOfWorkMiddleware."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'headless-toolkit[fastapi]' to use the FastAPI adapter"
        ) from exc


class UnitOfWorkMiddleware:
    """Begin a fresh :class:`UnitOfWork` for every HTTP request.

    Everything the request triggers shares one purge debounce flag, and no
    two requests ever share it.
    """

    def __init__(self, app: "ASGIApp") -> None:
        _require_fastapi()
        self.app = app

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] == "http":
            from headless_toolkit.kernel.content import UnitOfWorkContext

            UnitOfWorkContext.begin()

        await self.app(scope, receive, send)


__all__ = ["UnitOfWorkMiddleware"]
