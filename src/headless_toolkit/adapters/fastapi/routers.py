"""FastAPI adapter – preview verification and cache flush routers."""
import hmac
import time
from typing import Any, Optional

from headless_toolkit.application.cache.response import ResponseCache
from headless_toolkit.kernel.errors import ForbiddenError
from headless_toolkit.security.preview.token import PreviewTokenService

DEFAULT_PREFIX = "/wp-headless-toolkit/v1"


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'headless-toolkit[fastapi]' to use the FastAPI adapter"
        ) from exc


def PreviewRouter(
    service: PreviewTokenService,
    prefix: str = DEFAULT_PREFIX,
    tags: Optional[list[str]] = None,
) -> Any:
    """Return a router exposing ``GET {prefix}/preview/verify?token=...``.

    Responses::

        400 {"valid": false, "error": "missing_token"}
        401 {"valid": false, "error": "invalid_token"}
        200 {"valid": true, "entity_id": 42}

    An expired, tampered or malformed token always yields the same 401 body.
    """
    _require_fastapi()
    from fastapi import APIRouter, Query
    from fastapi.responses import JSONResponse

    router = APIRouter(prefix=prefix, tags=tags or ["preview"])

    @router.get("/preview/verify")
    async def verify_preview_token(token: Optional[str] = Query(default=None)) -> Any:
        if not token:
            return JSONResponse(status_code=400, content={"valid": False, "error": "missing_token"})
        payload = service.verify(token)
        if payload is None:
            return JSONResponse(status_code=401, content={"valid": False, "error": "invalid_token"})
        return JSONResponse(status_code=200, content={"valid": True, "entity_id": payload.entity_id})

    return router


def GraphqlCacheRouter(
    cache: ResponseCache,
    secret: Optional[str],
    prefix: str = DEFAULT_PREFIX,
    tags: Optional[list[str]] = None,
) -> Any:
    """Return a router exposing ``POST {prefix}/flush-graphql-cache``.

    The caller proves itself with the shared revalidation secret, passed as a
    ``secret`` query parameter or JSON body field. The frontend uses this to
    self-correct when it detects stale cached responses during a build.
    """
    _require_fastapi()
    from fastapi import APIRouter, Request
    from fastapi.responses import JSONResponse

    router = APIRouter(prefix=prefix, tags=tags or ["cache"])

    async def _provided_secret(request: Request) -> str:
        provided = request.query_params.get("secret")
        if provided:
            return provided
        try:
            body = await request.json()
        except ValueError:
            return ""
        if isinstance(body, dict) and isinstance(body.get("secret"), str):
            return body["secret"]
        return ""

    @router.post("/flush-graphql-cache")
    async def flush_graphql_cache(request: Request) -> Any:
        if not secret:
            error = ForbiddenError("Cache flush endpoint is not configured.", resource="flush-graphql-cache")
            return JSONResponse(status_code=error.http_status, content=error.to_dict())

        provided = await _provided_secret(request)
        if not provided or not hmac.compare_digest(secret.encode("utf-8"), provided.encode("utf-8")):
            error = ForbiddenError("Invalid or missing secret.", resource="flush-graphql-cache")
            return JSONResponse(status_code=error.http_status, content=error.to_dict())

        result = await cache.flush()
        return JSONResponse(
            status_code=200,
            content={
                "flushed": result.flushed,
                "group": result.namespace,
                "full_store": result.full_store,
                "now": int(time.time()),
            },
        )

    return router


__all__ = ["DEFAULT_PREFIX", "GraphqlCacheRouter", "PreviewRouter"]
