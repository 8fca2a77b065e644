"""Security – PreviewLinkBuilder rewrites CMS preview links to the frontend."""
from __future__ import annotations

from typing import Callable

import httpx

from headless_toolkit.config.settings.base import DEFAULT_PREVIEW_PATH
from headless_toolkit.security.preview.token import PreviewTokenService

__all__ = ["PreviewLinkBuilder", "PreviewPathResolver"]

#: ``(content_kind, entity_id) -> path`` relative to the frontend URL.
PreviewPathResolver = Callable[[str, int], str]


class PreviewLinkBuilder:
    """Builds ``{frontend}/{path}?secret={token}&id={entity_id}`` preview URLs.

    Falls back to the CMS's own preview link whenever the frontend URL or the
    token secret is not configured.
    """

    def __init__(
        self,
        frontend_url: str | None,
        tokens: PreviewTokenService,
        *,
        default_path: str = DEFAULT_PREVIEW_PATH,
        path_resolver: PreviewPathResolver | None = None,
    ) -> None:
        self._frontend_url = frontend_url or ""
        self._tokens = tokens
        self._default_path = default_path
        self._path_resolver = path_resolver

    def path_for(self, content_kind: str, entity_id: int) -> str:
        if self._path_resolver is None:
            return self._default_path
        return str(self._path_resolver(content_kind, entity_id))

    def build(
        self,
        original_link: str,
        entity_id: int,
        actor_id: int,
        content_kind: str = "post",
    ) -> str:
        if not self._frontend_url or not self._tokens.configured:
            return original_link
        token = self._tokens.issue(entity_id, actor_id)
        path = self.path_for(content_kind, entity_id)
        base = f"{self._frontend_url.rstrip('/')}/{path.lstrip('/')}"
        url = httpx.URL(base).copy_merge_params({"secret": token, "id": str(entity_id)})
        return str(url)
