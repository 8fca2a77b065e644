"""Config settings – Settings base class and HeadlessSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from headless_toolkit.config.validation import InvalidSettingValueError

DEFAULT_CACHE_TTL = 600
DEFAULT_MUTATION_KEYWORD = "mutation"
DEFAULT_CACHE_NAMESPACE = "headless_toolkit_graphql"
DEFAULT_TOKEN_EXPIRY = 300
DEFAULT_PREVIEW_PATH = "api/preview"
DEFAULT_CONTENT_KINDS = ("post", "page")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class HeadlessSettings(Settings):
    """Everything the invalidation pipeline and preview service read.

    Read from ``HEADLESS_*`` environment variables by
    :class:`~headless_toolkit.config.settings.loaders.EnvSettingsLoader`.
    Blank URLs/secrets leave the matching component inert rather than
    failing: missing configuration is not an operator-facing error.
    """

    _prefix: ClassVar[str] = "HEADLESS"

    revalidation_url: str = ""
    revalidation_secret: str = ""
    revalidation_content_kinds: list[str] = dataclasses.field(
        default_factory=lambda: list(DEFAULT_CONTENT_KINDS)
    )
    frontend_url: str = ""
    preview_secret: str = ""
    preview_token_expiry: int = DEFAULT_TOKEN_EXPIRY
    preview_path: str = DEFAULT_PREVIEW_PATH
    graphql_cache_ttl: int = DEFAULT_CACHE_TTL
    graphql_mutation_keyword: str = DEFAULT_MUTATION_KEYWORD
    graphql_cache_namespace: str = DEFAULT_CACHE_NAMESPACE
    redis_url: str = ""

    def _validate(self) -> None:
        if not self.graphql_mutation_keyword.strip():
            raise InvalidSettingValueError(
                "graphql_mutation_keyword", self.graphql_mutation_keyword, "must not be blank"
            )
        if not self.graphql_cache_namespace.strip():
            raise InvalidSettingValueError(
                "graphql_cache_namespace", self.graphql_cache_namespace, "must not be blank"
            )

    @property
    def cache_ttl(self) -> int:
        """Configured TTL, or the default when the value is not positive."""
        return self.graphql_cache_ttl if self.graphql_cache_ttl > 0 else DEFAULT_CACHE_TTL

    @property
    def token_expiry(self) -> int:
        return max(1, int(self.preview_token_expiry))


__all__ = [
    "DEFAULT_CACHE_NAMESPACE",
    "DEFAULT_CACHE_TTL",
    "DEFAULT_CONTENT_KINDS",
    "DEFAULT_MUTATION_KEYWORD",
    "DEFAULT_PREVIEW_PATH",
    "DEFAULT_TOKEN_EXPIRY",
    "HeadlessSettings",
    "Settings",
]
