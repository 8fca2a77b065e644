"""Security – preview tokens and preview links."""
from headless_toolkit.security.preview.links import PreviewLinkBuilder, PreviewPathResolver
from headless_toolkit.security.preview.token import PreviewTokenPayload, PreviewTokenService

__all__ = [
    "PreviewLinkBuilder",
    "PreviewPathResolver",
    "PreviewTokenPayload",
    "PreviewTokenService",
]
