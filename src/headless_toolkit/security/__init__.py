"""Security – signed preview access."""
from headless_toolkit.security.preview import (
    PreviewLinkBuilder,
    PreviewTokenPayload,
    PreviewTokenService,
)

__all__ = ["PreviewLinkBuilder", "PreviewTokenPayload", "PreviewTokenService"]
