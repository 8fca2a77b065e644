"""Application purge – debounced CDN purge."""
from headless_toolkit.application.purge.cdn import CdnIntegration
from headless_toolkit.application.purge.coordinator import CdnPurgeCoordinator

__all__ = ["CdnIntegration", "CdnPurgeCoordinator"]
