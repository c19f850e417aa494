"""walletkit runtime: bundle builders and configuration."""

from walletkit.runtime.builder import (
    MAX_PASSES_PER_COLLECTION,
    BuildRequest,
    BundleBuilder,
    OrderBuilder,
    PassBuilder,
    bundle_passes,
)
from walletkit.runtime.kinds import (
    KINDS,
    ORDER,
    PASS,
    PASS_COLLECTION_EXTENSION,
    PASS_COLLECTION_MEDIA_TYPE,
    BundleKind,
)
from walletkit.runtime.settings import Settings, get_settings, load_identity

__all__ = [
    "BuildRequest",
    "BundleBuilder",
    "PassBuilder",
    "OrderBuilder",
    "bundle_passes",
    "MAX_PASSES_PER_COLLECTION",
    "BundleKind",
    "PASS",
    "ORDER",
    "KINDS",
    "PASS_COLLECTION_EXTENSION",
    "PASS_COLLECTION_MEDIA_TYPE",
    "Settings",
    "get_settings",
    "load_identity",
]
