"""walletkit: signed pass and order bundles for Apple Wallet."""

__version__ = "0.1.0"

from walletkit.models import Personalization, PersonalizationField
from walletkit.primitives import (
    ConfigurationError,
    InvalidNumberOfPasses,
    NoIcon,
    NoPersonalizationLogo,
    NoSigningExecutable,
    NoSourceFiles,
    SigningIdentity,
    WalletKitError,
)
from walletkit.runtime import (
    ORDER,
    PASS,
    BuildRequest,
    BundleBuilder,
    OrderBuilder,
    PassBuilder,
    bundle_passes,
    load_identity,
)

__all__ = [
    "__version__",
    "Personalization",
    "PersonalizationField",
    "SigningIdentity",
    "BuildRequest",
    "BundleBuilder",
    "PassBuilder",
    "OrderBuilder",
    "bundle_passes",
    "load_identity",
    "PASS",
    "ORDER",
    "WalletKitError",
    "NoSourceFiles",
    "NoIcon",
    "NoPersonalizationLogo",
    "NoSigningExecutable",
    "InvalidNumberOfPasses",
    "ConfigurationError",
]
