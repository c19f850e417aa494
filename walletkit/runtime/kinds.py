"""Bundle kinds.

Pass and order bundles share one build pipeline. A BundleKind carries the
constants that differ between them: the properties member name, manifest
digest, required assets, and the recommended file extension.
"""

from dataclasses import dataclass
from typing import Callable, Collection, Tuple

from walletkit.primitives.digest import DigestFunction, sha1_hex, sha256_hex
from walletkit.primitives.errors import NoIcon, NoPersonalizationLogo

PERSONALIZATION_FILENAME = "personalization.json"

ICON_FILENAMES = ("icon.png", "icon@1x.png", "icon@2x.png", "icon@3x.png")
PERSONALIZATION_LOGO_FILENAMES = (
    "personalizationLogo.png",
    "personalizationLogo@1x.png",
    "personalizationLogo@2x.png",
    "personalizationLogo@3x.png",
)

AssetValidator = Callable[[Collection[str], bool], None]


def _has_any(filenames: Collection[str], accepted: Tuple[str, ...]) -> bool:
    return any(name in filenames for name in accepted)


def validate_pass_assets(filenames: Collection[str], personalized: bool) -> None:
    """Require an icon, plus a personalization logo for personalized passes.

    Args:
        filenames: Relative paths of the collected source files.
        personalized: Whether a personalization descriptor is being bundled.

    Raises:
        NoIcon: No accepted icon variant at the bundle root.
        NoPersonalizationLogo: Personalized pass without a logo variant.
    """
    if not _has_any(filenames, ICON_FILENAMES):
        raise NoIcon()
    if personalized and not _has_any(filenames, PERSONALIZATION_LOGO_FILENAMES):
        raise NoPersonalizationLogo()


def validate_order_assets(filenames: Collection[str], personalized: bool) -> None:
    """Orders have no required assets."""


@dataclass(frozen=True)
class BundleKind:
    """Constants for one bundle format.

    Attributes:
        name: Short name ("pass" or "order").
        properties_filename: Archive member holding the encoded properties.
        digest: Manifest digest function.
        validate_assets: Asset rule applied to collected file names.
        extension: Recommended file extension, without the dot.
        media_type: MIME type for serving the bundle.
        supports_personalization: Whether personalization.json may be bundled.
    """

    name: str
    properties_filename: str
    digest: DigestFunction
    validate_assets: AssetValidator
    extension: str
    media_type: str
    supports_personalization: bool = False


PASS = BundleKind(
    name="pass",
    properties_filename="pass.json",
    digest=sha1_hex,
    validate_assets=validate_pass_assets,
    extension="pkpass",
    media_type="application/vnd.apple.pkpass",
    supports_personalization=True,
)

ORDER = BundleKind(
    name="order",
    properties_filename="order.json",
    digest=sha256_hex,
    validate_assets=validate_order_assets,
    extension="order",
    media_type="application/vnd.apple.finance.order",
)

KINDS = {kind.name: kind for kind in (PASS, ORDER)}

PASS_COLLECTION_EXTENSION = "pkpasses"
PASS_COLLECTION_MEDIA_TYPE = "application/vnd.apple.pkpasses"
