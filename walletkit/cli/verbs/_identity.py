"""Signing identity resolution shared by the signing verbs."""

from walletkit.cli.output import die
from walletkit.primitives.errors import ConfigurationError
from walletkit.primitives.signing import SigningIdentity
from walletkit.runtime.settings import Settings, load_identity

OVERRIDE_FIELDS = (
    "wwdr_certificate_path",
    "certificate_path",
    "private_key_path",
    "private_key_password",
    "openssl_path",
)


def identity_from_args(args) -> SigningIdentity:
    """Load the identity from settings, with command-line flags taking priority."""
    overrides = {
        field: getattr(args, field)
        for field in OVERRIDE_FIELDS
        if getattr(args, field, None) is not None
    }
    try:
        return load_identity(Settings(**overrides))
    except ConfigurationError as e:
        die(e.message)
    except ValueError as e:
        die(f"invalid signing material: {e}")
    except TypeError as e:
        # cryptography refuses an encrypted key without a password
        die(
            f"{e}; pass --password or set WALLETKIT_PRIVATE_KEY_PASSWORD "
            "for an encrypted private key"
        )
