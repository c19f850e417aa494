"""walletkit primitives: stateless bundle building units."""

from walletkit.primitives.archive import ArchiveEntry, ArchiveWriter, write_archive
from walletkit.primitives.collector import (
    EXCLUDED_FILENAMES,
    SourceFileSet,
    collect_source_files,
    ensure_source_directory,
)
from walletkit.primitives.digest import DigestFunction, sha1_hex, sha256_hex
from walletkit.primitives.encoding import (
    PropertyEncoder,
    canonical_json,
    encode_properties,
)
from walletkit.primitives.errors import (
    ConfigurationError,
    InvalidNumberOfPasses,
    NoIcon,
    NoPersonalizationLogo,
    NoSigningExecutable,
    NoSourceFiles,
    WalletKitError,
)
from walletkit.primitives.manifest import (
    MANIFEST_FILENAME,
    RESERVED_FILENAMES,
    SIGNATURE_FILENAME,
    Manifest,
    build_manifest,
    encode_manifest,
)
from walletkit.primitives.signing import (
    DEFAULT_OPENSSL_PATH,
    DirectSigner,
    OpenSSLSigner,
    Signer,
    SigningIdentity,
)

__all__ = [
    # Errors
    "WalletKitError",
    "NoSourceFiles",
    "NoIcon",
    "NoPersonalizationLogo",
    "NoSigningExecutable",
    "InvalidNumberOfPasses",
    "ConfigurationError",
    # Digest
    "DigestFunction",
    "sha1_hex",
    "sha256_hex",
    # Collector
    "EXCLUDED_FILENAMES",
    "SourceFileSet",
    "collect_source_files",
    "ensure_source_directory",
    # Encoding
    "PropertyEncoder",
    "canonical_json",
    "encode_properties",
    # Manifest
    "MANIFEST_FILENAME",
    "SIGNATURE_FILENAME",
    "RESERVED_FILENAMES",
    "Manifest",
    "build_manifest",
    "encode_manifest",
    # Signing
    "DEFAULT_OPENSSL_PATH",
    "Signer",
    "DirectSigner",
    "OpenSSLSigner",
    "SigningIdentity",
    # Archive
    "ArchiveEntry",
    "ArchiveWriter",
    "write_archive",
]
