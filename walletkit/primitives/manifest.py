"""Manifest building.

A manifest maps every digested archive member to the hex digest of its
bytes. The manifest and signature members are never part of it.
"""

from typing import Dict, Mapping

from walletkit.primitives.digest import DigestFunction
from walletkit.primitives.encoding import canonical_json

MANIFEST_FILENAME = "manifest.json"
SIGNATURE_FILENAME = "signature"

RESERVED_FILENAMES = frozenset({MANIFEST_FILENAME, SIGNATURE_FILENAME})

Manifest = Dict[str, str]


def build_manifest(files: Mapping[str, bytes], digest: DigestFunction) -> Manifest:
    """Digest every file, skipping the reserved manifest/signature names.

    Args:
        files: Mapping of archive member name to contents.
        digest: Hex digest function for the bundle kind.

    Returns:
        Mapping of member name to lowercase hex digest.
    """
    return {
        name: digest(data)
        for name, data in files.items()
        if name not in RESERVED_FILENAMES
    }


def encode_manifest(manifest: Manifest) -> bytes:
    """Serialize a manifest as canonical JSON."""
    return canonical_json(manifest)
