"""Manifest digest functions.

Pass bundles digest with SHA-1, order bundles with SHA-256. Both return
lowercase hex, two characters per byte.
"""

import hashlib
from typing import Callable

DigestFunction = Callable[[bytes], str]


def sha1_hex(data: bytes) -> str:
    """SHA-1 hex digest (40 chars), used by pass manifests."""
    return hashlib.sha1(data).hexdigest()


def sha256_hex(data: bytes) -> str:
    """SHA-256 hex digest (64 chars), used by order manifests."""
    return hashlib.sha256(data).hexdigest()
