"""Bundle assembly.

BundleBuilder turns properties plus an asset directory into a signed
archive:

    collect -> encode -> validate assets -> manifest -> sign -> archive

Builders hold no per-build state. One builder (and its SigningIdentity)
can serve any number of concurrent ``build`` calls.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from walletkit.primitives.archive import ArchiveWriter, write_archive
from walletkit.primitives.collector import (
    collect_source_files,
    ensure_source_directory,
)
from walletkit.primitives.encoding import PropertyEncoder, encode_properties
from walletkit.primitives.errors import InvalidNumberOfPasses
from walletkit.primitives.manifest import (
    MANIFEST_FILENAME,
    RESERVED_FILENAMES,
    SIGNATURE_FILENAME,
    build_manifest,
    encode_manifest,
)
from walletkit.primitives.signing import SigningIdentity
from walletkit.runtime.kinds import ORDER, PASS, PERSONALIZATION_FILENAME, BundleKind

logger = logging.getLogger(__name__)

MAX_PASSES_PER_COLLECTION = 10


@dataclass(frozen=True)
class BuildRequest:
    """Input for one build.

    Attributes:
        properties: Content of pass.json / order.json; anything the encoder accepts.
        source_files_directory: Directory of loose asset files.
        personalization: Optional personalization.json content (passes only).
    """

    properties: Any
    source_files_directory: Union[str, Path]
    personalization: Any = None


class BundleBuilder:
    """Builds signed bundles of one kind.

    Args:
        kind: Bundle constants (PASS or ORDER).
        identity: Certificates and key used to sign the manifest.
        encoder: Property encoder, defaults to encode_properties.
        archive_writer: Archive writer, defaults to write_archive.
    """

    def __init__(
        self,
        kind: BundleKind,
        identity: SigningIdentity,
        encoder: Optional[PropertyEncoder] = None,
        archive_writer: Optional[ArchiveWriter] = None,
    ):
        self.kind = kind
        self.identity = identity
        self.encoder = encoder or encode_properties
        self.archive_writer = archive_writer or write_archive

    def build(self, request: BuildRequest) -> bytes:
        """Build, sign and archive one bundle.

        Args:
            request: Properties, source directory and optional personalization.

        Returns:
            The archive bytes. Persisting them is up to the caller.

        Raises:
            NoSourceFiles: The source directory does not exist.
            NoIcon: Pass bundle without an icon.
            NoPersonalizationLogo: Personalized pass without a logo.
            NoSigningExecutable: Encrypted key but openssl is missing.
            ValueError: Personalization supplied for a kind that has none.
        """
        kind = self.kind
        personalized = request.personalization is not None
        if personalized and not kind.supports_personalization:
            raise ValueError(f"{kind.name} bundles do not support personalization")

        ensure_source_directory(request.source_files_directory)

        generated: Dict[str, bytes] = {
            kind.properties_filename: self.encoder(request.properties)
        }
        if personalized:
            generated[PERSONALIZATION_FILENAME] = self.encoder(request.personalization)

        source_files = collect_source_files(request.source_files_directory)
        kind.validate_assets(source_files.keys(), personalized)

        files: Dict[str, bytes] = dict(generated)
        for name, data in source_files.items():
            if name in generated or name in RESERVED_FILENAMES:
                logger.warning(
                    f"Source file {name} is replaced by the generated {kind.name} member"
                )
                continue
            files[name] = data

        manifest_data = encode_manifest(build_manifest(files, kind.digest))
        logger.debug(f"Manifest for {kind.name} covers {len(files)} files")

        signature = self.identity.sign(manifest_data)

        entries = list(files.items())
        entries.append((MANIFEST_FILENAME, manifest_data))
        entries.append((SIGNATURE_FILENAME, signature))
        return self.archive_writer(entries)


class PassBuilder(BundleBuilder):
    """Builds ``.pkpass`` bundles.

    Only passes whose pass type identifier matches the signing certificate
    will be accepted by a wallet.
    """

    def __init__(
        self,
        identity: SigningIdentity,
        encoder: Optional[PropertyEncoder] = None,
        archive_writer: Optional[ArchiveWriter] = None,
    ):
        super().__init__(PASS, identity, encoder=encoder, archive_writer=archive_writer)

    def build_pass(
        self,
        properties: Any,
        source_files_directory: Union[str, Path],
        personalization: Any = None,
    ) -> bytes:
        """Build a pass from its parts. See BundleBuilder.build."""
        return self.build(
            BuildRequest(properties, source_files_directory, personalization)
        )

    def signature(self, data: bytes) -> bytes:
        """Sign a personalization token with the builder's identity."""
        return self.identity.sign(data)


class OrderBuilder(BundleBuilder):
    """Builds ``.order`` bundles."""

    def __init__(
        self,
        identity: SigningIdentity,
        encoder: Optional[PropertyEncoder] = None,
        archive_writer: Optional[ArchiveWriter] = None,
    ):
        super().__init__(ORDER, identity, encoder=encoder, archive_writer=archive_writer)

    def build_order(
        self, properties: Any, source_files_directory: Union[str, Path]
    ) -> bytes:
        """Build an order from its parts. See BundleBuilder.build."""
        return self.build(BuildRequest(properties, source_files_directory))


def bundle_passes(
    passes: Sequence[bytes], archive_writer: Optional[ArchiveWriter] = None
) -> bytes:
    """Combine finished passes into a ``.pkpasses`` collection.

    Args:
        passes: One to ten ``.pkpass`` archives.
        archive_writer: Archive writer, defaults to write_archive.

    Raises:
        InvalidNumberOfPasses: Fewer than one or more than ten passes.
    """
    if not 1 <= len(passes) <= MAX_PASSES_PER_COLLECTION:
        raise InvalidNumberOfPasses(len(passes))
    writer = archive_writer or write_archive
    return writer([(f"pass{i}.pkpass", data) for i, data in enumerate(passes, start=1)])
