"""Detached CMS signing for bundle manifests.

Two strategies, chosen once when a SigningIdentity is built:

    DirectSigner:  in-process PKCS#7 signing with ``cryptography``.
                   Used when the private key has no password.
    OpenSSLSigner: shells out to ``openssl smime`` in a scratch directory.
                   Used for password-protected keys.

Both return the DER encoding of a detached signature whose signer is the
pass/order certificate and which carries the WWDR certificate.
"""

import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional, Protocol

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.serialization import pkcs7

from walletkit.primitives.errors import NoSigningExecutable
from walletkit.primitives.manifest import MANIFEST_FILENAME, SIGNATURE_FILENAME

logger = logging.getLogger(__name__)

DEFAULT_OPENSSL_PATH = "/usr/bin/openssl"


class Signer(Protocol):
    """Produces a detached signature over a payload."""

    def sign(self, data: bytes) -> bytes: ...


class DirectSigner:
    """SHA-256 with RSA detached signature built in-process.

    OpenSSL adds the signing-time attribute from the wall clock when the
    signature is produced.
    """

    def __init__(self, pem_wwdr_certificate: str, pem_certificate: str, pem_private_key: str):
        self._wwdr = x509.load_pem_x509_certificate(pem_wwdr_certificate.encode("utf-8"))
        self._certificate = x509.load_pem_x509_certificate(pem_certificate.encode("utf-8"))
        self._private_key = serialization.load_pem_private_key(
            pem_private_key.encode("utf-8"), password=None
        )

    def sign(self, data: bytes) -> bytes:
        return (
            pkcs7.PKCS7SignatureBuilder()
            .set_data(data)
            .add_signer(self._certificate, self._private_key, hashes.SHA256())
            .add_certificate(self._wwdr)
            .sign(
                serialization.Encoding.DER,
                [pkcs7.PKCS7Options.DetachedSignature, pkcs7.PKCS7Options.Binary],
            )
        )


class OpenSSLSigner:
    """Signs by running ``openssl smime`` against files in a temporary directory.

    The in-process path cannot load encrypted PEM keys, so the key, both
    certificates and the payload are written to a fresh directory that is
    removed on every exit path. The password travels on the command line.

    No timeout is applied unless one is given: a hung executable blocks the
    calling build.
    """

    def __init__(
        self,
        pem_wwdr_certificate: str,
        pem_certificate: str,
        pem_private_key: str,
        password: str,
        openssl_path: str = DEFAULT_OPENSSL_PATH,
        timeout: Optional[float] = None,
    ):
        self._pem_wwdr_certificate = pem_wwdr_certificate
        self._pem_certificate = pem_certificate
        self._pem_private_key = pem_private_key
        self._password = password
        self.openssl_path = openssl_path
        self.timeout = timeout

    def build_command(
        self,
        wwdr_path: Path,
        certificate_path: Path,
        private_key_path: Path,
        input_path: Path,
        output_path: Path,
    ) -> List[str]:
        """Argument vector for a binary, DER-encoded detached signature."""
        return [
            self.openssl_path,
            "smime", "-binary", "-sign",
            "-certfile", str(wwdr_path),
            "-signer", str(certificate_path),
            "-inkey", str(private_key_path),
            "-in", str(input_path),
            "-out", str(output_path),
            "-outform", "DER",
            "-passin", f"pass:{self._password}",
        ]

    def sign(self, data: bytes) -> bytes:
        if not os.path.exists(self.openssl_path):
            raise NoSigningExecutable(self.openssl_path)

        with tempfile.TemporaryDirectory(prefix="walletkit-sign-") as tmp:
            temp_dir = Path(tmp)
            logger.debug(f"Signing with {self.openssl_path} in {temp_dir}")

            input_path = temp_dir / MANIFEST_FILENAME
            wwdr_path = temp_dir / "wwdr.pem"
            certificate_path = temp_dir / "certificate.pem"
            private_key_path = temp_dir / "private.pem"
            output_path = temp_dir / SIGNATURE_FILENAME

            input_path.write_bytes(data)
            wwdr_path.write_text(self._pem_wwdr_certificate, encoding="utf-8")
            certificate_path.write_text(self._pem_certificate, encoding="utf-8")
            private_key_path.write_text(self._pem_private_key, encoding="utf-8")
            os.chmod(private_key_path, 0o600)

            command = self.build_command(
                wwdr_path, certificate_path, private_key_path, input_path, output_path
            )
            completed = subprocess.run(
                command,
                cwd=temp_dir,
                capture_output=True,
                timeout=self.timeout,
            )
            if completed.returncode != 0:
                logger.warning(
                    f"{self.openssl_path} exited with {completed.returncode}: "
                    f"{completed.stderr.decode('utf-8', errors='replace').strip()}"
                )

            return output_path.read_bytes()


class SigningIdentity:
    """Certificates and key used to sign bundles.

    Read-only once constructed and safe to share between concurrent builds.
    The signing strategy is fixed here: a password selects OpenSSLSigner,
    otherwise DirectSigner.

    Args:
        pem_wwdr_certificate: Apple WWDR intermediate certificate (PEM).
        pem_certificate: Pass/order type certificate (PEM).
        pem_private_key: Private key for ``pem_certificate`` (PEM).
        pem_private_key_password: Password of an encrypted key, else None.
        openssl_path: Location of the ``openssl`` executable.
        signing_timeout: Optional limit in seconds for the openssl run.
    """

    def __init__(
        self,
        pem_wwdr_certificate: str,
        pem_certificate: str,
        pem_private_key: str,
        pem_private_key_password: Optional[str] = None,
        openssl_path: str = DEFAULT_OPENSSL_PATH,
        signing_timeout: Optional[float] = None,
    ):
        self._pem_private_key_password = pem_private_key_password
        self._openssl_path = openssl_path

        if pem_private_key_password is not None:
            self._signer: Signer = OpenSSLSigner(
                pem_wwdr_certificate,
                pem_certificate,
                pem_private_key,
                pem_private_key_password,
                openssl_path=openssl_path,
                timeout=signing_timeout,
            )
        else:
            self._signer = DirectSigner(
                pem_wwdr_certificate, pem_certificate, pem_private_key
            )
        logger.debug(f"Signing identity uses {type(self._signer).__name__}")

    @property
    def signer(self) -> Signer:
        return self._signer

    @property
    def openssl_path(self) -> str:
        return self._openssl_path

    @property
    def has_password(self) -> bool:
        return self._pem_private_key_password is not None

    def sign(self, data: bytes) -> bytes:
        """Return a DER detached signature over ``data``."""
        return self._signer.sign(data)

    def __repr__(self) -> str:
        return f"SigningIdentity(signer={type(self._signer).__name__})"
