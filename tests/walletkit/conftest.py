"""Shared fixtures: throwaway WWDR/leaf certificates and asset directories."""

import datetime
import sys
from pathlib import Path

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from walletkit.primitives.signing import SigningIdentity

KEY_PASSWORD = "password"


def _name(common_name: str) -> x509.Name:
    return x509.Name([
        x509.NameAttribute(NameOID.ORGANIZATION_NAME, "walletkit tests"),
        x509.NameAttribute(NameOID.COMMON_NAME, common_name),
    ])


def _pem(certificate: x509.Certificate) -> str:
    return certificate.public_bytes(serialization.Encoding.PEM).decode("ascii")


@pytest.fixture(scope="session")
def certificates():
    """WWDR-style CA plus a leaf certificate signed by it.

    Returns a dict of PEM strings: wwdr, certificate, private_key,
    encrypted_private_key (password "password").
    """
    now = datetime.datetime.now(datetime.timezone.utc)

    ca_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    ca_cert = (
        x509.CertificateBuilder()
        .subject_name(_name("Test WWDR CA"))
        .issuer_name(_name("Test WWDR CA"))
        .public_key(ca_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(ca_key, hashes.SHA256())
    )

    leaf_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    leaf_cert = (
        x509.CertificateBuilder()
        .subject_name(_name("Pass Type ID: pass.com.example.walletkit"))
        .issuer_name(ca_cert.subject)
        .public_key(leaf_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
        .sign(ca_key, hashes.SHA256())
    )

    return {
        "wwdr": _pem(ca_cert),
        "certificate": _pem(leaf_cert),
        "private_key": leaf_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("ascii"),
        "encrypted_private_key": leaf_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.BestAvailableEncryption(
                KEY_PASSWORD.encode("utf-8")
            ),
        ).decode("ascii"),
        "wwdr_cert": ca_cert,
        "leaf_cert": leaf_cert,
    }


@pytest.fixture(scope="session")
def identity(certificates):
    """Direct (unencrypted key) signing identity."""
    return SigningIdentity(
        pem_wwdr_certificate=certificates["wwdr"],
        pem_certificate=certificates["certificate"],
        pem_private_key=certificates["private_key"],
    )


@pytest.fixture
def pem_files(tmp_path, certificates):
    """The PEM strings written to disk, for settings and CLI tests."""
    pem_dir = tmp_path / "certs"
    pem_dir.mkdir()
    paths = {
        "wwdr": pem_dir / "wwdr.pem",
        "certificate": pem_dir / "certificate.pem",
        "private_key": pem_dir / "private.pem",
    }
    for key, path in paths.items():
        path.write_text(certificates[key], encoding="utf-8")
    return paths


def make_source_dir(root: Path, personalization_logo: bool = True) -> Path:
    """Create a pass asset tree with localized assets and bookkeeping files."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "icon.png").write_bytes(b"\x89PNG icon")
    (root / "logo.png").write_bytes(b"\x89PNG logo")
    (root / ".DS_Store").write_bytes(b"finder junk")
    (root / ".gitkeep").write_bytes(b"")
    localized = root / "it-IT.lproj"
    localized.mkdir()
    (localized / "logo.png").write_bytes(b"\x89PNG logo it")
    (localized / "pass.strings").write_text('"hello" = "ciao";', encoding="utf-8")
    (localized / ".gitkeep").write_bytes(b"")
    if personalization_logo:
        (root / "personalizationLogo.png").write_bytes(b"\x89PNG plogo")
        (localized / "personalizationLogo.png").write_bytes(b"\x89PNG plogo it")
    return root


@pytest.fixture
def source_dir(tmp_path):
    """Pass asset directory with icon, logos and a localization folder."""
    return make_source_dir(tmp_path / "SourceFiles")


@pytest.fixture
def pass_properties():
    return {
        "description": "Test Pass",
        "formatVersion": 1,
        "organizationName": "example",
        "passTypeIdentifier": "pass.com.example.walletkit",
        "serialNumber": "E5982H-I2",
        "teamIdentifier": "K6512ZA2S5",
        "webServiceURL": "https://www.example.com/api/passes/",
        "authenticationToken": "vxwxd7J8AlNNFPS8k0a0FfUFtq0ewzFdc",
        "logoText": "walletkit",
        "backgroundColor": "rgb(207, 77, 243)",
        "barcodes": [
            {"format": "PKBarcodeFormatQR", "message": "test", "messageEncoding": "iso-8859-1"}
        ],
        "boardingPass": {
            "transitType": "PKTransitTypeAir",
            "primaryFields": [{"key": "primary", "label": "Primary", "value": "Primary"}],
        },
    }


@pytest.fixture
def order_properties():
    return {
        "schemaVersion": 1,
        "orderTypeIdentifier": "order.com.example.walletkit",
        "orderIdentifier": "0f2c5e53-6c4a-4e4b-9d8c-1fa4a1f6e2b1",
        "orderType": "ecommerce",
        "orderNumber": "HM090772020864",
        "createdAt": "2026-10-01T12:00:00Z",
        "updatedAt": "2026-10-01T12:00:00Z",
        "status": "open",
        "merchant": {
            "merchantIdentifier": "com.example.pet-store",
            "displayName": "Pet Store",
            "url": "https://www.example.com/",
            "logo": "pet_store_logo.png",
        },
        "orderManagementURL": "https://www.example.com/",
        "authenticationToken": "d7bd8b4c2f3e4a61",
        "webServiceURL": "https://www.example.com/api/orders/",
    }


FAKE_OPENSSL = '''#!{python}
"""Stand-in for openssl smime: records argv, writes SIG: + input to -out."""
import json
import sys
from pathlib import Path

args = sys.argv[1:]
record = {record!r}
if record:
    Path(record).write_text(json.dumps(args))
if {write_output!r}:
    source = Path(args[args.index("-in") + 1])
    Path(args[args.index("-out") + 1]).write_bytes(b"SIG:" + source.read_bytes())
else:
    sys.stderr.write("unable to load private key\\n")
    sys.exit(3)
'''


def write_fake_openssl(path: Path, record: str = "", write_output: bool = True) -> Path:
    """Write an executable fake openssl script at ``path``."""
    path.write_text(
        FAKE_OPENSSL.format(python=sys.executable, record=record, write_output=write_output),
        encoding="utf-8",
    )
    path.chmod(0o755)
    return path
