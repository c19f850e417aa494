"""Configuration settings for walletkit.

Signing material is configured through environment variables (or a
``.env`` file) prefixed with ``WALLETKIT_``:

- WALLETKIT_WWDR_CERTIFICATE_PATH: Apple WWDR intermediate certificate (PEM)
- WALLETKIT_CERTIFICATE_PATH: pass/order type certificate (PEM)
- WALLETKIT_PRIVATE_KEY_PATH: private key for the certificate (PEM)
- WALLETKIT_PRIVATE_KEY_PASSWORD: set only when the key is encrypted
- WALLETKIT_OPENSSL_PATH: openssl used for encrypted keys
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from walletkit.primitives.errors import ConfigurationError
from walletkit.primitives.signing import DEFAULT_OPENSSL_PATH, SigningIdentity

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WALLETKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signing material
    wwdr_certificate_path: Optional[Path] = None
    certificate_path: Optional[Path] = None
    private_key_path: Optional[Path] = None
    private_key_password: Optional[str] = None

    # External signer
    openssl_path: str = DEFAULT_OPENSSL_PATH
    signing_timeout: Optional[float] = None  # seconds; unset blocks indefinitely

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def _read_pem(settings: Settings, field: str) -> str:
    path = getattr(settings, field)
    if path is None:
        raise ConfigurationError(
            f"{field} is not configured (set WALLETKIT_{field.upper()})", field=field
        )
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {field} at {path}: {e}", field=field) from e


def load_identity(settings: Optional[Settings] = None) -> SigningIdentity:
    """Build a SigningIdentity from configured PEM files.

    Args:
        settings: Settings to use, defaults to get_settings().

    Raises:
        ConfigurationError: A PEM path is unset or unreadable.
    """
    settings = settings or get_settings()
    identity = SigningIdentity(
        pem_wwdr_certificate=_read_pem(settings, "wwdr_certificate_path"),
        pem_certificate=_read_pem(settings, "certificate_path"),
        pem_private_key=_read_pem(settings, "private_key_path"),
        pem_private_key_password=settings.private_key_password,
        openssl_path=settings.openssl_path,
        signing_timeout=settings.signing_timeout,
    )
    logger.debug(f"Loaded signing identity from {settings.certificate_path}")
    return identity
