"""Error types for walletkit primitives.

Domain errors mark a failed build precondition (missing directory, missing
icon, missing signing executable). I/O and encoding failures are not wrapped:
they propagate from the platform unchanged.
"""

from typing import Optional


class WalletKitError(Exception):
    """Base exception for bundle build failures.

    Attributes:
        message: Error description.
        cause: Optional underlying exception being wrapped.
    """

    error_type = "walletKitError"

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WalletKitError):
            return NotImplemented
        return type(self) is type(other) and self.error_type == other.error_type

    def __hash__(self) -> int:
        return hash((type(self), self.error_type))


class NoSourceFiles(WalletKitError):
    """The path for the source files is not a directory.

    Attributes:
        path: The offending source directory path.
    """

    error_type = "noSourceFiles"

    def __init__(self, path: str):
        super().__init__(f"Source files directory not found: {path}")
        self.path = path


class NoIcon(WalletKitError):
    """None of the accepted ``icon@XX.png`` variants is present."""

    error_type = "noIcon"

    def __init__(self, message: str = "Pass bundle requires an icon.png asset"):
        super().__init__(message)


class NoPersonalizationLogo(WalletKitError):
    """None of the accepted ``personalizationLogo@XX.png`` variants is present."""

    error_type = "noPersonalizationLogo"

    def __init__(
        self,
        message: str = "Personalized pass bundle requires a personalizationLogo.png asset",
    ):
        super().__init__(message)


class NoSigningExecutable(WalletKitError):
    """The external signing executable does not exist.

    Attributes:
        path: The configured executable path.
    """

    error_type = "noOpenSSLExecutable"

    def __init__(self, path: str):
        super().__init__(f"Signing executable not found: {path}")
        self.path = path


class InvalidNumberOfPasses(WalletKitError):
    """A pass collection must hold between one and ten passes.

    Attributes:
        count: Number of passes that was supplied.
    """

    error_type = "invalidNumberOfPasses"

    def __init__(self, count: int):
        super().__init__(f"A pass collection holds 1 to 10 passes, got {count}")
        self.count = count


class ConfigurationError(WalletKitError):
    """Configuration error (missing field, unreadable PEM file, etc).

    Attributes:
        message: Description of the error.
        field: Optional setting name that failed.
    """

    error_type = "configurationError"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
