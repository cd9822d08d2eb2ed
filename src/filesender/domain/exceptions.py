class FileSenderError(Exception):
    """Base exception for all filesender errors."""


class SigningError(FileSenderError):
    """Raised when a signer cannot produce a payload."""


class CredentialError(FileSenderError):
    """Raised when a credential cannot be loaded."""
