"""Exceptions raised by the string encrypter."""


class InvalidArgumentError(ValueError):
    """Raised for missing/blank input or a passphrase that is too short.

    Checked before any cryptographic work; never wrapped.
    """


class UnsupportedSchemeError(ValueError):
    """Raised when an encryption scheme other than DES/DESede is requested."""


class InvalidKeySpecError(ValueError):
    """Raised when key material is too short for the requested scheme."""


class EncryptionError(Exception):
    """Wraps any failure from key derivation, cipher setup or transform.

    The underlying exception is always available as ``cause`` (and as
    ``__cause__`` when raised with ``raise ... from``).
    """

    def __init__(self, cause: BaseException):
        super().__init__(f"{type(cause).__name__}: {cause}")
        self.cause = cause
