"""Supported block-cipher schemes."""
from enum import Enum
from typing import Union

from .exceptions import UnsupportedSchemeError


DES_ENCRYPTION_SCHEME = "DES"
DESEDE_ENCRYPTION_SCHEME = "DESede"

_ALIASES = {
    "des": DES_ENCRYPTION_SCHEME,
    "desede": DESEDE_ENCRYPTION_SCHEME,
    "tripledes": DESEDE_ENCRYPTION_SCHEME,
    "3des": DESEDE_ENCRYPTION_SCHEME,
}


class EncryptionScheme(str, Enum):
    """Closed set of schemes a StringEncrypter can be bound to."""

    DES = DES_ENCRYPTION_SCHEME
    DESEDE = DESEDE_ENCRYPTION_SCHEME

    @property
    def raw_key_length(self) -> int:
        """Bytes of key material taken from the passphrase."""
        return 8 if self is EncryptionScheme.DES else 24

    @property
    def block_size(self) -> int:
        return 8

    @classmethod
    def parse(cls, value: Union[str, "EncryptionScheme"]) -> "EncryptionScheme":
        """Resolve a scheme from an enum member or a case-insensitive name.

        Raises:
            UnsupportedSchemeError: If the value is not DES or DESede.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = _ALIASES.get(value.strip().lower())
            if name is not None:
                return cls(name)
        raise UnsupportedSchemeError(
            f"Encryption scheme not supported: {value!r}"
        )
