"""
Key material — Passphrase to DES/DESede key conversion.

A passphrase is UTF-8 encoded and its leading bytes become the raw key:
- DES:    first 8 bytes
- DESede: first 24 bytes (three 8-byte DES sub-keys)

Each key byte is then forced to odd parity (the low bit of every DES key
byte is a parity bit and is ignored by the cipher itself).

Security Note:
    Derived keys are never logged, cached or serialized.
"""
from typing import Union

from .exceptions import InvalidKeySpecError
from .schemes import EncryptionScheme

PASSPHRASE_ENCODING = "utf-8"


def set_parity_bits(key: bytes) -> bytes:
    """Return a copy of ``key`` with every byte adjusted to odd parity."""
    adjusted = bytearray(len(key))
    for i, b in enumerate(key):
        b &= 0xFE
        adjusted[i] = b | ((bin(b).count("1") & 1) ^ 1)
    return bytes(adjusted)


def has_odd_parity(key: bytes) -> bool:
    return all(bin(b).count("1") % 2 == 1 for b in key)


class KeyMaterialBuilder:
    """Builds a scheme-valid symmetric key from a passphrase."""

    def __init__(self, scheme: Union[str, EncryptionScheme]):
        self.scheme = EncryptionScheme.parse(scheme)

    def __repr__(self) -> str:
        return f"<KeyMaterialBuilder scheme={self.scheme.value}>"

    def key_from_bytes(self, raw: bytes) -> bytes:
        """Apply the scheme key-spec rule to raw secret bytes.

        Raises:
            InvalidKeySpecError: If fewer bytes than the scheme needs are given.
        """
        size = self.scheme.raw_key_length
        if len(raw) < size:
            raise InvalidKeySpecError(
                f"{self.scheme.value} key material must be at least "
                f"{size} bytes, got {len(raw)}"
            )
        return set_parity_bits(raw[:size])

    def derive(self, passphrase: str) -> bytes:
        """Derive the key for ``passphrase`` (UTF-8 bytes, truncated, parity set)."""
        return self.key_from_bytes(passphrase.encode(PASSPHRASE_ENCODING))
