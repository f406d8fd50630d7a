"""
Cipher Context — Mutable DES/DESede engine state guarded by a lock.

A context is bound to one scheme and re-initialized (mode + key) before
every transform. Callers must hold it through ``acquire()``::

    with context.acquire() as engine:
        engine.init(CipherMode.ENCRYPT, key)
        ciphertext = engine.do_final(plaintext)

Transform is ECB with PKCS#5 padding and no IV, so equal plaintext blocks
under the same key give equal ciphertext blocks.
"""
import threading
from contextlib import contextmanager
from enum import Enum
from collections.abc import Iterator
from typing import Optional, Union

from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, modes

from .exceptions import InvalidKeySpecError
from .schemes import EncryptionScheme


class CipherMode(Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherContext:
    """Per-encrypter engine holder; one caller at a time."""

    def __init__(self, scheme: Union[str, EncryptionScheme]):
        self.scheme = EncryptionScheme.parse(scheme)
        self._lock = threading.Lock()
        self._mode: Optional[CipherMode] = None
        self._key: Optional[bytes] = None
        self._owner: Optional[int] = None

    def __repr__(self) -> str:
        mode = self._mode.value if self._mode else None
        return f"<CipherContext scheme={self.scheme.value} mode={mode}>"

    @property
    def mode(self) -> Optional[CipherMode]:
        return self._mode

    @contextmanager
    def acquire(self) -> Iterator["CipherContext"]:
        """Hold exclusive access; mode and key are cleared on release."""
        with self._lock:
            self._owner = threading.get_ident()
            try:
                yield self
            finally:
                self._mode = None
                self._key = None
                self._owner = None

    def init(self, mode: CipherMode, key: bytes) -> None:
        """Set the mode and key for the next ``do_final`` call.

        Raises:
            RuntimeError: If the calling thread does not hold ``acquire()``.
            InvalidKeySpecError: If the key length does not fit the scheme.
        """
        if self._owner != threading.get_ident():
            raise RuntimeError("CipherContext.init() called outside acquire()")
        if len(key) != self.scheme.raw_key_length:
            raise InvalidKeySpecError(
                f"{self.scheme.value} key must be {self.scheme.raw_key_length} "
                f"bytes, got {len(key)}"
            )
        self._mode = mode
        self._key = key

    def do_final(self, data: bytes) -> bytes:
        """Run the whole payload through the initialized engine.

        Raises:
            RuntimeError: If ``init`` was not called first.
            ValueError: On block misalignment or bad padding (decrypt).
        """
        if self._mode is None or self._key is None:
            raise RuntimeError("CipherContext used before init()")
        # single DES is TripleDES with K1 = K2 = K3
        key = self._key * 3 if len(self._key) == 8 else self._key
        cipher = Cipher(TripleDES(key), modes.ECB())
        block_bits = self.scheme.block_size * 8
        if self._mode is CipherMode.ENCRYPT:
            padder = padding.PKCS7(block_bits).padder()
            padded = padder.update(data) + padder.finalize()
            encryptor = cipher.encryptor()
            return encryptor.update(padded) + encryptor.finalize()
        decryptor = cipher.decryptor()
        padded = decryptor.update(data) + decryptor.finalize()
        unpadder = padding.PKCS7(block_bits).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
