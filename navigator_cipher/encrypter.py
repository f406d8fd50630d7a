"""
StringEncrypter — Reversible DES/DESede encryption of short text values.

Pipeline:
- encrypt: UTF-8 → DES/DESede (ECB, PKCS#5 padding) → base64 text
- decrypt: base64 text → DES/DESede → UTF-8

The key is derived from the passphrase given to each call, using the
scheme the instance was constructed with.

Security Note:
    Output is deterministic (no IV) and unauthenticated: equal inputs give
    equal ciphertext, and tampering is only detected by padding checks.
    This is kept so existing stored values stay readable.
    Never log plaintext, ciphertext or passphrases.
"""
import logging
from typing import Optional, Union

from .codec import Base64Codec
from .context import CipherContext, CipherMode
from .exceptions import EncryptionError, InvalidArgumentError
from .keys import KeyMaterialBuilder
from .schemes import EncryptionScheme

logger = logging.getLogger("navigator.cipher")

DEFAULT_ENCRYPTION_KEY = "This is a fairly long phrase used to encrypt"
MIN_PASSPHRASE_LENGTH = 24
TEXT_ENCODING = "utf-8"


def validate_passphrase(passphrase: Optional[str]) -> str:
    """Check the passphrase invariant (non-null, >= 24 chars once trimmed).

    Raises:
        InvalidArgumentError: If the passphrase is missing or too short.
    """
    if passphrase is None:
        raise InvalidArgumentError("encryption key was null")
    if not isinstance(passphrase, str):
        raise InvalidArgumentError(
            f"encryption key must be text, got {type(passphrase).__name__}"
        )
    if len(passphrase.strip()) < MIN_PASSPHRASE_LENGTH:
        raise InvalidArgumentError(
            f"encryption key was less than {MIN_PASSPHRASE_LENGTH} characters"
        )
    return passphrase


class StringEncrypter:
    """Symmetric string cipher bound to one scheme.

    Instances are meant to be built once and shared. Calls on the same
    instance are serialized through its CipherContext.

    Args:
        scheme: ``EncryptionScheme`` member or name ("DES", "DESede").
        passphrase: Construction-time passphrase; only validated here, each
            ``encrypt``/``decrypt`` call supplies the key it actually uses.

    Raises:
        InvalidArgumentError: If the passphrase is missing or too short.
        UnsupportedSchemeError: If the scheme is not DES or DESede.
    """

    def __init__(
        self,
        scheme: Union[str, EncryptionScheme] = EncryptionScheme.DESEDE,
        passphrase: Optional[str] = DEFAULT_ENCRYPTION_KEY,
    ):
        validate_passphrase(passphrase)
        self._scheme = EncryptionScheme.parse(scheme)
        self._context = CipherContext(self._scheme)
        self._keys = KeyMaterialBuilder(self._scheme)
        self._codec = Base64Codec()
        logger.debug("StringEncrypter ready: scheme=%s", self._scheme.value)

    def __repr__(self) -> str:
        return f"<StringEncrypter scheme={self._scheme.value}>"

    @property
    def scheme(self) -> EncryptionScheme:
        return self._scheme

    def _transform(self, mode: CipherMode, data: bytes, passphrase: str) -> bytes:
        key = self._keys.derive(passphrase)
        with self._context.acquire() as engine:
            engine.init(mode, key)
            return engine.do_final(data)

    def encrypt(self, plaintext: str, passphrase: str) -> str:
        """Encrypt ``plaintext`` and return it as base64 text.

        Raises:
            InvalidArgumentError: Blank plaintext or invalid passphrase.
            EncryptionError: Any key, cipher or encoding failure.
        """
        if plaintext is None or not plaintext.strip():
            raise InvalidArgumentError("unencrypted string was null or empty")
        validate_passphrase(passphrase)
        try:
            ciphertext = self._transform(
                CipherMode.ENCRYPT, plaintext.encode(TEXT_ENCODING), passphrase
            )
            return self._codec.encode(ciphertext)
        except Exception as err:
            logger.debug("encrypt failed: %s", type(err).__name__)
            raise EncryptionError(err) from err

    def decrypt(self, ciphertext: str, passphrase: str) -> str:
        """Decrypt base64 ``ciphertext`` produced by ``encrypt``.

        A wrong passphrase or corrupted value usually fails the padding
        check; in rare cases it decodes to garbage instead.

        Raises:
            InvalidArgumentError: Blank ciphertext or invalid passphrase.
            EncryptionError: Bad base64, block size, padding or UTF-8.
        """
        if ciphertext is None or not ciphertext.strip():
            raise InvalidArgumentError("encrypted string was null or empty")
        validate_passphrase(passphrase)
        try:
            raw = self._codec.decode(ciphertext)
            cleartext = self._transform(CipherMode.DECRYPT, raw, passphrase)
            return cleartext.decode(TEXT_ENCODING)
        except Exception as err:
            logger.debug("decrypt failed: %s", type(err).__name__)
            raise EncryptionError(err) from err
