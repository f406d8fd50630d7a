"""Navigator Cipher — Reversible encryption of short secrets for storage.

Security Note (Threat Model):
    DES/DESede in ECB mode without IV or authentication tag. Ciphertext is
    deterministic and tampering is not detected beyond padding checks.
    The format is kept for compatibility with values already stored;
    do not use it for new data that needs semantic security.
"""

from .version import __version__
from .exceptions import (
    EncryptionError,
    InvalidArgumentError,
    InvalidKeySpecError,
    UnsupportedSchemeError,
)
from .schemes import EncryptionScheme, DES_ENCRYPTION_SCHEME, DESEDE_ENCRYPTION_SCHEME
from .keys import KeyMaterialBuilder
from .codec import Base64Codec
from .context import CipherContext, CipherMode
from .encrypter import StringEncrypter, DEFAULT_ENCRYPTION_KEY, MIN_PASSPHRASE_LENGTH
from .config import EncrypterConfig
from .factory import (
    EncrypterResult,
    LazyEncrypter,
    build_encrypter,
    default_instance,
    encrypter_from_config,
    encrypter_from_env,
)

__all__ = [
    "__version__",
    "EncryptionError",
    "InvalidArgumentError",
    "InvalidKeySpecError",
    "UnsupportedSchemeError",
    "EncryptionScheme",
    "DES_ENCRYPTION_SCHEME",
    "DESEDE_ENCRYPTION_SCHEME",
    "KeyMaterialBuilder",
    "Base64Codec",
    "CipherContext",
    "CipherMode",
    "StringEncrypter",
    "DEFAULT_ENCRYPTION_KEY",
    "MIN_PASSPHRASE_LENGTH",
    "EncrypterConfig",
    "EncrypterResult",
    "LazyEncrypter",
    "build_encrypter",
    "default_instance",
    "encrypter_from_config",
    "encrypter_from_env",
]
