"""
Cipher Configuration — Validated encrypter settings from the environment.

Reads:
    NAV_ENCRYPTION_SCHEME = DES | DESede (default DESede)
    NAV_ENCRYPTION_KEY    = passphrase, at least 24 characters once trimmed

Security Note:
    Never log the passphrase. Only the scheme name is logged.
"""
import os
import logging

from pydantic import BaseModel, Field, SecretStr, field_validator

from .encrypter import DEFAULT_ENCRYPTION_KEY, MIN_PASSPHRASE_LENGTH
from .schemes import EncryptionScheme

logger = logging.getLogger("navigator.cipher")

SCHEME_ENV = "NAV_ENCRYPTION_SCHEME"
KEY_ENV = "NAV_ENCRYPTION_KEY"


class EncrypterConfig(BaseModel):
    """Validated encrypter configuration."""

    scheme: EncryptionScheme = Field(default=EncryptionScheme.DESEDE)
    passphrase: SecretStr = Field(default=SecretStr(DEFAULT_ENCRYPTION_KEY))

    @field_validator("scheme", mode="before")
    @classmethod
    def parse_scheme(cls, v):
        """Accept scheme names case-insensitively (DES, DESede, TripleDES)."""
        return EncryptionScheme.parse(v)

    @field_validator("passphrase")
    @classmethod
    def validate_passphrase(cls, v: SecretStr) -> SecretStr:
        """Ensure the passphrase meets the minimum length."""
        if len(v.get_secret_value().strip()) < MIN_PASSPHRASE_LENGTH:
            raise ValueError(
                f"passphrase must be at least {MIN_PASSPHRASE_LENGTH} characters"
            )
        return v

    @classmethod
    def from_env(cls) -> "EncrypterConfig":
        """Create EncrypterConfig from NAV_ENCRYPTION_* environment variables.

        Returns:
            Populated EncrypterConfig instance.
        """
        scheme = os.environ.get(SCHEME_ENV, EncryptionScheme.DESEDE.value)
        passphrase = os.environ.get(KEY_ENV)
        if passphrase is None:
            logger.debug("%s not set, using built-in passphrase", KEY_ENV)
            passphrase = DEFAULT_ENCRYPTION_KEY
        config = cls(scheme=scheme, passphrase=passphrase)
        logger.debug("Encrypter config loaded: scheme=%s", config.scheme.value)
        return config
