"""
Encrypter factories — Fallible construction and the shared default instance.

``build_encrypter`` never raises for construction problems; it returns an
``EncrypterResult`` holding either the encrypter or the error. The default
instance (DESede, built-in passphrase) is built once per process by a
``LazyEncrypter`` holder.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .config import EncrypterConfig
from .encrypter import DEFAULT_ENCRYPTION_KEY, StringEncrypter
from .schemes import EncryptionScheme

logger = logging.getLogger("navigator.cipher")


@dataclass(frozen=True)
class EncrypterResult:
    """Outcome of building a StringEncrypter: a value or an error."""

    value: Optional[StringEncrypter] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    def unwrap(self) -> StringEncrypter:
        """Return the encrypter, re-raising the construction error if any."""
        if self.error is not None:
            raise self.error
        if self.value is None:
            raise RuntimeError("EncrypterResult holds neither value nor error")
        return self.value


def build_encrypter(
    scheme: Union[str, EncryptionScheme] = EncryptionScheme.DESEDE,
    passphrase: Optional[str] = DEFAULT_ENCRYPTION_KEY,
) -> EncrypterResult:
    """Build a StringEncrypter, capturing construction errors in the result."""
    try:
        return EncrypterResult(value=StringEncrypter(scheme, passphrase))
    except ValueError as err:
        return EncrypterResult(error=err)


class LazyEncrypter:
    """Builds an encrypter on first ``get()``, exactly once across threads.

    A failed build is logged and kept; later calls return the same result.
    """

    def __init__(self, builder: Callable[[], EncrypterResult]):
        self._builder = builder
        self._lock = threading.Lock()
        self._result: Optional[EncrypterResult] = None

    @property
    def initialized(self) -> bool:
        return self._result is not None

    def get(self) -> EncrypterResult:
        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is None:
                result = self._builder()
                if result.error is not None:
                    logger.error(
                        "Failed to create default StringEncrypter instance: %s",
                        result.error,
                    )
                self._result = result
            return self._result


_DEFAULT = LazyEncrypter(
    lambda: build_encrypter(EncryptionScheme.DESEDE, DEFAULT_ENCRYPTION_KEY)
)


def default_instance() -> EncrypterResult:
    """Return the process-wide default encrypter (DESede, built-in passphrase)."""
    return _DEFAULT.get()


def encrypter_from_config(config: EncrypterConfig) -> StringEncrypter:
    """Build a StringEncrypter from a validated configuration."""
    return StringEncrypter(config.scheme, config.passphrase.get_secret_value())


def encrypter_from_env() -> StringEncrypter:
    """Build a StringEncrypter from NAV_ENCRYPTION_* environment variables."""
    return encrypter_from_config(EncrypterConfig.from_env())
