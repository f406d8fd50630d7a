"""
Tests for the building blocks behind StringEncrypter.

Tests cover:
- EncryptionScheme parsing and key sizes
- KeyMaterialBuilder truncation and parity adjustment
- Base64Codec strictness
- CipherContext mode handling and exclusive access
"""
import binascii
import threading
import time
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest

from navigator_cipher import (
    Base64Codec,
    CipherContext,
    CipherMode,
    EncryptionScheme,
    InvalidKeySpecError,
    KeyMaterialBuilder,
    UnsupportedSchemeError,
)
from navigator_cipher.keys import has_odd_parity, set_parity_bits

KEY = "This is a fairly long phrase used to encrypt"


# --- Test Schemes ---

class TestEncryptionScheme:
    """Tests for scheme parsing."""

    @pytest.mark.parametrize("name,expected", [
        ("DES", EncryptionScheme.DES),
        ("des", EncryptionScheme.DES),
        ("DESede", EncryptionScheme.DESEDE),
        ("desede", EncryptionScheme.DESEDE),
        ("TripleDES", EncryptionScheme.DESEDE),
        ("3DES", EncryptionScheme.DESEDE),
        (EncryptionScheme.DES, EncryptionScheme.DES),
    ])
    def test_parse(self, name, expected):
        """Test accepted scheme spellings."""
        assert EncryptionScheme.parse(name) is expected

    @pytest.mark.parametrize("name", ["AES", "", "DES3-CBC", None, 8])
    def test_parse_unsupported(self, name):
        """Test anything else is rejected."""
        with pytest.raises(UnsupportedSchemeError):
            EncryptionScheme.parse(name)

    def test_key_lengths(self):
        """Test raw key lengths per scheme."""
        assert EncryptionScheme.DES.raw_key_length == 8
        assert EncryptionScheme.DESEDE.raw_key_length == 24
        assert EncryptionScheme.DESEDE.value == "DESede"


# --- Test Key Material ---

class TestKeyMaterialBuilder:
    """Tests for passphrase to key conversion."""

    def test_desede_length_and_parity(self):
        """Test DESede keys are 24 bytes with odd parity."""
        key = KeyMaterialBuilder("DESede").derive(KEY)
        assert len(key) == 24
        assert has_odd_parity(key)

    def test_des_length(self):
        """Test DES keys are 8 bytes."""
        key = KeyMaterialBuilder(EncryptionScheme.DES).derive(KEY)
        assert len(key) == 8
        assert has_odd_parity(key)

    def test_only_parity_bits_change(self):
        """Test adjustment only touches the low bit of each byte."""
        raw = KEY.encode("utf-8")[:24]
        key = KeyMaterialBuilder("DESede").derive(KEY)
        assert all((a & 0xFE) == (b & 0xFE) for a, b in zip(raw, key))

    def test_set_parity_bits_known_values(self):
        """Test parity on a few hand-checked bytes."""
        assert set_parity_bits(b"\x00\x01\xff\xfe\x03") == b"\x01\x01\xfe\xfe\x02"

    def test_prefix_determines_key(self):
        """Test bytes past the key length are ignored."""
        builder = KeyMaterialBuilder("DESede")
        prefix = "x" * 24
        assert builder.derive(prefix + "one") == builder.derive(prefix + "two")

    def test_too_short(self):
        """Test short key material is rejected."""
        with pytest.raises(InvalidKeySpecError):
            KeyMaterialBuilder("DESede").key_from_bytes(b"\x01" * 23)

    def test_multibyte_passphrase(self):
        """Test key material counts UTF-8 bytes, not characters."""
        key = KeyMaterialBuilder("DESede").derive("ü" * 12)
        assert len(key) == 24


# --- Test Codec ---

class TestBase64Codec:
    """Tests for the ciphertext text codec."""

    def test_encode_is_padded_single_line(self):
        """Test padding and no wrapping on long input."""
        text = Base64Codec().encode(b"\x00" * 100)
        assert text.endswith("=")
        assert "\n" not in text

    def test_decode_strips_surrounding_whitespace(self):
        """Test surrounding whitespace is tolerated."""
        assert Base64Codec().decode("  aGVsbG8=\n") == b"hello"

    @pytest.mark.parametrize("text", ["aGVs bG8=", "aGVsbG8", "héllo==="])
    def test_decode_strict(self, text):
        """Test invalid characters and bad padding raise."""
        with pytest.raises(binascii.Error):
            Base64Codec().decode(text)


# --- Test Cipher Context ---

class TestCipherContext:
    """Tests for the locked engine holder."""

    def test_init_outside_acquire(self):
        """Test init requires holding the context."""
        ctx = CipherContext("DESede")
        with pytest.raises(RuntimeError):
            ctx.init(CipherMode.ENCRYPT, b"\x01" * 24)

    def test_do_final_before_init(self):
        """Test transform requires init."""
        ctx = CipherContext("DESede")
        with ctx.acquire() as engine:
            with pytest.raises(RuntimeError):
                engine.do_final(b"data")

    def test_wrong_key_size(self):
        """Test a DES context refuses a DESede-sized key."""
        ctx = CipherContext("DES")
        with ctx.acquire() as engine:
            with pytest.raises(InvalidKeySpecError):
                engine.init(CipherMode.ENCRYPT, b"\x01" * 24)

    def test_state_cleared_on_release(self):
        """Test mode and key do not outlive the acquire block."""
        ctx = CipherContext("DESede")
        key = KeyMaterialBuilder("DESede").derive(KEY)
        with ctx.acquire() as engine:
            engine.init(CipherMode.ENCRYPT, key)
            ciphertext = engine.do_final(b"payload")
            assert ctx.mode is CipherMode.ENCRYPT
        assert ctx.mode is None
        with ctx.acquire() as engine:
            engine.init(CipherMode.DECRYPT, key)
            assert engine.do_final(ciphertext) == b"payload"

    def test_des_key_without_deprecation_warning(self):
        """Test a DES context round trips with warnings turned into errors."""
        ctx = CipherContext("DES")
        key = KeyMaterialBuilder("DES").derive(KEY)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with ctx.acquire() as engine:
                engine.init(CipherMode.ENCRYPT, key)
                ciphertext = engine.do_final(b"payload")
            with ctx.acquire() as engine:
                engine.init(CipherMode.DECRYPT, key)
                assert engine.do_final(ciphertext) == b"payload"

    def test_init_from_other_thread_while_held(self):
        """Test only the holding thread may init the context."""
        ctx = CipherContext("DESede")
        errors = []

        def intruder():
            try:
                ctx.init(CipherMode.ENCRYPT, b"\x01" * 24)
            except RuntimeError as err:
                errors.append(err)

        with ctx.acquire():
            worker = threading.Thread(target=intruder)
            worker.start()
            worker.join(timeout=10)
            assert ctx.mode is None
        assert len(errors) == 1

    def test_exclusive_access(self):
        """Test at most one holder is inside the context at a time."""
        ctx = CipherContext("DESede")
        inside = 0
        peak = 0
        guard = threading.Lock()

        def hold(_):
            nonlocal inside, peak
            with ctx.acquire():
                with guard:
                    inside += 1
                    peak = max(peak, inside)
                time.sleep(0.001)
                with guard:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(hold, range(40)))
        assert peak == 1
