"""Base64 text codec for ciphertext (standard alphabet, padded, no wrapping)."""
import base64
import binascii


class Base64Codec:
    """Standard base64 with ``=`` padding and no line breaks.

    Decoding is strict: characters outside the alphabet raise
    ``binascii.Error`` instead of being silently skipped.
    """

    encoding = "ascii"

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data).decode(self.encoding)

    def decode(self, text: str) -> bytes:
        try:
            raw = text.strip().encode(self.encoding)
        except UnicodeEncodeError as err:
            raise binascii.Error(f"non-base64 character in input: {err}") from err
        return base64.b64decode(raw, validate=True)
