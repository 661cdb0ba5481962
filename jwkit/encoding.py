"""Base64 alphabets with strict, canonical decoding."""

from __future__ import annotations

import base64
import binascii
import string
from enum import Enum

from .errors import InvalidLength, InvalidValue

_COMMON = (string.ascii_letters + string.digits).encode("ascii")


def _to_bytes(data) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidValue("non-ASCII character in base64 input") from exc
    return memoryview(data).tobytes()


class Encoding(Enum):
    """A base64 variant, defined by its alphabet and its use of padding."""

    BASE64 = ("+/", True)
    BASE64_UNPADDED = ("+/", False)
    BASE64_URL = ("-_", True)
    BASE64_URL_UNPADDED = ("-_", False)

    def __init__(self, specials: str, padded: bool) -> None:
        self.altchars = specials.encode("ascii")
        self.padded = padded
        self.alphabet = _COMMON + self.altchars

    def encode(self, data) -> str:
        """Encode bytes into base64 text."""
        raw = base64.b64encode(memoryview(data).tobytes(), altchars=self.altchars)
        text = raw.decode("ascii")
        return text if self.padded else text.rstrip("=")

    def decode(self, text) -> bytes:
        """Decode base64 text (str or bytes), rejecting anything non-canonical."""
        raw = _to_bytes(text)

        if self.padded:
            if len(raw) % 4:
                raise InvalidLength()
            body = raw.rstrip(b"=")
            if len(raw) - len(body) > 2:
                raise InvalidValue("too much base64 padding")
        else:
            body = raw
            if len(body) % 4 == 1:
                raise InvalidLength()

        if body.translate(None, self.alphabet):
            raise InvalidValue("invalid base64 character")

        padded = body + b"=" * (-len(body) % 4)
        try:
            data = base64.b64decode(padded, altchars=self.altchars, validate=True)
        except binascii.Error as exc:
            raise InvalidValue() from exc

        canonical = base64.b64encode(data, altchars=self.altchars).rstrip(b"=")
        if canonical != body:
            raise InvalidValue("non-canonical base64 trailing bits")
        return data