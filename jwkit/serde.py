"""Base64-encoded byte strings, secrets and nested JSON documents."""

from __future__ import annotations

import hmac
import json
from dataclasses import dataclass
from typing import Any

from .encoding import Encoding
from .errors import InvalidLength

_DEFAULT = Encoding.BASE64_URL_UNPADDED


class Bytes(bytes):
    """Bytes that travel as base64 text in the given encoding."""

    encoding: Encoding

    def __new__(cls, data=b"", encoding: Encoding = _DEFAULT):
        obj = super().__new__(cls, data)
        obj.encoding = encoding
        return obj

    @classmethod
    def parse(cls, text, encoding: Encoding = _DEFAULT, length: int | None = None):
        """Decode base64 text; if ``length`` is given the result must have it."""
        data = encoding.decode(text)
        if length is not None and len(data) != length:
            raise InvalidLength("invalid base64 length")
        return cls(data, encoding)

    def encode(self) -> str:
        """Return the base64 text for these bytes."""
        return self.encoding.encode(self)

    def __reduce__(self):
        return (self.__class__, (bytes(self), self.encoding))

    def __repr__(self) -> str:
        return f"Bytes({bytes(self)!r})"


class Secret(Bytes):
    """Secret bytes: compared in constant time and never shown in text."""

    def __eq__(self, other) -> bool:
        if not isinstance(other, (bytes, bytearray, memoryview)):
            return NotImplemented
        return hmac.compare_digest(bytes(self), bytes(other))

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = bytes.__hash__

    def __repr__(self) -> str:
        return "Secret(***)"

    def __str__(self) -> str:
        return "Secret(***)"


@dataclass(frozen=True)
class Json:
    """A JSON document carried as base64 text inside another document.

    Both the original bytes and the parsed value are kept; encoding uses the
    original bytes, so the exact serialization is never lost.
    """

    buf: Bytes
    value: Any

    @classmethod
    def new(cls, value, encoding: Encoding = _DEFAULT) -> "Json":
        """Serialize ``value`` to compact JSON and keep both forms."""
        raw = json.dumps(
            value, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
        return cls(Bytes(raw, encoding), value)

    @classmethod
    def from_bytes(cls, buf) -> "Json":
        """Parse already-decoded JSON bytes."""
        if not isinstance(buf, Bytes):
            buf = Bytes(buf)
        return cls(buf, json.loads(bytes(buf)))

    @classmethod
    def parse(cls, text, encoding: Encoding = _DEFAULT) -> "Json":
        """Decode base64 text, then parse the JSON it holds."""
        return cls.from_bytes(Bytes.parse(text, encoding))

    def encode(self) -> str:
        """Return the base64 text of the original JSON bytes."""
        return self.buf.encode()

    def __bytes__(self) -> bytes:
        return bytes(self.buf)