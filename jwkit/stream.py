"""Streaming base64 encoding and decoding.

Do not use these types to decode secrets: invalid input is reported block by
block, which could leak timing information.

A target ("inner") is any object with an ``update(chunk)`` method, such as a
:class:`Buffer` or a ``hashlib`` hash object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .encoding import Encoding
from .errors import B64Error, InvalidValue


def _as_bytes(chunk) -> bytes:
    return memoryview(chunk).tobytes()


class Update(ABC):
    """Something that can be fed bytes."""

    @abstractmethod
    def update(self, chunk) -> None:
        """Feed the object with the given bytes."""

    def chain(self, chunk):
        """Feed the object and return it, for chained calls."""
        self.update(chunk)
        return self


class Buffer(Update):
    """An in-memory byte sink."""

    def __init__(self, initial=b"") -> None:
        self._data = bytearray(initial)

    def update(self, chunk) -> None:
        self._data += _as_bytes(chunk)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Buffer({bytes(self._data)!r})"


class Fanout(Update):
    """Feeds every chunk to each of its targets, in order."""

    def __init__(self, targets=()) -> None:
        self.targets = list(targets)

    def update(self, chunk) -> None:
        data = _as_bytes(chunk)
        for target in self.targets:
            target.update(data)


class Encoder(Update):
    """Base64-encodes whatever it is fed and passes the text on to ``inner``."""

    def __init__(self, inner=None, encoding: Encoding = Encoding.BASE64_URL_UNPADDED) -> None:
        self.inner = Buffer() if inner is None else inner
        self.encoding = encoding
        self._pending = b""

    def update(self, chunk) -> None:
        data = self._pending + _as_bytes(chunk)
        cut = len(data) - len(data) % 3
        self._pending = data[cut:]
        if cut:
            self.inner.update(self.encoding.encode(data[:cut]).encode("ascii"))

    def finish(self):
        """Encode the remaining bytes and return the inner target."""
        tail, self._pending = self._pending, b""
        self.inner.update(self.encoding.encode(tail).encode("ascii"))
        return self.inner


class Decoder(Update):
    """Decodes base64 text as it is fed and passes the bytes on to ``inner``.

    The last block is held back until :meth:`finish`, since only it may be
    short or padded.
    """

    def __init__(self, inner=None, encoding: Encoding = Encoding.BASE64_URL_UNPADDED) -> None:
        self.inner = Buffer() if inner is None else inner
        self.encoding = encoding
        self._pending = b""

    def update(self, chunk) -> None:
        if isinstance(chunk, str):
            chunk = chunk.encode("ascii", errors="replace")
        data = self._pending + _as_bytes(chunk)
        if len(data) <= 4:
            self._pending = data
            return

        cut = (len(data) - 1) // 4 * 4
        blocks, self._pending = data[:cut], data[cut:]
        try:
            decoded = self.encoding.decode(blocks)
        except B64Error as exc:
            raise InvalidValue() from exc
        if len(decoded) != cut // 4 * 3:
            raise InvalidValue("padding before the final base64 block")
        self.inner.update(decoded)

    def finish(self):
        """Decode the final block and return the inner target."""
        tail, self._pending = self._pending, b""
        self.inner.update(self.encoding.decode(tail))
        return self.inner


class Optional(Update):
    """Passes bytes on to ``inner`` either base64-encoded or as they are."""

    def __init__(self, inner, b64: bool, encoding: Encoding = Encoding.BASE64_URL_UNPADDED) -> None:
        self.encoded = b64
        self._target = Encoder(inner, encoding) if b64 else inner

    def update(self, chunk) -> None:
        self._target.update(chunk)

    def finish(self):
        """Complete any encoding and return the inner target."""
        if self.encoded:
            return self._target.finish()
        return self._target