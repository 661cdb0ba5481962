"""Exceptions raised for malformed base64 and unusable key material."""

from __future__ import annotations


class _DefaultMessageError(ValueError):
    """A ValueError that carries a default message when none is given."""

    default_message = "error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class B64Error(_DefaultMessageError):
    """Base class for base64 decoding errors."""

    default_message = "invalid base64"


class InvalidLength(B64Error):
    """The length of the base64 input is invalid."""

    default_message = "invalid base64 length"


class InvalidValue(B64Error):
    """The base64 input holds an invalid value."""

    default_message = "invalid base64 value"


class KeyMaterialError(_DefaultMessageError):
    """Base class for errors related to key material."""

    default_message = "invalid key material"


class InvalidKey(KeyMaterialError):
    """The inputs are invalid."""

    default_message = "invalid key material"


class NotPrivate(KeyMaterialError):
    """The private key is unknown."""

    default_message = "key has no private material"


class AlgMismatch(KeyMaterialError):
    """The key does not match the requested algorithm or curve."""

    default_message = "algorithm mismatch"


class Unsupported(KeyMaterialError):
    """The requested key kind or criteria are unsupported."""

    default_message = "unsupported key"