"""JSON Web Algorithm identifiers."""

from __future__ import annotations

from enum import Enum


class Signing(str, Enum):
    """Signature and MAC algorithms, each valued by its registered name.

    The families are EdDSA, ECDSA (ES*), HMAC (HS*), RSA-PSS (PS*),
    RSA PKCS#1 v1.5 (RS*) and the unsecured ``none``.
    """

    EDDSA = "EdDSA"
    ES256 = "ES256"
    ES256K = "ES256K"
    ES384 = "ES384"
    ES512 = "ES512"
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"
    PS256 = "PS256"
    PS384 = "PS384"
    PS512 = "PS512"
    RS256 = "RS256"
    RS384 = "RS384"
    RS512 = "RS512"
    NULL = "none"

    def __str__(self) -> str:
        return self.value


def parse_algorithm(value) -> Signing:
    """Return the algorithm named by ``value`` (a registered name or an algorithm).

    Names are case-sensitive. An unknown name raises ``ValueError``; a value
    of any other type raises ``TypeError``.
    """
    if isinstance(value, Signing):
        return value
    if not isinstance(value, str):
        raise TypeError(f"algorithm must be a string, not {type(value).__name__}")
    try:
        return Signing(value)
    except ValueError:
        raise ValueError(f"unknown algorithm: {value!r}") from None