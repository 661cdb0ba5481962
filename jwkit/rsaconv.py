"""Conversion between RSA JWKs and ``cryptography`` key objects."""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import rsa as asym_rsa

from .errors import InvalidKey, NotPrivate, Unsupported
from .jwk import Rsa, RsaPrivate

_MAX_MODULUS_BITS = 4096
_MIN_EXPONENT = 2
_MAX_EXPONENT = (1 << 33) - 1


def _to_int(data) -> int:
    return int.from_bytes(data, "big")


def _to_bytes(value: int) -> bytes:
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


def _public_numbers(rsa: Rsa) -> asym_rsa.RSAPublicNumbers:
    n = _to_int(rsa.n)
    e = _to_int(rsa.e)
    if n.bit_length() > _MAX_MODULUS_BITS:
        raise InvalidKey("RSA modulus is too large")
    if not _MIN_EXPONENT <= e <= _MAX_EXPONENT:
        raise InvalidKey("RSA public exponent is out of range")
    return asym_rsa.RSAPublicNumbers(e, n)


def rsa_public_key(rsa: Rsa) -> asym_rsa.RSAPublicKey:
    """Build a public key from an RSA JWK."""
    numbers = _public_numbers(rsa)
    try:
        return numbers.public_key()
    except ValueError as exc:
        raise InvalidKey() from exc


def rsa_private_key(rsa: Rsa) -> asym_rsa.RSAPrivateKey:
    """Build a private key from an RSA JWK.

    The JWK must hold its prime factors; keys with more than two primes are
    not supported. The CRT values are recomputed from the primes.
    """
    if rsa.prv is None:
        raise NotPrivate()
    opt = rsa.prv.opt
    if opt is None:
        raise Unsupported("RSA private key without prime factors")
    if opt.oth:
        raise Unsupported("multi-prime RSA keys are not supported")

    public = asym_rsa.RSAPublicNumbers(_to_int(rsa.e), _to_int(rsa.n))
    d = _to_int(rsa.prv.d)
    p = _to_int(opt.p)
    q = _to_int(opt.q)
    try:
        numbers = asym_rsa.RSAPrivateNumbers(
            p=p,
            q=q,
            d=d,
            dmp1=asym_rsa.rsa_crt_dmp1(d, p),
            dmq1=asym_rsa.rsa_crt_dmq1(d, q),
            iqmp=asym_rsa.rsa_crt_iqmp(p, q),
            public_numbers=public,
        )
        return numbers.private_key()
    except (ValueError, ZeroDivisionError) as exc:
        raise InvalidKey() from exc


def rsa_from_public_key(key) -> Rsa:
    """Return the RSA JWK material for a public key."""
    if not isinstance(key, asym_rsa.RSAPublicKey):
        raise TypeError(f"not an RSA public key: {type(key).__name__}")
    numbers = key.public_numbers()
    return Rsa(n=_to_bytes(numbers.n), e=_to_bytes(numbers.e))


def rsa_from_private_key(key) -> Rsa:
    """Return the RSA JWK material for a private key.

    Only the private exponent is exported; the optional prime factors and
    CRT values are left out.
    """
    if not isinstance(key, asym_rsa.RSAPrivateKey):
        raise TypeError(f"not an RSA private key: {type(key).__name__}")
    numbers = key.private_numbers()
    public = numbers.public_numbers
    return Rsa(
        n=_to_bytes(public.n),
        e=_to_bytes(public.e),
        prv=RsaPrivate(d=_to_bytes(numbers.d)),
    )