"""Key strength and algorithm support for key material of every kind.

Keys may be JWKs and their material (``Jwk``, ``Ec``, ``Rsa``, ``Oct``,
``Okp``), raw symmetric key bytes, or parsed ``cryptography`` key objects
(RSA keys and P-256/P-384 elliptic-curve keys).

Strength is measured in bytes of an equivalent symmetric key: a P-256 key,
for instance, has a strength of 16.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric import ec as asym_ec
from cryptography.hazmat.primitives.asymmetric import rsa as asym_rsa

from .errors import Unsupported
from .jwa import Signing, parse_algorithm
from .jwk import Ec, EcCurves, Jwk, Oct, Okp, OkpCurves, Rsa

_BYTES_LIKE = (bytes, bytearray, memoryview)

_EC_STRENGTH = {
    EcCurves.P256: 16,
    EcCurves.P256K: 16,
    EcCurves.P384: 24,
    EcCurves.P521: 32,
}

_EC_ALGORITHM = {
    EcCurves.P256: Signing.ES256,
    EcCurves.P256K: Signing.ES256K,
    EcCurves.P384: Signing.ES384,
    EcCurves.P521: Signing.ES512,
}

_OKP_STRENGTH = {
    OkpCurves.ED25519: 16,
    OkpCurves.ED448: 24,
    OkpCurves.X25519: 16,
    OkpCurves.X448: 24,
}

_HMAC_MINIMUM = {
    Signing.HS256: 16,
    Signing.HS384: 24,
    Signing.HS512: 32,
}

_RSA_MINIMUM = {
    Signing.RS256: 16,
    Signing.RS384: 24,
    Signing.RS512: 32,
    Signing.PS256: 16,
    Signing.PS384: 24,
    Signing.PS512: 32,
}

_NATIVE_EC = {
    "secp256r1": (16, Signing.ES256),
    "secp384r1": (24, Signing.ES384),
}

_NATIVE_EC_TYPES = (asym_ec.EllipticCurvePublicKey, asym_ec.EllipticCurvePrivateKey)
_NATIVE_RSA_TYPES = (asym_rsa.RSAPublicKey, asym_rsa.RSAPrivateKey)


def _native_ec(key) -> tuple[int, Signing]:
    name = key.curve.name
    try:
        return _NATIVE_EC[name]
    except KeyError:
        raise Unsupported(f"unsupported curve: {name}") from None


def _meets(minimums: dict, algo: Signing, level: int) -> bool:
    minimum = minimums.get(algo)
    return minimum is not None and level >= minimum


def _unknown(key) -> TypeError:
    return TypeError(f"not a key: {type(key).__name__}")


def strength(key) -> int:
    """Return the strength of ``key`` in bytes of an equivalent symmetric key."""
    if isinstance(key, Jwk):
        return strength(key.key)
    if isinstance(key, _BYTES_LIKE):
        return memoryview(key).nbytes
    if isinstance(key, Oct):
        return len(key.k)
    if isinstance(key, Ec):
        return _EC_STRENGTH[key.crv]
    if isinstance(key, Okp):
        return _OKP_STRENGTH[key.crv]
    if isinstance(key, Rsa):
        return len(key.n) // 16
    if isinstance(key, _NATIVE_RSA_TYPES):
        return (key.key_size + 7) // 8 // 16
    if isinstance(key, _NATIVE_EC_TYPES):
        return _native_ec(key)[0]
    raise _unknown(key)


def is_supported(key, algo) -> bool:
    """Tell whether ``key`` can be used with the algorithm ``algo``.

    ``algo`` is a :class:`~jwkit.jwa.Signing` or its JOSE name. A JWK that
    names an algorithm supports only that one.
    """
    algo = parse_algorithm(algo)

    if isinstance(key, Jwk):
        if not is_supported(key.key, algo):
            return False
        return key.prm.alg is None or key.prm.alg == algo
    if isinstance(key, (Oct, *_BYTES_LIKE)):
        return _meets(_HMAC_MINIMUM, algo, strength(key))
    if isinstance(key, Ec):
        return _EC_ALGORITHM[key.crv] == algo
    if isinstance(key, Okp):
        return algo == Signing.EDDSA
    if isinstance(key, asym_rsa.RSAPublicKey):
        # RFC 7518 examples use small keys, so every RSA algorithm is
        # accepted for a public key once it reaches the minimum size.
        return strength(key) >= 16 and algo in _RSA_MINIMUM
    if isinstance(key, (Rsa, asym_rsa.RSAPrivateKey)):
        return _meets(_RSA_MINIMUM, algo, strength(key))
    if isinstance(key, _NATIVE_EC_TYPES):
        return _native_ec(key)[1] == algo
    raise _unknown(key)