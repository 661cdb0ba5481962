"""Fully parsed keys, ready for cryptographic use.

A JWK is only half parsed: it mirrors the data on the wire. A
:class:`CryptoKey` holds either raw symmetric key bytes or a parsed
``cryptography`` key object. It converts to and from JWK key material.
"""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives.asymmetric import ec as asym_ec
from cryptography.hazmat.primitives.asymmetric import rsa as asym_rsa

from . import keyinfo
from .ecconv import ec_from_private_key, ec_from_public_key, ec_private_key, ec_public_key
from .errors import Unsupported
from .jwk import Ec, EcCurves, Oct, Okp, Rsa
from .rsaconv import rsa_from_private_key, rsa_from_public_key, rsa_private_key, rsa_public_key
from .serde import Secret

_BYTES_LIKE = (bytes, bytearray, memoryview)
_RSA_TYPES = (asym_rsa.RSAPublicKey, asym_rsa.RSAPrivateKey)
_EC_TYPES = (asym_ec.EllipticCurvePublicKey, asym_ec.EllipticCurvePrivateKey)
_PRIVATE_TYPES = (asym_rsa.RSAPrivateKey, asym_ec.EllipticCurvePrivateKey)
_NATIVE_CURVES = frozenset({"secp256r1", "secp384r1"})
_JWK_CURVES = frozenset({EcCurves.P256, EcCurves.P384})


class Kind(Enum):
    """Whether a key is public or holds secret material."""

    PUBLIC = "public"
    SECRET = "secret"


class CryptoKey:
    """A symmetric, RSA, P-256 or P-384 key usable for cryptography.

    ``material`` is either symmetric key bytes or a ``cryptography`` RSA or
    elliptic-curve (P-256 or P-384) key object, public or private.
    """

    __slots__ = ("_material",)

    def __init__(self, material) -> None:
        if isinstance(material, _BYTES_LIKE):
            material = Secret(bytes(material))
        elif isinstance(material, _EC_TYPES):
            name = material.curve.name
            if name not in _NATIVE_CURVES:
                raise Unsupported(f"unsupported curve: {name}")
        elif not isinstance(material, _RSA_TYPES):
            raise TypeError(f"not usable key material: {type(material).__name__}")
        self._material = material

    @property
    def material(self):
        """The symmetric key bytes or the ``cryptography`` key object."""
        return self._material

    @classmethod
    def from_jwk_key(cls, key) -> "CryptoKey":
        """Parse JWK key material (``Oct``, ``Rsa`` or ``Ec``).

        Keys holding private material become private keys. OKP keys and
        curves other than P-256 and P-384 raise :class:`Unsupported`.
        """
        if isinstance(key, Oct):
            return cls(key.k)
        if isinstance(key, Rsa):
            return cls(rsa_public_key(key) if key.prv is None else rsa_private_key(key))
        if isinstance(key, Ec):
            if key.crv not in _JWK_CURVES:
                raise Unsupported(f"unsupported curve: {key.crv.value}")
            return cls(ec_public_key(key) if key.d is None else ec_private_key(key))
        if isinstance(key, Okp):
            raise Unsupported("OKP keys are not supported")
        raise TypeError(f"not key material: {type(key).__name__}")

    def to_jwk_key(self):
        """Return the JWK key material for this key."""
        material = self._material
        if isinstance(material, Secret):
            return Oct(k=bytes(material))
        if isinstance(material, asym_rsa.RSAPrivateKey):
            return rsa_from_private_key(material)
        if isinstance(material, asym_rsa.RSAPublicKey):
            return rsa_from_public_key(material)
        if isinstance(material, asym_ec.EllipticCurvePrivateKey):
            return ec_from_private_key(material)
        return ec_from_public_key(material)

    def kind(self) -> Kind:
        """Return whether the key is public or secret."""
        if isinstance(self._material, (Secret, *_PRIVATE_TYPES)):
            return Kind.SECRET
        return Kind.PUBLIC

    def strength(self) -> int:
        """Return the strength in bytes of an equivalent symmetric key."""
        return keyinfo.strength(self._material)

    def is_supported(self, algo) -> bool:
        """Tell whether the key can be used with the algorithm ``algo``."""
        return keyinfo.is_supported(self._material, algo)

    def __repr__(self) -> str:
        if isinstance(self._material, Secret):
            return "CryptoKey(Secret(***))"
        return f"CryptoKey({type(self._material).__name__}, {self.kind().value})"