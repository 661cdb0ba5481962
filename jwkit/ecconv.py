"""Conversion between elliptic-curve JWKs and ``cryptography`` key objects.

Only the P-256 and P-384 curves are converted.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import ec as asym_ec

from .errors import AlgMismatch, InvalidKey, NotPrivate, Unsupported
from .jwk import Ec, EcCurves


@dataclass(frozen=True)
class _Curve:
    size: int
    order: int
    native: type


_CURVES = {
    EcCurves.P256: _Curve(
        32,
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
        asym_ec.SECP256R1,
    ),
    EcCurves.P384: _Curve(
        48,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF581A0DB248B0A77AECEC196ACCC52973,
        asym_ec.SECP384R1,
    ),
}

_BY_NAME = {
    "secp256r1": EcCurves.P256,
    "secp384r1": EcCurves.P384,
}


def _resolve(ec: Ec, curve) -> _Curve:
    target = ec.crv if curve is None else EcCurves(curve)
    info = _CURVES.get(target)
    if info is None:
        raise Unsupported(f"unsupported curve: {target.value}")
    if ec.crv != target:
        raise AlgMismatch(f"key curve {ec.crv.value} is not {target.value}")
    return info


def _curve_of(key) -> tuple[EcCurves, _Curve]:
    name = key.curve.name
    try:
        crv = _BY_NAME[name]
    except KeyError:
        raise Unsupported(f"unsupported curve: {name}") from None
    return crv, _CURVES[crv]


def ec_public_key(ec: Ec, curve=None) -> asym_ec.EllipticCurvePublicKey:
    """Build a public key from an EC JWK on ``curve`` (by default its own)."""
    info = _resolve(ec, curve)
    if len(ec.x) != info.size or len(ec.y) != info.size:
        raise InvalidKey("coordinate has the wrong length")
    numbers = asym_ec.EllipticCurvePublicNumbers(
        int.from_bytes(ec.x, "big"), int.from_bytes(ec.y, "big"), info.native()
    )
    try:
        return numbers.public_key()
    except ValueError as exc:
        raise InvalidKey("point is not on the curve") from exc


def ec_private_key(ec: Ec, curve=None) -> asym_ec.EllipticCurvePrivateKey:
    """Build a private key from an EC JWK on ``curve`` (by default its own)."""
    info = _resolve(ec, curve)
    if ec.d is None:
        raise NotPrivate()
    if not 0 < len(ec.d) <= info.size:
        raise InvalidKey("private scalar has the wrong length")
    scalar = int.from_bytes(ec.d, "big")
    if not 0 < scalar < info.order:
        raise InvalidKey("private scalar is out of range")
    try:
        return asym_ec.derive_private_key(scalar, info.native())
    except ValueError as exc:
        raise InvalidKey() from exc


def ec_from_public_key(key) -> Ec:
    """Return the EC JWK material for a public key."""
    if not isinstance(key, asym_ec.EllipticCurvePublicKey):
        raise TypeError(f"not an elliptic-curve public key: {type(key).__name__}")
    crv, info = _curve_of(key)
    numbers = key.public_numbers()
    return Ec(
        crv=crv,
        x=numbers.x.to_bytes(info.size, "big"),
        y=numbers.y.to_bytes(info.size, "big"),
    )


def ec_from_private_key(key) -> Ec:
    """Return the EC JWK material, including ``d``, for a private key."""
    if not isinstance(key, asym_ec.EllipticCurvePrivateKey):
        raise TypeError(f"not an elliptic-curve private key: {type(key).__name__}")
    crv, info = _curve_of(key)
    public = ec_from_public_key(key.public_key())
    scalar = key.private_numbers().private_value
    return Ec(crv=crv, x=public.x, y=public.y, d=scalar.to_bytes(info.size, "big"))