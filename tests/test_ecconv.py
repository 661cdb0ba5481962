import pytest
from cryptography.hazmat.primitives.asymmetric import ec as asym_ec

from jwkit.ecconv import (
    ec_from_private_key,
    ec_from_public_key,
    ec_private_key,
    ec_public_key,
)
from jwkit.errors import AlgMismatch, InvalidKey, NotPrivate, Unsupported
from jwkit.jwk import Ec, EcCurves, key_from_dict

X_B64 = "MKBCTNIcKUSDii11ySs3526iDZ8AiTo7Tu6KPAqv7D4"
Y_B64 = "4Etl6SRW2YiLUrN5vfvVHuhp7x8PxltmWWlbbM4IFyM"
D_B64 = "870MB6gfuTJ4HtUnUvYMyJpr5eUZNP4Bk43bVdj3eAE"

X_BYTES = bytes(
    [
        48, 160, 66, 76, 210, 28, 41, 68, 131, 138, 45, 117, 201, 43, 55, 231,
        110, 162, 13, 159, 0, 137, 58, 59, 78, 238, 138, 60, 10, 175, 236, 62,
    ]
)
Y_BYTES = bytes(
    [
        224, 75, 101, 233, 36, 86, 217, 136, 139, 82, 179, 121, 189, 251, 213,
        30, 232, 105, 239, 31, 15, 198, 91, 102, 89, 105, 91, 108, 206, 8, 23,
        35,
    ]
)
D_BYTES = bytes(
    [
        243, 189, 12, 7, 168, 31, 185, 50, 120, 30, 213, 39, 82, 246, 12,
        200, 154, 107, 229, 229, 25, 52, 254, 1, 147, 141, 219, 85, 216,
        247, 120, 1,
    ]
)


def _public_jwk():
    return key_from_dict({"kty": "EC", "crv": "P-256", "x": X_B64, "y": Y_B64})


def _private_jwk():
    return key_from_dict(
        {"kty": "EC", "crv": "P-256", "x": X_B64, "y": Y_B64, "d": D_B64}
    )


def test_rfc7517_a1_public_round_trip():
    key = _public_jwk()
    public = ec_public_key(key)
    assert public.curve.name == "secp256r1"
    assert public.public_numbers().x == int.from_bytes(X_BYTES, "big")
    assert public.public_numbers().y == int.from_bytes(Y_BYTES, "big")
    back = ec_from_public_key(public)
    assert back == key
    assert back.x == X_BYTES
    assert back.d is None


def test_rfc7517_a2_private_round_trip():
    key = _private_jwk()
    private = ec_private_key(key)
    assert private.private_numbers().private_value == int.from_bytes(D_BYTES, "big")
    back = ec_from_private_key(private)
    assert back == key
    assert back.d == D_BYTES


def test_explicit_matching_curve():
    key = _public_jwk()
    assert ec_from_public_key(ec_public_key(key, EcCurves.P256)) == key


def test_curve_mismatch():
    with pytest.raises(AlgMismatch):
        ec_public_key(_public_jwk(), EcCurves.P384)
    with pytest.raises(AlgMismatch):
        ec_private_key(_private_jwk(), EcCurves.P384)


def test_unsupported_curve():
    key = Ec(crv=EcCurves.P521, x=bytes(66), y=bytes(66))
    with pytest.raises(Unsupported):
        ec_public_key(key)
    with pytest.raises(Unsupported):
        ec_private_key(_private_jwk(), EcCurves.P256K)


def test_wrong_coordinate_length():
    key = Ec(crv=EcCurves.P384, x=X_BYTES, y=Y_BYTES)
    with pytest.raises(InvalidKey):
        ec_public_key(key)


def test_point_not_on_curve():
    tampered = bytearray(Y_BYTES)
    tampered[-1] ^= 1
    key = Ec(crv=EcCurves.P256, x=X_BYTES, y=bytes(tampered))
    with pytest.raises(InvalidKey):
        ec_public_key(key)


def test_private_key_needs_d():
    with pytest.raises(NotPrivate):
        ec_private_key(_public_jwk())


def test_private_scalar_zero_or_too_long():
    zero = Ec(crv=EcCurves.P256, x=X_BYTES, y=Y_BYTES, d=bytes(32))
    with pytest.raises(InvalidKey):
        ec_private_key(zero)
    long = Ec(crv=EcCurves.P256, x=X_BYTES, y=Y_BYTES, d=b"\x01" + D_BYTES)
    with pytest.raises(InvalidKey):
        ec_private_key(long)


def test_generated_p384_round_trip():
    private = asym_ec.generate_private_key(asym_ec.SECP384R1())
    key = ec_from_private_key(private)
    assert key.crv == EcCurves.P384
    again = ec_private_key(key)
    assert again.private_numbers() == private.private_numbers()
    public = ec_from_public_key(private.public_key())
    assert (public.x, public.y, public.d) == (key.x, key.y, None)


def test_native_unsupported_curve():
    private = asym_ec.generate_private_key(asym_ec.SECP521R1())
    with pytest.raises(Unsupported):
        ec_from_private_key(private)
    with pytest.raises(Unsupported):
        ec_from_public_key(private.public_key())


def test_wrong_native_type():
    private = asym_ec.generate_private_key(asym_ec.SECP256R1())
    with pytest.raises(TypeError):
        ec_from_public_key(private)
    with pytest.raises(TypeError):
        ec_from_private_key(private.public_key())