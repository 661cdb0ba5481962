"""JSON Web Keys: key material, key parameters, keys and key sets."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .encoding import Encoding
from .errors import InvalidLength
from .jwa import Signing, parse_algorithm
from .serde import Bytes, Secret


# ---------------------------------------------------------------- helpers


def _bytes_like(value, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"field `{name}` must be bytes, not {type(value).__name__}")


def _as_bytes(value, name: str) -> Bytes:
    return Bytes(_bytes_like(value, name))


def _as_secret(value, name: str) -> Secret:
    return Secret(_bytes_like(value, name))


def _mapping(data, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a mapping, not {type(data).__name__}")
    return data


def _field(data: Mapping, name: str):
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _text(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"field `{name}` must be a string, not {type(value).__name__}")
    return value


def _b64(data: Mapping, name: str, length: int | None = None) -> Bytes:
    return Bytes.parse(_text(_field(data, name), name), length=length)


def _b64_secret(data: Mapping, name: str) -> Secret:
    return Secret.parse(_text(_field(data, name), name))


def _enum(enum_type, value, name: str):
    try:
        return enum_type(_text(value, name))
    except ValueError:
        raise ValueError(f"unknown value for `{name}`: {value!r}") from None


# ---------------------------------------------------------------- parameters


class Class(str, Enum):
    """The key class (``use`` in RFC 7517)."""

    ENCRYPTION = "enc"
    SIGNING = "sig"

    def __str__(self) -> str:
        return self.value


class Operations(str, Enum):
    """Key operations (``key_ops`` in RFC 7517), in lexicographical order."""

    DECRYPT = "decrypt"
    DERIVE_BITS = "deriveBits"
    DERIVE_KEY = "deriveKey"
    ENCRYPT = "encrypt"
    SIGN = "sign"
    UNWRAP_KEY = "unwrapKey"
    VERIFY = "verify"
    WRAP_KEY = "wrapKey"

    def __str__(self) -> str:
        return self.value


_OPS_RANK = {op: rank for rank, op in enumerate(Operations)}


@dataclass
class Thumbprint:
    """X.509 certificate thumbprints (SHA-1 and SHA-256)."""

    s1: bytes | None = None
    s256: bytes | None = None

    def __post_init__(self) -> None:
        if self.s1 is not None:
            self.s1 = _as_bytes(self.s1, "x5t")
            if len(self.s1) != 20:
                raise InvalidLength("x5t must be 20 bytes")
        if self.s256 is not None:
            self.s256 = _as_bytes(self.s256, "x5t#S256")
            if len(self.s256) != 32:
                raise InvalidLength("x5t#S256 must be 32 bytes")

    def _to_dict(self) -> dict:
        out = {}
        if self.s1 is not None:
            out["x5t"] = self.s1.encode()
        if self.s256 is not None:
            out["x5t#S256"] = self.s256.encode()
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "Thumbprint":
        return cls(
            s1=_b64(data, "x5t", 20) if "x5t" in data else None,
            s256=_b64(data, "x5t#S256", 32) if "x5t#S256" in data else None,
        )


@dataclass
class Parameters:
    """JWK parameters shared by every kind of key."""

    alg: Signing | None = None
    kid: str | None = None
    cls: Class | None = None
    ops: frozenset | None = None
    x5c: list | None = None
    x5t: Thumbprint = field(default_factory=Thumbprint)

    def __post_init__(self) -> None:
        if self.alg is not None:
            self.alg = parse_algorithm(self.alg)
        if self.kid is not None:
            _text(self.kid, "kid")
        if self.cls is not None:
            self.cls = Class(self.cls)
        if self.ops is not None:
            self.ops = frozenset(Operations(op) for op in self.ops)
        if self.x5c is not None:
            self.x5c = [
                Bytes(_bytes_like(cert, "x5c"), Encoding.BASE64) for cert in self.x5c
            ]

    @classmethod
    def from_algorithm(cls, alg) -> "Parameters":
        """Parameters naming ``alg``, with the class that algorithm implies."""
        algorithm = parse_algorithm(alg)
        return cls(alg=algorithm, cls=Class.SIGNING)

    def to_dict(self) -> dict:
        """Return the JSON object members for these parameters."""
        out: dict = {}
        if self.alg is not None:
            out["alg"] = self.alg.value
        if self.kid is not None:
            out["kid"] = self.kid
        if self.cls is not None:
            out["use"] = self.cls.value
        if self.ops is not None:
            out["key_ops"] = [op.value for op in sorted(self.ops, key=_OPS_RANK.__getitem__)]
        if self.x5c is not None:
            out["x5c"] = [cert.encode() for cert in self.x5c]
        out.update(self.x5t._to_dict())
        return out

    @classmethod
    def from_dict(cls, data) -> "Parameters":
        """Read parameters from a JSON object, ignoring unrelated members."""
        data = _mapping(data, "parameters")

        alg = parse_algorithm(data["alg"]) if "alg" in data else None
        kid = _text(data["kid"], "kid") if "kid" in data else None
        use = _enum(Class, data["use"], "use") if "use" in data else None

        ops = None
        if "key_ops" in data:
            raw_ops = data["key_ops"]
            if not isinstance(raw_ops, list):
                raise TypeError("field `key_ops` must be a list")
            ops = frozenset(_enum(Operations, op, "key_ops") for op in raw_ops)

        x5c = None
        if "x5c" in data:
            raw_certs = data["x5c"]
            if not isinstance(raw_certs, list):
                raise TypeError("field `x5c` must be a list")
            x5c = [Bytes.parse(_text(cert, "x5c"), Encoding.BASE64) for cert in raw_certs]

        return cls(
            alg=alg, kid=kid, cls=use, ops=ops, x5c=x5c, x5t=Thumbprint._from_dict(data)
        )


# ---------------------------------------------------------------- key material


class EcCurves(str, Enum):
    """Elliptic curves."""

    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"
    P256K = "secp256k1"

    def __str__(self) -> str:
        return self.value


@dataclass
class Ec:
    """An elliptic-curve key."""

    _KTY: ClassVar[str] = "EC"

    crv: EcCurves
    x: bytes
    y: bytes
    d: bytes | None = None

    def __post_init__(self) -> None:
        self.crv = EcCurves(self.crv)
        self.x = _as_bytes(self.x, "x")
        self.y = _as_bytes(self.y, "y")
        if self.d is not None:
            self.d = _as_secret(self.d, "d")

    def _to_dict(self) -> dict:
        out = {"crv": self.crv.value, "x": self.x.encode(), "y": self.y.encode()}
        if self.d is not None:
            out["d"] = self.d.encode()
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "Ec":
        return cls(
            crv=_enum(EcCurves, _field(data, "crv"), "crv"),
            x=_b64(data, "x"),
            y=_b64(data, "y"),
            d=_b64_secret(data, "d") if "d" in data else None,
        )


class OkpCurves(str, Enum):
    """CFRG curves."""

    ED25519 = "Ed25519"
    ED448 = "Ed448"
    X25519 = "X25519"
    X448 = "X448"

    def __str__(self) -> str:
        return self.value


@dataclass
class Okp:
    """A CFRG-curve key."""

    _KTY: ClassVar[str] = "OKP"

    crv: OkpCurves
    x: bytes
    d: bytes | None = None

    def __post_init__(self) -> None:
        self.crv = OkpCurves(self.crv)
        self.x = _as_bytes(self.x, "x")
        if self.d is not None:
            self.d = _as_secret(self.d, "d")

    def _to_dict(self) -> dict:
        out = {"crv": self.crv.value, "x": self.x.encode()}
        if self.d is not None:
            out["d"] = self.d.encode()
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "Okp":
        return cls(
            crv=_enum(OkpCurves, _field(data, "crv"), "crv"),
            x=_b64(data, "x"),
            d=_b64_secret(data, "d") if "d" in data else None,
        )


@dataclass
class Oct:
    """A symmetric key."""

    _KTY: ClassVar[str] = "oct"

    k: bytes

    def __post_init__(self) -> None:
        self.k = _as_secret(self.k, "k")

    def _to_dict(self) -> dict:
        return {"k": self.k.encode()}

    @classmethod
    def _from_dict(cls, data: Mapping) -> "Oct":
        return cls(k=_b64_secret(data, "k"))


@dataclass
class RsaOtherPrimes:
    """An additional RSA prime with its CRT values."""

    r: bytes
    d: bytes
    t: bytes

    def __post_init__(self) -> None:
        self.r = _as_secret(self.r, "r")
        self.d = _as_secret(self.d, "d")
        self.t = _as_secret(self.t, "t")

    def _to_dict(self) -> dict:
        return {"r": self.r.encode(), "d": self.d.encode(), "t": self.t.encode()}

    @classmethod
    def _from_dict(cls, data) -> "RsaOtherPrimes":
        data = _mapping(data, "oth entry")
        return cls(
            r=_b64_secret(data, "r"), d=_b64_secret(data, "d"), t=_b64_secret(data, "t")
        )


_RSA_OPTIONAL_FIELDS = ("p", "q", "dp", "dq", "qi")


@dataclass
class RsaOptional:
    """Optional RSA private key material (primes and CRT values)."""

    p: bytes
    q: bytes
    dp: bytes
    dq: bytes
    qi: bytes
    oth: list = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in _RSA_OPTIONAL_FIELDS:
            setattr(self, name, _as_secret(getattr(self, name), name))
        self.oth = [
            prime if isinstance(prime, RsaOtherPrimes) else RsaOtherPrimes(*prime)
            for prime in self.oth
        ]

    def _to_dict(self) -> dict:
        out = {name: getattr(self, name).encode() for name in _RSA_OPTIONAL_FIELDS}
        if self.oth:
            out["oth"] = [prime._to_dict() for prime in self.oth]
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "RsaOptional | None":
        if not all(name in data for name in _RSA_OPTIONAL_FIELDS):
            return None
        oth = data.get("oth", [])
        if not isinstance(oth, list):
            raise TypeError("field `oth` must be a list")
        return cls(
            **{name: _b64_secret(data, name) for name in _RSA_OPTIONAL_FIELDS},
            oth=[RsaOtherPrimes._from_dict(prime) for prime in oth],
        )


@dataclass
class RsaPrivate:
    """RSA private key material."""

    d: bytes
    opt: RsaOptional | None = None

    def __post_init__(self) -> None:
        self.d = _as_secret(self.d, "d")

    def _to_dict(self) -> dict:
        out = {"d": self.d.encode()}
        if self.opt is not None:
            out.update(self.opt._to_dict())
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "RsaPrivate | None":
        if "d" not in data:
            return None
        return cls(d=_b64_secret(data, "d"), opt=RsaOptional._from_dict(data))


@dataclass
class Rsa:
    """An RSA key."""

    _KTY: ClassVar[str] = "RSA"

    n: bytes
    e: bytes
    prv: RsaPrivate | None = None

    def __post_init__(self) -> None:
        self.n = _as_bytes(self.n, "n")
        self.e = _as_bytes(self.e, "e")

    def _to_dict(self) -> dict:
        out = {"n": self.n.encode(), "e": self.e.encode()}
        if self.prv is not None:
            out.update(self.prv._to_dict())
        return out

    @classmethod
    def _from_dict(cls, data: Mapping) -> "Rsa":
        return cls(n=_b64(data, "n"), e=_b64(data, "e"), prv=RsaPrivate._from_dict(data))


Key = Union[Ec, Rsa, Oct, Okp]

_KEY_TYPES = {kind._KTY: kind for kind in (Ec, Rsa, Oct, Okp)}


def key_to_dict(key) -> dict:
    """Return the JSON object members (including ``kty``) for key material."""
    if not isinstance(key, (Ec, Rsa, Oct, Okp)):
        raise TypeError(f"not key material: {type(key).__name__}")
    return {"kty": key._KTY, **key._to_dict()}


def key_from_dict(data):
    """Read key material from a JSON object, dispatching on ``kty``."""
    data = _mapping(data, "key")
    kty = _text(_field(data, "kty"), "kty")
    try:
        kind = _KEY_TYPES[kty]
    except KeyError:
        raise ValueError(f"unknown key type: {kty!r}") from None
    return kind._from_dict(data)


# ---------------------------------------------------------------- keys and sets


@dataclass
class Jwk:
    """A JSON Web Key: key material together with its parameters."""

    key: Key
    prm: Parameters = field(default_factory=Parameters)

    def to_dict(self) -> dict:
        """Return the JSON object for this key."""
        return {**key_to_dict(self.key), **self.prm.to_dict()}

    @classmethod
    def from_dict(cls, data) -> "Jwk":
        """Read a key from a JSON object."""
        return cls(key=key_from_dict(data), prm=Parameters.from_dict(data))


@dataclass
class JwkSet:
    """A set of JSON Web Keys."""

    keys: list = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON object for this set."""
        return {"keys": [jwk.to_dict() for jwk in self.keys]}

    @classmethod
    def from_dict(cls, data) -> "JwkSet":
        """Read a key set from a JSON object."""
        data = _mapping(data, "key set")
        keys = _field(data, "keys")
        if not isinstance(keys, list):
            raise TypeError("field `keys` must be a list")
        return cls(keys=[Jwk.from_dict(entry) for entry in keys])