# jwkit

JSON Web Key (JWK) data types for Python, with the pieces needed to read, write and use them:

- `jwkit.encoding`: the base64 variants as the `Encoding` enum (`BASE64`, `BASE64_UNPADDED`, `BASE64_URL`, `BASE64_URL_UNPADDED`). Each has `encode` and `decode`. Decoding is strict and rejects non-canonical input.
- `jwkit.stream`: streaming base64 `Encoder` and `Decoder`, and `Optional`, which encodes or passes bytes through. Each of them feeds any object with an `update` method. `Buffer` collects bytes in memory. `Fanout` feeds several targets at once.
- `jwkit.serde`: base64-carried values.
  - `Bytes` is a `bytes` subclass with `parse` and `encode`.
  - `Secret` compares in constant time and shows as `Secret(***)`.
  - `Json` holds base64-encoded JSON and keeps its original bytes.
- `jwkit.jwa`: the signing algorithms (`Signing`) and `parse_algorithm`.
- `jwkit.jwk`: the JWK types.
  - Key material: `Ec`, `Rsa` (with `RsaPrivate`, `RsaOptional`, `RsaOtherPrimes`), `Oct` and `Okp`.
  - Curves: `EcCurves` and `OkpCurves`.
  - `Parameters`, with `Class`, `Operations` and `Thumbprint`.
  - `Jwk` and `JwkSet`, both with `to_dict` and `from_dict`.
  - `key_to_dict` and `key_from_dict` for bare key material.
- `jwkit.keyinfo`: `strength` and `is_supported`.
- `jwkit.ecconv` and `jwkit.rsaconv`: conversion between JWK material and `cryptography` key objects.
- `jwkit.cryptokey`: `CryptoKey`, a fully parsed key, and `Kind`.
- `jwkit.errors`: the exceptions.

## Installation

```
pip install jwkit
```

## Reading and writing a key set

```python
import json
from jwkit.jwk import JwkSet

document = json.loads(text)
keys = JwkSet.from_dict(document)
for jwk in keys.keys:
    print(jwk.prm.kid, type(jwk.key).__name__)

print(json.dumps(keys.to_dict()))
```

`from_dict` ignores members it does not know. `to_dict` writes only the members that are set, and writes `key_ops` in a fixed order.

These errors can come from reading:

- Bad base64 raises `InvalidValue` or `InvalidLength`, both subclasses of `B64Error`.
- A thumbprint of the wrong size raises `InvalidLength`.
- A missing field, an unknown `kty` or an unknown enum value raises `ValueError`.
- A member of the wrong JSON type raises `TypeError`.

## Checking what a key is good for

```python
from jwkit.jwa import Signing
from jwkit.keyinfo import strength, is_supported

jwk = keys.keys[0]
strength(jwk)                      # comparable symmetric key size, in bytes
is_supported(jwk, Signing.RS256)   # or is_supported(jwk, "RS256")
```

Strength is measured in bytes of a comparable symmetric key:

- An EC key on P-256 counts as 16.
- An RSA key counts as its modulus length in bytes divided by 16.
- A symmetric key counts as its length in bytes.

A `Jwk` that names an `alg` supports only that algorithm.

## Using a key with `cryptography`

```python
from jwkit.cryptokey import CryptoKey

key = CryptoKey.from_jwk_key(jwk.key)   # Oct, Rsa, or Ec on P-256 / P-384
print(key.kind(), key.strength())
material = key.material                 # bytes or a cryptography key object
roundtrip = key.to_jwk_key()
```

The lower-level functions are also available:

- `ec_public_key`, `ec_private_key`, `ec_from_public_key` and `ec_from_private_key` in `jwkit.ecconv`.
- `rsa_public_key`, `rsa_private_key`, `rsa_from_public_key` and `rsa_from_private_key` in `jwkit.rsaconv`.

An RSA private key can be built only from a JWK that holds its two prime factors. Keys with extra primes are not supported. When a private RSA key is exported, only `d` is written.

Conversion errors are `InvalidKey`, `NotPrivate`, `AlgMismatch` and `Unsupported`. All four are subclasses of `KeyMaterialError`.

## What it does not do

jwkit describes, checks and converts keys. It does not:

- generate keys;
- sign, verify, encrypt or decrypt;
- read or write JWS or JWE objects.

For those, use the `cryptography` key objects that `CryptoKey` and the conversion functions return.

## Running the tests

```
pip install -e ".[test]"
pytest
```