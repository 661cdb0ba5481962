import pytest
from cryptography.hazmat.primitives.asymmetric import rsa as asym_rsa

from jwkit.errors import InvalidKey, NotPrivate, Unsupported
from jwkit.jwk import Rsa, RsaOtherPrimes, RsaPrivate, key_from_dict
from jwkit.rsaconv import (
    rsa_from_private_key,
    rsa_from_public_key,
    rsa_private_key,
    rsa_public_key,
)

N_A = (
    "0vx7agoebGcQSuuPiLJXZptN9nndrQmbXEps2aiAFbWhM78LhWx4cbbfAAtVT86zwu1RK7aPFFxuhDR1L6tSoc_"
    "BJECPebWKRXjBZCiFV4n3oknjhMstn64tZ_2W-5JsGY4Hc5n9yBXArwl93lqt7_RN5w6Cf0h4QyQ5v-65YGjQR0_"
    "FDW2QvzqY368QQMicAtaSqzs8KJZgnYb9c7d0zgdAZHzu6qMQvRL5hajrn1n91CbOpbISD08qNLyrdkt-bFTWhAI4"
    "vMQFh6WeZu0fM4lFd2NcRwr3XPksINHaQ-G_xBniIqbw0Ls1jF44-csFCur-kEgU8awapJzKnqDKgw"
)
D_A = (
    "X4cTteJY_gn4FYPsXB8rdXix5vwsg1FLN5E3EaG6RJoVH-HLLKD9M7dx5oo7GURknchnrRweUkC7hT5fJLM0WbFAK"
    "NLWY2vv7B6NqXSzUvxT0_YSfqijwp3RTzlBaCxWp4doFk5N2o8Gy_nHNKroADIkJ46pRUohsXywbReAdYaMwFs9tv8"
    "d_cPVY3i07a3t8MN6TNwm0dSawm9v47UiCl3Sk5ZiG7xojPLu4sbg1U2jx4IBTNBznbJSzFHK66jT8bgkuqsk0Gjsk"
    "DJk19Z4qwjwbsnn4j2WBii3RL-Us2lGVkY8fkFzme1z0HbIkfz0Y6mqnOYtqc0X4jfcKoAC8Q"
)
P_A = (
    "83i-7IvMGXoMXCskv73TKr8637FiO7Z27zv8oj6pbWUQyLPQBQxtPVnwD20R-60eTDmD2ujnMt5PoqMrm8RfmNhVW"
    "DtjjMmCMjOpSXicFHj7XOuVIYQyqVWlWEh6dN36GVZYk93N8Bc9vY41xy8B9RzzOGVQzXvNEvn7O0nVbfs"
)
Q_A = (
    "3dfOR9cuYq-0S-mkFLzgItgMEfFzB2q3hWehMuG0oCuqnb3vobLyumqjVZQO1dIrdwgTnCdpYzBcOfW5r370AFXji"
    "Wft_NGEiovonizhKpo9VVS78TzFgxkIdrecRezsZ-1kYd_s1qDbxtkDEgfAITAG9LUnADun4vIcb6yelxk"
)
DP_A = (
    "G4sPXkc6Ya9y8oJW9_ILj4xuppu0lzi_H7VTkS8xj5SdX3coE0oimYwxIi2emTAue0UOa5dpgFGyBJ4c8tQ2VF402"
    "XRugKDTP8akYhFo5tAA77Qe_NmtuYZc3C3m3I24G2GvR5sSDxUyAN2zq8Lfn9EUms6rY3Ob8YeiKkTiBj0"
)
DQ_A = (
    "s9lAH9fggBsoFR8Oac2R_E2gw282rT2kGOAhvIllETE1efrA6huUUvMfBcMpn8lqeW6vzznYY5SSQF7pMdC_agI3n"
    "G8Ibp1BUb0JUiraRNqUfLhcQb_d9GF4Dh7e74WbRsobRonujTYN1xCaP6TO61jvWrX-L18txXw494Q_cgk"
)
QI_A = (
    "GyM_p6JrXySiz1toFgKbWV-JdI3jQ4ypu9rbMWx3rQJBfmt0FoYzgUIZEVFEcOqwemRN81zoDAaa-Bk0KWNGDjJHZ"
    "DdDmFhW3AN7lI-puxk_mHZGJ11rxyR8O55XLSe3SPmRfKwZI6yU24ZxvQKFYItdldUKGzO6Ia6zTKhAVRU"
)
N_B = (
    "vrjOfz9Ccdgx5nQudyhdoR17V-IubWMeOZCwX_jj0hgAsz2J_pqYW08PLbK_PdiVGKPrqzmDIsLI7sA25VEnHU1uCL"
    "NwBuUiCO11_-7dYbsr4iJmG0Qu2j8DsVyT1azpJC_NG84Ty5KKthuCaPod7iI7w0LK9orSMhBEwwZDCxTWq4aYWAch"
    "c8t-emd9qOvWtVMDC2BXksRngh6X5bUYLy6AyHKvj-nUy1wgzjYQDwHMTplCoLtU-o-8SNnZ1tmRoGE9uJkBLdh5gF"
    "ENabWnU5m1ZqZPdwS-qo-meMvVfJb6jJVWRpl2SUtCnYG2C32qvbWbjZ_jBPD5eunqsIo1vQ"
)

E_BYTES = bytes([1, 0, 1])
N_A_HEAD = bytes([210, 252, 123, 106, 10, 30, 108, 103, 16, 74])
D_A_HEAD = bytes([95, 135, 19, 181, 226, 88, 254, 9, 248, 21])


def _private_dict(**overrides):
    data = {
        "kty": "RSA",
        "n": N_A,
        "e": "AQAB",
        "d": D_A,
        "p": P_A,
        "q": Q_A,
        "dp": DP_A,
        "dq": DQ_A,
        "qi": QI_A,
    }
    data.update(overrides)
    return data


@pytest.fixture(scope="module")
def generated():
    return asym_rsa.generate_private_key(public_exponent=65537, key_size=2048)


def test_rfc7517_a1_public_round_trip():
    key = key_from_dict({"kty": "RSA", "n": N_A, "e": "AQAB"})
    public = rsa_public_key(key)
    assert public.public_numbers().e == int.from_bytes(E_BYTES, "big")
    back = rsa_from_public_key(public)
    assert back == key
    assert back.n[:10] == N_A_HEAD
    assert back.e == E_BYTES


def test_rfc7517_a2_private_round_trip():
    key = key_from_dict(_private_dict())
    private = rsa_private_key(key)
    back = rsa_from_private_key(private)
    assert back.prv.opt is None
    assert back.prv.d[:10] == D_A_HEAD
    back.prv.opt = key.prv.opt
    assert back == key


def test_rfc7517_a2_crt_values_match():
    key = key_from_dict(_private_dict())
    numbers = rsa_private_key(key).private_numbers()
    assert numbers.dmp1 == int.from_bytes(key.prv.opt.dp, "big")
    assert numbers.dmq1 == int.from_bytes(key.prv.opt.dq, "big")
    assert numbers.iqmp == int.from_bytes(key.prv.opt.qi, "big")


def test_rfc7517_b_public_round_trip():
    key = key_from_dict({"kty": "RSA", "n": N_B, "e": "AQAB"})
    assert rsa_from_public_key(rsa_public_key(key)) == key


def test_private_needs_private_material():
    with pytest.raises(NotPrivate):
        rsa_private_key(Rsa(n=bytes([1, 2, 3]), e=E_BYTES))


def test_private_without_primes_unsupported():
    key = key_from_dict({"kty": "RSA", "n": N_A, "e": "AQAB", "d": D_A})
    assert key.prv.opt is None
    with pytest.raises(Unsupported):
        rsa_private_key(key)


def test_multi_prime_unsupported():
    key = key_from_dict(_private_dict())
    key.prv.opt.oth = [RsaOtherPrimes(r=b"\x03", d=b"\x01", t=b"\x01")]
    with pytest.raises(Unsupported):
        rsa_private_key(key)


def test_inconsistent_primes_rejected():
    key = key_from_dict(_private_dict(p=DP_A))
    with pytest.raises(InvalidKey):
        rsa_private_key(key)


def test_even_exponent_rejected():
    key = key_from_dict({"kty": "RSA", "n": N_A, "e": "Ag"})
    with pytest.raises(InvalidKey):
        rsa_public_key(key)


def test_exponent_out_of_range_rejected():
    huge = ((1 << 33) + 1).to_bytes(5, "big")
    with pytest.raises(InvalidKey):
        rsa_public_key(Rsa(n=key_from_dict({"kty": "RSA", "n": N_A, "e": "AQAB"}).n, e=huge))
    with pytest.raises(InvalidKey):
        rsa_public_key(Rsa(n=key_from_dict({"kty": "RSA", "n": N_A, "e": "AQAB"}).n, e=b"\x01"))


def test_modulus_too_large_rejected():
    with pytest.raises(InvalidKey):
        rsa_public_key(Rsa(n=b"\xff" * 513, e=E_BYTES))


def test_generated_key(generated):
    key = rsa_from_private_key(generated)
    assert len(key.n) > 256 - 8
    assert key.e == E_BYTES
    assert isinstance(key.prv, RsaPrivate)
    assert key.prv.opt is None
    assert len(key.prv.d) > 256 - 8
    public = rsa_public_key(key)
    assert public.public_numbers() == generated.public_key().public_numbers()


def test_generated_key_without_primes_cannot_be_rebuilt(generated):
    with pytest.raises(Unsupported):
        rsa_private_key(rsa_from_private_key(generated))


def test_public_export_of_generated(generated):
    key = rsa_from_public_key(generated.public_key())
    assert key.prv is None
    assert key == Rsa(n=rsa_from_private_key(generated).n, e=E_BYTES)


def test_wrong_native_type(generated):
    with pytest.raises(TypeError):
        rsa_from_public_key(generated)
    with pytest.raises(TypeError):
        rsa_from_private_key(generated.public_key())