import json

import pytest

from jwkit.jwa import Signing, parse_algorithm


@pytest.mark.parametrize(
    "name, expected",
    [
        ("EdDSA", Signing.EDDSA),
        ("ES256", Signing.ES256),
        ("ES256K", Signing.ES256K),
        ("ES384", Signing.ES384),
        ("ES512", Signing.ES512),
        ("HS256", Signing.HS256),
        ("HS384", Signing.HS384),
        ("HS512", Signing.HS512),
        ("PS256", Signing.PS256),
        ("PS384", Signing.PS384),
        ("PS512", Signing.PS512),
        ("RS256", Signing.RS256),
        ("RS384", Signing.RS384),
        ("RS512", Signing.RS512),
        ("none", Signing.NULL),
    ],
)
def test_parse_known_names(name, expected):
    assert parse_algorithm(name) is expected
    assert str(expected) == name


def test_every_member_round_trips():
    for alg in Signing:
        assert parse_algorithm(alg.value) is alg


def test_parse_passes_algorithm_through():
    assert parse_algorithm(Signing.HS256) is Signing.HS256


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        parse_algorithm("bogus")


def test_names_are_case_sensitive():
    with pytest.raises(ValueError):
        parse_algorithm("es256")


def test_non_string_raises_type_error():
    with pytest.raises(TypeError):
        parse_algorithm(256)


def test_serializes_as_its_name_in_json():
    alg = parse_algorithm("RS256")
    assert json.loads(json.dumps({"alg": alg})) == {"alg": "RS256"}


def test_null_is_named_none():
    alg = parse_algorithm("none")
    assert alg is Signing.NULL
    assert str(alg) == "none"