from __future__ import annotations

import pytest

from arff_loader.arff.errors import DataSizeMismatchError, InvalidValueError, MissingValueError
from arff_loader.arff.materialize import materialize_value, parse_data_line
from arff_loader.models.headers import Headers
from arff_loader.models.types import Nominal, Numeric, RepresentationKind


@pytest.fixture()
def headers() -> Headers:
    return Headers([("size", Numeric()), ("colour", Nominal(("a", "b", "c")))])


@pytest.mark.parametrize(
    "token,expected",
    [
        ("1", 1.0),
        ("-2.5", -2.5),
        ("+3", 3.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("6.02E-2", 0.0602),
    ],
)
def test_numeric_values(headers: Headers, token: str, expected: float):
    assert materialize_value(token, headers[0]) == (expected,)


@pytest.mark.parametrize("token", ["abc", "1.2.3", "nan", "inf", "0x10", "", "1,5", "1e999"])
def test_invalid_numeric_values(headers: Headers, token: str):
    with pytest.raises(InvalidValueError) as e:
        materialize_value(token, headers[0])
    assert e.value.attribute == "size"
    assert e.value.error_type == "INVALID_VALUE"


@pytest.mark.parametrize("token", ["1e999", "-1e999"])
def test_overflowing_numeric_is_out_of_range(headers: Headers, token: str):
    with pytest.raises(InvalidValueError, match="number out of range") as e:
        materialize_value(token, headers[0])
    assert e.value.value == token


def test_nominal_value_has_every_representation(headers: Headers):
    assert materialize_value("b", headers[1]) == ((0, 1, 0), "b", 1, 1)


def test_nominal_value_is_case_sensitive(headers: Headers):
    with pytest.raises(InvalidValueError):
        materialize_value("B", headers[1])


def test_undeclared_nominal_value(headers: Headers):
    with pytest.raises(InvalidValueError) as e:
        materialize_value("purple", headers[1])
    assert e.value.value == "purple"
    assert "colour" in str(e.value)


def test_missing_values(headers: Headers):
    assert materialize_value("?", headers[0]) == (None,)
    assert materialize_value("?", headers[1]) == (None, None, None, None)


def test_parse_data_line(headers: Headers):
    row = parse_data_line("2.5, 'c'", headers)
    assert row.headers is headers
    assert row.get_value(headers[0].canonical) == 2.5
    colour = headers[1]
    assert row.get_value(colour.canonical) == (0, 0, 1)
    assert row.get_value(colour.representation(RepresentationKind.LABEL)) == "c"
    assert row.get_value(colour.representation(RepresentationKind.INDEX)) == 2
    assert row.get_value(colour.representation(RepresentationKind.ENTROPIC)) == 2


def test_parse_data_line_with_missing(headers: Headers):
    row = parse_data_line("?,a", headers)
    assert row.is_missing(headers[0].canonical)
    with pytest.raises(MissingValueError) as e:
        row.get_value(headers[0].canonical)
    assert e.value.attribute == "size"


def test_parse_data_line_wrong_width(headers: Headers):
    with pytest.raises(DataSizeMismatchError):
        parse_data_line("1,a,extra", headers)
