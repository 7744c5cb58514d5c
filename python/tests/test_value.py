# tests/test_value.py

from __future__ import annotations

import pytest

from tfjson.errors import DecodeError
from tfjson.models.value import (
    ValueKind,
    decode_value,
    encode_value,
    value_kind,
    values_equal,
)


def test_decode_keeps_integral_and_fractional_numbers_apart() -> None:
    decoded = decode_value('{"count": 3, "ratio": 0.25, "whole": 1.0}')

    assert isinstance(decoded, dict)
    assert decoded["count"] == 3 and isinstance(decoded["count"], int)
    assert decoded["ratio"] == 0.25
    assert isinstance(decoded["whole"], float)
    assert encode_value(decoded) == '{"count":3,"ratio":0.25,"whole":1.0}'


def test_decode_invalid_json_reports_path() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_value("{not json", path="variables.region")

    assert excinfo.value.path == "variables.region"
    assert str(excinfo.value).startswith("variables.region: ")


def test_encode_is_canonical() -> None:
    first = encode_value({"b": [1, 2], "a": {"y": None, "x": "é"}})
    second = encode_value({"a": {"x": "é", "y": None}, "b": [1, 2]})

    assert first == second == '{"a":{"x":"é","y":null},"b":[1,2]}'


def test_encode_rejects_nan() -> None:
    with pytest.raises(ValueError):
        encode_value(float("nan"))


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.null),
        (True, ValueKind.bool),
        (7, ValueKind.number),
        (7.5, ValueKind.number),
        ("s", ValueKind.string),
        ([1], ValueKind.list),
        ({"a": 1}, ValueKind.object),
    ],
)
def test_value_kind(value: object, kind: ValueKind) -> None:
    assert value_kind(value) is kind


def test_value_kind_rejects_non_json() -> None:
    with pytest.raises(TypeError):
        value_kind(object())


def test_mapping_equality_ignores_order() -> None:
    assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})


def test_sequence_equality_respects_order() -> None:
    assert not values_equal([1, 2], [2, 1])
    assert values_equal([1, [2, {"k": "v"}]], [1, [2, {"k": "v"}]])


def test_booleans_never_equal_numbers() -> None:
    assert not values_equal(True, 1)
    assert not values_equal({"enabled": False}, {"enabled": 0})
    assert values_equal(1, 1.0)


def test_mappings_with_different_keys_differ() -> None:
    assert not values_equal({"a": 1}, {"a": 1, "b": None})
    assert not values_equal({"a": 1}, [("a", 1)])


def test_decode_rejects_numbers_beyond_double_range() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_value('{"sizes": [1, 1e400]}', path="values")

    assert excinfo.value.path == "values.sizes[1]"
    assert decode_value("1.7976931348623157e308") == 1.7976931348623157e308
