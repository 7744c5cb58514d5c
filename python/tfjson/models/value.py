"""
tfjson/models/value.py

The untyped value model used wherever the document format admits "any value":
state attribute values, variable defaults, output values, change before/after
objects and constant expression values.

A Value is a pydantic JsonValue (None, bool, int, float, str, a list of Values,
or a dict mapping str to Value) whose numbers all fit in a double. Literals that
overflow to infinity on parse are rejected with a DecodeError.

Precision contract:
  - Integers decode to Python int and are exact at any magnitude.
  - Fractional numbers decode to IEEE-754 doubles and re-encode with the shortest
    representation that parses back to the same double, so decoding an encoded
    Value always yields an equal Value.
  - 1 and 1.0 keep distinct wire representations but compare equal under
    values_equal (numeric equality). Booleans never compare equal to numbers.
"""

from __future__ import annotations

import json
import math
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import AfterValidator, JsonValue, TypeAdapter, ValidationError

from tfjson.errors import DecodeError
from tfjson.models.validator import decode_error_from_validation, join_path


def _check_finite(value: Any, path: str = "") -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise DecodeError(path, f"number {value!r} is out of range for a double")
    if isinstance(value, list):
        for index, item in enumerate(value):
            _check_finite(item, join_path(path, index))
    elif isinstance(value, dict):
        for key, item in value.items():
            _check_finite(item, join_path(path, key))


def ensure_finite(value: Any) -> Any:
    """Reject values holding numbers that overflowed to infinity on parse."""
    _check_finite(value)
    return value


# Any JSON value whose numbers all fit in a double.
Value = Annotated[JsonValue, AfterValidator(ensure_finite)]

_VALUE_ADAPTER: TypeAdapter[Any] = TypeAdapter(Value)


class ValueKind(str, Enum):
    """Shape of a Value."""

    null = "null"
    bool = "bool"
    number = "number"
    string = "string"
    list = "list"
    object = "object"


def value_kind(value: object) -> ValueKind:
    """Classify a Python object as one of the Value shapes.

    Raises:
        TypeError: If the object is not JSON-compatible at the top level.
    """
    if value is None:
        return ValueKind.null
    # bool is a subclass of int, so it must be tested first.
    if isinstance(value, bool):
        return ValueKind.bool
    if isinstance(value, (int, float)):
        return ValueKind.number
    if isinstance(value, str):
        return ValueKind.string
    if isinstance(value, list):
        return ValueKind.list
    if isinstance(value, dict):
        return ValueKind.object
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def decode_value(raw: Union[str, bytes], path: str = "") -> Value:
    """Parse JSON text into a Value.

    Args:
        raw: JSON text or UTF-8 bytes.
        path: Field location reported if decoding fails.

    Returns:
        The decoded Value.

    Raises:
        DecodeError: If the input is not valid JSON or holds a number
            outside the range of a double.
    """
    try:
        return _VALUE_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise decode_error_from_validation(exc, path) from exc


def encode_value(value: Value) -> str:
    """Serialize a Value to canonical JSON text.

    Mapping keys are sorted and separators are compact, so the same logical
    value always produces the same text.

    Raises:
        ValueError: If the value contains NaN or infinity.
        TypeError: If the value contains non-JSON objects.
    """
    return json.dumps(
        value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def values_equal(left: Value, right: Value) -> bool:
    """Compare two Values recursively by shape and content.

    Mappings compare independently of key order; sequences compare in order.
    Booleans only equal booleans.
    """
    if value_kind(left) is not value_kind(right):
        return False

    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )

    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            values_equal(left[key], right[key]) for key in left
        )

    return left == right


__all__ = [
    "Value",
    "ensure_finite",
    "ValueKind",
    "value_kind",
    "decode_value",
    "encode_value",
    "values_equal",
]
