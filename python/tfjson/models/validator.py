"""
tfjson/models/validator.py

Helpers that bridge pydantic validation and tfjson's DecodeError:

 - validate_type: validate an untyped Value against any pydantic-compatible type.
 - decode_error_from_validation: turn a pydantic ValidationError into the first
   DecodeError it describes, with a dotted field path.
 - join_path: build dotted paths such as "resources[0].expressions.ami".
"""

from typing import Any, Sequence, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from tfjson.errors import DecodeError

T = TypeVar("T")


def join_path(prefix: str, *parts: Union[str, int]) -> str:
    """Append field names and list indices to a dotted path.

    Args:
        prefix: Existing path, possibly empty.
        *parts: Field names (str), list indices (int), or already-built
            sub-paths (str starting with "[" are appended without a dot).

    Returns:
        The combined path.
    """
    path = prefix
    for part in parts:
        if isinstance(part, int):
            path = f"{path}[{part}]"
        elif not part:
            continue
        elif not path or part.startswith("["):
            path = f"{path}{part}"
        else:
            path = f"{path}.{part}"
    return path


def _loc_path(loc: Sequence[Union[str, int]]) -> str:
    return join_path("", *loc)


def decode_error_from_validation(exc: ValidationError, prefix: str = "") -> DecodeError:
    """Convert the first error in a ValidationError into a DecodeError.

    If the failure was itself raised as a DecodeError inside a validator, its
    type (e.g. UnboundedNestingError) and relative path are preserved and
    prefixed with the location pydantic recorded.

    Args:
        exc: The pydantic error to convert.
        prefix: Path of the value that was being validated.

    Returns:
        A DecodeError (or subclass) whose __cause__ should be set by the caller
        with ``raise ... from exc``.
    """
    first = exc.errors()[0]
    location = join_path(prefix, _loc_path(first.get("loc", ())))
    inner = (first.get("ctx") or {}).get("error")
    if isinstance(inner, DecodeError):
        return inner.at(join_path(location, inner.path))
    return DecodeError(location, first["msg"])


def validate_type(obj: Any, expected_type: Type[T]) -> T:
    """
    Validates that a given Value conforms to the expected pydantic-based type.

    Args:
        obj (Any): The object to validate.
        expected_type (Type[T]): The type (pydantic or otherwise) to validate against.

    Returns:
        T: The validated object, cast to the expected type.

    Raises:
        DecodeError: If validation fails.
    """
    try:
        adapter = TypeAdapter(expected_type)
        return adapter.validate_python(obj)
    except ValidationError as e:
        raise decode_error_from_validation(e) from e


__all__ = ["join_path", "decode_error_from_validation", "validate_type"]
