"""
tfjson/models/expression.py

The Expression model and its wire decoder/encoder.

An Expression is the parsed form of one configuration field. Exactly one of
three shapes holds:

 - constant:      {"constant_value": <any JSON value>}
 - unresolved:    {"references": ["var.foo", ...]}
 - nested blocks: [{"field": <expression>, ...}, ...]

An object with neither member (or a bare null) is an unknown expression.

Dispatch is purely structural. Any JSON array at an expression position is read
as a list of nested blocks and every element must be an object; there is no way
to express an array-valued constant there, because the producer emits nested
blocks with exactly that shape. Field names are never consulted.

Encoding is the exact inverse: members are only emitted when populated, so a
null constant_value or an empty references list are read as absent.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ValidationError,
    ValidationInfo,
    model_serializer,
    model_validator,
)

from tfjson.errors import DecodeError, UnboundedNestingError
from tfjson.models.settings import DEFAULT_MAX_NESTING_DEPTH
from tfjson.models.validator import decode_error_from_validation, join_path
from tfjson.models.value import (
    Value,
    decode_value,
    encode_value,
    value_kind,
    values_equal,
)

CONSTANT_VALUE_KEY = "constant_value"
REFERENCES_KEY = "references"


class ExpressionKind(str, Enum):
    """Which of the mutually exclusive payloads an Expression carries."""

    constant = "constant"
    unresolved = "unresolved"
    nested_blocks = "nested_blocks"
    unknown = "unknown"


class Expression(BaseModel):
    """One configuration field as declared in source configuration.

    Attributes:
        constant_value: The value, when the whole expression is a constant.
        references: Identifiers that made the value unknown at parse time.
        nested_blocks: Repeated sub-blocks, each mapping field name to Expression.
            When set, constant_value and references are always None.
    """

    constant_value: Optional[Value] = None
    references: Optional[List[str]] = None
    nested_blocks: Optional[List[Dict[str, Expression]]] = None

    @model_validator(mode="before")
    @classmethod
    def _from_wire_shape(cls, data: Any, info: ValidationInfo) -> Any:
        """Accept a block list when an Expression is validated from Python data.

        Document fields use ExpressionField instead, which applies the full wire
        decoding rules.
        """
        if data is None:
            return {}
        if isinstance(data, list):
            max_depth = (info.context or {}).get(
                "max_nesting_depth", DEFAULT_MAX_NESTING_DEPTH
            )
            return {"nested_blocks": _blocks_from_wire(data, "", 0, max_depth)}
        if isinstance(data, dict):
            if data.get(REFERENCES_KEY) == []:
                return {k: v for k, v in data.items() if k != REFERENCES_KEY}
            return data
        if isinstance(data, Expression):
            return data
        raise DecodeError(
            "",
            "expected an expression object or a list of nested blocks, "
            f"got {value_kind(data).value}",
        )

    @model_validator(mode="after")
    def _check_exclusive(self) -> Expression:
        populated = [
            name
            for name, present in (
                (CONSTANT_VALUE_KEY, self.constant_value is not None),
                (REFERENCES_KEY, self.references is not None),
                ("nested_blocks", self.nested_blocks is not None),
            )
            if present
        ]
        if len(populated) > 1:
            raise DecodeError(
                "", f"expression payloads are mutually exclusive, got {populated}"
            )
        return self

    @model_serializer(mode="plain")
    def _to_wire(self) -> Any:
        return encode_expression(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return values_equal(encode_expression(self), encode_expression(other))

    @property
    def kind(self) -> ExpressionKind:
        if self.nested_blocks is not None:
            return ExpressionKind.nested_blocks
        if self.references is not None:
            return ExpressionKind.unresolved
        if self.constant_value is not None:
            return ExpressionKind.constant
        return ExpressionKind.unknown

    @property
    def is_known(self) -> bool:
        """True when the expression is a constant or a block list."""
        return self.kind in (ExpressionKind.constant, ExpressionKind.nested_blocks)


def _blocks_from_wire(
    raw: List[Any], path: str, depth: int, max_depth: int
) -> List[Dict[str, Expression]]:
    if depth >= max_depth:
        raise UnboundedNestingError(path, max_depth)

    blocks: List[Dict[str, Expression]] = []
    for index, raw_block in enumerate(raw):
        block_path = join_path(path, index)
        if not isinstance(raw_block, dict):
            raise DecodeError(
                block_path,
                f"nested block must be an object, got {value_kind(raw_block).value}",
            )
        blocks.append(
            {
                name: expression_from_wire(
                    raw_expr, join_path(block_path, name), depth + 1, max_depth
                )
                for name, raw_expr in raw_block.items()
            }
        )
    return blocks


def expression_from_wire(
    raw: Any,
    path: str = "",
    depth: int = 0,
    max_depth: Optional[int] = None,
) -> Expression:
    """Build an Expression from already-parsed JSON.

    Args:
        raw: The parsed JSON for one field.
        path: Location of the field, used in error messages.
        depth: Number of enclosing nested-block lists.
        max_depth: Deepest allowed chain of nested-block lists.

    Returns:
        The decoded Expression.

    Raises:
        DecodeError: If the JSON matches no expression shape.
        UnboundedNestingError: If nested blocks go deeper than max_depth.
    """
    limit = DEFAULT_MAX_NESTING_DEPTH if max_depth is None else max_depth

    if isinstance(raw, list):
        return Expression(nested_blocks=_blocks_from_wire(raw, path, depth, limit))
    if raw is None:
        return Expression()
    if not isinstance(raw, dict):
        raise DecodeError(
            path,
            "expected an expression object or a list of nested blocks, "
            f"got {value_kind(raw).value}",
        )

    members = {key: raw[key] for key in (CONSTANT_VALUE_KEY, REFERENCES_KEY) if key in raw}
    try:
        return Expression.model_validate(members)
    except ValidationError as exc:
        raise decode_error_from_validation(exc, path) from exc


def _expression_from_document(data: Any, info: ValidationInfo) -> Expression:
    if isinstance(data, Expression):
        return data
    max_depth = (info.context or {}).get("max_nesting_depth", DEFAULT_MAX_NESTING_DEPTH)
    return expression_from_wire(data, "", 0, max_depth)


# Expression-typed document field: wire JSON goes through expression_from_wire,
# so only constant_value and references are read from objects and the nesting
# limit from the validation context applies.
ExpressionField = Annotated[Expression, BeforeValidator(_expression_from_document)]


def decode_expression(
    raw: Union[str, bytes], field: str = "", max_depth: Optional[int] = None
) -> Expression:
    """Decode the raw JSON of one configuration field.

    Args:
        raw: JSON text or bytes for the field.
        field: Name or path of the field, reported on failure.
        max_depth: Deepest allowed chain of nested-block lists.

    Raises:
        DecodeError: If the JSON cannot be parsed or matches no expression shape.
    """
    return expression_from_wire(decode_value(raw, field), field, 0, max_depth)


def encode_expression(expr: Expression) -> Any:
    """Re-emit an Expression in its wire shape as plain JSON data."""
    if expr.nested_blocks is not None:
        return [
            {name: encode_expression(inner) for name, inner in block.items()}
            for block in expr.nested_blocks
        ]

    encoded: Dict[str, Any] = {}
    if expr.constant_value is not None:
        encoded[CONSTANT_VALUE_KEY] = expr.constant_value
    if expr.references:
        encoded[REFERENCES_KEY] = list(expr.references)
    return encoded


def dump_expression(expr: Expression) -> str:
    """Serialize an Expression to canonical JSON text."""
    return encode_value(encode_expression(expr))


__all__ = [
    "CONSTANT_VALUE_KEY",
    "REFERENCES_KEY",
    "ExpressionKind",
    "Expression",
    "ExpressionField",
    "expression_from_wire",
    "decode_expression",
    "encode_expression",
    "dump_expression",
]
