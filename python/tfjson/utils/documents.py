"""
tfjson/utils/documents.py

Decode and encode whole documents. Exports:
    - load_plan
    - load_state
    - load_config
    - dump_document
    - get_output

Decoding is all-or-nothing: either a fully-typed document is returned or a single
DecodeError describing the first problem found, with its dotted field path.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from tfjson.models.config import Config
from tfjson.models.plan import Plan
from tfjson.models.settings import DecoderSettings
from tfjson.models.state import State, StateValues
from tfjson.models.validator import decode_error_from_validation, validate_type
from tfjson.models.value import encode_value
from tfjson.models.wire import WireModel
from tfjson.utils.version_gate import validate_config, validate_plan, validate_state

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=WireModel)
T = TypeVar("T")


def _load(
    model: Type[D],
    raw: Union[str, bytes],
    settings: Optional[DecoderSettings],
    gate: Optional[Callable[[D], None]],
) -> D:
    settings = settings or DecoderSettings()
    logger.debug(
        "Decoding %s document (%d bytes, max nesting depth %d)",
        model.__name__,
        len(raw),
        settings.max_nesting_depth,
    )
    try:
        document = model.model_validate_json(raw, context=settings.as_context())
    except ValidationError as exc:
        error = decode_error_from_validation(exc)
        logger.debug("Failed to decode %s document: %s", model.__name__, error)
        raise error from exc

    if gate is not None:
        gate(document)
    return document


def load_plan(
    raw: Union[str, bytes],
    settings: Optional[DecoderSettings] = None,
    validate: bool = True,
) -> Plan:
    """Decode a JSON plan.

    Args:
        raw: The JSON text, e.g. the output of 'terraform show -json plan.tfplan'.
        settings: Decoder settings; read from TFJSON_* environment variables
            when omitted.
        validate: Run the format-version gate after decoding.

    Returns:
        Plan: The decoded plan.

    Raises:
        DecodeError: If the JSON is malformed or does not match the plan schema.
        VersionError: If validate is True and the format version is unsupported.
    """
    return _load(Plan, raw, settings, validate_plan if validate else None)


def load_state(
    raw: Union[str, bytes],
    settings: Optional[DecoderSettings] = None,
    validate: bool = True,
) -> State:
    """Decode a JSON state, i.e. 'terraform show -json' of a state file.

    Raises:
        DecodeError: If the JSON does not match the state schema.
        VersionError: If validate is True and the format version is unsupported.
    """
    return _load(State, raw, settings, validate_state if validate else None)


def load_config(
    raw: Union[str, bytes],
    settings: Optional[DecoderSettings] = None,
    validate: bool = True,
) -> Config:
    """Decode a standalone configuration document (the "configuration" key of a plan)."""
    return _load(Config, raw, settings, validate_config if validate else None)


def dump_document(document: WireModel) -> str:
    """Serialize a document to canonical JSON text.

    Absent members are omitted and keys are sorted, so the same document always
    produces the same text and decoding the text yields an equal document.
    """
    return encode_value(document.model_dump(mode="json"))


def get_output(
    source: Union[State, StateValues], output_name: str, output_type: Type[T]
) -> T:
    """Retrieve a typed output value from a State or StateValues.

    Args:
        source (Union[State, StateValues]):
            A decoded state, or plan.planned_values / plan.prior_state.
        output_name (str):
            Which output to retrieve by name.
        output_type (Type[T]):
            The Python type to validate/cast the output to.

    Returns:
        The typed output if present.

    Raises:
        KeyError: If the output is missing.
        DecodeError: If validation to output_type fails.
    """
    values = source.values if isinstance(source, State) else source
    outputs = (values.outputs if values else None) or {}
    output = outputs.get(output_name)
    if output is None:
        raise KeyError(f"Output '{output_name}' not found.")
    return validate_type(output.value, output_type)


__all__ = [
    "load_plan",
    "load_state",
    "load_config",
    "dump_document",
    "get_output",
]
