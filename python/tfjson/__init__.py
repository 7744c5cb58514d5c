"""
tfjson

Typed models for Terraform's JSON plan, configuration and state documents.

Typical use:

    from tfjson import load_plan

    with open("plan.json", "rb") as f:
        plan = load_plan(f.read())
    for rc in plan.resource_changes or []:
        print(rc.address, rc.change.actions)
"""

from tfjson.errors import (
    TfJsonError,
    DecodeError,
    UnboundedNestingError,
    VersionError,
    MissingDocumentError,
    MissingVersionError,
    VersionMismatchError,
)
from tfjson.models import (
    Config,
    DecoderSettings,
    Expression,
    ExpressionKind,
    Plan,
    PLAN_FORMAT_VERSION,
    State,
    STATE_FORMAT_VERSION,
    Value,
    decode_expression,
    decode_value,
    dump_expression,
    encode_value,
    values_equal,
)
from tfjson.utils import (
    dump_document,
    get_output,
    load_config,
    load_plan,
    load_state,
    validate,
)

__all__ = [
    "TfJsonError",
    "DecodeError",
    "UnboundedNestingError",
    "VersionError",
    "MissingDocumentError",
    "MissingVersionError",
    "VersionMismatchError",
    "Config",
    "DecoderSettings",
    "Expression",
    "ExpressionKind",
    "Plan",
    "PLAN_FORMAT_VERSION",
    "State",
    "STATE_FORMAT_VERSION",
    "Value",
    "decode_expression",
    "decode_value",
    "dump_expression",
    "encode_value",
    "values_equal",
    "dump_document",
    "get_output",
    "load_config",
    "load_plan",
    "load_state",
    "validate",
]
