"""
tfjson.models

Aggregator import for the value model, the Expression model and the plan,
configuration and state document models.
"""

from tfjson.models.value import (
    Value,
    ValueKind,
    value_kind,
    decode_value,
    encode_value,
    values_equal,
)
from tfjson.models.expression import (
    Expression,
    ExpressionField,
    ExpressionKind,
    expression_from_wire,
    decode_expression,
    encode_expression,
    dump_expression,
)
from tfjson.models.resource_mode import ResourceMode
from tfjson.models.config import (
    Config,
    ConfigModule,
    ConfigOutput,
    ConfigProvisioner,
    ConfigResource,
    ConfigVariable,
    ModuleCall,
    ProviderConfig,
)
from tfjson.models.plan import (
    PLAN_FORMAT_VERSION,
    Action,
    Change,
    Plan,
    PlanVariable,
    ResourceChange,
)
from tfjson.models.state import (
    STATE_FORMAT_VERSION,
    Module,
    Output,
    Resource,
    State,
    StateValues,
)
from tfjson.models.settings import DecoderSettings

__all__ = [
    "Value",
    "ValueKind",
    "value_kind",
    "decode_value",
    "encode_value",
    "values_equal",
    "Expression",
    "ExpressionField",
    "ExpressionKind",
    "expression_from_wire",
    "decode_expression",
    "encode_expression",
    "dump_expression",
    "ResourceMode",
    "Config",
    "ConfigModule",
    "ConfigOutput",
    "ConfigProvisioner",
    "ConfigResource",
    "ConfigVariable",
    "ModuleCall",
    "ProviderConfig",
    "PLAN_FORMAT_VERSION",
    "Action",
    "Change",
    "Module",
    "Output",
    "Plan",
    "PlanVariable",
    "Resource",
    "ResourceChange",
    "StateValues",
    "STATE_FORMAT_VERSION",
    "State",
    "DecoderSettings",
]
