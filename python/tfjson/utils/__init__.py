"""
tfjson.utils

Document entry points and the format-version gate.
"""

from tfjson.utils.documents import (
    load_plan,
    load_state,
    load_config,
    dump_document,
    get_output,
)
from tfjson.utils.version_gate import (
    validate,
    validate_format_version,
    validate_plan,
    validate_state,
    validate_config,
)

__all__ = [
    "load_plan",
    "load_state",
    "load_config",
    "dump_document",
    "get_output",
    "validate",
    "validate_format_version",
    "validate_plan",
    "validate_state",
    "validate_config",
]
