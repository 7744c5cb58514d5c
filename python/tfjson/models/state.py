"""
tfjson/models/state.py

Pydantic models for the state representation: the JSON document printed by
'terraform show -json' for a state file, also embedded in a plan as
"prior_state". Its StateValues shape is reused by Plan.planned_values.

Resource attribute values are plain Values: they are concrete snapshots with
unknown values omitted or null, never Expressions.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Union

from pydantic import Field

from tfjson.models.resource_mode import ResourceMode
from tfjson.models.value import Value
from tfjson.models.wire import WireModel

STATE_FORMAT_VERSION = "0.1"


class Output(WireModel):
    """
    Represents an output value in a state representation.

    Attributes:
        sensitive: Whether the output was marked sensitive. Always encoded.
        value: The output data, can be any Value.
    """

    sensitive: bool = False
    value: Optional[Value] = None


class Resource(WireModel):
    """A resource instance in a state representation.

    Attributes:
        address: The absolute resource address.
        mode: Managed resource or data source.
        type: The resource type, e.g. "aws_instance" for aws_instance.foo.
        name: The resource name, e.g. "foo" for aws_instance.foo.
        index: The instance key from "count" (int) or "for_each" (str).
        provider_name: The provider this resource belongs to, which may not be
            a prefix of the type (e.g. "google-beta" offering google_* types).
        schema_version: The version of the resource type schema that "values"
            conforms to. Always encoded.
        values: Attribute values. Unknown values are omitted or null.
    """

    address: Optional[str] = None
    mode: Optional[ResourceMode] = None
    type: Optional[str] = None
    name: Optional[str] = None
    index: Optional[Union[int, str]] = None
    provider_name: Optional[str] = None
    schema_version: int = Field(default=0, ge=0)
    values: Optional[Dict[str, Value]] = None


class Module(WireModel):
    """The root module or a child module in a state representation.

    Attributes:
        resources: All resources or data sources within this module.
        address: The absolute module address, omitted for the root module.
        child_modules: Any child modules within this module.
    """

    resources: Optional[List[Resource]] = None
    address: Optional[str] = None
    child_modules: Optional[List[Module]] = None

    def iter_resources(self) -> Iterator[Resource]:
        """Yield every resource in this module and its children, depth first."""
        yield from self.resources or []
        for child in self.child_modules or []:
            yield from child.iter_resources()

    def resource_count(self) -> int:
        return sum(1 for _ in self.iter_resources())


class StateValues(WireModel):
    """
    Represents the resolved values of a state: outputs and the root module.

    Attributes:
        outputs: A dictionary of output_name -> Output.
        root_module: The root module of this representation.
    """

    outputs: Optional[Dict[str, Output]] = None
    root_module: Optional[Module] = None

    def resource_count(self) -> int:
        return self.root_module.resource_count() if self.root_module else 0


class State(WireModel):
    """
    A pydantic model for the high-level structure of a JSON state.

    Attributes:
        format_version: The format version string; see validate_state.
        terraform_version: The version of Terraform that created this state.
        values: Outputs and the root module. Absent for an empty state.
    """

    format_version: str = ""
    terraform_version: Optional[str] = None
    values: Optional[StateValues] = None

    def resource_count(self) -> int:
        """Count resources in the root module and all child modules."""
        return self.values.resource_count() if self.values else 0

    def is_empty(self) -> bool:
        """Check if this state contains zero resources.

        Returns:
            True if no resources are present, otherwise False.
        """
        return self.resource_count() == 0


__all__ = [
    "STATE_FORMAT_VERSION",
    "Output",
    "Resource",
    "Module",
    "StateValues",
    "State",
]
