"""
tfjson/models/plan.py

Pydantic models for the JSON plan format produced by
'terraform show -json <planfile>': the changes it proposes and the
configuration it was made from.

Resource attribute values (planned or prior) are plain Values: they are
concrete snapshots. Configuration lives under Plan.configuration and uses
Expressions instead.

ResourceChange restates the identity fields of a resource (address, mode, type,
name, index, provider_name) rather than embedding a Resource. The producer keeps
the two copies consistent; nothing here reconciles them.
"""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import Dict, List, Optional, Union


from tfjson.models.config import Config
from tfjson.models.resource_mode import ResourceMode
from tfjson.models.state import State, StateValues
from tfjson.models.value import Value
from tfjson.models.wire import WireModel

PLAN_FORMAT_VERSION = "0.1"


class Action(str, Enum):
    """A single change action. Replacements appear as two actions."""

    no_op = "no-op"
    create = "create"
    read = "read"
    update = "update"
    delete = "delete"


class Change(WireModel):
    """A proposed change for an object.

    Attributes:
        actions: The actions to be carried out.
        before: The object value before the action; unset for create.
        after: The object value after the action; unset for delete, and
            incomplete when values are not known until apply.
        after_unknown: A deep object of booleans marking unknown ("computed")
            values. Anything absent here should be available in after.
    """

    actions: Optional[List[Action]] = None
    before: Optional[Value] = None
    after: Optional[Value] = None
    after_unknown: Optional[Value] = None

    @property
    def is_replace(self) -> bool:
        return set(self.actions or []) == {Action.create, Action.delete}


class ResourceChange(WireModel):
    """An individual change action for one resource instance.

    Attributes:
        address: The absolute resource address.
        module_address: The module portion of the address, omitted for the
            root module.
        mode: Managed resource or data source.
        type: The resource type.
        name: The resource name.
        index: The instance key from "count" (int) or "for_each" (str).
        provider_name: The provider this resource belongs to.
        deposed: The deposed object key when the change applies to a deposed
            object rather than the current one.
        change: The change that will be made to this object.
    """

    address: Optional[str] = None
    module_address: Optional[str] = None
    mode: Optional[ResourceMode] = None
    type: Optional[str] = None
    name: Optional[str] = None
    index: Optional[Union[int, str]] = None
    provider_name: Optional[str] = None
    deposed: Optional[Union[bool, str]] = None
    change: Optional[Change] = None


class PlanVariable(WireModel):
    """A root module variable value supplied for the plan."""

    value: Optional[Value] = None


class Plan(WireModel):
    """The entire contents of a JSON plan.

    Attributes:
        format_version: Must equal PLAN_FORMAT_VERSION; see validate_plan.
        terraform_version: The version of Terraform that produced the plan.
        variables: Root module input variables, by name.
        planned_values: The prior state merged with the diff for this plan.
        resource_changes: Change operations for resources and data sources.
        output_changes: Change operations for outputs.
        prior_state: The state prior to the plan, as a full state
            representation whose values have the planned_values shape.
        configuration: The configuration used to make the plan.
    """

    format_version: str = ""
    terraform_version: Optional[str] = None
    variables: Optional[Dict[str, PlanVariable]] = None
    planned_values: Optional[StateValues] = None
    resource_changes: Optional[List[ResourceChange]] = None
    output_changes: Optional[Dict[str, Change]] = None
    prior_state: Optional[State] = None
    configuration: Optional[Config] = None

    def changes_by_action(self) -> Dict[str, List[ResourceChange]]:
        """Group resource changes by their joined action list, e.g. "delete,create"."""
        grouped: Dict[str, List[ResourceChange]] = defaultdict(list)
        for rc in self.resource_changes or []:
            actions = rc.change.actions if rc.change and rc.change.actions else []
            key = ",".join(action.value for action in actions) or Action.no_op.value
            grouped[key].append(rc)
        return dict(grouped)


__all__ = [
    "PLAN_FORMAT_VERSION",
    "Action",
    "Change",
    "ResourceChange",
    "PlanVariable",
    "Plan",
]
