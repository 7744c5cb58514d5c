"""
tfjson/models/config.py

Pydantic models for the "configuration" document: the parsed source configuration
that produced a plan, as found under the "configuration" key of
'terraform show -json <planfile>'.

Every configurable field in here is an Expression (see expression.py), while
variable defaults are plain Values.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import Field

from tfjson.models.expression import ExpressionField
from tfjson.models.resource_mode import ResourceMode
from tfjson.models.value import Value
from tfjson.models.wire import WireModel


class ProviderConfig(WireModel):
    """A provider configuration instance.

    Attributes:
        name: The name of the provider, e.g. "aws".
        alias: The alias of the provider, e.g. "us-east-1".
        module_address: The address of the module the provider is declared in.
        expressions: Any non-special configuration values, indexed by key.
    """

    name: Optional[str] = None
    alias: Optional[str] = None
    module_address: Optional[str] = None
    expressions: Optional[Dict[str, ExpressionField]] = None


class ConfigOutput(WireModel):
    """An output as defined in configuration.

    Attributes:
        sensitive: Whether the output was marked sensitive.
        expression: The defined value of the output.
    """

    sensitive: bool = False
    expression: Optional[ExpressionField] = None


class ConfigVariable(WireModel):
    """A variable as defined in configuration.

    Attributes:
        default: The default value, a plain Value rather than an Expression.
        description: The text description of the variable.
    """

    default: Optional[Value] = None
    description: Optional[str] = None


class ConfigProvisioner(WireModel):
    """A provisioner declared in a resource configuration.

    Attributes:
        type: The type of the provisioner, e.g. "local-exec".
        expressions: Any non-special configuration values, indexed by key.
    """

    type: Optional[str] = None
    expressions: Optional[Dict[str, ExpressionField]] = None


class ConfigResource(WireModel):
    """The configuration representation of a resource.

    Attributes:
        address: The address of the resource relative to its module.
        mode: Managed resource or data source.
        type: The resource type, e.g. "null_resource" in "null_resource.foo".
        name: The resource name, e.g. "foo" in "null_resource.foo".
        provider_config_key: Key into Config.provider_config for this resource.
        provisioners: Provisioners defined for this resource, if any.
        expressions: Configuration values indexed by key. Repeated sub-blocks
            (e.g. "ingress") arrive here as nested-block Expressions.
        schema_version: The resource's configuration schema version.
        count_expression: The expression for "count", if set.
        for_each_expression: The expression for "for_each", if set.
    """

    address: Optional[str] = None
    mode: Optional[ResourceMode] = None
    type: Optional[str] = None
    name: Optional[str] = None
    provider_config_key: Optional[str] = None
    provisioners: Optional[List[ConfigProvisioner]] = None
    expressions: Optional[Dict[str, ExpressionField]] = None
    schema_version: int = Field(default=0, ge=0)
    count_expression: Optional[ExpressionField] = None
    for_each_expression: Optional[ExpressionField] = None


class ModuleCall(WireModel):
    """A "module" stanza, including the configuration of the called module.

    Attributes:
        resolved_source: The resolved contents of the "source" argument.
        expressions: Any non-special configuration values, indexed by key.
        count_expression: The expression for "count", if set.
        for_each_expression: The expression for "for_each", if set.
        module: The configuration of the module itself.
    """

    resolved_source: Optional[str] = None
    expressions: Optional[Dict[str, ExpressionField]] = None
    count_expression: Optional[ExpressionField] = None
    for_each_expression: Optional[ExpressionField] = None
    module: Optional[ConfigModule] = None


class ConfigModule(WireModel):
    """A module in configuration; the root module or a called child module.

    Attributes:
        outputs: The outputs defined in the module.
        resources: The resources defined in the module.
        module_calls: Any "module" stanzas within the module.
        variables: The variables defined in the module.
    """

    outputs: Optional[Dict[str, ConfigOutput]] = None
    resources: Optional[List[ConfigResource]] = None
    module_calls: Optional[Dict[str, ModuleCall]] = None
    variables: Optional[Dict[str, ConfigVariable]] = None

    def iter_resources(self, prefix: str = "") -> Iterator[Tuple[str, ConfigResource]]:
        """Yield (module path, resource) pairs, descending into module calls.

        The module path is "" for the root module and "module.a.module.b" for
        nested calls.
        """
        for resource in self.resources or []:
            yield prefix, resource
        for call_name, call in sorted((self.module_calls or {}).items()):
            if call.module is None:
                continue
            child = f"{prefix}.module.{call_name}" if prefix else f"module.{call_name}"
            yield from call.module.iter_resources(child)


class Config(WireModel):
    """The complete configuration source.

    Attributes:
        provider_config: All provider instances across all modules, indexed in
            the format NAME or NAME.ALIAS.
        root_module: The root module; child modules descend from here.
    """

    provider_config: Optional[Dict[str, ProviderConfig]] = None
    root_module: Optional[ConfigModule] = None


ModuleCall.model_rebuild()


__all__ = [
    "ProviderConfig",
    "ConfigOutput",
    "ConfigVariable",
    "ConfigProvisioner",
    "ConfigResource",
    "ModuleCall",
    "ConfigModule",
    "Config",
]
