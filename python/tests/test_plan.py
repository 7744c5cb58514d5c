# tests/test_plan.py

from __future__ import annotations

import json

import pytest

from tfjson.errors import (
    DecodeError,
    MissingVersionError,
    UnboundedNestingError,
    VersionMismatchError,
)
from tfjson.models.expression import ExpressionKind
from tfjson.models.plan import Action, Plan, ResourceChange
from tfjson.models.resource_mode import ResourceMode
from tfjson.models.settings import DecoderSettings
from tfjson.utils.documents import dump_document, load_plan


def test_load_plan_top_level(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)

    assert plan.format_version == "0.1"
    assert plan.terraform_version == "0.12.6"
    assert plan.variables is not None
    assert plan.variables["instance_count"].value == 2
    assert plan.variables["region"].value == "us-west-2"


def test_planned_values_are_plain_values(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)
    assert plan.planned_values is not None and plan.planned_values.root_module

    resources = list(plan.planned_values.root_module.iter_resources())
    assert [r.address for r in resources] == [
        "aws_vpc.main",
        "null_resource.worker[0]",
        "null_resource.worker[1]",
        "module.network.aws_security_group.web",
    ]

    sg = resources[-1]
    # In state values, a repeated block is just a list of objects.
    assert sg.values is not None
    assert sg.values["ingress"] == [
        {"cidr_blocks": ["10.0.0.0/16"], "from_port": 443, "to_port": 443, "protocol": "tcp"}
    ]
    assert resources[1].index == 0
    assert resources[0].schema_version == 1
    assert resources[0].mode is ResourceMode.managed

    outputs = plan.planned_values.outputs or {}
    assert outputs["db_password"].sensitive is True
    assert outputs["vpc_id"].value is None


def test_resource_changes(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)
    changes = plan.resource_changes or []

    assert len(changes) == 4
    replace = changes[1]
    assert replace.change is not None
    assert replace.change.actions == [Action.delete, Action.create]
    assert replace.change.is_replace
    assert replace.change.before == {"id": "4427351233", "triggers": None}
    assert changes[3].module_address == "module.network"
    assert changes[3].change is not None
    assert changes[3].change.after_unknown == {"ingress": [{"cidr_blocks": [False]}]}

    grouped = plan.changes_by_action()
    assert sorted(grouped) == ["create", "delete,create", "no-op", "update"]
    assert [rc.address for rc in grouped["update"]] == ["module.network.aws_security_group.web"]

    assert plan.output_changes is not None
    assert plan.output_changes["vpc_id"].after_unknown is True


def test_resource_change_restates_identity(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)
    assert plan.planned_values is not None and plan.planned_values.root_module
    resource = (plan.planned_values.root_module.resources or [])[1]
    change = (plan.resource_changes or [])[1]

    assert (change.address, change.mode, change.type, change.name, change.index) == (
        resource.address,
        resource.mode,
        resource.type,
        resource.name,
        resource.index,
    )
    assert "values" not in ResourceChange.model_fields


def test_prior_state(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)

    assert plan.prior_state is not None
    assert plan.prior_state.format_version == "0.1"
    assert plan.prior_state.resource_count() == 1


def test_configuration_uses_expressions(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)
    config = plan.configuration
    assert config is not None and config.root_module is not None

    providers = config.provider_config or {}
    assert providers["aws"].expressions is not None
    assert providers["aws"].expressions["region"].references == ["var.region"]
    assert providers["aws.east"].alias == "east"

    worker = (config.root_module.resources or [])[1]
    assert worker.count_expression is not None
    assert worker.count_expression.references == ["var.instance_count"]
    assert worker.expressions is None
    assert worker.provisioners is not None
    assert worker.provisioners[0].type == "local-exec"

    call = (config.root_module.module_calls or {})["network"]
    assert call.resolved_source == "./modules/network"
    assert call.module is not None
    sg = (call.module.resources or [])[0]
    assert sg.expressions is not None
    ingress = sg.expressions["ingress"]
    assert ingress.kind is ExpressionKind.nested_blocks
    block = (ingress.nested_blocks or [])[0]
    assert block["from_port"].constant_value == 443
    assert block["cidr_blocks"].constant_value == ["10.0.0.0/16"]

    variables = call.module.variables or {}
    assert variables["ports"].default == [80, 443]
    assert variables["vpc_id"].default is None


def test_round_trip(plan_bytes: bytes) -> None:
    plan = load_plan(plan_bytes)
    encoded = dump_document(plan)
    again = load_plan(encoded)

    assert again == plan
    assert dump_document(again) == encoded
    # Absent members are omitted, always-present ones are kept.
    decoded = json.loads(encoded)
    assert "before" not in decoded["resource_changes"][0]["change"]
    assert decoded["planned_values"]["outputs"]["vpc_id"] == {"sensitive": False}


def test_version_mismatch() -> None:
    with pytest.raises(VersionMismatchError) as excinfo:
        load_plan('{"format_version": "9.9"}')

    assert (excinfo.value.expected, excinfo.value.got) == ("0.1", "9.9")
    assert load_plan('{"format_version": "9.9"}', validate=False).format_version == "9.9"


def test_missing_version() -> None:
    with pytest.raises(MissingVersionError):
        load_plan("{}")


def test_malformed_json() -> None:
    with pytest.raises(DecodeError):
        load_plan(b'{"format_version": "0.1",')


def test_bad_expression_reports_full_path() -> None:
    raw = json.dumps(
        {
            "format_version": "0.1",
            "configuration": {
                "root_module": {
                    "resources": [
                        {"address": "aws_instance.web", "expressions": {"ami": 5}}
                    ]
                }
            },
        }
    )

    with pytest.raises(DecodeError) as excinfo:
        load_plan(raw)

    assert excinfo.value.path == "configuration.root_module.resources[0].expressions.ami"


def test_nesting_limit_from_settings() -> None:
    raw = json.dumps(
        {
            "format_version": "0.1",
            "configuration": {
                "root_module": {
                    "resources": [
                        {
                            "expressions": {
                                "dynamic": [{"content": [{"x": {"constant_value": 1}}]}]
                            }
                        }
                    ]
                }
            },
        }
    )

    assert load_plan(raw, settings=DecoderSettings(max_nesting_depth=2)).configuration
    with pytest.raises(UnboundedNestingError) as excinfo:
        load_plan(raw, settings=DecoderSettings(max_nesting_depth=1))

    assert excinfo.value.path == (
        "configuration.root_module.resources[0].expressions.dynamic[0].content"
    )


def test_legacy_managed_mode_spelling() -> None:
    plan = load_plan(
        '{"format_version": "0.1", "resource_changes": [{"address": "a.b", "mode": "resource"}]}'
    )

    assert (plan.resource_changes or [])[0].mode is ResourceMode.managed


def test_unknown_members_are_ignored() -> None:
    plan = load_plan('{"format_version": "0.1", "relevant_attributes": [], "timestamp": "x"}')

    assert plan == Plan(format_version="0.1")


def test_out_of_range_attribute_values_are_rejected() -> None:
    raw = json.dumps(
        {
            "format_version": "0.1",
            "planned_values": {
                "root_module": {
                    "resources": [{"address": "aws_ebs_volume.a", "values": {"size": 1}}]
                }
            },
        }
    ).replace('"size": 1', '"size": 1e400')

    with pytest.raises(DecodeError) as excinfo:
        load_plan(raw)

    assert excinfo.value.path == "planned_values.root_module.resources[0].values.size"


def test_out_of_range_constant_in_configuration_is_rejected() -> None:
    raw = (
        '{"format_version": "0.1", "configuration": {"root_module": {"resources": '
        '[{"expressions": {"size": {"constant_value": 1e400}}}]}}}'
    )

    with pytest.raises(DecodeError) as excinfo:
        load_plan(raw)

    assert excinfo.value.path == (
        "configuration.root_module.resources[0].expressions.size.constant_value"
    )
