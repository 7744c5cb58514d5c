# tests/test_version_gate.py

from __future__ import annotations

import logging

import pytest

from tfjson.errors import (
    MissingDocumentError,
    MissingVersionError,
    VersionError,
    VersionMismatchError,
)
from tfjson.models.config import Config
from tfjson.models.plan import PLAN_FORMAT_VERSION, Plan
from tfjson.models.state import STATE_FORMAT_VERSION, State
from tfjson.utils.version_gate import (
    validate,
    validate_config,
    validate_format_version,
    validate_plan,
    validate_state,
)


def test_supported_versions() -> None:
    assert PLAN_FORMAT_VERSION == "0.1"
    assert STATE_FORMAT_VERSION == "0.1"


def test_missing_document() -> None:
    with pytest.raises(MissingDocumentError):
        validate_plan(None)
    with pytest.raises(MissingDocumentError):
        validate(None)


def test_empty_version_is_missing() -> None:
    with pytest.raises(MissingVersionError):
        validate_plan(Plan(format_version=""))
    with pytest.raises(MissingVersionError):
        validate_state(State())


def test_other_version_is_a_mismatch(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="tfjson.utils.version_gate"):
        with pytest.raises(VersionMismatchError) as excinfo:
            validate_plan(Plan(format_version="9.9"))

    assert excinfo.value.expected == "0.1"
    assert excinfo.value.got == "9.9"
    assert "9.9" in caplog.text


def test_versions_must_match_exactly() -> None:
    with pytest.raises(VersionMismatchError):
        validate_format_version(Plan(format_version="0.1.0"), "0.1")
    with pytest.raises(VersionMismatchError):
        validate_format_version(Plan(format_version=" 0.1"), "0.1")


def test_matching_version_passes_without_inspecting_the_rest() -> None:
    assert validate_plan(Plan(format_version="0.1")) is None
    assert validate_state(State(format_version="0.1")) is None


def test_config_has_no_version_to_check() -> None:
    assert validate_config(Config()) is None
    with pytest.raises(MissingDocumentError):
        validate_config(None)


def test_validate_dispatches_on_document_type() -> None:
    assert validate(Plan(format_version="0.1")) is None
    assert validate(Config()) is None
    with pytest.raises(VersionError):
        validate(State(format_version="1.0"))
    with pytest.raises(TypeError):
        validate("0.1")  # type: ignore[arg-type]
