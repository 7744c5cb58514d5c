# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

TESTDATA = Path(__file__).resolve().parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Directory holding the JSON fixtures."""
    return TESTDATA


@pytest.fixture
def plan_bytes() -> bytes:
    return (TESTDATA / "basic" / "plan.json").read_bytes()


@pytest.fixture
def config_bytes() -> bytes:
    return (TESTDATA / "basic" / "config.json").read_bytes()


@pytest.fixture
def state_bytes() -> bytes:
    return (TESTDATA / "state" / "state.json").read_bytes()
