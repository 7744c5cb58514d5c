"""
tfjson/utils/version_gate.py

The format-version gate. Run it on every decoded top-level document before
anything else reads the document. It only looks at format_version and never
corrects a mismatch.

Each validator returns None when the document passes and raises one of the
VersionError subclasses otherwise.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from tfjson.errors import (
    MissingDocumentError,
    MissingVersionError,
    VersionMismatchError,
)
from tfjson.models.config import Config
from tfjson.models.plan import PLAN_FORMAT_VERSION, Plan
from tfjson.models.state import STATE_FORMAT_VERSION, State

logger = logging.getLogger(__name__)

Document = Union[Plan, State, Config]


def validate_format_version(
    document: Optional[Union[Plan, State]], expected: str, kind: str = "document"
) -> None:
    """Check presence and exact match of a document's format_version.

    Args:
        document: The decoded document, or None.
        expected: The single version string this package implements.
        kind: Document name used in error messages.

    Raises:
        MissingDocumentError: If document is None.
        MissingVersionError: If format_version is empty.
        VersionMismatchError: If format_version is not exactly `expected`.
    """
    if document is None:
        logger.warning("Rejecting %s: document is missing", kind)
        raise MissingDocumentError(kind)

    if not document.format_version:
        logger.warning("Rejecting %s: no format version present", kind)
        raise MissingVersionError()

    if document.format_version != expected:
        logger.warning(
            "Rejecting %s: format version %r, supported version is %r",
            kind,
            document.format_version,
            expected,
        )
        raise VersionMismatchError(expected, document.format_version)


def validate_plan(plan: Optional[Plan]) -> None:
    validate_format_version(plan, PLAN_FORMAT_VERSION, "plan")


def validate_state(state: Optional[State]) -> None:
    validate_format_version(state, STATE_FORMAT_VERSION, "state")


def validate_config(config: Optional[Config]) -> None:
    """Config documents carry no format version; only presence is checked."""
    if config is None:
        logger.warning("Rejecting config: document is missing")
        raise MissingDocumentError("config")


def validate(document: Optional[Document]) -> None:
    """Run the gate matching the document's type.

    Raises:
        MissingDocumentError: If document is None.
        MissingVersionError: If a versioned document has an empty format_version.
        VersionMismatchError: If a versioned document has another version.
        TypeError: If document is not a Plan, State or Config.
    """
    if document is None:
        raise MissingDocumentError()
    if isinstance(document, Plan):
        return validate_plan(document)
    if isinstance(document, State):
        return validate_state(document)
    if isinstance(document, Config):
        return validate_config(document)
    raise TypeError(f"not a tfjson document: {type(document).__name__}")


__all__ = [
    "validate_format_version",
    "validate_plan",
    "validate_state",
    "validate_config",
    "validate",
]
