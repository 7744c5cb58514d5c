"""
tfjson/errors.py

Exception hierarchy shared by the decoders and the format-version gate.

Every failure surfaced by this package derives from TfJsonError, so callers can
catch one type at the boundary. DecodeError also derives from ValueError, which
lets pydantic validators raise it and have the failure folded into a
ValidationError with the full field location attached.
"""

from __future__ import annotations

from typing import Optional


class TfJsonError(Exception):
    """Base class for all errors raised by tfjson."""


class DecodeError(TfJsonError, ValueError):
    """Raised when JSON is malformed or does not match an expected shape.

    Attributes:
        path (str): Dotted location of the offending field, e.g.
            "configuration.root_module.resources[0].expressions.ami".
            Empty when the failure concerns the whole document.
        reason (str): Human-readable description of the problem.
    """

    def __init__(self, path: str, reason: str) -> None:
        """
        Initialize a DecodeError.

        Args:
            path (str): Dotted location of the offending field.
            reason (str): What went wrong at that location.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if path else reason)

    def at(self, path: str) -> DecodeError:
        """Return the same error relocated to an absolute path."""
        return DecodeError(path, self.reason)


class UnboundedNestingError(DecodeError):
    """Raised when nested blocks recurse deeper than the configured limit.

    Attributes:
        max_depth (int): The limit that was exceeded.
    """

    def __init__(self, path: str, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(path, f"nested blocks exceed maximum depth of {max_depth}")

    def at(self, path: str) -> UnboundedNestingError:
        return UnboundedNestingError(path, self.max_depth)


class VersionError(TfJsonError):
    """Base class for format-version gate failures."""


class MissingDocumentError(VersionError):
    """Raised when a document was required but None was given."""

    def __init__(self, kind: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(f"{kind or 'document'} is missing")


class MissingVersionError(VersionError):
    """Raised when a document carries an empty format_version."""

    def __init__(self) -> None:
        super().__init__("unexpected document input, no format version present")


class VersionMismatchError(VersionError):
    """Raised when format_version differs from the supported version.

    Attributes:
        expected (str): The version this package implements.
        got (str): The version found in the document.
    """

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(
            f"unsupported document format version: expected {expected!r}, got {got!r}"
        )


__all__ = [
    "TfJsonError",
    "DecodeError",
    "UnboundedNestingError",
    "VersionError",
    "MissingDocumentError",
    "MissingVersionError",
    "VersionMismatchError",
]
