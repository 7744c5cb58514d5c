# tfjson/models/resource_mode.py

from enum import Enum
from typing import Optional


class ResourceMode(str, Enum):
    """Whether an address names a managed resource or a read-only data source."""

    managed = "managed"
    data = "data"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ResourceMode"]:
        # Early format documentation spelled managed mode "resource".
        if value == "resource":
            return cls.managed
        return None


__all__ = ["ResourceMode"]
