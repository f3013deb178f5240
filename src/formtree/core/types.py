"""
Core type definitions for formtree.

This module contains the well-known field type tags and the type aliases
used throughout the tree model.
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Well-known field type tags.

    Field types are open string tags: any string is accepted by ``Field``, and
    members of this enum compare equal to their plain string values.
    """

    ARRAY = "array"
    BOOLEAN = "boolean"
    DATE = "date"
    NUMBER = "number"
    OBJECT = "object"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


PathInput = str | Sequence[str]

FieldValue = Any
