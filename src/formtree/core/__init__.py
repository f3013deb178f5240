"""
Core formtree components.

This package provides the tree node classes (``Element``, ``Field``), their
leaf capabilities (``Option``, ``Widget``) and the path helpers.
"""

from formtree.core.element import Element
from formtree.core.field import Field
from formtree.core.option import Option
from formtree.core.path_utils import (
    PATH_SEPARATOR,
    PathComponents,
    join_path,
    normalize_path,
    split_path,
)
from formtree.core.types import FieldType, FieldValue, PathInput
from formtree.core.widget import Widget

__all__ = [
    "Element",
    "Field",
    "FieldType",
    "FieldValue",
    "Option",
    "PathInput",
    "Widget",
    "PATH_SEPARATOR",
    "PathComponents",
    "join_path",
    "normalize_path",
    "split_path",
]
