"""
formtree exception classes.

This package provides the exception types raised by the tree model in
strict mode.
"""

from formtree.exceptions.core import (
    ElementAlreadyAttachedError,
    FieldValueError,
    FormTreeError,
    MissingPrototypeError,
    PathValidationError,
    TreeCycleError,
    TreeStructureError,
    ValueShapeError,
)

__all__ = [
    "FormTreeError",
    "TreeStructureError",
    "ElementAlreadyAttachedError",
    "TreeCycleError",
    "FieldValueError",
    "MissingPrototypeError",
    "ValueShapeError",
    "PathValidationError",
]
