"""
Exception classes for formtree.

This module defines the errors raised by the tree model when it runs in
strict mode. In lenient mode the same conditions degrade silently (see
``formtree.config``), so none of these are raised for ordinary lookups.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from formtree.core.element import Element


def _describe(element: "Element | None") -> str:
    if element is None:
        return "<none>"
    name = element.name or "<anonymous>"
    return f"{type(element).__name__} '{name}'"


class FormTreeError(Exception):
    """Base exception for all formtree errors."""

    pass


class TreeStructureError(FormTreeError):
    """Base exception for parent/child linkage violations."""

    pass


class ElementAlreadyAttachedError(TreeStructureError):
    """Raised when an element that already has a parent is attached elsewhere."""

    def __init__(
        self,
        element: "Element",
        current_parent: "Element | None",
        new_parent: "Element",
    ):
        """
        Initialize the exception.

        Params:
            element: The element being attached
            current_parent: The parent that currently owns the element
            new_parent: The element it was being attached to
        """
        self.element = element
        self.current_parent = current_parent
        self.new_parent = new_parent
        super().__init__(
            f"{_describe(element)} is already attached to {_describe(current_parent)}, "
            f"cannot attach it to {_describe(new_parent)}"
        )


class TreeCycleError(TreeStructureError):
    """Raised when attaching an element would make it its own ancestor."""

    def __init__(self, element: "Element", new_parent: "Element"):
        """
        Initialize the exception.

        Params:
            element: The element being attached
            new_parent: The descendant it was being attached to
        """
        self.element = element
        self.new_parent = new_parent
        super().__init__(
            f"Cannot attach {_describe(element)} to {_describe(new_parent)}: "
            f"the element is the new parent or one of its ancestors"
        )


class FieldValueError(FormTreeError):
    """Base exception for value assignments a field cannot honor."""

    pass


class MissingPrototypeError(FieldValueError):
    """Raised when an array field has no Field prototype to build children from."""

    def __init__(self, field: "Element", item_count: int):
        """
        Initialize the exception.

        Params:
            field: The array field the value was assigned to
            item_count: Number of array items that would have been dropped
        """
        self.field = field
        self.item_count = item_count
        super().__init__(
            f"Prototype missing for array field {_describe(field)}: "
            f"cannot materialize {item_count} item(s) without a Field prototype"
        )


class ValueShapeError(FieldValueError):
    """Raised when a composite field receives a value of the wrong shape."""

    def __init__(self, field: "Element", field_type: str, value: Any):
        """
        Initialize the exception.

        Params:
            field: The field the value was assigned to
            field_type: The field's type tag
            value: The rejected value
        """
        self.field = field
        self.field_type = field_type
        self.value = value
        expected = "a mapping" if field_type == "object" else "a sequence"
        super().__init__(
            f"Field {_describe(field)} of type '{field_type}' expects {expected}, "
            f"got {type(value).__name__}"
        )


class PathValidationError(FormTreeError):
    """Raised when a path argument is neither a dotted string nor a segment sequence."""

    def __init__(self, path: Any, reason: str):
        """
        Initialize the exception.

        Params:
            path: The invalid path
            reason: Why the path is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")
