"""
Field elements carrying typed values.

A ``Field`` is an ``Element`` with a type tag, a value and a list of choice
options. Fields of type ``object`` and ``array`` are composites: assigning
their value also updates their subtree.

- object: each direct sub-field whose name is a key of the assigned mapping
  receives that key's value.
- array: the children are rebuilt, one clone of ``prototype`` per item, each
  clone receiving its item as value.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Optional

from formtree.config import get_config
from formtree.core.element import Element
from formtree.core.option import Option
from formtree.core.types import FieldType, FieldValue
from formtree.core.widget import Widget
from formtree.exceptions import MissingPrototypeError, ValueShapeError

logger = logging.getLogger(__name__)


class Field(Element):
    """
    Element holding a typed value.

    Params:
        type: Type tag; see ``FieldType`` for the well-known ones
        name: Field name
        options: Choice options offered by the field
        prototype: Template cloned once per item when an array value is set
        widget: Opaque rendering capability
    """

    def __init__(
        self,
        type: str | None = None,
        name: str | None = None,
        *,
        options: Iterable[Option] | None = None,
        prototype: Optional[Element] = None,
        widget: Widget | None = None,
    ):
        super().__init__(name, prototype=prototype, widget=widget)
        self.type = type
        self._value: FieldValue = None
        self.options: list[Option] = list(options) if options else []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(type={self.type!s}, name={self.name!r}, "
            f"children={len(self._children)})"
        )

    @property
    def value(self) -> FieldValue:
        return self._value

    @value.setter
    def value(self, value: FieldValue) -> None:
        self._check_value(value)
        self._apply_value(value)

    @property
    def field_path(self) -> str:
        """Like ``path`` but only names of fields are joined."""
        if not self.name:
            return ""
        return self._join_ancestor_names(Field)

    def clone(self) -> "Field":
        """
        Clone the field with its subtree, type, value and options.

        The value is applied again on the clone, so composite fields rebuild
        or refill their cloned children. The stored value was accepted when it
        was assigned, so it is not checked again.
        """
        clone = super().clone()
        clone.type = self.type
        clone._apply_value(self._value)
        clone.options = [option.clone() for option in self.options if option is not None]
        return clone

    def _check_value(self, value: Any) -> None:
        """
        Walk the value the way ``_apply_value`` will, raising before any change.

        Raises:
            ValueShapeError: In strict mode, if this field or a nested one gets
                a value of the wrong shape
            MissingPrototypeError: In strict mode, if an array field or a
                nested one has items but no Field prototype
        """
        config = get_config()

        if self.type == FieldType.OBJECT:
            if not isinstance(value, Mapping):
                if value is not None and config.is_enabled("check_value_shape"):
                    raise ValueShapeError(self, str(self.type), value)
                return
            for field in self.direct_sub_fields():
                if field.name and field.name in value:
                    field._check_value(value[field.name])

        elif self.type == FieldType.ARRAY:
            if not _is_array_value(value):
                if value is not None and config.is_enabled("check_value_shape"):
                    raise ValueShapeError(self, str(self.type), value)
                return
            if not isinstance(self.prototype, Field):
                if value and config.is_enabled("require_array_prototype"):
                    raise MissingPrototypeError(self, len(value))
                return
            for item in value:
                self.prototype._check_value(item)

    def _apply_value(self, value: Any) -> None:
        if self.type == FieldType.OBJECT:
            self._apply_object(value)
        elif self.type == FieldType.ARRAY:
            self._apply_array(value)
        else:
            self._value = value

    def _apply_object(self, value: Any) -> None:
        if not isinstance(value, Mapping):
            self._store_mismatched(value)
            return

        self._value = value

        assigned = 0
        for field in self.direct_sub_fields():
            if field.name and field.name in value:
                field._apply_value(value[field.name])
                assigned += 1

        logger.debug(f"Propagated {assigned} value(s) into sub-fields of {self!r}")

    def _apply_array(self, value: Any) -> None:
        if not _is_array_value(value):
            self._store_mismatched(value)
            return

        prototype = self.prototype

        self._value = value
        self.children = []

        if not isinstance(prototype, Field):
            if value:
                logger.warning(
                    f"Dropping {len(value)} item(s) assigned to {self!r}: no Field prototype"
                )
            return

        for item in value:
            child = prototype.clone()
            child._apply_value(item)
            self.add(child)

        logger.debug(f"Rebuilt {len(value)} child(ren) of {self!r} from prototype")

    def _store_mismatched(self, value: Any) -> None:
        if value is not None:
            logger.warning(
                f"Storing {type(value).__name__} verbatim in {self!r} without updating children"
            )
        self._value = value


def _is_array_value(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
