"""
Element base class for the formtree model.

An ``Element`` is a node of the form tree. It owns an ordered list of
children and keeps a back reference to its parent. All linkage changes go
through the methods of this class, which keep both directions consistent:
an element's ``parent`` is set exactly when the parent's ``children``
contains it.
"""

import copy
import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Optional

from formtree.config import get_config
from formtree.core.path_utils import PathComponents, join_path, normalize_path
from formtree.core.types import PathInput
from formtree.core.widget import Widget
from formtree.exceptions import ElementAlreadyAttachedError, TreeCycleError

if TYPE_CHECKING:
    from formtree.core.field import Field

logger = logging.getLogger(__name__)


class Element:
    """
    Node of a form tree.

    Elements are identified by object identity. The name is optional and does
    not need to be unique among siblings; anonymous elements act as
    transparent groups for path lookup.

    Params:
        name: Element name; an empty string counts as no name
        prototype: Template element cloned on demand, not part of the tree
        widget: Opaque rendering capability
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        prototype: Optional["Element"] = None,
        widget: Widget | None = None,
    ):
        self._parent: Element | None = None
        self._children: list[Element] = []
        self.name: str | None = name or None
        self.prototype = prototype
        self.widget = widget

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, children={len(self._children)})"

    @property
    def parent(self) -> Optional["Element"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Element"]) -> None:
        """
        Move this element under another parent, or detach it with None.

        The element is removed from its current parent first and appended to
        the new parent's children.
        """
        if parent is not None and get_config().is_enabled("check_cycles"):
            parent._check_cycle(self)

        if self._parent is not None:
            self._parent.remove(self)

        if parent is not None:
            parent.add(self)

    @property
    def root(self) -> "Element":
        """The topmost ancestor, or the element itself when it has no parent."""
        element = self
        while element._parent is not None:
            element = element._parent
        return element

    @property
    def children(self) -> list["Element"]:
        return self._children

    @children.setter
    def children(self, elements: Iterable["Element"]) -> None:
        """
        Replace all children.

        Previous children are detached; every new child gets its parent set
        to this element.
        """
        elements = list(elements)
        config = get_config()

        if config.is_enabled("check_attachment"):
            seen: set[int] = set()
            for element in elements:
                if id(element) in seen:
                    raise ElementAlreadyAttachedError(element, self, self)
                seen.add(id(element))
                if element._parent is not None and element._parent is not self:
                    raise ElementAlreadyAttachedError(element, element._parent, self)

        if config.is_enabled("check_cycles"):
            for element in elements:
                self._check_cycle(element)

        for child in self._children:
            child._parent = None

        for element in elements:
            if element._parent is not None and element._parent is not self:
                logger.warning(
                    f"Moving {element!r} from {element._parent!r} to {self!r}"
                )
                element._parent.remove(element)
            element._parent = self

        self._children = elements

    def add(self, *elements: "Element") -> "Element":
        """
        Append child elements.

        Params:
            *elements: Elements to append, in order

        Returns:
            This element, for chaining

        Raises:
            ElementAlreadyAttachedError: In strict mode, if an element already
                belongs to another parent
            TreeCycleError: In strict mode, if an element is this element or
                one of its ancestors
        """
        config = get_config()

        for element in elements:
            if config.is_enabled("check_cycles"):
                self._check_cycle(element)
            if (
                config.is_enabled("check_attachment")
                and element._parent is not None
                and element._parent is not self
            ):
                raise ElementAlreadyAttachedError(element, element._parent, self)

        for element in elements:
            if element._parent is not None:
                if element._parent is not self:
                    logger.warning(
                        f"Moving {element!r} from {element._parent!r} to {self!r}"
                    )
                element._parent.remove(element)

            self._children.append(element)
            element._parent = self

        return self

    def remove(self, element: "Element | str") -> Optional["Element"]:
        """
        Remove a child either by reference or by name.

        Only the first matching child (in child order) is removed.

        Params:
            element: The child itself or the name of the child

        Returns:
            The removed child, or None if nothing matched
        """
        for index, child in enumerate(self._children):
            if isinstance(element, str):
                matched = child.name == element
            else:
                matched = child is element

            if matched:
                del self._children[index]
                child._parent = None
                return child

        return None

    @property
    def path(self) -> str:
        """
        Dot-joined names from the root down to this element.

        Anonymous ancestors are skipped; an anonymous element has an empty
        path.
        """
        if not self.name:
            return ""
        return self._join_ancestor_names(Element)

    def find(self, path: PathInput) -> Optional["Element"]:
        """
        Find a descendant by path.

        Children whose name equals the first segment are matched; when several
        siblings share the name the last one wins. If no child matches, the
        whole path is looked up inside each anonymous child that has children
        of its own.

        Params:
            path: Dotted path or sequence of segments

        Returns:
            The element found, or None
        """
        return self._find(normalize_path(path), Element)

    def find_field(self, path: PathInput) -> Optional["Field"]:
        """Like ``find`` but only fields can match a path segment."""
        from formtree.core.field import Field

        return self._find(normalize_path(path), Field)

    def _find(self, segments: list[str], kind: type) -> Optional["Element"]:
        if not segments:
            return None

        components = PathComponents.from_segments(segments)

        found = None
        for child in self._children:
            if isinstance(child, kind) and child.name == components.first_part:
                found = child

        if found is not None:
            if components.has_remainder:
                return found._find(components.remainder, kind)
            return found

        for child in self._children:
            if not child.name and child._children:
                found = child._find(segments, kind)
                if found is not None:
                    return found

        return None

    def direct_sub_fields(self) -> list["Field"]:
        """
        Collect the nearest field along each branch below this element.

        Non-field children are searched through; fields are not.
        """
        from formtree.core.field import Field

        fields: list[Field] = []
        for child in self._children:
            if isinstance(child, Field):
                fields.append(child)
            else:
                fields.extend(child.direct_sub_fields())
        return fields

    def walk(self) -> Iterator["Element"]:
        """Iterate over this element and all descendants, depth first."""
        yield self
        for child in self._children:
            yield from child.walk()

    def clone(self) -> "Element":
        """
        Create a structural copy of this element and its subtree.

        Prototype and widget are cloned as well. The copy has no parent.
        """
        clone = copy.copy(self)
        clone._parent = None
        clone._children = []
        clone.prototype = self.prototype.clone() if self.prototype is not None else None
        clone.widget = self.widget.clone() if self.widget is not None else None

        for child in self._children:
            child.clone().parent = clone

        return clone

    def _join_ancestor_names(self, kind: type) -> str:
        names = []
        element: Element | None = self
        while element is not None:
            if isinstance(element, kind) and element.name:
                names.append(element.name)
            element = element._parent
        return join_path(list(reversed(names)))

    def _check_cycle(self, element: "Element") -> None:
        ancestor: Element | None = self
        while ancestor is not None:
            if ancestor is element:
                raise TreeCycleError(element, self)
            ancestor = ancestor._parent
