"""
Top-level form framing.

``Form`` is the usual root of a form tree: an object-typed ``Field`` that also
carries a ``FormFrame`` with a title and buttons. Buttons are ordinary
elements with a label.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from formtree.core.element import Element
from formtree.core.field import Field
from formtree.core.option import Option
from formtree.core.types import FieldType
from formtree.core.widget import Widget


class Button(Element):
    """Named element with a label."""

    def __init__(
        self,
        name: str | None = None,
        label: str | None = None,
        *,
        widget: Widget | None = None,
    ):
        super().__init__(name, widget=widget)
        self.label = label


@dataclass
class FormFrame:
    """Title and buttons framing a form."""

    title: str | None = None
    buttons: list[Button] = field(default_factory=list)

    def add_buttons(self, buttons: Iterable[Button]) -> None:
        self.buttons.extend(buttons)

    def clone(self) -> "FormFrame":
        return FormFrame(title=self.title, buttons=[button.clone() for button in self.buttons])


class Form(Field):
    """
    Root field of a form, object-typed unless told otherwise.

    The frame is created on first access of ``frame``, ``title``,
    ``buttons`` or ``add_buttons``.
    """

    def __init__(
        self,
        type: str | None = FieldType.OBJECT,
        name: str | None = None,
        *,
        options: Iterable[Option] | None = None,
        prototype: Optional[Element] = None,
        widget: Widget | None = None,
    ):
        super().__init__(type, name, options=options, prototype=prototype, widget=widget)
        self._frame: FormFrame | None = None

    @property
    def frame(self) -> FormFrame:
        if self._frame is None:
            self._frame = FormFrame()
        return self._frame

    @frame.setter
    def frame(self, frame: FormFrame | None) -> None:
        self._frame = frame

    @property
    def title(self) -> str | None:
        return self.frame.title

    @title.setter
    def title(self, title: str | None) -> None:
        self.frame.title = title

    @property
    def buttons(self) -> list[Button]:
        return self.frame.buttons

    @buttons.setter
    def buttons(self, buttons: Iterable[Button]) -> None:
        self.frame.buttons = list(buttons)

    def add_buttons(self, buttons: Iterable[Button]) -> None:
        self.frame.add_buttons(buttons)

    def clone(self) -> "Form":
        clone = super().clone()
        clone._frame = self._frame.clone() if self._frame is not None else None
        return clone
