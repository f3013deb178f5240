"""
Choice options carried by fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Option(BaseModel):
    """
    A value/label/disabled triple offered by choice-style fields.

    Options live in ``Field.options`` and are independent of the tree: they
    have no parent and no children.
    """

    model_config = ConfigDict(validate_assignment=True)

    value: Any = None
    label: str | None = None
    disabled: bool = False

    def clone(self) -> "Option":
        """
        Copy the option.

        The copy is shallow: a mutable ``value`` is shared between the
        original and the clone.
        """
        return self.model_copy()
