"""
Opaque widget capability attached to tree elements.

Rendering layers subclass ``Widget`` (or attach arbitrary attributes to it);
the tree model never inspects it and only clones it alongside its element.
"""

from pydantic import BaseModel, ConfigDict


class Widget(BaseModel):
    """Clonable attachment point for a rendering layer."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    def clone(self) -> "Widget":
        """Shallow copy: attributes are copied, mutable payloads are shared."""
        return self.model_copy()
