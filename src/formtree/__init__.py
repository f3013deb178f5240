"""
formtree - A tree-structured data model for forms

formtree provides path-addressed form elements, typed fields whose object and
array values propagate into their children, and structural cloning.
"""

from importlib.metadata import version

from formtree.config import TreeConfig, TreeMode, get_config, set_config, tree_config
from formtree.core import Element, Field, FieldType, Option, Widget, join_path, split_path
from formtree.form import Button, Form, FormFrame

__version__ = version("formtree")

__all__ = [
    "__version__",
    "Element",
    "Field",
    "FieldType",
    "Option",
    "Widget",
    "Form",
    "FormFrame",
    "Button",
    "TreeConfig",
    "TreeMode",
    "get_config",
    "set_config",
    "tree_config",
    "join_path",
    "split_path",
]
