"""
Strict/lenient behaviour configuration for formtree.

The tree model can either report configuration mistakes (an element attached
to two parents, an array field without a prototype, a value of the wrong
shape) or absorb them silently. The active configuration is held in a
context variable so it can be scoped with ``tree_config()``.
"""

import contextvars
import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class TreeMode(Enum):
    """How the tree model reacts to configuration errors."""

    STRICT = "strict"  # Raise formtree exceptions
    LENIENT = "lenient"  # Degrade silently, log a warning where data is lost


@dataclass(frozen=True)
class TreeConfig:
    """Configuration for tree mutation and value assignment checks."""

    mode: TreeMode = TreeMode.STRICT
    check_attachment: bool = True  # add() of an element owned elsewhere
    check_cycles: bool = True  # add() of self or an ancestor
    require_array_prototype: bool = True  # array values need a Field prototype
    check_value_shape: bool = True  # object needs a mapping, array a sequence
    check_path_type: bool = True  # find() arguments must be str or sequence

    @classmethod
    def strict(cls) -> "TreeConfig":
        return cls(mode=TreeMode.STRICT)

    @classmethod
    def lenient(cls) -> "TreeConfig":
        return cls(mode=TreeMode.LENIENT)

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "TreeConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        config = dict(config)
        if "mode" in config and not isinstance(config["mode"], TreeMode):
            config["mode"] = TreeMode(config["mode"])
        return cls(**config)

    @property
    def is_strict(self) -> bool:
        return self.mode == TreeMode.STRICT

    def is_enabled(self, check: str) -> bool:
        """
        Check whether a named check should raise.

        Params:
            check: Name of one of the boolean check fields

        Returns:
            True only in strict mode with the check switched on
        """
        return self.is_strict and bool(getattr(self, check))


_DEFAULT_CONFIG = TreeConfig()

_active_config: contextvars.ContextVar[TreeConfig] = contextvars.ContextVar(
    "formtree_active_config", default=_DEFAULT_CONFIG
)


def get_config() -> TreeConfig:
    """Return the configuration active in the current context."""
    return _active_config.get()


def set_config(config: TreeConfig) -> contextvars.Token:
    """
    Install a configuration for the current context.

    Params:
        config: The configuration to activate

    Returns:
        Token to pass to ``reset_config`` to restore the previous one
    """
    return _active_config.set(config)


def reset_config(token: contextvars.Token) -> None:
    _active_config.reset(token)


@contextmanager
def tree_config(config: TreeConfig | None = None, **overrides) -> Iterator[TreeConfig]:
    """
    Scope a configuration to a ``with`` block.

    Params:
        config: Base configuration; the active one when omitted
        **overrides: Field values replacing those of the base configuration

    Yields:
        The configuration active inside the block

    Example:
        with tree_config(TreeConfig.lenient()):
            field.value = ["dropped"]
    """
    base = config if config is not None else get_config()
    if "mode" in overrides and not isinstance(overrides["mode"], TreeMode):
        overrides["mode"] = TreeMode(overrides["mode"])
    scoped = replace(base, **overrides) if overrides else base

    token = _active_config.set(scoped)
    logger.debug(f"Entered tree config scope: mode={scoped.mode.value}")
    try:
        yield scoped
    finally:
        _active_config.reset(token)
