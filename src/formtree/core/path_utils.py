"""
Dotted path utilities for formtree.

Paths address descendants by name, one segment per tree level, joined with
dots (e.g. ``"address.street"``). Lookup methods accept either the dotted
string or an already split sequence of segments.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from formtree.config import get_config
from formtree.exceptions import PathValidationError

PATH_SEPARATOR = "."


@dataclass
class PathComponents:
    """Result of splitting a path into its first segment and the rest."""

    first_part: str
    remainder: list[str]

    @property
    def has_remainder(self) -> bool:
        return bool(self.remainder)

    @classmethod
    def from_segments(cls, segments: Sequence[str]) -> "PathComponents":
        """
        Split a non-empty segment sequence at its first segment.

        Params:
            segments: Path segments (e.g. ["address", "street"])

        Returns:
            PathComponents with first_part and remainder

        Examples:
            ["address", "street"] -> PathComponents("address", ["street"])
            ["name"] -> PathComponents("name", [])
        """
        return cls(first_part=segments[0], remainder=list(segments[1:]))


def split_path(path: str) -> list[str]:
    """
    Split a dotted path into its segments.

    Params:
        path: Dotted path (e.g. "address.street")

    Returns:
        List of segments; an empty path yields an empty list

    Examples:
        "address.street" -> ["address", "street"]
        "name" -> ["name"]
        "" -> []
    """
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def join_path(segments: Sequence[str]) -> str:
    """Join path segments with dots, skipping empty ones."""
    return PATH_SEPARATOR.join(segment for segment in segments if segment)


def normalize_path(path: Any) -> list[str]:
    """
    Turn a path argument into a list of segments.

    Params:
        path: Dotted path string or a sequence of segment strings

    Returns:
        List of segments, empty when there is nothing to look up

    Raises:
        PathValidationError: In strict mode, if path is neither a string nor
            a sequence of strings
    """
    if isinstance(path, str):
        return split_path(path)

    if isinstance(path, Sequence) and all(isinstance(part, str) for part in path):
        return list(path)

    if get_config().is_enabled("check_path_type"):
        raise PathValidationError(path, "must be a dotted string or a sequence of strings")
    return []
