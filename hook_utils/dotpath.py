"""Dot-notation access to nested mappings, e.g. ``employee.address.city``.

Only mappings are traversed. List indices are never interpreted, so
``"items.0"`` looks up the key ``"0"`` and finds nothing inside a list.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from .config import get_settings
from .errors import InvalidPathError

logger = logging.getLogger("hook-utils.dotpath")


class _Missing:
    """Marker for a value that is not there."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def split_path(path: str, strict: bool | None = None) -> list[str]:
    """Split a dot path into its segments.

    Empty segments are kept as literal ``""`` keys unless strict checking
    is enabled, in which case they raise :class:`InvalidPathError`.
    ``strict=None`` defers to ``Settings.strict_paths``.
    """
    parts = path.split(".")
    if strict is None:
        strict = get_settings().strict_paths
    if strict and "" in parts:
        raise InvalidPathError(path)
    return parts


def get_by_dot(
    root: Any, path: str, default: Any = MISSING, strict: bool | None = None
) -> Any:
    """Get a value from nested mappings using dot notation.

    Returns ``default`` (``MISSING`` unless given) when a key is missing or
    an intermediate value is not a mapping. A stored value equal to
    ``default`` cannot be told apart from a missing one; use
    :func:`has_by_dot` for that.
    """
    current = root
    for part in split_path(path, strict):
        if not isinstance(current, Mapping):
            return default
        current = current.get(part, MISSING)
    return default if current is MISSING else current


def has_by_dot(root: Any, path: str, strict: bool | None = None) -> bool:
    """Return True if every segment of ``path`` exists as a mapping key."""
    current = root
    for part in split_path(path, strict):
        if not isinstance(current, Mapping) or part not in current:
            return False
        current = current[part]
    return True


def set_by_dot(
    root: MutableMapping[str, Any],
    path: str,
    value: Any,
    delete_if_absent: bool = False,
    strict: bool | None = None,
) -> MutableMapping[str, Any]:
    """Set a value in nested mappings using dot notation.

    Missing or non-mapping intermediates are replaced with new empty dicts.
    To delete a key pass ``value=MISSING`` and ``delete_if_absent=True``.
    Intermediate dicts created on the way are kept, so
    ``set_by_dot({}, "a.b.c", MISSING, True)`` returns ``{"a": {"b": {}}}``.

    ``root`` is modified in place and returned.
    """
    if not isinstance(root, MutableMapping):
        raise TypeError(f"set_by_dot needs a mutable mapping, got {type(root).__name__}")

    *parents, last = split_path(path, strict)
    current = root
    for part in parents:
        if not isinstance(current.get(part), MutableMapping):
            current[part] = {}
        current = current[part]

    if value is MISSING and delete_if_absent:
        current.pop(last, None)
        logger.debug("Deleted %s", path)
    else:
        current[last] = value
    return root
