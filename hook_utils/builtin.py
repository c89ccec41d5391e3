"""Built-in hooks composed from the context guard and item accessors."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from datetime import datetime, timezone
from typing import Any

from .context import check_context
from .dotpath import MISSING, has_by_dot, set_by_dot
from .invocation import HookInvocation
from .items import get_items, replace_items

HookFn = Callable[[HookInvocation], HookInvocation]


def _each_item(items: Any) -> list[MutableMapping[str, Any]]:
    """Return the mappings in ``items``, which is one item or a list of them."""
    if isinstance(items, MutableMapping):
        return [items]
    if isinstance(items, (list, tuple)):
        return [item for item in items if isinstance(item, MutableMapping)]
    return []


def set_now(*paths: str) -> HookFn:
    """Return a hook that stamps the current UTC time at each dot path.

    Only valid before ``create``, ``update`` or ``patch``.
    """
    paths = paths or ("created_at",)

    def hook(invocation: HookInvocation) -> HookInvocation:
        check_context(invocation, "before", ["create", "update", "patch"], "set_now")
        now = datetime.now(timezone.utc)
        for item in _each_item(get_items(invocation)):
            for path in paths:
                set_by_dot(item, path, now)
        return invocation

    return hook


def discard(*paths: str) -> HookFn:
    """Return a hook that deletes each dot path from every item.

    Paths an item does not have are left alone; no parents are created.

    Usable in either phase. Before ``remove`` there is no payload, so that
    combination is rejected.
    """

    def hook(invocation: HookInvocation) -> HookInvocation:
        if invocation.is_before:
            check_context(
                invocation, "before", ["find", "get", "create", "update", "patch"], "discard"
            )
        items = get_items(invocation)
        for item in _each_item(items):
            for path in paths:
                if has_by_dot(item, path):
                    set_by_dot(item, path, MISSING, True)
        replace_items(invocation, items)
        return invocation

    return hook
