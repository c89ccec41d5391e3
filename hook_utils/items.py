"""Read and replace the data items of a hook invocation.

Items are ``input_payload`` before the operation, and ``output_payload``
after it, except for paginated ``find`` results where they live inside the
envelope (``output_payload["items"]``, with the count in ``"total"``).
Envelope key names come from :class:`~hook_utils.config.Settings`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import get_settings
from .invocation import HookInvocation


def _paginated(invocation: HookInvocation) -> bool:
    result = invocation.output_payload
    return (
        invocation.is_find
        and isinstance(result, Mapping)
        and result.get(get_settings().items_key) is not None
    )


def get_items(invocation: HookInvocation) -> Any:
    """Return the data item or list of data items in a hook.

    The payload itself is returned, not a copy.
    """
    if invocation.is_before:
        return invocation.input_payload
    if _paginated(invocation):
        return invocation.output_payload[get_settings().items_key]
    return invocation.output_payload


def replace_items(invocation: HookInvocation, items: Any) -> None:
    """Replace the data items in a hook. Companion to :func:`get_items`.

    Replacing the items of a paginated ``find`` result with a single item
    leaves a one-element list in the envelope.
    """
    if invocation.is_before:
        invocation.input_payload = items
    elif _paginated(invocation):
        settings = get_settings()
        envelope = invocation.output_payload
        if isinstance(items, (list, tuple)):
            envelope[settings.items_key] = items
            envelope[settings.total_key] = len(items)
        else:
            envelope[settings.items_key] = [items]
            envelope[settings.total_key] = 1
    else:
        invocation.output_payload = items
