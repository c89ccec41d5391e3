"""Guard that restricts a hook to a phase and a set of operations."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from enum import Enum

from .config import get_settings
from .errors import ContextMismatch, OperationMismatch
from .invocation import HookInvocation, Operation, Phase

logger = logging.getLogger("hook-utils.context")


def _name(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


def check_context(
    invocation: HookInvocation,
    phase: str | Phase | None = None,
    operations: str | Operation | Iterable[str | Operation] | None = (),
    label: str | None = None,
) -> None:
    """Raise if ``invocation`` is not in an allowed phase and operation.

    ``phase`` of None allows either phase. ``operations`` may be one name or
    a collection of names; None or an empty collection allows any operation.

    Example::

        def include_created_at(invocation):
            check_context(invocation, "before", "create", "include_created_at")
            invocation.input_payload["created_at"] = datetime.now(timezone.utc)
            return invocation

        check_context(invocation, "before", ["update", "patch"], "hook_name")
        check_context(invocation, None, ["update", "patch"])
        check_context(invocation, "before")
    """
    if label is None:
        label = get_settings().default_label

    if phase and invocation.phase.value != _name(phase):
        logger.debug(
            "Hook %s rejected: phase %s, expected %s",
            label, invocation.phase.value, _name(phase),
        )
        raise ContextMismatch(label, _name(phase))

    if not operations:
        return

    if isinstance(operations, (str, Operation)):
        allowed = [_name(operations)]
    else:
        allowed = [_name(op) for op in operations]

    if allowed and invocation.operation.value not in allowed:
        logger.debug(
            "Hook %s rejected: operation %s, expected one of %s",
            label, invocation.operation.value, allowed,
        )
        raise OperationMismatch(label, allowed, json.dumps(allowed))
