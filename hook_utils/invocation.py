"""Hook invocation types.

A :class:`HookInvocation` is the context a service hook receives for one
call. The hosting framework builds it; the helpers in this package only read
and mutate its fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Phase(Enum):
    """When the hook fires relative to the service operation."""

    BEFORE = "before"
    AFTER = "after"


class Operation(Enum):
    """Service operations a hook can be attached to."""

    FIND = "find"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    PATCH = "patch"
    REMOVE = "remove"


@dataclass
class HookInvocation:
    """Context passed to a hook.

    ``input_payload`` is the incoming data and is only meaningful in the
    ``before`` phase. ``output_payload`` is the operation result and is only
    meaningful ``after``; for ``find`` it may be a paginated envelope such as
    ``{"items": [...], "total": 2}``.

    String values for ``phase`` and ``operation`` are coerced to the enums,
    both on construction and when the framework reassigns them later.
    """

    phase: Phase
    operation: Operation
    input_payload: Any | None = None
    output_payload: Any | None = None
    id: Any | None = None
    params: dict[str, Any] = field(default_factory=dict)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "phase":
            value = Phase(value)
        elif name == "operation":
            value = Operation(value)
        super().__setattr__(name, value)

    @property
    def is_before(self) -> bool:
        return self.phase is Phase.BEFORE

    @property
    def is_find(self) -> bool:
        return self.operation is Operation.FIND
