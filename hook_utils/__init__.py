"""Helpers for service hooks.

Dot-path access to nested mappings, a context guard for hook functions, and
accessors that normalize a hook's data items across lifecycle shapes.
"""

from .context import check_context
from .dotpath import MISSING, get_by_dot, has_by_dot, set_by_dot, split_path
from .errors import ContextMismatch, HookUtilsError, InvalidPathError, OperationMismatch
from .invocation import HookInvocation, Operation, Phase
from .items import get_items, replace_items

__all__ = [
    "MISSING",
    "ContextMismatch",
    "HookInvocation",
    "HookUtilsError",
    "InvalidPathError",
    "Operation",
    "OperationMismatch",
    "Phase",
    "check_context",
    "get_by_dot",
    "get_items",
    "has_by_dot",
    "replace_items",
    "set_by_dot",
    "split_path",
]
