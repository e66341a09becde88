"""
Ops — fluent "or fail with" over every liftable shape.

    from fallible import ops as O

    user = O.awaitable_option(repo.find(uid)) | "no such user"
    body = O.document(Signup, raw) | (lambda errors: Fail(f"{len(errors)} bad fields"))
    _ = O.guard(user.active) | "account disabled"
"""

from __future__ import annotations

from fallible.ops._ops import (
    Ops,
    StepOps,
    UnitStepOps,
    from_message,
    awaitable,
    blocking,
    call_async,
    awaitable_option,
    awaitable_result,
    lazy,
    option,
    optional,
    result,
    document,
    form,
    guard,
    attempt,
)
from fallible.ops._dispatch import ops

__all__ = (
    "Ops",
    "StepOps",
    "UnitStepOps",
    "from_message",
    "ops",
    "awaitable",
    "blocking",
    "call_async",
    "awaitable_option",
    "awaitable_result",
    "lazy",
    "option",
    "optional",
    "result",
    "document",
    "form",
    "guard",
    "attempt",
)
