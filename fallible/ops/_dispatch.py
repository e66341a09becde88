"""
ops() — pick the entry point from the shape of a value.

Only shapes recognisable without awaiting are dispatched. Awaitables hide
their shape until resolved, so they need an explicit entry point.
"""

from __future__ import annotations

import inspect
from concurrent.futures import Future as ConcurrentFuture
from typing import Any, Never, overload

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from fallible._errors import UnsupportedShape
from fallible._types import ValidatedForm
from fallible.ops._ops import (
    Ops,
    StepOps,
    UnitStepOps,
    form,
    guard,
    lazy,
    option,
    optional,
    result,
)


@overload
def ops(value: bool) -> UnitStepOps[None]: ...
@overload
def ops(value: None) -> UnitStepOps[Never]: ...
@overload
def ops[T](value: Option[T]) -> UnitStepOps[T]: ...
@overload
def ops[T, E](value: Result[T, E]) -> StepOps[T, E]: ...
@overload
def ops[T, E](value: LazyCoroResult[T, E]) -> StepOps[T, E]: ...
@overload
def ops[T](value: ValidatedForm[T]) -> StepOps[T, ValidatedForm[T]]: ...


def ops(value: object) -> Ops[Any, Any]:
    """
    Dispatch a value to its entry point.

    Example:
        from fallible import ops as O

        step = O.ops(user.is_admin) | "admin only"
        step = O.ops(repo.find(uid)) | (lambda err: Fail(f"lookup failed: {err}"))
    """
    match value:
        case bool():
            return guard(value)
        case None:
            return optional(None)
        case Some() | Nothing():
            return option(value)
        case Ok() | Error():
            return result(value)
        case LazyCoroResult():
            return lazy(value)
        case ValidatedForm():
            return form(value)
        case _ if inspect.isawaitable(value) or isinstance(value, ConcurrentFuture):
            raise UnsupportedShape(
                f"cannot tell the shape of {type(value).__name__} before awaiting it",
                hint="use awaitable(), awaitable_option() or awaitable_result()",
            )
        case _:
            raise UnsupportedShape(
                f"no adapter for {type(value).__name__}",
                hint="use optional() for values that may be None, attempt() for callables",
            )


__all__ = ("ops",)
