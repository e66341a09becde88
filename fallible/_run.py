"""
Terminal conversions — await a Step and hand its outcome to the outside.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from fallible._errors import StepFailed
from fallible._fail import Fail
from fallible._types import Step


async def run[T](step: Step[T]) -> Result[T, Fail]:
    """
    Await step as a two-branch Result.

    Example:
        match await run(pipeline):
            case Ok(order):
                ...
            case Error(fail):
                log.warning("order rejected: %s", fail.user_message())
    """
    return await step


async def run_merged(step: Step[Fail]) -> Fail:
    """Await a Step whose success value is itself a Fail; both branches merge."""
    match await step:
        case Ok(value):
            return value
        case Error(reason):
            return reason
    raise TypeError("step did not resolve to Ok or Error")


def run_lazy[T](step: Step[T]) -> LazyCoroResult[T, Fail]:
    """
    Hand step out as a disjoint union: a LazyCoroResult whose left side is the
    Fail and whose right side is the value. Nothing runs until it is awaited.

    Example:
        union = run_lazy(pipeline)
        match await union:
            case Ok(order): ...
            case Error(fail): ...

    """

    async def resolve() -> Result[T, Fail]:
        return await step

    return LazyCoroResult(resolve)


async def run_or_raise[T](step: Step[T]) -> T:
    """
    Await step and return its value, or raise StepFailed.

    The Fail's root cause, when there is one, becomes `__cause__`.
    """
    match await step:
        case Ok(value):
            return value
        case Error(reason):
            raise StepFailed(reason) from reason.root_cause()
    raise TypeError("step did not resolve to Ok or Error")


__all__ = ("run", "run_merged", "run_lazy", "run_or_raise")
