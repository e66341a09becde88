"""
Sequencing — bind Steps left to right, stopping at the first Fail.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from combinators import lift as L
from kungfu import Error, LazyCoroResult, Ok, Result

from fallible._fail import Fail
from fallible._types import Step

log = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def succeed[T](value: T) -> Step[T]:
    """Already-resolved successful Step."""
    return L.pure(value)


def fail(reason: Fail | str) -> Step[Any]:
    """Already-resolved failed Step."""
    return L.fail(Fail(reason) if isinstance(reason, str) else reason)


# ═══════════════════════════════════════════════════════════════════════════════
# then() — Monadic Bind
# ═══════════════════════════════════════════════════════════════════════════════


def then[T, U](step: Step[T], f: Callable[[T], Step[U]]) -> Step[U]:
    """
    Run step, then the Step built by f from its value.

    A Fail short-circuits: f is never called and the Fail is passed on as is.

    Example:
        pipeline = then(load_user(uid), lambda user: check_quota(user))
    """

    async def run() -> Result[U, Fail]:
        match await step:
            case Ok(value):
                return await f(value)
            case Error(reason):
                log.debug("short-circuit on %r", reason.message)
                return Error(reason)
        raise TypeError("step did not resolve to Ok or Error")

    return LazyCoroResult(run)


def map[T, U](step: Step[T], f: Callable[[T], U]) -> Step[U]:
    """Transform the value of a successful Step."""

    async def run() -> Result[U, Fail]:
        match await step:
            case Ok(value):
                return Ok(f(value))
            case other:
                return other

    return LazyCoroResult(run)


def zero(_value: object) -> Fail:
    """Default on_false of ensure(): the zero Fail, whatever the value."""
    return Fail.empty()


def ensure[T](
    step: Step[T],
    predicate: Callable[[T], bool],
    on_false: Callable[[T], Fail] = zero,
) -> Step[T]:
    """
    Keep the value only if predicate holds.

    Rejected values become on_false(value), the zero Fail by default.
    """

    def check(value: T) -> Step[T]:
        if predicate(value):
            return succeed(value)
        return fail(on_false(value))

    return then(step, check)


def annotate[T](step: Step[T], message: str) -> Step[T]:
    """Wrap the Fail of step, if any, with one more hop of context."""

    async def run() -> Result[T, Fail]:
        match await step:
            case Error(reason):
                return Error(reason.annotate(message))
            case other:
                return other

    return LazyCoroResult(run)


def chain(step: Step[Any], *fns: Callable[[Any], Step[Any]]) -> Step[Any]:
    """
    Fold then() over fns, left to right.

    Example:
        order = chain(
            parse_request(raw),
            lambda req: load_user(req.user_id),
            lambda user: place_order(user),
        )
    """
    for f in fns:
        step = then(step, f)
    return step


__all__ = ("succeed", "fail", "then", "map", "zero", "ensure", "annotate", "chain")
