"""
Synchronous shapes — resolved on the spot, wrapped into an already-settled Step.
"""

from __future__ import annotations

import logging

from combinators import lift as L
from kungfu import Error, Ok, Option, Result, Some

from fallible._config import DEFAULT_CONFIG, Config
from fallible._errors import is_fatal
from fallible._fail import Fail
from fallible._types import OnEmpty, OnError, Step, Thunk, ValidatedForm

log = logging.getLogger(__name__)


def rejected(fail: Fail, trigger: str) -> Fail:
    """Record a trigger turned into a Fail and pass the Fail through."""
    log.debug("%s -> fail %r", trigger, fail.message)
    return fail


def captured(fail: Fail, exc: Exception) -> Fail:
    """Record a non-fatal exception turned into a Fail."""
    log.debug("captured %s -> fail %r", type(exc).__name__, fail.message, exc_info=exc)
    return fail


# ═══════════════════════════════════════════════════════════════════════════════
# Optional values
# ═══════════════════════════════════════════════════════════════════════════════


def from_option[T](option: Option[T], *, on_none: OnEmpty) -> Step[T]:
    """
    Lift a kungfu Option: Some(v) succeeds with v, Nothing fails.

    Example:
        step = lift.from_option(cache.lookup(key), on_none=lambda: Fail("cache miss"))
    """
    match option:
        case Some(value):
            return L.pure(value)
        case _:
            return L.fail(rejected(on_none(), "empty option"))


def from_optional[T](value: T | None, *, on_none: OnEmpty) -> Step[T]:
    """Lift a native optional: None fails, anything else succeeds."""
    if value is None:
        return L.fail(rejected(on_none(), "None value"))
    return L.pure(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Two-branch result
# ═══════════════════════════════════════════════════════════════════════════════


def from_result[T, E](result: Result[T, E], *, on_error: OnError[E]) -> Step[T]:
    """Lift a Result: Ok passes through, Error(e) becomes on_error(e)."""
    match result:
        case Ok(value):
            return L.pure(value)
        case Error(err):
            return L.fail(rejected(on_error(err), "error result"))
    raise TypeError(f"expected Ok or Error, got {type(result).__name__}")


# ═══════════════════════════════════════════════════════════════════════════════
# Form & guard
# ═══════════════════════════════════════════════════════════════════════════════


def from_form[T](
    form: ValidatedForm[T],
    *,
    on_invalid: OnError[ValidatedForm[T]],
) -> Step[T]:
    """
    Lift a bound form. Valid forms yield their data; invalid ones are handed
    to on_invalid whole, errors included.
    """
    if form.validate():
        return L.pure(form.data)
    return L.fail(rejected(on_invalid(form), "invalid form"))


def from_bool(flag: bool, *, on_false: OnEmpty) -> Step[None]:
    """
    Guard: True continues with None, False fails.

    Example:
        lift.from_bool(user.is_admin, on_false=lambda: Fail("admin only"))
    """
    if flag:
        return L.pure(None)
    return L.fail(rejected(on_false(), "guard is false"))


# ═══════════════════════════════════════════════════════════════════════════════
# Eager call
# ═══════════════════════════════════════════════════════════════════════════════


def from_call[T](
    fn: Thunk[T],
    *,
    on_error: OnError[Exception],
    config: Config = DEFAULT_CONFIG,
) -> Step[T]:
    """
    Call fn now. A non-fatal exception becomes on_error(exc); fatal ones propagate.

    Example:
        lift.from_call(lambda: int(raw), on_error=lambda e: Fail("not a number").with_root(e))
    """
    try:
        value = fn()
    except Exception as exc:
        if is_fatal(exc, config):
            raise
        return L.fail(captured(on_error(exc), exc))
    return L.pure(value)


__all__ = (
    "from_option",
    "from_optional",
    "from_result",
    "from_form",
    "from_bool",
    "from_call",
)
