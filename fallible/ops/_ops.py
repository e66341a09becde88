"""
Step ops — the fluent "or fail with" operator.

A StepOps holds one shape and knows which adapter lifts it. Supplying the
failure producer (or a plain message) yields the Step:

    step = O.optional(user) | (lambda: Fail("no such user"))
    step = O.awaitable(repo.load(uid)) | "load failed"
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import LazyCoroResult, Option, Result

from fallible import lift as FL
from fallible._config import DEFAULT_CONFIG, Config
from fallible._fail import Fail
from fallible._types import (
    AsyncThunk,
    ErrorList,
    OnEmpty,
    OnError,
    Step,
    Thunk,
    ValidatedForm,
)
from fallible.lift._async import AnyAwaitable
from fallible.lift._document import Validator

# ═══════════════════════════════════════════════════════════════════════════════
# Message sugar
# ═══════════════════════════════════════════════════════════════════════════════


def from_message(message: str, payload: object) -> Fail:
    """
    Fail for `ops | "message"`.

    An exception payload becomes the root cause; any other payload is shown
    as the inner message, annotated with `message`. Payload-less shapes pass
    None, so their inner message is "None".
    """
    if isinstance(payload, BaseException):
        return Fail(message).with_root(payload)
    return Fail(str(payload)).annotate(message)


# ═══════════════════════════════════════════════════════════════════════════════
# Ops — Base
# ═══════════════════════════════════════════════════════════════════════════════


class Ops[T, H](ABC):
    """
    A liftable shape waiting for its failure producer.

    `ops | handler` accepts either a producer callable or a plain message.
    """

    __slots__ = ()

    @abstractmethod
    def or_fail_with(self, handler: H) -> Step[T]: ...

    @abstractmethod
    def or_fail(self, message: str) -> Step[T]: ...

    def __or__(self, handler: H | str) -> Step[T]:
        if isinstance(handler, str):
            return self.or_fail(handler)
        return self.or_fail_with(handler)


@dataclass(frozen=True, slots=True)
class StepOps[T, P](Ops[T, OnError[P]]):
    """Shape whose failure branch carries a payload of type P."""

    lift: Callable[[OnError[P]], Step[T]]

    def or_fail_with(self, handler: OnError[P]) -> Step[T]:
        return self.lift(handler)

    def or_fail(self, message: str) -> Step[T]:
        return self.lift(lambda payload: from_message(message, payload))


@dataclass(frozen=True, slots=True)
class UnitStepOps[T](Ops[T, OnEmpty]):
    """Shape whose failure branch carries nothing: optional values, guards."""

    lift: Callable[[OnEmpty], Step[T]]

    def or_fail_with(self, handler: OnEmpty) -> Step[T]:
        return self.lift(handler)

    def or_fail(self, message: str) -> Step[T]:
        return self.lift(lambda: from_message(message, None))


# ═══════════════════════════════════════════════════════════════════════════════
# Entry points — one per shape
# ═══════════════════════════════════════════════════════════════════════════════


def awaitable[T](
    aw: AnyAwaitable[T],
    *,
    config: Config = DEFAULT_CONFIG,
) -> StepOps[T, Exception]:
    """Awaitable that may raise."""
    return StepOps(lambda h: FL.from_awaitable(aw, on_error=h, config=config))


def blocking[T](
    fn: Thunk[T],
    *,
    config: Config = DEFAULT_CONFIG,
) -> StepOps[T, Exception]:
    """Blocking callable, run on `config.executor` when awaited."""
    return StepOps(lambda h: FL.from_blocking(fn, on_error=h, config=config))


def call_async[T](
    fn: AsyncThunk[T],
    *,
    config: Config = DEFAULT_CONFIG,
) -> StepOps[T, Exception]:
    """Coroutine function, called only when the Step is awaited."""
    return StepOps(lambda h: FL.from_async_call(fn, on_error=h, config=config))


def awaitable_option[T](aw: AnyAwaitable[Option[T] | T | None]) -> UnitStepOps[T]:
    return UnitStepOps(lambda h: FL.from_awaitable_option(aw, on_none=h))


def awaitable_result[T, E](aw: AnyAwaitable[Result[T, E]]) -> StepOps[T, E]:
    return StepOps(lambda h: FL.from_awaitable_result(aw, on_error=h))


def lazy[T, E](lcr: LazyCoroResult[T, E]) -> StepOps[T, E]:
    return StepOps(lambda h: FL.from_lazy(lcr, on_error=h))


def option[T](opt: Option[T]) -> UnitStepOps[T]:
    return UnitStepOps(lambda h: FL.from_option(opt, on_none=h))


def optional[T](value: T | None) -> UnitStepOps[T]:
    return UnitStepOps(lambda h: FL.from_optional(value, on_none=h))


def result[T, E](res: Result[T, E]) -> StepOps[T, E]:
    return StepOps(lambda h: FL.from_result(res, on_error=h))


def document[T](
    validator: Validator[T],
    data: object,
    *,
    json: bool | None = None,
) -> StepOps[T, ErrorList]:
    """Raw data checked against a pydantic model or TypeAdapter."""
    return StepOps(lambda h: FL.from_document(validator, data, on_invalid=h, json=json))


def form[T](f: ValidatedForm[T]) -> StepOps[T, ValidatedForm[T]]:
    return StepOps(lambda h: FL.from_form(f, on_invalid=h))


def guard(flag: bool) -> UnitStepOps[None]:
    return UnitStepOps(lambda h: FL.from_bool(flag, on_false=h))


def attempt[T](fn: Thunk[T], *, config: Config = DEFAULT_CONFIG) -> StepOps[T, Exception]:
    """Callable evaluated eagerly, once the failure producer is supplied."""
    return StepOps(lambda h: FL.from_call(fn, on_error=h, config=config))


__all__ = (
    "Ops",
    "StepOps",
    "UnitStepOps",
    "from_message",
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
