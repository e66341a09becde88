"""
Asynchronous shapes — each lift is a suspension point inside the returned Step.

Nothing runs until the Step is awaited. Coroutines are single-use, so is the
Step built around one.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from concurrent.futures import Future as ConcurrentFuture

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from fallible._config import DEFAULT_CONFIG, Config
from fallible._errors import is_fatal
from fallible._fail import Fail
from fallible._types import AsyncThunk, OnEmpty, OnError, Step, Thunk
from fallible.lift._sync import captured, rejected

type AnyAwaitable[T] = Awaitable[T] | ConcurrentFuture[T]


def _as_awaitable[T](awaitable: AnyAwaitable[T]) -> Awaitable[T]:
    if isinstance(awaitable, ConcurrentFuture):
        return asyncio.wrap_future(awaitable)
    return awaitable


def _catching[T](
    thunk: AsyncThunk[T],
    on_error: OnError[Exception],
    config: Config,
) -> Step[T]:
    async def run() -> Result[T, Fail]:
        try:
            value = await thunk()
        except Exception as exc:
            if is_fatal(exc, config):
                raise
            return Error(captured(on_error(exc), exc))
        return Ok(value)

    return LazyCoroResult(run)


def _settle[T, E](result: Result[T, E], on_error: OnError[E]) -> Result[T, Fail]:
    match result:
        case Ok(value):
            return Ok(value)
        case Error(err):
            return Error(rejected(on_error(err), "error result"))
    raise TypeError(f"expected Ok or Error, got {type(result).__name__}")


# ═══════════════════════════════════════════════════════════════════════════════
# Raising computations
# ═══════════════════════════════════════════════════════════════════════════════


def from_awaitable[T](
    awaitable: AnyAwaitable[T],
    *,
    on_error: OnError[Exception],
    config: Config = DEFAULT_CONFIG,
) -> Step[T]:
    """
    Lift an awaitable that may raise.

    Accepts coroutines, asyncio futures/tasks and `concurrent.futures.Future`.
    Non-fatal exceptions become on_error(exc); fatal ones (cancellation,
    interpreter exit, `config.fatal`) propagate unchanged.

    Example:
        step = lift.from_awaitable(
            repo.load(user_id),
            on_error=lambda e: Fail("load failed").with_root(e),
        )
    """
    return _catching(lambda: _as_awaitable(awaitable), on_error, config)


def from_async_call[T](
    fn: AsyncThunk[T],
    *,
    on_error: OnError[Exception],
    config: Config = DEFAULT_CONFIG,
) -> Step[T]:
    """
    Call a coroutine function when the Step is awaited, not before.

    Unlike from_awaitable, no coroutine object exists until then, so a Step
    that is built and dropped leaves nothing un-awaited behind.
    """
    return _catching(fn, on_error, config)


def from_blocking[T](
    fn: Thunk[T],
    *,
    on_error: OnError[Exception],
    config: Config = DEFAULT_CONFIG,
) -> Step[T]:
    """
    Run a blocking callable on `config.executor` when the Step is awaited.

    Example:
        config = Config(executor=ThreadPoolExecutor(4))
        step = lift.from_blocking(
            lambda: Path("data.csv").read_text(),
            on_error=lambda e: Fail("read failed").with_root(e),
            config=config,
        )
    """

    async def submit() -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(config.executor, fn)

    return _catching(submit, on_error, config)


# ═══════════════════════════════════════════════════════════════════════════════
# Async optional / result / lazy result
# ═══════════════════════════════════════════════════════════════════════════════


def from_awaitable_option[T](
    awaitable: AnyAwaitable[Option[T] | T | None],
    *,
    on_none: OnEmpty,
) -> Step[T]:
    """
    Lift an awaitable optional. Some(v) and plain values succeed; Nothing and
    None fail. Exceptions raised by the awaitable are not captured.
    """

    async def run() -> Result[T, Fail]:
        match await _as_awaitable(awaitable):
            case Some(value):
                return Ok(value)
            case None | Nothing():
                return Error(rejected(on_none(), "empty option"))
            case value:
                return Ok(value)

    return LazyCoroResult(run)


def from_awaitable_result[T, E](
    awaitable: AnyAwaitable[Result[T, E]],
    *,
    on_error: OnError[E],
) -> Step[T]:
    """Lift an awaitable Result: Error(e) becomes on_error(e)."""

    async def run() -> Result[T, Fail]:
        return _settle(await _as_awaitable(awaitable), on_error)

    return LazyCoroResult(run)


def from_lazy[T, E](lazy: LazyCoroResult[T, E], *, on_error: OnError[E]) -> Step[T]:
    """
    Re-target a LazyCoroResult's error channel onto Fail.

    Example:
        step = lift.from_lazy(cache.get(uid), on_error=lambda e: Fail(str(e)))
    """

    async def run() -> Result[T, Fail]:
        return _settle(await lazy, on_error)

    return LazyCoroResult(run)


__all__ = (
    "from_awaitable",
    "from_async_call",
    "from_blocking",
    "from_awaitable_option",
    "from_awaitable_result",
    "from_lazy",
)
