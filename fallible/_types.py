"""
Core types for fallible.

Re-exports from kungfu + the Step alias and the external shapes adapters accept.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

from fallible._fail import Fail

# ═══════════════════════════════════════════════════════════════════════════════
# Step — the common pipeline type
# ═══════════════════════════════════════════════════════════════════════════════

type Step[T] = LazyCoroResult[T, Fail]
"""Lazy async computation yielding T or a Fail."""

# ═══════════════════════════════════════════════════════════════════════════════
# Failure producers
# ═══════════════════════════════════════════════════════════════════════════════

type OnError[P] = Callable[[P], Fail]
"""Builds a Fail from the failure trigger payload."""

type OnEmpty = Callable[[], Fail]
"""Builds a Fail for shapes whose failure carries no payload."""

# ═══════════════════════════════════════════════════════════════════════════════
# External shapes
# ═══════════════════════════════════════════════════════════════════════════════

type ErrorList = list[Any]
"""Structured validation errors, as returned by `ValidationError.errors()`."""

type Thunk[T] = Callable[[], T]

type AsyncThunk[T] = Callable[[], Awaitable[T]]


@runtime_checkable
class ValidatedForm[T](Protocol):
    """
    A bound form: `validate()` reports whether it holds errors, `data` is the
    bound value. WTForms-style forms satisfy this structurally.
    """

    @property
    def data(self) -> T: ...

    def validate(self) -> bool: ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Pipeline
    "Step",
    "OnError",
    "OnEmpty",
    # Shapes
    "ErrorList",
    "Thunk",
    "AsyncThunk",
    "ValidatedForm",
)
