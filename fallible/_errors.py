"""
Exception hierarchy for fallible.

Failures travel through pipelines as values. Exceptions here are reserved
for programmer errors and for the opt-in raising terminal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fallible._config import Config
    from fallible._fail import Fail


class FallibleError(Exception):
    """Base exception for all fallible errors."""


class CombineError(FallibleError):
    """Two failures were combined. A pipeline carries a single causal thread."""


class ConfigurationError(FallibleError, ValueError):
    """Config validation failed."""


class UnsupportedShape(FallibleError, TypeError):
    """Value outside the closed set of shapes `ops()` can dispatch."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (hint: {self.hint})" if self.hint else base


class StepFailed(FallibleError):
    """Raised by `run_or_raise` when a step resolves to a Fail."""

    def __init__(self, fail: Fail) -> None:
        super().__init__(fail.user_message())
        self.fail = fail


def is_fatal(exc: BaseException, config: Config) -> bool:
    """
    Fatal errors are never turned into a Fail.

    Anything that is not an `Exception` (cancellation, exit, interrupt)
    is fatal, plus the `Exception` subclasses listed in `config.fatal`.
    """
    if not isinstance(exc, Exception):
        return True
    return isinstance(exc, config.fatal)


__all__ = (
    "FallibleError",
    "CombineError",
    "ConfigurationError",
    "UnsupportedShape",
    "StepFailed",
    "is_fatal",
)
