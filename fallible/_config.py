"""Configuration: frozen Config passed explicitly to adapters that need it."""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass

from fallible._errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Config:
    """
    Execution settings for adapters that schedule or capture work.

    Example:
        pool = ThreadPoolExecutor(max_workers=4)
        config = Config(executor=pool)
        step = L.from_blocking(read_file, on_error=..., config=config)
    """

    #: Where blocking callables run. *None* uses the event loop's default executor.
    executor: Executor | None = None
    #: Exception subclasses that propagate instead of becoming a Fail.
    fatal: tuple[type[BaseException], ...] = (MemoryError, RecursionError)

    def __post_init__(self) -> None:
        if self.executor is not None and not isinstance(self.executor, Executor):
            raise ConfigurationError(
                f"executor must be a concurrent.futures.Executor, got {type(self.executor).__name__}"
            )
        for kind in self.fatal:
            if not (isinstance(kind, type) and issubclass(kind, BaseException)):
                raise ConfigurationError(f"fatal entries must be exception types, got {kind!r}")


DEFAULT_CONFIG = Config()

__all__ = ("Config", "DEFAULT_CONFIG")
