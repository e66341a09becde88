"""
Fail — chainable failure description.

A Fail carries a message and at most one cause: either a root exception
(terminal) or a parent Fail (one more hop). Every `annotate` adds a hop,
every `with_root` terminates the chain. Values are immutable.

    f = Fail("parse failed").with_root(OSError("disk gone"))
    g = f.annotate("request rejected")

    g.user_message()
    # 'request rejected <- request rejected <- parse failed <- parse failed <- disk gone'
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from fallible._errors import CombineError

# ═══════════════════════════════════════════════════════════════════════════════
# Cause — Root Exception | Parent Fail
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Root:
    """Terminal low-level error at the end of a chain."""

    error: BaseException


@dataclass(frozen=True, slots=True)
class Parent:
    """Previous hop of the chain."""

    fail: Fail


type Cause = Root | Parent


def describe(error: BaseException) -> str:
    """Display text of a root error; class name when it carries no message."""
    return str(error) or type(error).__name__


# ═══════════════════════════════════════════════════════════════════════════════
# Fail
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Fail:
    """
    Why a pipeline stopped.

    `messages()` repeats each hop's message once before descending into its
    cause. Consumers parsing `user_message()` rely on that layout.
    """

    message: str
    cause: Cause | None = None

    @classmethod
    def empty(cls) -> Fail:
        """The zero Fail, used when a filter rejects a value."""
        return cls("")

    def annotate(self, message: str) -> Fail:
        """New Fail with `message`, keeping this one as parent."""
        return Fail(message, Parent(self))

    def with_root(self, error: BaseException) -> Fail:
        """Same message, cause replaced by a root error."""
        return replace(self, cause=Root(error))

    def chain(self) -> Iterator[Fail]:
        """Walk the hops from this Fail down to the last one."""
        node: Fail | None = self
        while node is not None:
            yield node
            match node.cause:
                case Parent(parent):
                    node = parent
                case _:
                    node = None

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.chain())

    def messages(self) -> list[str]:
        out: list[str] = []
        for node in self.chain():
            match node.cause:
                case None:
                    out.append(node.message)
                case Root(error):
                    out.extend((node.message, node.message, describe(error)))
                case Parent():
                    out.extend((node.message, node.message))
        return out

    def user_message(self) -> str:
        return " <- ".join(self.messages())

    def root_cause(self) -> BaseException | None:
        for node in self.chain():
            if isinstance(node.cause, Root):
                return node.cause.error
        return None

    def __add__(self, other: object) -> Fail:
        raise CombineError(
            f"cannot combine {self.message!r} with {other!r}: "
            "a pipeline stops at its first failure"
        )

    def __str__(self) -> str:
        return self.user_message()


__all__ = ("Fail", "Cause", "Root", "Parent", "describe")
