"""
Lift — adapters from each "might not have succeeded" shape into a Step.

    from fallible import lift

    user = lift.from_optional(users.get(uid), on_none=lambda: Fail("no such user"))
    body = lift.from_document(Signup, raw, on_invalid=lambda errs: Fail(str(errs)))

Every adapter takes the shape first and a keyword failure producer. Producers
for payload-less shapes (optional, guard) take no arguments.
"""

from __future__ import annotations

from fallible.lift._sync import (
    from_option,
    from_optional,
    from_result,
    from_form,
    from_bool,
    from_call,
)
from fallible.lift._async import (
    from_awaitable,
    from_async_call,
    from_blocking,
    from_awaitable_option,
    from_awaitable_result,
    from_lazy,
)
from fallible.lift._document import Validator, validate, from_document

__all__ = (
    # Synchronous
    "from_option",
    "from_optional",
    "from_result",
    "from_form",
    "from_bool",
    "from_call",
    # Asynchronous
    "from_awaitable",
    "from_async_call",
    "from_blocking",
    "from_awaitable_option",
    "from_awaitable_result",
    "from_lazy",
    # Documents
    "Validator",
    "validate",
    "from_document",
)
