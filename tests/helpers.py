"""Small helpers to unpack a Step's outcome in assertions."""

from __future__ import annotations

from typing import Any

from kungfu import Error, Ok

from fallible import Fail, Step


async def ok_value(step: Step[Any]) -> Any:
    match await step:
        case Ok(value):
            return value
        case Error(reason):
            raise AssertionError(f"expected Ok, got Fail: {reason.user_message()}")
    raise AssertionError("step did not resolve to Ok or Error")


async def fail_of(step: Step[Any]) -> Fail:
    match await step:
        case Error(reason):
            assert isinstance(reason, Fail)
            return reason
        case Ok(value):
            raise AssertionError(f"expected Fail, got Ok({value!r})")
    raise AssertionError("step did not resolve to Ok or Error")
