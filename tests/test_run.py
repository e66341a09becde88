from __future__ import annotations

import pytest
from kungfu import Error, LazyCoroResult, Ok

import fallible as F
from fallible import Fail, StepFailed, lift, ops as O
from tests.helpers import fail_of

pytestmark = pytest.mark.unit


@pytest.mark.asyncio
async def test_run_yields_two_branch_result() -> None:
    match await F.run(F.succeed("v")):
        case Ok(value):
            assert value == "v"
        case other:
            pytest.fail(f"unexpected {other!r}")

    match await F.run(O.optional(None) | (lambda: Fail("missing id"))):
        case Error(fail):
            assert fail.user_message() == "missing id"
        case other:
            pytest.fail(f"unexpected {other!r}")


@pytest.mark.asyncio
async def test_run_merged_returns_fail_from_either_branch() -> None:
    produced = Fail("report")
    assert await F.run_merged(F.succeed(produced)) is produced

    failed = Fail("stopped")
    assert await F.run_merged(F.fail(failed)) is failed


@pytest.mark.asyncio
async def test_run_or_raise_returns_value() -> None:
    assert await F.run_or_raise(F.succeed(3)) == 3


@pytest.mark.asyncio
async def test_run_or_raise_chains_root_cause() -> None:
    err = OSError("disk gone")
    step = F.fail(Fail("parse failed").with_root(err).annotate("request rejected"))

    with pytest.raises(StepFailed) as info:
        await F.run_or_raise(step)

    assert info.value.fail.root_cause() is err
    assert info.value.__cause__ is err
    assert str(info.value) == info.value.fail.user_message()


@pytest.mark.asyncio
async def test_run_or_raise_without_root() -> None:
    with pytest.raises(StepFailed) as info:
        await F.run_or_raise(F.fail("nope"))

    assert info.value.__cause__ is None


@pytest.mark.asyncio
async def test_run_lazy_is_a_deferred_union() -> None:
    ran: list[str] = []

    async def work() -> int:
        ran.append("work")
        return 7

    union = F.run_lazy(O.call_async(work) | "work failed")

    assert isinstance(union, LazyCoroResult)
    assert ran == []
    match await union:
        case Ok(value):
            assert value == 7
        case other:
            pytest.fail(f"unexpected {other!r}")
    assert ran == ["work"]


@pytest.mark.asyncio
async def test_run_lazy_carries_the_fail() -> None:
    reason = Fail("quota exceeded")

    match await F.run_lazy(F.fail(reason)):
        case Error(fail):
            assert fail is reason
        case other:
            pytest.fail(f"unexpected {other!r}")


@pytest.mark.asyncio
async def test_run_lazy_lifts_back_into_a_step() -> None:
    step = lift.from_lazy(F.run_lazy(F.fail("denied")), on_error=lambda fail: fail.annotate("retry"))

    fail = await fail_of(step)
    assert fail.messages() == ["retry", "retry", "denied"]
