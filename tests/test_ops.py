from __future__ import annotations

import asyncio
import gc
import warnings

import pytest
from kungfu import Error, LazyCoroResult, Nothing, Ok, Some
from pydantic import BaseModel

from fallible import Fail, UnsupportedShape, ops as O
from tests.conftest import FakeForm
from tests.helpers import fail_of, ok_value

pytestmark = pytest.mark.unit


class Item(BaseModel):
    sku: str


async def explode() -> str:
    raise ConnectionError("refused")


class TestMessageSugar:
    def test_exception_payload_becomes_root(self) -> None:
        err = ValueError("bad")
        fail = O.from_message("parse failed", err)

        assert fail.root_cause() is err
        assert fail.messages() == ["parse failed", "parse failed", "bad"]

    def test_other_payload_is_annotated(self) -> None:
        fail = O.from_message("lookup failed", "not found")

        assert fail.messages() == ["lookup failed", "lookup failed", "not found"]

    @pytest.mark.asyncio
    async def test_unit_shapes_annotate_none_display(self) -> None:
        fail = await fail_of(O.optional(None) | "missing id")
        assert fail.messages() == ["missing id", "missing id", "None"]
        assert fail.root_cause() is None

    @pytest.mark.asyncio
    async def test_guard_message_annotates_none_display(self) -> None:
        fail = await fail_of(O.guard(False) | "admin only")
        assert fail.user_message() == "admin only <- admin only <- None"


class TestOperator:
    @pytest.mark.asyncio
    async def test_pipe_with_producer(self) -> None:
        fail = await fail_of(O.result(Error(404)) | (lambda code: Fail(f"status {code}")))
        assert fail.message == "status 404"

    @pytest.mark.asyncio
    async def test_or_fail_with_is_the_pipe(self) -> None:
        step = O.guard(True).or_fail_with(lambda: Fail("x"))
        assert await ok_value(step) is None

    @pytest.mark.asyncio
    async def test_awaitable_with_message(self) -> None:
        fail = await fail_of(O.awaitable(explode()) | "load failed")
        assert fail.user_message() == "load failed <- load failed <- refused"
        assert isinstance(fail.root_cause(), ConnectionError)

    @pytest.mark.asyncio
    async def test_awaitable_option(self) -> None:
        async def find() -> None:
            return None

        fail = await fail_of(O.awaitable_option(find()) | "no such user")
        assert fail.user_message() == "no such user <- no such user <- None"

    @pytest.mark.asyncio
    async def test_awaitable_result_with_message(self) -> None:
        async def find() -> Error[str]:
            return Error("timeout")

        fail = await fail_of(O.awaitable_result(find()) | "lookup failed")
        assert fail.messages() == ["lookup failed", "lookup failed", "timeout"]

    @pytest.mark.asyncio
    async def test_document_with_message(self) -> None:
        fail = await fail_of(O.document(Item, {}) | "bad item")
        assert fail.message == "bad item"
        assert "sku" in fail.cause.fail.message  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_form_with_message(self) -> None:
        form = FakeForm(data=None, errors={"email": ["required"]})
        fail = await fail_of(O.form(form) | "signup rejected")
        assert fail.messages() == ["signup rejected", "signup rejected", "email: required"]

    @pytest.mark.asyncio
    async def test_attempt(self) -> None:
        fail = await fail_of(O.attempt(lambda: {}["k"]) | "missing key")
        assert isinstance(fail.root_cause(), KeyError)

    @pytest.mark.asyncio
    async def test_blocking(self) -> None:
        assert await ok_value(O.blocking(lambda: 3) | "x") == 3

    @pytest.mark.asyncio
    async def test_call_async_defers_the_call(self) -> None:
        calls: list[int] = []

        async def work() -> int:
            calls.append(1)
            return 5

        step = O.call_async(work) | "x"
        await asyncio.sleep(0)
        assert calls == []
        assert await ok_value(step) == 5

    def test_dropped_call_async_step_creates_no_coroutine(self) -> None:
        calls: list[int] = []

        async def work() -> int:
            calls.append(1)
            return 5

        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            step = O.call_async(work) | "x"
            del step
            gc.collect()

        assert calls == []


class TestDispatch:
    @pytest.mark.asyncio
    async def test_bool(self) -> None:
        assert await ok_value(O.ops(True) | "no") is None
        assert (await fail_of(O.ops(False) | "no")).message == "no"

    @pytest.mark.asyncio
    async def test_none(self) -> None:
        assert (await fail_of(O.ops(None) | "missing")).message == "missing"

    @pytest.mark.asyncio
    async def test_option(self) -> None:
        assert await ok_value(O.ops(Some(1)) | "missing") == 1
        assert (await fail_of(O.ops(Nothing()) | "missing")).message == "missing"

    @pytest.mark.asyncio
    async def test_result(self) -> None:
        assert await ok_value(O.ops(Ok("v")) | "x") == "v"
        assert (await fail_of(O.ops(Error("e")) | (lambda e: Fail(e)))).message == "e"

    @pytest.mark.asyncio
    async def test_lazy(self) -> None:
        async def impl() -> Ok[int]:
            return Ok(9)

        assert await ok_value(O.ops(LazyCoroResult(impl)) | "x") == 9

    @pytest.mark.asyncio
    async def test_form(self) -> None:
        assert await ok_value(O.ops(FakeForm(data={"a": 1})) | "x") == {"a": 1}

    def test_awaitables_need_an_explicit_entry_point(self) -> None:
        coro = explode()
        try:
            with pytest.raises(UnsupportedShape, match="awaitable"):
                O.ops(coro)
        finally:
            coro.close()

    def test_plain_values_are_rejected(self) -> None:
        with pytest.raises(UnsupportedShape) as info:
            O.ops(42)
        assert info.value.hint is not None
        assert isinstance(info.value, TypeError)
