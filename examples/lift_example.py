"""
Lift — every "maybe failed" shape into one Step.

Level 3: fallible.ops / fallible.lift
Level 2: kungfu.Result
"""

from kungfu import Ok, Error
from pydantic import BaseModel

import fallible as F
from fallible import Fail, lift, ops as O
from examples._infra import banner, run, FakeDb, UserId


db = FakeDb()


class Transfer(BaseModel):
    amount: int


def show(label: str, result: object) -> None:
    match result:
        case Ok(value):
            print(f"  ✓ {label}: {value!r}")
        case Error(fail):
            print(f"  ✗ {label}: {fail.user_message()}")


async def main() -> None:
    banner("Lift: one Step per shape")

    # Explicit adapters
    show("optional", await lift.from_optional(None, on_none=lambda: Fail("missing id")))
    show("option", await lift.from_option(db.session_user("s-alice"), on_none=lambda: Fail("no session")))
    show("guard", await lift.from_bool(False, on_false=lambda: Fail("admin only")))

    # Fluent operator: producer or plain message
    show("result", await (O.result(await db.get_user(UserId(9))) | (lambda e: Fail(str(e)))))
    show("awaitable option", await (O.awaitable_option(db.find_user(UserId(1))) | "no such user"))
    show("document", await (O.document(Transfer, '{"amount": "lots"}') | "bad transfer"))
    show("attempt", await (O.attempt(lambda: int("12x")) | "not a number"))

    # Dispatch by shape
    show("ops(bool)", await (O.ops(True) | "never shown"))
    show("ops(Result)", await (O.ops(Ok(3)) | "never shown"))

    banner("Failure chain")
    fail = Fail("parse failed").with_root(OSError("disk gone")).annotate("request rejected")
    print(f"  messages: {fail.messages()}")
    print(f"  user message: {fail.user_message()}")
    print(f"  root cause: {fail.root_cause()!r}")

    merged = await F.run_merged(F.succeed(fail))
    print(f"  merged: {merged.message}")


if __name__ == "__main__":
    run(main)
