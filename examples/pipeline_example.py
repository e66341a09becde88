"""
Pipeline — heterogeneous steps chained left to right.

The first failure short-circuits everything after it.

Level 4: fallible.chain / fallible.then
Level 3: fallible.ops
Level 2: kungfu.Result
"""

from concurrent.futures import ThreadPoolExecutor

from kungfu import Ok, Error
from pydantic import BaseModel

import fallible as F
from fallible import Config, Fail, ops as O
from examples._infra import banner, run, FakeDb, User


db = FakeDb()


class WithdrawRequest(BaseModel):
    session: str
    amount: int


def audit(user: User, remaining: int) -> str:
    # blocking I/O in a real app
    return f"{user.name} withdrew, {remaining} left"


def withdraw(raw: str, config: Config) -> F.Step[str]:
    return F.chain(
        O.document(WithdrawRequest, raw) | "malformed request",
        lambda req: F.then(
            O.option(db.session_user(req.session)) | "not logged in",
            lambda uid: F.then(
                O.awaitable_result(db.get_user(uid)) | "user lookup failed",
                lambda user: F.then(
                    O.guard(user.active) | f"account {user.id.value} disabled",
                    lambda _: F.then(
                        O.awaitable(db.withdraw(user, req.amount)) | "withdrawal refused",
                        lambda remaining: O.blocking(lambda: audit(user, remaining), config=config)
                        | "audit failed",
                    ),
                ),
            ),
        ),
    )


async def main() -> None:
    banner("Pipeline: withdraw")

    with ThreadPoolExecutor(max_workers=2) as pool:
        config = Config(executor=pool)
        requests = [
            '{"session": "s-alice", "amount": 20}',
            '{"session": "s-alice", "amount": 500}',
            '{"session": "s-bob", "amount": 1}',
            '{"session": "s-nobody", "amount": 1}',
            '{"amount": 1}',
        ]
        for raw in requests:
            match await F.run(withdraw(raw, config)):
                case Ok(line):
                    print(f"  ✓ {line}")
                case Error(fail):
                    print(f"  ✗ {fail.user_message()}")


if __name__ == "__main__":
    run(main)
