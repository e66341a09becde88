"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field

from kungfu import Result, Ok, Error, Option, Some, Nothing


# Types
@dataclass(frozen=True, slots=True)
class UserId:
    value: int


@dataclass(frozen=True, slots=True)
class User:
    id: UserId
    name: str
    email: str
    active: bool = True
    balance: int = 0


# Errors
@dataclass(frozen=True, slots=True)
class NotFound(Exception):
    entity: str
    id: int | str

    def __str__(self) -> str:
        return f"{self.entity}:{self.id} not found"


# Fake DB
@dataclass(slots=True)
class FakeDb:
    users: dict[int, User] = field(default_factory=lambda: {
        1: User(UserId(1), "Alice", "alice@example.com", balance=120),
        2: User(UserId(2), "Bob", "bob@example.com", active=False),
    })
    sessions: dict[str, int] = field(default_factory=lambda: {"s-alice": 1, "s-bob": 2})

    async def find_user(self, user_id: UserId) -> User | None:
        await asyncio.sleep(0.01)
        return self.users.get(user_id.value)

    async def get_user(self, user_id: UserId) -> Result[User, NotFound]:
        user = await self.find_user(user_id)
        return Ok(user) if user else Error(NotFound("User", user_id.value))

    def session_user(self, token: str) -> Option[UserId]:
        uid = self.sessions.get(token)
        return Some(UserId(uid)) if uid is not None else Nothing()

    async def withdraw(self, user: User, amount: int) -> int:
        await asyncio.sleep(0.01)
        if amount > user.balance:
            raise ValueError(f"insufficient funds: {user.balance} < {amount}")
        return user.balance - amount


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
