"""
FastAPI — map a Fail to an HTTP response.

    uvicorn examples.fastapi_example:app
"""

import fastapi

import fallible as F
from fallible import ops as O
from fallible.contrib import fastapi as FF
from examples._infra import FakeDb, UserId


db = FakeDb()

app = FF.install(fastapi.FastAPI(), status_code=404)


@app.get("/users/{user_id}")
async def get_user(user_id: int) -> dict[str, str]:
    step = F.then(
        O.awaitable_option(db.find_user(UserId(user_id))) | "no such user",
        lambda user: F.map(O.guard(user.active) | "account disabled", lambda _: user),
    )
    user = await F.run_or_raise(step)
    return {"name": user.name, "email": user.email}
# Run yourself with uvicorn and look at the docs!
