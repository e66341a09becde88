"""
FastAPI integration for fallible (optional dependency: ``fallible[fastapi]``).

    from fallible.contrib import fastapi as FF

    FF.install(app)

    @app.post("/signup")
    async def signup(body: dict) -> dict:
        user = await F.run_or_raise(signup_pipeline(body))
        return {"id": user.id}
"""

from fallible.contrib._fastapi import (
    fail_body,
    to_http_exception,
    to_response,
    install,
)

__all__ = (
    "fail_body",
    "to_http_exception",
    "to_response",
    "install",
)
