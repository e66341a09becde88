from __future__ import annotations

from typing import Any

import fastapi
from fastapi.responses import JSONResponse

from fallible._errors import StepFailed
from fallible._fail import Fail


def fail_body(fail: Fail) -> dict[str, Any]:
    return {"message": fail.user_message(), "messages": fail.messages()}


def to_http_exception(fail: Fail, status_code: int = 400) -> fastapi.HTTPException:
    return fastapi.HTTPException(status_code=status_code, detail=fail_body(fail))


def to_response(fail: Fail, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": fail_body(fail)})


def install(app: fastapi.FastAPI, status_code: int = 400) -> fastapi.FastAPI:
    """Answer every uncaught StepFailed with `status_code` and the Fail's messages."""

    async def _on_step_failed(request: fastapi.Request, exc: Exception) -> JSONResponse:
        del request
        if not isinstance(exc, StepFailed):  # pragma: no cover - registered for StepFailed only
            raise exc
        return to_response(exc.fail, status_code)

    app.add_exception_handler(StepFailed, _on_step_failed)
    return app
