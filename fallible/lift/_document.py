"""
Validated documents — pydantic models and type adapters.
"""

from __future__ import annotations

from typing import Any

from combinators import lift as L
from pydantic import BaseModel, TypeAdapter, ValidationError

from fallible._errors import UnsupportedShape
from fallible._types import ErrorList, OnError, Step
from fallible.lift._sync import rejected

type Validator[T] = type[T] | TypeAdapter[T]


def validate[T](validator: Validator[T], data: Any, *, json: bool | None = None) -> T:
    """
    Validate data with a BaseModel subclass or a TypeAdapter.

    `json=None` treats str/bytes as JSON text and anything else as Python data.
    """
    as_json = isinstance(data, (str, bytes, bytearray)) if json is None else json
    if isinstance(validator, TypeAdapter):
        return validator.validate_json(data) if as_json else validator.validate_python(data)
    if isinstance(validator, type) and issubclass(validator, BaseModel):
        return validator.model_validate_json(data) if as_json else validator.model_validate(data)
    raise UnsupportedShape(
        f"cannot validate with {validator!r}",
        hint="pass a pydantic BaseModel subclass or a TypeAdapter",
    )


def from_document[T](
    validator: Validator[T],
    data: Any,
    *,
    on_invalid: OnError[ErrorList],
    json: bool | None = None,
) -> Step[T]:
    """
    Lift a validated document. Validation errors reach on_invalid as the
    structured list from `ValidationError.errors()`.

    Example:
        step = lift.from_document(
            SignupRequest,
            request_body,
            on_invalid=lambda errors: Fail(f"{len(errors)} invalid field(s)"),
        )
    """
    try:
        value = validate(validator, data, json=json)
    except ValidationError as exc:
        return L.fail(rejected(on_invalid(exc.errors()), "invalid document"))
    return L.pure(value)


__all__ = ("Validator", "validate", "from_document")
