"""Pytest configuration and shared test doubles."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest


@dataclass
class FakeForm:
    """WTForms-shaped form: `validate()` plus bound `data` and `errors`."""

    data: Any
    errors: dict[str, list[str]] = field(default_factory=dict)
    validate_calls: int = 0

    def validate(self) -> bool:
        self.validate_calls += 1
        return not self.errors

    def __str__(self) -> str:
        return "; ".join(f"{name}: {', '.join(msgs)}" for name, msgs in self.errors.items())


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the fallible loggers."""
    caplog.set_level(logging.DEBUG, logger="fallible")
    return caplog
