"""
fallible — one Step type for every "might not have succeeded" shape.

    import fallible as F
    from fallible import ops as O

    user = O.awaitable_option(repo.find(uid)) | "no such user"
    pipeline = F.then(user, lambda u: O.guard(u.active) | "account disabled")

    match await F.run(pipeline):
        case Ok(_): ...
        case Error(fail): print(fail.user_message())
"""

import logging

from fallible import lift
from fallible import ops
from fallible._fail import Fail, Cause, Root, Parent
from fallible._errors import (
    FallibleError,
    CombineError,
    ConfigurationError,
    UnsupportedShape,
    StepFailed,
    is_fatal,
)
from fallible._config import Config, DEFAULT_CONFIG
from fallible._types import (
    Step,
    OnError,
    OnEmpty,
    ValidatedForm,
)
from fallible._compose import succeed, fail, then, map, ensure, annotate, chain
from fallible._run import run, run_merged, run_lazy, run_or_raise

logging.getLogger("fallible").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = (
    # Namespaces
    "lift",
    "ops",
    # Failure value
    "Fail",
    "Cause",
    "Root",
    "Parent",
    # Errors
    "FallibleError",
    "CombineError",
    "ConfigurationError",
    "UnsupportedShape",
    "StepFailed",
    "is_fatal",
    # Configuration
    "Config",
    "DEFAULT_CONFIG",
    # Types
    "Step",
    "OnError",
    "OnEmpty",
    "ValidatedForm",
    # Sequencing
    "succeed",
    "fail",
    "then",
    "map",
    "ensure",
    "annotate",
    "chain",
    # Terminals
    "run",
    "run_merged",
    "run_lazy",
    "run_or_raise",
)
