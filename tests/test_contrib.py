from __future__ import annotations

import pytest

import fallible.contrib

pytestmark = pytest.mark.unit


def test_star_import_exports_only_loaded_names() -> None:
    namespace: dict[str, object] = {}
    exec("from fallible.contrib import *", namespace)

    assert all(hasattr(fallible.contrib, name) for name in fallible.contrib.__all__)
