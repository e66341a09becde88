"""
Contrib — optional integrations. Access integrations via submodules.

    from fallible.contrib import fastapi
    # fastapi.install(app)

Submodules are not imported here, so `fallible.contrib` loads without the
optional dependencies installed.
"""

__all__: tuple[str, ...] = ()
