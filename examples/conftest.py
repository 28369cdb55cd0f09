"""Fixtures for the runnable examples under ``examples/``.

Each example directory holds an ``app.py`` that builds a module-level
``router`` and a ``test_app.py`` exercising it.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_router(request: pytest.FixtureRequest):
    """The ``router`` built by ``app.py`` beside the requesting test.

    ``app.py`` is executed under a per-directory module name on every
    call, so routes registered by one test never leak into the next.
    """
    source = Path(request.path).with_name("app.py")
    spec = importlib.util.spec_from_file_location(f"wren_example_{source.parent.name}", source)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.router
