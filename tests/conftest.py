import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavegen import create_app  # noqa: E402
from cavegen.routes.cave_api import clear_cave_cache  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app()
    app.config.update({"TESTING": True})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture(autouse=True)
def _isolate_generation_env(monkeypatch):
    """Keep env-driven switches from leaking between tests."""
    for key in ("CAVEGEN_ENABLE_GENERATION_METRICS", "CAVEGEN_LOG_LEVEL", "CAVEGEN_LOG_JSON"):
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def _clear_cave_cache():
    """Cached caves must not leak between tests that tweak app config."""
    clear_cave_cache()
    yield
    clear_cave_cache()
