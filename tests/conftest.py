"""Root test configuration: isolate every test from local config and MDVIEW_ env vars"""

import os

import pytest

from mdview.config import ENV_PREFIX, Settings
from mdview.render.document import DocumentRenderer


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no MDVIEW_* variables set."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="renderer")
def renderer_fixture():
    """Renderer with default settings."""
    return DocumentRenderer(Settings())
