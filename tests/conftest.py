import os
import shutil

import pytest

from tests.fixtures.fake_registry import CountingTemplateRegistry


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "requires_git: mark tests that shell out to a real git executable"
    )


def pytest_collection_modifyitems(config, items):
    if shutil.which("git") is not None:
        return

    skip_git = pytest.mark.skip(reason="git executable not available")
    for item in items:
        if "requires_git" in item.keywords:
            item.add_marker(skip_git)


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run with a clean environment.

    Unset SITEDEPS_* variables that can switch the hashing backend.
    """
    to_clear = [k for k in os.environ.keys() if k.startswith("SITEDEPS_")]
    for k in to_clear:
        monkeypatch.delenv(k, raising=False)
    yield


@pytest.fixture
def template_registry():
    """Registry knowing the common Ruby-style template engines."""
    return CountingTemplateRegistry({".erb", ".haml", ".slim", ".scss", ".sass", ".md"})
