"""Shared fixtures."""

import pytest

from hook_utils.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at an empty location so user config never leaks in."""
    monkeypatch.setenv("HOOK_UTILS_CONFIG", str(tmp_path / "missing.yaml"))
    reset_settings()
    yield
    reset_settings()
