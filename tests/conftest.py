# tests/conftest.py
# Keep tests hermetic: no AP_* settings leak in from the developer's shell.

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_ap_env(monkeypatch):
    """Drop AP_* and CI variables so settings start from defaults."""
    for name in list(os.environ):
        if name.startswith("AP_") or name == "CI":
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside a nested temporary directory and return its cwd string.

    Nested so that `..` and `../..` stay below the filesystem root.
    """
    nested = tmp_path / "outer" / "inner"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    return os.getcwd()
