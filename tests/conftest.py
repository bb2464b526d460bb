"""Shared fixtures for backend profile tests.

Every test starts without ``APP_*`` or ``VCAP_*`` variables so that the
developer's shell or a CI platform cannot leak profiles or bindings in.
"""

from __future__ import annotations

import os

import pytest

from backend_profiles.cloud import reset_connectors
from backend_profiles.initializer import reset_bootstrap


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in list(os.environ):
        if name.upper().startswith(("APP_", "VCAP_")):
            monkeypatch.delenv(name, raising=False)
    # Keep a stray .env in the working directory out of Settings.
    monkeypatch.chdir(tmp_path)
    reset_connectors()
    reset_bootstrap()
    yield
    reset_connectors()
    reset_bootstrap()
