import os

import pytest


@pytest.fixture(autouse=True)
def _private_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """load_env writes to os.environ; give each test its own copy."""
    monkeypatch.setattr(os, 'environ', dict(os.environ))
