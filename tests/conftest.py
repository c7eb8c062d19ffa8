import pytest

from uztranslit.app.utils.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Each test starts with no cached config and no config env vars"""
    monkeypatch.delenv("UZT_CONFIG", raising=False)
    reset_config()
    yield
    reset_config()
