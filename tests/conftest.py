import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("PERCENTAGE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PERCENTAGE_JSON_LOGS", "false")
    monkeypatch.delenv("PERCENTAGE_DEFAULT_SCALE", raising=False)
    monkeypatch.delenv("PERCENTAGE_DEFAULT_ROUNDING_MODE", raising=False)

    from percentage.shared.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
