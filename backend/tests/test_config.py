from pathlib import Path

import pytest

from wordsmith.config import BACKEND_DIR, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("WORDSMITH_API_KEY", "secret")
    monkeypatch.setenv("WORDSMITH_MODEL", "gemini-test")
    monkeypatch.setenv("WORDSMITH_LOG_LEVEL", "debug")
    monkeypatch.setenv("WORDSMITH_EXPORT_DIR", "exports")

    settings = get_settings()
    assert settings.api_key == "secret"
    assert settings.model == "gemini-test"
    assert settings.log_level == "DEBUG"
    assert settings.export_dir == (BACKEND_DIR / "exports").resolve()


def test_gemini_key_is_used_as_fallback(monkeypatch):
    monkeypatch.delenv("WORDSMITH_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "fallback")
    assert get_settings().api_key == "fallback"


def test_absolute_export_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("WORDSMITH_EXPORT_DIR", str(tmp_path))
    assert get_settings().export_dir == Path(tmp_path).resolve()
