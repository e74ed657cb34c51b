"""Tests for settings loading and result rendering."""

from app.core.config import Settings, get_settings
from app.models.result import OUT_MALFORMED, OUT_URL_ERROR, AnalysisResult, ResultKind


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.fetch_connect_timeout == 10.0
    assert settings.fetch_read_timeout == 20.0
    assert settings.fetch_follow_redirects is True
    assert settings.fetch_user_agent == "HtmlAnalyzer/1.0"
    assert settings.fetch_max_lines == 100_000


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FETCH_MAX_LINES", "10")
    monkeypatch.setenv("FETCH_USER_AGENT", "Tester/2.0")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.fetch_max_lines == 10
    assert settings.fetch_user_agent == "Tester/2.0"
    assert settings.log_level == "debug"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_render_text_verbatim():
    assert AnalysisResult.ok_text("  a <b> & c").render() == "  a <b> & c"


def test_render_failures():
    assert AnalysisResult.malformed().render() == OUT_MALFORMED == "malformed HTML"
    assert AnalysisResult.url_error().render() == OUT_URL_ERROR == "URL connection error"


def test_text_result_without_text_renders_malformed():
    assert AnalysisResult(ResultKind.TEXT, None).render() == OUT_MALFORMED
