import importlib

import pytest

import tip_logic
import settings


def test_pinned_from_environment():
    assert settings.LOCALE == "en_US"
    assert settings.CURRENCY == "USD"


def test_resolve_locale_normalizes_separator():
    assert settings.resolve_locale("de-DE") == "de_DE"
    assert settings.resolve_locale("fr_FR") == "fr_FR"


def test_resolve_locale_unknown_falls_back():
    assert settings.resolve_locale("zz_ZZ") == settings.FALLBACK_LOCALE


def test_default_currency_from_territory():
    assert settings.default_currency("en_US") == "USD"
    assert settings.default_currency("ja_JP") == "JPY"
    assert settings.default_currency("en_GB") == "GBP"


def test_default_currency_without_territory():
    assert settings.default_currency("de") == settings.FALLBACK_CURRENCY


@pytest.fixture
def reload_settings(monkeypatch):
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(settings)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings)


def test_unknown_log_level_falls_back(reload_settings):
    reloaded = reload_settings(TIPCALC_LOG_LEVEL="chatty")
    assert reloaded.LOG_LEVEL == "INFO"


def test_known_log_level_kept(reload_settings):
    reloaded = reload_settings(TIPCALC_LOG_LEVEL="debug")
    assert reloaded.LOG_LEVEL == "DEBUG"


def test_unknown_currency_passes_through(reload_settings):
    reloaded = reload_settings(TIPCALC_CURRENCY="xyz")
    assert reloaded.CURRENCY == "XYZ"

    formatted = tip_logic.calculate_tip(100, 15, locale="en_US")
    assert "XYZ" in formatted
    assert "15.00" in formatted
