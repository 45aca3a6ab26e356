import pytest

from age_profile.settings import load_settings


def _set_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", " token ")
    monkeypatch.setenv("TELEGRAM_ALLOWED_USER_ID", "111")
    monkeypatch.setenv("TELEGRAM_ALLOWED_CHAT_ID", "222")


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required(monkeypatch)
    monkeypatch.delenv("PROFILE_TIMEZONE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = load_settings()

    assert settings.telegram_bot_token == "token"
    assert settings.telegram_allowed_user_id == 111
    assert settings.telegram_allowed_chat_id == 222
    assert settings.timezone == "UTC"
    assert settings.log_level == "INFO"


def test_load_settings_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required(monkeypatch)
    monkeypatch.setenv("PROFILE_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.timezone == "Europe/Berlin"
    assert settings.log_level == "DEBUG"


def test_missing_token_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required(monkeypatch)
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN")

    with pytest.raises(ValueError):
        load_settings()


def test_unknown_timezone_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required(monkeypatch)
    monkeypatch.setenv("PROFILE_TIMEZONE", "Mars/Olympus")

    with pytest.raises(ValueError):
        load_settings()
