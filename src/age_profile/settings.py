from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    telegram_allowed_user_id: int
    telegram_allowed_chat_id: int
    timezone: str = "UTC"
    log_level: str = "INFO"


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise ValueError(f"Missing required environment variable: {name}")
    return value.strip()


def _parse_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {value}") from exc
    return value


def _parse_log_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {value}")
    return level


def load_settings() -> Settings:
    token = _required_env("TELEGRAM_BOT_TOKEN")
    allowed_user_id = int(_required_env("TELEGRAM_ALLOWED_USER_ID"))
    allowed_chat_id = int(_required_env("TELEGRAM_ALLOWED_CHAT_ID"))

    timezone = _parse_timezone(os.getenv("PROFILE_TIMEZONE", "UTC").strip() or "UTC")
    log_level = _parse_log_level(os.getenv("LOG_LEVEL", "INFO").strip() or "INFO")

    return Settings(
        telegram_bot_token=token,
        telegram_allowed_user_id=allowed_user_id,
        telegram_allowed_chat_id=allowed_chat_id,
        timezone=timezone,
        log_level=log_level,
    )
