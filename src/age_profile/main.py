from __future__ import annotations

import logging
from functools import partial

from telegram.ext import Application

from age_profile.bot_handlers import ChatPresenter, HandlerDependencies, build_handlers
from age_profile.date_logic import today_in_timezone
from age_profile.settings import load_settings
from age_profile.viewmodel import ProfileViewModel


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every polling request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    presenter = ChatPresenter()
    view_model = ProfileViewModel(presenter, today=partial(today_in_timezone, settings.timezone))

    application = Application.builder().token(settings.telegram_bot_token).build()
    application.bot_data["handler_deps"] = HandlerDependencies(
        settings=settings,
        view_model=view_model,
        presenter=presenter,
    )

    for handler in build_handlers():
        application.add_handler(handler)

    logging.getLogger(__name__).info("Starting profile bot (timezone %s)", settings.timezone)
    application.run_polling()


if __name__ == "__main__":
    main()
