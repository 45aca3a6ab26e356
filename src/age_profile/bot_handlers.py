from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from telegram import Update
from telegram.ext import (
    CallbackContext,
    CommandHandler,
    ConversationHandler,
    MessageHandler,
    filters,
)

from age_profile.date_logic import InvalidBirthdateError, parse_birthdate_text
from age_profile.greeting import GreetingViewModel
from age_profile.models import BIRTH_DATE_FIELD, ProfileSummary
from age_profile.settings import Settings
from age_profile.viewmodel import ProfileViewModel

LOGGER = logging.getLogger(__name__)

STATE_BIRTHDATE = 0


@dataclass
class ChatPresenter:
    """Queues replies for the chat that triggered a profile change.

    Greetings are kept as view-models and rendered on ``drain`` so they read
    the profile after every derived field has been recomputed.
    """

    outbox: list[str | GreetingViewModel] = field(default_factory=list)

    def show_error(self, message: str, title: str) -> None:
        self.outbox.append(render_error(message, title))

    def show_greeting(self, greeting: GreetingViewModel) -> None:
        self.outbox.append(greeting)

    def drain(self) -> list[str]:
        replies = [
            render_greeting(item) if isinstance(item, GreetingViewModel) else item
            for item in self.outbox
        ]
        self.outbox.clear()
        return replies


@dataclass(frozen=True)
class HandlerDependencies:
    settings: Settings
    view_model: ProfileViewModel
    presenter: ChatPresenter


def is_authorized(update: Update, settings: Settings) -> bool:
    effective_user = update.effective_user
    effective_chat = update.effective_chat
    if effective_user is None or effective_chat is None:
        return False
    return (
        effective_user.id == settings.telegram_allowed_user_id
        and effective_chat.id == settings.telegram_allowed_chat_id
    )


async def _deny_unauthorized(update: Update) -> None:
    if update.effective_message:
        await update.effective_message.reply_text("This bot is restricted to its configured owner.")


def render_error(message: str, title: str) -> str:
    return f"⚠️ {title}\n{message}"


def render_greeting(greeting: GreetingViewModel) -> str:
    return greeting.render()


def render_summary(summary: ProfileSummary) -> str:
    lines = [
        f"Birthdate: {summary.birth_date.isoformat()}",
        f"Age: {summary.age}",
        "",
        summary.formatted_age,
        "",
        f"Western zodiac: {summary.western_zodiac}",
        f"Chinese zodiac: {summary.chinese_zodiac}",
    ]
    if summary.zodiac_info:
        lines.extend(["", summary.zodiac_info])
    return "\n".join(lines)


def _render_help() -> str:
    return (
        "Commands:\n"
        "/birthdate - Set your birthdate (e.g. /birthdate 1990-03-14)\n"
        "/age - Show your age in years, months and days\n"
        "/zodiac - Show your Western and Chinese zodiac signs\n"
        "/reset - Start over with today's date\n"
        "/help - Show this help message\n"
        "/cancel - Cancel the active birthdate prompt\n\n"
        "Birthdate format: YYYY-MM-DD"
    )


def apply_birth_date(deps: HandlerDependencies, value: date) -> list[str]:
    """Push ``value`` through the view-model and collect the chat replies."""
    view_model = deps.view_model
    view_model.set_birth_date(value)
    view_model.profile.refresh()
    replies = deps.presenter.drain()

    errors = view_model.profile.get_errors(BIRTH_DATE_FIELD)
    if errors:
        # An unchanged invalid value raises no notification; repeat the error.
        if not replies:
            replies.append(render_error(errors[0], "Error"))
        return replies

    replies.append(render_summary(view_model.profile.summary()))
    return replies


async def _reply_all(update: Update, replies: list[str]) -> None:
    for reply in replies:
        await update.effective_message.reply_text(reply)


async def help_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return
    await update.effective_message.reply_text(_render_help())


async def birthdate_start(update: Update, context: CallbackContext) -> int:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return ConversationHandler.END

    if context.args:
        return await _handle_birthdate_text(update, deps, " ".join(context.args))

    await update.effective_message.reply_text("Send your birthdate as YYYY-MM-DD.")
    return STATE_BIRTHDATE


async def birthdate_received(update: Update, context: CallbackContext) -> int:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return ConversationHandler.END

    return await _handle_birthdate_text(update, deps, update.effective_message.text or "")


async def _handle_birthdate_text(update: Update, deps: HandlerDependencies, raw_text: str) -> int:
    try:
        value = parse_birthdate_text(raw_text)
    except InvalidBirthdateError as exc:
        await update.effective_message.reply_text(f"{exc}. Please send YYYY-MM-DD, or /cancel.")
        return STATE_BIRTHDATE

    await _reply_all(update, apply_birth_date(deps, value))
    errors = deps.view_model.profile.get_errors(BIRTH_DATE_FIELD)
    if errors:
        LOGGER.warning("Birthdate %s stored with errors: %s", value.isoformat(), errors)
    else:
        LOGGER.info("Birthdate updated to %s", value.isoformat())
    return ConversationHandler.END


async def age_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return

    profile = deps.view_model.profile
    profile.refresh()
    await update.effective_message.reply_text(
        f"You are {profile.age} years old.\n\n{profile.formatted_age}"
    )


async def zodiac_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return

    await update.effective_message.reply_text(deps.view_model.profile.zodiac_info)


async def reset_command(update: Update, context: CallbackContext) -> None:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return

    deps.view_model.reset()
    deps.presenter.drain()
    await update.effective_message.reply_text("Profile reset. Send /birthdate to start again.")
    LOGGER.info("Profile reset")


async def cancel_command(update: Update, context: CallbackContext) -> int:
    deps: HandlerDependencies = context.application.bot_data["handler_deps"]
    if not is_authorized(update, deps.settings):
        await _deny_unauthorized(update)
        return ConversationHandler.END

    await update.effective_message.reply_text("Canceled.")
    return ConversationHandler.END


def build_handlers() -> list:
    birthdate_conversation = ConversationHandler(
        entry_points=[CommandHandler("birthdate", birthdate_start)],
        states={
            STATE_BIRTHDATE: [MessageHandler(filters.TEXT & ~filters.COMMAND, birthdate_received)],
        },
        fallbacks=[CommandHandler("cancel", cancel_command)],
        name="birthdate_conversation",
        persistent=False,
    )

    return [
        birthdate_conversation,
        CommandHandler(["start", "help"], help_command),
        CommandHandler("age", age_command),
        CommandHandler("zodiac", zodiac_command),
        CommandHandler("reset", reset_command),
        CommandHandler("cancel", cancel_command),
    ]
