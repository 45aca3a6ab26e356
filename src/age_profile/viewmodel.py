from __future__ import annotations

import logging
from datetime import date
from typing import Any, Protocol

from age_profile.greeting import GreetingViewModel
from age_profile.models import BIRTH_DATE_FIELD
from age_profile.observable import ObservableEntity
from age_profile.profile import Clock, Profile
from age_profile.zodiac_lookup import DEFAULT_LOOKUP, ZodiacLookup

LOGGER = logging.getLogger(__name__)

ERROR_TITLE = "Error"
PROFILE_FIELD = "profile"


class ProfilePresenter(Protocol):
    def show_error(self, message: str, title: str) -> None: ...

    def show_greeting(self, greeting: GreetingViewModel) -> None: ...


class ProfileViewModel(ObservableEntity):
    """Owns the current profile and reacts to its birthdate changes.

    A birthdate change ends in exactly one of three outcomes: the first
    validation error is shown, a birthday greeting is opened, or the zodiac
    description is refreshed.
    """

    def __init__(
        self,
        presenter: ProfilePresenter,
        *,
        today: Clock = date.today,
        lookup: ZodiacLookup = DEFAULT_LOOKUP,
    ) -> None:
        super().__init__()
        self._presenter = presenter
        self._today = today
        self._lookup = lookup
        self._profile: Profile | None = None
        self._greeting: GreetingViewModel | None = None

        self.profile = self._new_profile()

    @property
    def profile(self) -> Profile:
        return self._profile

    @profile.setter
    def profile(self, value: Profile) -> None:
        if self._set_field(PROFILE_FIELD, value):
            value.subscribe(self._on_profile_changed)

    @property
    def greeting(self) -> GreetingViewModel | None:
        return self._greeting

    def before_field_update(self, field_name: str) -> None:
        if field_name == PROFILE_FIELD and self._profile is not None:
            self._profile.unsubscribe(self._on_profile_changed)

    def set_birth_date(self, value: date) -> None:
        self._profile.birth_date = value

    def reset(self) -> None:
        self.close_greeting()
        self.profile = self._new_profile()

    def close_greeting(self) -> None:
        self._greeting = None

    def _new_profile(self) -> Profile:
        return Profile(today=self._today, lookup=self._lookup)

    def _on_profile_changed(self, sender: Any, field_name: str) -> None:
        if field_name == BIRTH_DATE_FIELD:
            self._on_birth_date_updated()

    def _on_birth_date_updated(self) -> None:
        profile = self._profile
        errors = profile.get_errors(BIRTH_DATE_FIELD)
        if errors:
            LOGGER.info("Birthdate %s flagged: %s", profile.birth_date.isoformat(), errors[0])
            self._presenter.show_error(errors[0], ERROR_TITLE)
        elif profile.calculate_is_birthday_today(profile.birth_date):
            self._show_greeting()
        else:
            profile.update_zodiac_info()

    def _show_greeting(self) -> None:
        # A new birthday event replaces any greeting that is still open.
        self._greeting = GreetingViewModel(self._profile)
        LOGGER.info("Opening birthday greeting")
        self._presenter.show_greeting(self._greeting)
