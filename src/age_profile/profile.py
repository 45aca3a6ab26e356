from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from age_profile import date_logic
from age_profile.models import BIRTH_DATE_FIELD, MAXIMUM_AGE, MINIMUM_AGE, ProfileSummary
from age_profile.observable import ObservableEntity
from age_profile.zodiac import ChineseZodiac, WesternZodiac, chinese_zodiac_for, western_zodiac_for
from age_profile.zodiac_lookup import DEFAULT_LOOKUP, ZodiacLookup, get_zodiac_info

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], date]


class Profile(ObservableEntity):
    """A person's birthdate together with everything derived from it.

    Setting ``birth_date`` validates the new value, keeps it even when it is
    invalid, and then recomputes age, birthday flag, both zodiac signs and the
    zodiac description, in that order.
    """

    def __init__(
        self,
        birth_date: date | None = None,
        *,
        today: Clock = date.today,
        lookup: ZodiacLookup = DEFAULT_LOOKUP,
    ) -> None:
        super().__init__()
        self._today = today
        self._lookup = lookup

        self._birth_date: date | None = None
        self._age = 0
        self._is_birthday_today = False
        self._chinese_zodiac: ChineseZodiac | None = None
        self._western_zodiac: WesternZodiac | None = None
        self._zodiac_info = ""

        self.birth_date = birth_date if birth_date is not None else today()

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @birth_date.setter
    def birth_date(self, value: date) -> None:
        if not self._set_field_validated(BIRTH_DATE_FIELD, value, self.validate_birth_date):
            return

        LOGGER.debug("Birthdate set to %s", value.isoformat())
        self._set_field("age", self.calculate_age(value))
        self._set_field("is_birthday_today", self.calculate_is_birthday_today(value))
        self._set_field("chinese_zodiac", chinese_zodiac_for(value))
        self._set_field("western_zodiac", western_zodiac_for(value))
        self.notify("formatted_age")
        self.update_zodiac_info()

    @property
    def age(self) -> int:
        return self._age

    @property
    def is_birthday_today(self) -> bool:
        return self._is_birthday_today

    @property
    def chinese_zodiac(self) -> ChineseZodiac:
        return self._chinese_zodiac

    @property
    def western_zodiac(self) -> WesternZodiac:
        return self._western_zodiac

    @property
    def zodiac_info(self) -> str:
        return self._zodiac_info

    @property
    def formatted_age(self) -> str:
        return date_logic.format_age(self._birth_date, self._today())

    def calculate_age(self, birth_date: date) -> int:
        return date_logic.calculate_age(birth_date, self._today())

    def calculate_is_birthday_today(self, birth_date: date) -> bool:
        return date_logic.calculate_is_birthday_today(birth_date, self._today())

    def validate_birth_date(self) -> None:
        self.clear_errors(BIRTH_DATE_FIELD)
        age = self.calculate_age(self._birth_date)
        if age < MINIMUM_AGE:
            self.add_error(BIRTH_DATE_FIELD, f"User age can't be younger than {MINIMUM_AGE}")
        if age >= MAXIMUM_AGE:
            self.add_error(BIRTH_DATE_FIELD, f"User age must be less than {MAXIMUM_AGE} years")

    def refresh(self) -> None:
        """Re-derive the clock-dependent fields for the current day.

        Age, birthday flag and birthdate errors depend on today's date, so a
        long-lived profile goes stale once the clock passes midnight.
        """
        self.validate_birth_date()
        self._set_field("age", self.calculate_age(self._birth_date))
        self._set_field("is_birthday_today", self.calculate_is_birthday_today(self._birth_date))
        self.notify("formatted_age")

    def update_zodiac_info(self) -> None:
        info = get_zodiac_info(self._western_zodiac.value, self._chinese_zodiac.value, self._lookup)
        self._set_field("zodiac_info", info)

    def summary(self) -> ProfileSummary:
        return ProfileSummary(
            birth_date=self._birth_date,
            age=self._age,
            formatted_age=self.formatted_age,
            western_zodiac=self._western_zodiac.value,
            chinese_zodiac=self._chinese_zodiac.value,
            zodiac_info=self._zodiac_info,
            is_birthday_today=self._is_birthday_today,
        )
