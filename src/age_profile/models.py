from __future__ import annotations

from dataclasses import dataclass
from datetime import date


MINIMUM_AGE = 18
MAXIMUM_AGE = 135

# Non-leap table; February is always 28 days here.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

BIRTH_DATE_FIELD = "birth_date"


@dataclass(frozen=True)
class AgeBreakdown:
    years: int
    months: int
    days: int

    def render(self) -> str:
        return f"{self.years} years,\n{self.months} months,\n{self.days} days"


@dataclass(frozen=True)
class ProfileSummary:
    birth_date: date
    age: int
    formatted_age: str
    western_zodiac: str
    chinese_zodiac: str
    zodiac_info: str
    is_birthday_today: bool
