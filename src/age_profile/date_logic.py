from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from age_profile.models import DAYS_IN_MONTH, AgeBreakdown


class InvalidBirthdateError(ValueError):
    pass


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def add_years(value: date, years: int) -> date:
    target_year = value.year + years
    if value.month == 2 and value.day == 29 and not is_leap_year(target_year):
        return date(target_year, 2, 28)
    return value.replace(year=target_year)


def calculate_age(birth_date: date, today: date) -> int:
    age = today.year - birth_date.year

    # Compare against this year's anniversary, not the raw month/day.
    if birth_date > add_years(today, -age):
        age -= 1

    return age


def calculate_is_birthday_today(birth_date: date, today: date) -> bool:
    if birth_date.month == today.month and birth_date.day == today.day:
        return birth_date.year <= today.year
    return False


def calculate_age_breakdown(birth_date: date, today: date) -> AgeBreakdown:
    """Split the time since ``birth_date`` into years, months and days.

    Day counts for a partial month come from the fixed non-leap
    ``DAYS_IN_MONTH`` table, so results around February of a leap year can be
    off by one day.
    """
    age = calculate_age(birth_date, today)
    last_birthday = add_years(birth_date, age)
    days = (today - last_birthday).days

    if (today.month, today.day) < (birth_date.month, birth_date.day):
        months = 12 - (birth_date.month - today.month)
    else:
        months = today.month - birth_date.month

    if today.day < birth_date.day:
        months -= 1
        previous_month_index = (today.month - 2) % 12
        days = DAYS_IN_MONTH[previous_month_index] - (birth_date.day - today.day) + 1

    return AgeBreakdown(years=age, months=months, days=days)


def format_age(birth_date: date, today: date) -> str:
    return calculate_age_breakdown(birth_date, today).render()


def today_in_timezone(timezone_name: str) -> date:
    return datetime.now(ZoneInfo(timezone_name)).date()


def parse_birthdate_text(raw_text: str) -> date:
    value = raw_text.strip()

    match = re.fullmatch(r"(\d{4})-(\d{1,2})-(\d{1,2})", value)
    if not match:
        raise InvalidBirthdateError("Birthdate must use YYYY-MM-DD")

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidBirthdateError(f"Invalid calendar date: {value}") from exc
