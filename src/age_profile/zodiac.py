from __future__ import annotations

from datetime import date
from enum import Enum


class ChineseZodiac(Enum):
    RAT = "Rat"
    OX = "Ox"
    TIGER = "Tiger"
    RABBIT = "Rabbit"
    DRAGON = "Dragon"
    SNAKE = "Snake"
    HORSE = "Horse"
    GOAT = "Goat"
    MONKEY = "Monkey"
    ROOSTER = "Rooster"
    DOG = "Dog"
    PIG = "Pig"


class WesternZodiac(Enum):
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


CHINESE_CYCLE = tuple(ChineseZodiac)

# (month, day) of the last day of each sign, in calendar order.
WESTERN_CUTOFFS = (
    ((1, 19), WesternZodiac.CAPRICORN),
    ((2, 18), WesternZodiac.AQUARIUS),
    ((3, 20), WesternZodiac.PISCES),
    ((4, 19), WesternZodiac.ARIES),
    ((5, 20), WesternZodiac.TAURUS),
    ((6, 20), WesternZodiac.GEMINI),
    ((7, 22), WesternZodiac.CANCER),
    ((8, 22), WesternZodiac.LEO),
    ((9, 22), WesternZodiac.VIRGO),
    ((10, 22), WesternZodiac.LIBRA),
    ((11, 21), WesternZodiac.SCORPIO),
    ((12, 21), WesternZodiac.SAGITTARIUS),
)


def chinese_zodiac_for(value: date) -> ChineseZodiac:
    # Gregorian year only; 4 AD is a Rat year. Lunar new year is not considered.
    return CHINESE_CYCLE[(value.year - 4) % 12]


def western_zodiac_for(value: date) -> WesternZodiac:
    month_day = (value.month, value.day)
    for cutoff, sign in WESTERN_CUTOFFS:
        if month_day <= cutoff:
            return sign
    return WesternZodiac.CAPRICORN
