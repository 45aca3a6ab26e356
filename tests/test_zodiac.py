from datetime import date

from age_profile.zodiac import ChineseZodiac, WesternZodiac, chinese_zodiac_for, western_zodiac_for
from age_profile.zodiac_lookup import CHINESE_DESCRIPTIONS, WESTERN_DESCRIPTIONS, ZodiacLookup, get_zodiac_info


def test_chinese_zodiac_follows_twelve_year_cycle() -> None:
    assert chinese_zodiac_for(date(2020, 6, 1)) is ChineseZodiac.RAT
    assert chinese_zodiac_for(date(2009, 6, 1)) is ChineseZodiac.OX
    assert chinese_zodiac_for(date(1990, 6, 1)) is ChineseZodiac.HORSE
    assert chinese_zodiac_for(date(2006, 10, 19)) is ChineseZodiac.DOG
    assert chinese_zodiac_for(date(2032, 1, 1)) is ChineseZodiac.RAT


def test_western_zodiac_boundaries() -> None:
    assert western_zodiac_for(date(1990, 3, 20)) is WesternZodiac.PISCES
    assert western_zodiac_for(date(1990, 3, 21)) is WesternZodiac.ARIES
    assert western_zodiac_for(date(2006, 10, 19)) is WesternZodiac.LIBRA
    assert western_zodiac_for(date(2000, 7, 30)) is WesternZodiac.LEO


def test_capricorn_spans_new_year() -> None:
    assert western_zodiac_for(date(1990, 12, 25)) is WesternZodiac.CAPRICORN
    assert western_zodiac_for(date(1991, 1, 10)) is WesternZodiac.CAPRICORN
    assert western_zodiac_for(date(1991, 1, 20)) is WesternZodiac.AQUARIUS


def test_every_sign_has_a_description() -> None:
    lookup = ZodiacLookup()
    for sign in WesternZodiac:
        assert lookup.describe(sign.value) == WESTERN_DESCRIPTIONS[sign.value]
    for animal in ChineseZodiac:
        assert lookup.describe(animal.value) == CHINESE_DESCRIPTIONS[animal.value]


def test_describe_is_case_insensitive() -> None:
    lookup = ZodiacLookup()
    assert lookup.describe("rat") == CHINESE_DESCRIPTIONS["Rat"]
    assert lookup.describe_western("LEO") == WESTERN_DESCRIPTIONS["Leo"]


def test_describe_unknown_sign() -> None:
    lookup = ZodiacLookup()
    assert lookup.describe("Unicorn") == "No information available for Unicorn."
    assert lookup.describe_chinese("Leo") == "No information available for Leo."


def test_zodiac_info_puts_western_first() -> None:
    info = get_zodiac_info("Libra", "Dog")
    assert info == f"{WESTERN_DESCRIPTIONS['Libra']}\n{CHINESE_DESCRIPTIONS['Dog']}"


def test_custom_tables() -> None:
    lookup = ZodiacLookup(western={"Leo": "Lion"}, chinese={"Dog": "Loyal"})
    assert get_zodiac_info("Leo", "Dog", lookup) == "Lion\nLoyal"
