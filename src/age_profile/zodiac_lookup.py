from __future__ import annotations

from age_profile.zodiac import ChineseZodiac, WesternZodiac

WESTERN_DESCRIPTIONS = {
    WesternZodiac.ARIES.value: (
        "Aries (March 21 - April 19): a fire sign ruled by Mars. "
        "Aries people are energetic, direct and quick to take the lead."
    ),
    WesternZodiac.TAURUS.value: (
        "Taurus (April 20 - May 20): an earth sign ruled by Venus. "
        "Taurus people are patient, reliable and fond of comfort."
    ),
    WesternZodiac.GEMINI.value: (
        "Gemini (May 21 - June 20): an air sign ruled by Mercury. "
        "Gemini people are curious, talkative and adapt quickly."
    ),
    WesternZodiac.CANCER.value: (
        "Cancer (June 21 - July 22): a water sign ruled by the Moon. "
        "Cancer people are caring, protective and deeply attached to home."
    ),
    WesternZodiac.LEO.value: (
        "Leo (July 23 - August 22): a fire sign ruled by the Sun. "
        "Leo people are generous, proud and enjoy being in the spotlight."
    ),
    WesternZodiac.VIRGO.value: (
        "Virgo (August 23 - September 22): an earth sign ruled by Mercury. "
        "Virgo people are practical, precise and attentive to detail."
    ),
    WesternZodiac.LIBRA.value: (
        "Libra (September 23 - October 22): an air sign ruled by Venus. "
        "Libra people value harmony, fairness and good company."
    ),
    WesternZodiac.SCORPIO.value: (
        "Scorpio (October 23 - November 21): a water sign ruled by Pluto. "
        "Scorpio people are intense, loyal and hard to read."
    ),
    WesternZodiac.SAGITTARIUS.value: (
        "Sagittarius (November 22 - December 21): a fire sign ruled by Jupiter. "
        "Sagittarius people are optimistic, restless and love to travel."
    ),
    WesternZodiac.CAPRICORN.value: (
        "Capricorn (December 22 - January 19): an earth sign ruled by Saturn. "
        "Capricorn people are disciplined, ambitious and patient."
    ),
    WesternZodiac.AQUARIUS.value: (
        "Aquarius (January 20 - February 18): an air sign ruled by Uranus. "
        "Aquarius people are independent, inventive and idealistic."
    ),
    WesternZodiac.PISCES.value: (
        "Pisces (February 19 - March 20): a water sign ruled by Neptune. "
        "Pisces people are imaginative, gentle and intuitive."
    ),
}

CHINESE_DESCRIPTIONS = {
    ChineseZodiac.RAT.value: "Year of the Rat: quick-witted, resourceful and thrifty.",
    ChineseZodiac.OX.value: "Year of the Ox: diligent, dependable and determined.",
    ChineseZodiac.TIGER.value: "Year of the Tiger: brave, confident and competitive.",
    ChineseZodiac.RABBIT.value: "Year of the Rabbit: quiet, elegant and kind.",
    ChineseZodiac.DRAGON.value: "Year of the Dragon: confident, ambitious and charismatic.",
    ChineseZodiac.SNAKE.value: "Year of the Snake: enigmatic, wise and calm under pressure.",
    ChineseZodiac.HORSE.value: "Year of the Horse: lively, active and free-spirited.",
    ChineseZodiac.GOAT.value: "Year of the Goat: gentle, sympathetic and creative.",
    ChineseZodiac.MONKEY.value: "Year of the Monkey: sharp, curious and playful.",
    ChineseZodiac.ROOSTER.value: "Year of the Rooster: observant, hardworking and outspoken.",
    ChineseZodiac.DOG.value: "Year of the Dog: loyal, honest and protective.",
    ChineseZodiac.PIG.value: "Year of the Pig: generous, easygoing and warm-hearted.",
}


def _missing(sign_name: str) -> str:
    return f"No information available for {sign_name}."


class ZodiacLookup:
    """Maps zodiac sign names to descriptive text.

    Lookups are pure and case-insensitive; unknown names get a placeholder
    sentence instead of an exception.
    """

    def __init__(
        self,
        western: dict[str, str] | None = None,
        chinese: dict[str, str] | None = None,
    ) -> None:
        self._western = {key.lower(): text for key, text in (western or WESTERN_DESCRIPTIONS).items()}
        self._chinese = {key.lower(): text for key, text in (chinese or CHINESE_DESCRIPTIONS).items()}

    def describe_western(self, sign_name: str) -> str:
        return self._western.get(sign_name.strip().lower(), _missing(sign_name))

    def describe_chinese(self, sign_name: str) -> str:
        return self._chinese.get(sign_name.strip().lower(), _missing(sign_name))

    def describe(self, sign_name: str) -> str:
        key = sign_name.strip().lower()
        if key in self._western:
            return self._western[key]
        return self._chinese.get(key, _missing(sign_name))


DEFAULT_LOOKUP = ZodiacLookup()


def get_zodiac_info(western_zodiac: str, chinese_zodiac: str, lookup: ZodiacLookup = DEFAULT_LOOKUP) -> str:
    return f"{lookup.describe(western_zodiac)}\n{lookup.describe(chinese_zodiac)}"
