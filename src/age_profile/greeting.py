from __future__ import annotations

import hashlib

from age_profile.profile import Profile

GREETING_TEMPLATES = (
    "🎉 Happy birthday! Today is all yours.",
    "🥳 Today we celebrate you.\nGo make it count.",
    "🎈 You leveled up today.\nAchievement unlocked.",
    "🎂 Cake is appropriate today. Happy birthday!",
    "🌟 Today's featured human: you. Happy birthday!",
)

AGE_GREETING_TEMPLATES = (
    "🎉 Happy birthday! {age} candles on the cake today.",
    "🎈 You officially turn {age} today.",
    "🚨 Level {age} unlocked. Happy birthday!",
    "🥳 Today marks {age} years of you.",
    "🎊 {age} looks good on you. Happy birthday!",
)


class GreetingViewModel:
    """Congratulatory content for a profile whose birthday is today.

    Holds a read-only reference to the profile; every property reads the
    profile's current values when accessed.
    """

    title = "Happy Birthday!"

    def __init__(self, profile: Profile) -> None:
        self._profile = profile

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def age(self) -> int:
        return self._profile.age

    @property
    def message(self) -> str:
        age = self._profile.age
        if age > 0:
            template = self._select_template(AGE_GREETING_TEMPLATES, "age")
            return template.format(age=age)
        return self._select_template(GREETING_TEMPLATES, "plain")

    @property
    def zodiac_line(self) -> str:
        return (
            f"Born under {self._profile.western_zodiac.value} "
            f"in the year of the {self._profile.chinese_zodiac.value}."
        )

    def render(self) -> str:
        return "\n".join((self.title, self.message, self.zodiac_line))

    def _select_template(self, templates: tuple[str, ...], variant_group: str) -> str:
        seed = "|".join(
            (
                self._profile.birth_date.isoformat(),
                str(self._profile.age),
                variant_group,
            )
        )
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        index = int.from_bytes(digest[:4], "big") % len(templates)
        return templates[index]
