# config.py

from __future__ import annotations

from dataclasses import dataclass

from duration import parse_duration

# -------------------------------------------------
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# -------------------------------------------------
# правило 20-20-20 для глаз и вода раз в час

DEFAULT_EYES = "20m"
DEFAULT_WATER = "1h"


@dataclass(frozen=True)
class Reminder:
    name: str
    title: str
    body: str


EYES_REMINDER = Reminder(
    name="eyes",
    title="Eye break 👀",
    body="Look away for ~20s. 20-20-20 rule!",
)

WATER_REMINDER = Reminder(
    name="water",
    title="Hydration 💧",
    body="Drink a few sips of water.",
)


@dataclass(frozen=True)
class Config:
    # исходные строки из командной строки (для вывода при старте)
    eyes: str = DEFAULT_EYES
    water: str = DEFAULT_WATER

    # интервалы в секундах
    eyes_seconds: int = parse_duration(DEFAULT_EYES, "eyes")
    water_seconds: int = parse_duration(DEFAULT_WATER, "water")


def load_config(eyes: str = DEFAULT_EYES, water: str = DEFAULT_WATER) -> Config:
    """
    Собирает Config из значений --eyes / --water.
    При неверном значении пробрасывает DurationParseError.
    """
    return Config(
        eyes=eyes,
        water=water,
        eyes_seconds=parse_duration(eyes, "eyes"),
        water_seconds=parse_duration(water, "water"),
    )
