"""Tests for building Config from command-line values."""

import dataclasses

import pytest

from config import (
    DEFAULT_EYES,
    DEFAULT_WATER,
    EYES_REMINDER,
    WATER_REMINDER,
    Config,
    load_config,
)
from duration import DurationParseError


def test_defaults():
    config = load_config()
    assert config.eyes == DEFAULT_EYES == "20m"
    assert config.water == DEFAULT_WATER == "1h"
    assert config.eyes_seconds == 1200
    assert config.water_seconds == 3600


def test_custom_values():
    config = load_config("30m", "2h")
    assert config.eyes_seconds == 1800
    assert config.water_seconds == 7200


def test_invalid_value_names_field():
    with pytest.raises(DurationParseError) as exc_info:
        load_config("20m", "often")
    assert exc_info.value.field_name == "water"


def test_config_is_immutable():
    config = load_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.eyes_seconds = 1


def test_reminder_messages():
    assert EYES_REMINDER.name == "eyes"
    assert EYES_REMINDER.title.startswith("Eye break")
    assert WATER_REMINDER.name == "water"
    assert WATER_REMINDER.title.startswith("Hydration")


def test_config_defaults_match_default_strings():
    assert Config() == load_config(DEFAULT_EYES, DEFAULT_WATER)
