# duration.py

from __future__ import annotations

# множители единиц: минуты и часы -> секунды
UNIT_SECONDS = {
    "m": 60,
    "h": 3600,
}

# верхняя граница величины (беззнаковое 64-битное число)
MAX_MAGNITUDE = 2**64 - 1

_DIGITS = frozenset("0123456789")


class DurationParseError(ValueError):
    """
    Неверное значение интервала (--eyes / --water).
    reason: "invalid unit" или "invalid number".
    """

    def __init__(self, field_name: str, raw: str, reason: str, message: str):
        super().__init__(message)
        self.field_name = field_name
        self.raw = raw
        self.reason = reason


def _invalid_unit(field_name: str, raw: str) -> DurationParseError:
    return DurationParseError(
        field_name,
        raw,
        "invalid unit",
        f"Invalid value for --{field_name}='{raw}': "
        "only 'm' (minutes) or 'h' (hours) are allowed",
    )


def _invalid_number(field_name: str, raw: str) -> DurationParseError:
    return DurationParseError(
        field_name,
        raw,
        "invalid number",
        f"Could not parse --{field_name}='{raw}': invalid number",
    )


def parse_duration(raw: str, field_name: str) -> int:
    """
    Разбирает строку вида "<число><m|h>" и возвращает интервал в целых секундах.

    "20m" -> 1200 сек, "1h" -> 3600 сек, "0m" -> 0 сек.
    Составные ("1h30m") и дробные значения не поддерживаются.
    """
    unit = raw[-1:]
    if unit not in UNIT_SECONDS:
        raise _invalid_unit(field_name, raw)

    number = raw[:-1]
    # int() принимает пробелы, знак, "_" и не-ASCII цифры, поэтому проверяем сами
    if not number or not set(number) <= _DIGITS:
        raise _invalid_number(field_name, raw)

    magnitude = int(number)
    if magnitude > MAX_MAGNITUDE:
        raise _invalid_number(field_name, raw)

    return magnitude * UNIT_SECONDS[unit]
