"""Parsowanie i formatowanie literałów czasu (`"30 s"`, `"5min"`, `"1 d"`).

Rozdzielczość `datetime.timedelta` to mikrosekunda, dlatego literały w
nanosekundach są akceptowane tylko dla pełnych mikrosekund.
"""

import re
from datetime import timedelta
from enum import Enum

from .exceptions import ParseFormatError, RangeOverflowError

_DURATION_LITERAL = re.compile(r"(?P<number>[+-]?[0-9]+)\s*(?P<unit>.*)", re.DOTALL)

_MICROSECOND = timedelta(microseconds=1)


class TimeUnit(Enum):
    """Jednostki czasu: (liczba nanosekund, etykiety). Pierwsza etykieta jest kanoniczna."""

    DAYS = (86_400_000_000_000, ("d", "day", "days"))
    HOURS = (3_600_000_000_000, ("h", "hour", "hours"))
    MINUTES = (60_000_000_000, ("min", "m", "minute", "minutes"))
    SECONDS = (1_000_000_000, ("s", "sec", "secs", "second", "seconds"))
    MILLISECONDS = (1_000_000, ("ms", "milli", "millis", "millisecond", "milliseconds"))
    MICROSECONDS = (1_000, ("us", "µs", "micro", "micros", "microsecond", "microseconds"))
    NANOSECONDS = (1, ("ns", "nano", "nanos", "nanosecond", "nanoseconds"))

    @property
    def nanos(self) -> int:
        return self.value[0]

    @property
    def labels(self) -> tuple:
        return self.value[1]


_LABEL_TO_UNIT = {label: unit for unit in TimeUnit for label in unit.labels}


def _all_units() -> str:
    return ", ".join(f"{unit.name}: ({' | '.join(unit.labels)})" for unit in TimeUnit)


def parse_duration(text: str) -> timedelta:
    """
    Parsuje literał czasu: liczba całkowita (opcjonalnie ze znakiem) i jednostka.

    Brak jednostki oznacza milisekundy. Etykiety jednostek nie rozróżniają
    wielkości liter.

    Args:
        text (str): Literał, np. `"500"`, `"30 s"`, `"2h"`.

    Returns:
        timedelta: Sparsowany odcinek czasu.

    Raises:
        ParseFormatError: Gdy literał nie pasuje do gramatyki lub nie jest
            pełną liczbą mikrosekund.
        RangeOverflowError: Gdy wynik przekracza zakres `timedelta`.
    """
    trimmed = text.strip()
    if not trimmed:
        raise ParseFormatError("argument is an empty- or whitespace-only string", text)

    match = _DURATION_LITERAL.fullmatch(trimmed)
    if match is None:
        raise ParseFormatError(f"text does not start with a number: '{text}'", text)

    try:
        number = int(match.group("number"))
    except ValueError:
        raise RangeOverflowError(
            f"The value '{text}' has too many digits to be represented as a duration (numeric overflow).", text
        ) from None
    unit_label = match.group("unit").strip()
    if unit_label:
        unit = _LABEL_TO_UNIT.get(unit_label.lower())
        if unit is None:
            raise ParseFormatError(
                f"Time interval unit label '{unit_label}' does not match any of the recognized units: {_all_units()}",
                text,
            )
    else:
        unit = TimeUnit.MILLISECONDS

    micros, remainder = divmod(number * unit.nanos, TimeUnit.MICROSECONDS.nanos)
    if remainder:
        raise ParseFormatError(f"Duration '{text}' is not a whole number of microseconds", text)
    try:
        return timedelta(microseconds=micros)
    except OverflowError as e:
        raise RangeOverflowError(f"The value '{text}' cannot be represented as a duration (numeric overflow).", text) from e


def format_with_highest_unit(duration: timedelta) -> str:
    """Formatuje czas w największej jednostce, która dzieli go bez reszty, np. `"5 min"`."""
    nanos = (duration // _MICROSECOND) * TimeUnit.MICROSECONDS.nanos
    if nanos == 0:
        return f"0 {TimeUnit.MILLISECONDS.labels[0]}"
    for unit in TimeUnit:
        if nanos % unit.nanos == 0:
            return f"{nanos // unit.nanos} {unit.labels[0]}"
