"""Rozmiar pamięci w bajtach wraz z parserem literałów typu `64 mb`."""

import re
from enum import Enum
from functools import total_ordering

from .exceptions import ParseFormatError, RangeOverflowError

MAX_BYTES = 2**63 - 1

_SIZE_LITERAL = re.compile(r"(?P<number>[0-9]+)\s*(?P<unit>.*)", re.DOTALL)


class MemoryUnit(Enum):
    """Jednostki rozmiaru (wielokrotności binarne) i ich etykiety.

    Pierwsza etykieta jest skrótem, druga formą kanoniczną używaną przez
    `MemorySize.__str__`.
    """

    BYTES = (1, ("b", "bytes"))
    KILO_BYTES = (1 << 10, ("k", "kb", "kibibytes"))
    MEGA_BYTES = (1 << 20, ("m", "mb", "mebibytes"))
    GIGA_BYTES = (1 << 30, ("g", "gb", "gibibytes"))
    TERA_BYTES = (1 << 40, ("t", "tb", "tebibytes"))

    @property
    def multiplier(self) -> int:
        return self.value[0]

    @property
    def labels(self) -> tuple:
        return self.value[1]

    @classmethod
    def from_label(cls, label: str):
        label = label.lower()
        for unit in cls:
            if label in unit.labels:
                return unit
        return None

    @classmethod
    def all_labels(cls) -> str:
        return " | ".join(f"{unit.name}: ({' | '.join(unit.labels)})" for unit in cls)


_ORDERED_UNITS = list(MemoryUnit)


@total_ordering
class MemorySize:
    """Niemutowalny rozmiar pamięci w bajtach (nieujemny, mieści się w 64 bitach)."""

    __slots__ = ("_bytes",)

    def __init__(self, num_bytes: int):
        if isinstance(num_bytes, bool) or not isinstance(num_bytes, int):
            raise TypeError("bytes must be an int")
        if num_bytes < 0:
            raise ValueError("bytes must be >= 0")
        if num_bytes > MAX_BYTES:
            raise RangeOverflowError(
                "The value cannot be represented as 64bit number of bytes (numeric overflow).",
                num_bytes,
            )
        self._bytes = num_bytes

    @classmethod
    def of_mebi_bytes(cls, mebi_bytes: int) -> "MemorySize":
        return cls(mebi_bytes << 20)

    @classmethod
    def parse(cls, text: str, default_unit: MemoryUnit = None) -> "MemorySize":
        """
        Parsuje literał rozmiaru: liczba całkowita i opcjonalna jednostka.

        Brak jednostki oznacza `default_unit` (domyślnie bajty). Jednostki nie
        rozróżniają wielkości liter.

        Args:
            text (str): Literał, np. `"512"`, `"64 mb"`, `"1G"`.
            default_unit (MemoryUnit | None): Jednostka dla literału bez jednostki.

        Returns:
            MemorySize: Sparsowany rozmiar.

        Raises:
            ParseFormatError: Gdy literał nie pasuje do gramatyki.
            RangeOverflowError: Gdy wynik nie mieści się w 64 bitach.
        """
        trimmed = text.strip()
        if not trimmed:
            raise ParseFormatError("argument is an empty- or whitespace-only string", text)

        match = _SIZE_LITERAL.fullmatch(trimmed)
        if match is None:
            raise ParseFormatError(f"text does not start with a number: '{text}'", text)

        try:
            number = int(match.group("number"))
        except ValueError:
            number = MAX_BYTES + 1  # wiecej cyfr niz pozwala int()
        if number > MAX_BYTES:
            raise RangeOverflowError(
                f"The value '{text}' cannot be represented as 64bit number (numeric overflow).",
                text,
            )

        unit_label = match.group("unit").strip()
        if unit_label:
            unit = MemoryUnit.from_label(unit_label)
            if unit is None:
                raise ParseFormatError(
                    f"Memory size unit '{unit_label}' does not match any of the recognized units: "
                    f"{MemoryUnit.all_labels()}",
                    text,
                )
        else:
            unit = default_unit or MemoryUnit.BYTES

        result = number * unit.multiplier
        if result > MAX_BYTES:
            raise RangeOverflowError(
                f"The value '{text}' cannot be represented as 64bit number of bytes (numeric overflow).",
                text,
            )
        return cls(result)

    @property
    def bytes(self) -> int:
        return self._bytes

    @property
    def kibi_bytes(self) -> int:
        return self._bytes >> 10

    @property
    def mebi_bytes(self) -> int:
        return self._bytes >> 20

    @property
    def gibi_bytes(self) -> int:
        return self._bytes >> 30

    @property
    def tebi_bytes(self) -> int:
        return self._bytes >> 40

    def add(self, other: "MemorySize") -> "MemorySize":
        return MemorySize(self._bytes + other._bytes)

    def subtract(self, other: "MemorySize") -> "MemorySize":
        return MemorySize(self._bytes - other._bytes)

    def multiply(self, multiplier: float) -> "MemorySize":
        if multiplier < 0:
            raise ValueError("multiplier must be >= 0")
        return MemorySize(int(self._bytes * multiplier))

    def divide(self, by: int) -> "MemorySize":
        if by <= 0:
            raise ValueError("divisor must be > 0")
        return MemorySize(self._bytes // by)

    def to_human_readable_string(self) -> str:
        if self._bytes == MAX_BYTES:
            return "infinite"
        unit = MemoryUnit.BYTES
        for candidate in _ORDERED_UNITS:
            if self._bytes >= candidate.multiplier:
                unit = candidate
        if unit is MemoryUnit.BYTES:
            return f"{self._bytes} bytes"
        return f"{self._bytes / unit.multiplier:.3f}{unit.labels[1]} ({self._bytes} bytes)"

    def __str__(self) -> str:
        # najwieksza jednostka dzielaca rozmiar bez reszty
        unit = MemoryUnit.BYTES
        if self._bytes:
            for candidate in _ORDERED_UNITS:
                if self._bytes % candidate.multiplier == 0:
                    unit = candidate
        return f"{self._bytes // unit.multiplier} {unit.labels[1]}"

    def __repr__(self) -> str:
        return f"MemorySize({self._bytes})"

    def __eq__(self, other):
        if not isinstance(other, MemorySize):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, MemorySize):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)


MemorySize.ZERO = MemorySize(0)
MemorySize.MAX_VALUE = MemorySize(MAX_BYTES)
