"""Typy docelowe konwersji wartości konfiguracyjnych.

Każdy typ docelowy jest niemutowalnym wariantem `TypeTag`. Konwerter
(`conversion.convert_value`) dopasowuje warianty instrukcją `match`, więc
zbiór wariantów jest zamknięty: nowy typ wymaga nowej gałęzi konwersji.

Eksponuje:
- warianty: `Int32Type`, `Int64Type`, `BoolType`, `Float32Type`, `Float64Type`,
  `TextType`, `SecretType`, `EnumType`, `DurationType`, `MemorySizeType`,
  `MapType`, `ListType`
- stałe bezparametrowych wariantów (`INT32`, `TEXT`, ...) oraz fabryki
  `enum_of()` i `list_of()`
- `Password`: wartość sekretna, która nigdy nie pokazuje treści w diagnostyce
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .exceptions import UnsupportedTypeError


class TypeTag:
    """Bazowa klasa wariantów typu docelowego."""

    __slots__ = ()


@dataclass(frozen=True)
class Int32Type(TypeTag):
    """32-bitowa liczba całkowita ze znakiem."""


@dataclass(frozen=True)
class Int64Type(TypeTag):
    """64-bitowa liczba całkowita ze znakiem."""


@dataclass(frozen=True)
class BoolType(TypeTag):
    """Wartość logiczna (`true`/`false` bez rozróżniania wielkości liter)."""


@dataclass(frozen=True)
class Float32Type(TypeTag):
    """Liczba zmiennoprzecinkowa pojedynczej precyzji."""


@dataclass(frozen=True)
class Float64Type(TypeTag):
    """Liczba zmiennoprzecinkowa podwójnej precyzji."""


@dataclass(frozen=True)
class TextType(TypeTag):
    """Tekst w postaci kanonicznej (`render`)."""


@dataclass(frozen=True)
class SecretType(TypeTag):
    """Tekst sekretny, opakowany w `Password`."""


@dataclass(frozen=True)
class EnumType(TypeTag):
    """Jedna z nazw członków podanego `Enum` (bez rozróżniania wielkości liter).

    Tablica nazwa -> członek budowana jest raz, przy tworzeniu wariantu.
    Przy kolizji nazw różniących się tylko wielkością liter wygrywa członek
    zadeklarowany wcześniej.

    Attributes:
        enum_type (type[Enum]): Klasa wyliczenia.
        members (Mapping[str, Enum]): Nazwy członków (wielkimi literami) -> członek.
    """

    enum_type: type
    members: Mapping = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not (isinstance(self.enum_type, type) and issubclass(self.enum_type, Enum)):
            raise UnsupportedTypeError(self.enum_type)
        table = {}
        for member in self.enum_type:
            table.setdefault(member.name.upper(), member)
        object.__setattr__(self, "members", MappingProxyType(table))


@dataclass(frozen=True)
class DurationType(TypeTag):
    """Odcinek czasu (`datetime.timedelta`)."""


@dataclass(frozen=True)
class MemorySizeType(TypeTag):
    """Rozmiar pamięci w bajtach (`MemorySize`)."""


@dataclass(frozen=True)
class MapType(TypeTag):
    """Mapa tekst -> tekst."""


@dataclass(frozen=True)
class ListType(TypeTag):
    """Lista elementów typu `element`."""

    element: TypeTag

    def __post_init__(self):
        if not isinstance(self.element, TypeTag):
            raise UnsupportedTypeError(self.element)


INT32 = Int32Type()
INT64 = Int64Type()
BOOL = BoolType()
FLOAT32 = Float32Type()
FLOAT64 = Float64Type()
TEXT = TextType()
SECRET = SecretType()
DURATION = DurationType()
MEMORY_SIZE = MemorySizeType()
MAP_OF_TEXT = MapType()


def enum_of(enum_type: type) -> EnumType:
    return EnumType(enum_type)


def list_of(element: TypeTag) -> ListType:
    return ListType(element)


class Password:
    """Wartość sekretna (hasło, klucz API).

    `str()` i `repr()` zwracają maskę, treść dostępna jest wyłącznie przez
    `get_password()`.
    """

    __slots__ = ("_password",)

    MASK = "******"

    def __init__(self, password: str):
        if not isinstance(password, str):
            raise TypeError("Password must be created from a str")
        self._password = password

    def get_password(self) -> str:
        return self._password

    def __eq__(self, other):
        if not isinstance(other, Password):
            return NotImplemented
        return self._password == other._password

    def __hash__(self):
        return hash(self._password)

    def __str__(self) -> str:
        return self.MASK

    def __repr__(self) -> str:
        return f"Password({self.MASK})"
