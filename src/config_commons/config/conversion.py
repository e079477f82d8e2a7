"""
#### Konwersja wartości konfiguracyjnych

Zamiana surowych wartości (tekst z plików/zmiennych środowiskowych lub obiekty
już otypowane) na wartości typu docelowego oraz operacja odwrotna: zapis
wartości otypowanej w kanonicznej postaci tekstowej.

Wszystkie funkcje są czyste i bezstanowe, można je wywoływać współbieżnie.

#### Przykład użycia:
```python
from config_commons.config import INT32, MAP_OF_TEXT, TEXT, convert_value, list_of, render

convert_value("42", INT32)                     # 42
convert_value("a,b,c", list_of(TEXT))          # ["a", "b", "c"]
convert_value("k1:v1,k2:v2", MAP_OF_TEXT)      # {"k1": "v1", "k2": "v2"}
render(["a,b", "c"])                           # "'a,b',c"
```

#### Niezmienniki:
- `convert_value(render(v), tag) == v` dla każdego typu
- zawężanie liczb nigdy nie obcina wartości po cichu (`RangeOverflowError`)
- wartość już właściwego typu zwracana jest bez zmian
"""

import math
import re
from collections.abc import Mapping
from datetime import timedelta
from enum import Enum
from typing import Any, Dict, List

import numpy as np

from .exceptions import (
    ConversionError,
    MalformedStructureError,
    ParseFormatError,
    RangeOverflowError,
    UnsupportedTypeError,
)
from .memory_size import MemorySize
from .splitter import escape_with_single_quote, split_escaped
from .time_utils import format_with_highest_unit, parse_duration
from .types import (
    DURATION,
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    MEMORY_SIZE,
    BoolType,
    DurationType,
    EnumType,
    Float32Type,
    Float64Type,
    Int32Type,
    Int64Type,
    ListType,
    MapType,
    MemorySizeType,
    Password,
    SecretType,
    TextType,
    TypeTag,
)

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1

_FLOAT32_INFO = np.finfo(np.float32)
FLOAT32_MAX = float(_FLOAT32_INFO.max)
FLOAT32_MIN = float(_FLOAT32_INFO.smallest_subnormal)

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

LIST_DELIMITER = ","
MAP_KEY_VALUE_DELIMITER = ":"


def convert_value(raw_value: Any, type_tag: TypeTag) -> Any:
    """
    Konwertuje surową wartość na typ docelowy.

    Args:
        raw_value: Tekst albo obiekt już otypowany.
        type_tag (TypeTag): Typ docelowy.

    Returns:
        Any: Wartość typu docelowego.

    Raises:
        ParseFormatError: Gdy tekst nie pasuje do gramatyki typu.
        RangeOverflowError: Gdy liczba nie mieści się w zakresie typu.
        MalformedStructureError: Gdy wpis mapy nie jest parą klucz:wartość.
        UnsupportedTypeError: Gdy typ docelowy nie ma reguły konwersji.
    """
    match type_tag:
        case Int32Type():
            return convert_to_int(raw_value)
        case Int64Type():
            return convert_to_long(raw_value)
        case BoolType():
            return convert_to_boolean(raw_value)
        case Float32Type():
            return convert_to_float(raw_value)
        case Float64Type():
            return convert_to_double(raw_value)
        case TextType():
            return convert_to_string(raw_value)
        case SecretType():
            return convert_to_password(raw_value)
        case EnumType():
            return convert_to_enum(raw_value, type_tag)
        case DurationType():
            return convert_to_duration(raw_value)
        case MemorySizeType():
            return convert_to_memory_size(raw_value)
        case MapType():
            return convert_to_properties(raw_value)
        case ListType(element=element):
            return convert_to_list(raw_value, element)
        case _:
            raise UnsupportedTypeError(type_tag)


def render(value: Any) -> str:
    """Zwraca kanoniczną postać tekstową wartości (odwrotność `convert_value`)."""
    return convert_to_string(value)


def _is_integer(o: Any) -> bool:
    return isinstance(o, (int, np.integer)) and not isinstance(o, bool)


def _check_int_range(value: int, low: int, high: int, type_tag: TypeTag, type_name: str) -> int:
    if low <= value <= high:
        return value
    # str() nie obsluguje liczb dluzszych niz sys.get_int_max_str_digits()
    shown = value if value.bit_length() <= 64 else "with more than 19 digits"
    raise RangeOverflowError(
        f"Configuration value {shown} overflows/underflows the {type_name} type.", value, type_tag
    )


def _parse_int(o: Any, type_tag: TypeTag, type_name: str) -> int:
    text = str(o).strip()
    if not _INTEGER_LITERAL.fullmatch(text):
        raise ParseFormatError(f"Could not parse value '{o}' as {type_name}.", o, type_tag)
    try:
        return int(text)
    except ValueError:
        raise RangeOverflowError(
            f"Configuration value with more than 19 digits overflows/underflows the {type_name} type.", o, type_tag
        ) from None


def convert_to_int(o: Any) -> int:
    if _is_integer(o):
        return _check_int_range(int(o), INT32_MIN, INT32_MAX, INT32, "integer")
    return _check_int_range(_parse_int(o, INT32, "integer"), INT32_MIN, INT32_MAX, INT32, "integer")


def convert_to_long(o: Any) -> int:
    if _is_integer(o):
        return _check_int_range(int(o), INT64_MIN, INT64_MAX, INT64, "long")
    return _check_int_range(_parse_int(o, INT64, "long"), INT64_MIN, INT64_MAX, INT64, "long")


def convert_to_boolean(o: Any) -> bool:
    if isinstance(o, (bool, np.bool_)):
        return bool(o)

    match str(o).strip().upper():
        case "TRUE":
            return True
        case "FALSE":
            return False
        case _:
            raise ParseFormatError(
                f"Unrecognized option for boolean: {o}. Expected one of: [TRUE, FALSE] (case insensitive)",
                o,
            )


def _parse_float(o: Any, type_tag: TypeTag, type_name: str) -> float:
    text = str(o).strip()
    try:
        value = float(text)
    except ValueError:
        raise ParseFormatError(f"Could not parse value '{o}' as {type_name}.", o, type_tag) from None
    # float() zwraca inf dla literalow spoza zakresu double
    if math.isinf(value) and "inf" not in text.lower():
        raise RangeOverflowError(
            f"Configuration value {text} overflows/underflows the {type_name} type.", o, type_tag
        )
    return value


def _narrow_to_float32(value: float) -> float:
    magnitude = abs(value)
    if (
        value == 0.0
        or math.isnan(value)
        or math.isinf(value)
        or FLOAT32_MIN <= magnitude <= FLOAT32_MAX
    ):
        return float(np.float32(value))
    raise RangeOverflowError(
        f"Configuration value {value} overflows/underflows the float type.", value, FLOAT32
    )


def convert_to_float(o: Any) -> float:
    if isinstance(o, np.float32):
        return float(o)
    if isinstance(o, (float, np.floating)):
        return _narrow_to_float32(float(o))
    return _narrow_to_float32(_parse_float(o, FLOAT32, "float"))


def convert_to_double(o: Any) -> float:
    if isinstance(o, (float, np.floating)):
        return float(o)
    return _parse_float(o, FLOAT64, "double")


def convert_to_string(o: Any) -> str:
    match o:
        case Enum():
            return o.name
        case str():
            return o
        case Password():
            return o.get_password()
        case bool() | np.bool_():
            return "true" if o else "false"
        case timedelta():
            return format_with_highest_unit(o)
        case float() | np.floating():
            return repr(float(o))
        case Mapping():
            return LIST_DELIMITER.join(
                escape_with_single_quote(
                    escape_with_single_quote(convert_to_string(key), MAP_KEY_VALUE_DELIMITER)
                    + MAP_KEY_VALUE_DELIMITER
                    + escape_with_single_quote(convert_to_string(value), MAP_KEY_VALUE_DELIMITER),
                    LIST_DELIMITER,
                )
                for key, value in o.items()
            )
        case list() | tuple():
            return LIST_DELIMITER.join(
                escape_with_single_quote(convert_to_string(element), LIST_DELIMITER) for element in o
            )
        case _:
            return str(o)


def convert_to_password(o: Any) -> Password:
    if isinstance(o, Password):
        return o
    return Password(convert_to_string(o))


def convert_to_enum(o: Any, type_tag: EnumType) -> Enum:
    if isinstance(o, type_tag.enum_type):
        return o

    name = o.name if isinstance(o, Enum) else str(o).strip()
    member = type_tag.members.get(name.upper())
    if member is None:
        raise ParseFormatError(
            f"Could not parse value for enum {type_tag.enum_type.__name__}. "
            f"Expected one of: [{', '.join(m.name for m in type_tag.enum_type)}]",
            o,
            type_tag,
        )
    return member


def _as_literal(o: Any, type_tag: TypeTag) -> str:
    try:
        return str(o)
    except ValueError:
        raise RangeOverflowError(
            f"Configuration value is too large to be converted to {type_tag!r}.", None, type_tag
        ) from None


def convert_to_duration(o: Any) -> timedelta:
    if isinstance(o, timedelta):
        return o
    return parse_duration(_as_literal(o, DURATION))


def convert_to_memory_size(o: Any) -> MemorySize:
    if isinstance(o, MemorySize):
        return o
    return MemorySize.parse(_as_literal(o, MEMORY_SIZE))


def convert_to_properties(o: Any) -> Dict[str, str]:
    if isinstance(o, dict):
        return o
    if isinstance(o, Mapping):
        return dict(o)

    properties = {}
    for entry in split_escaped(str(o), LIST_DELIMITER):
        pair = split_escaped(entry, MAP_KEY_VALUE_DELIMITER)
        if len(pair) != 2:
            raise MalformedStructureError(
                f"Map item '{entry}' is not a key-value pair (missing ':'?)", o
            )
        properties[pair[0]] = pair[1]
    return properties


def convert_to_list(o: Any, element: TypeTag) -> List[Any]:
    if isinstance(o, list):
        return o
    if isinstance(o, tuple):
        return list(o)
    try:
        return [convert_value(segment, element) for segment in split_escaped(str(o), LIST_DELIMITER)]
    except ConversionError as e:
        if not _holds_secret(element):
            raise
        # tekst listy sekretow nie moze trafic do wyjatku
        raise type(e)(e.message, Password.MASK, e.type_tag or ListType(element)) from None


def _holds_secret(type_tag: TypeTag) -> bool:
    match type_tag:
        case SecretType():
            return True
        case ListType(element=element):
            return _holds_secret(element)
        case _:
            return False
