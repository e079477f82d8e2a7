from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from ..util.logger import MessageLogger, debug
from .conversion import convert_value, render
from .exceptions import ConfigurationError, ConversionError
from .memory_size import MemorySize
from .types import (
    BOOL,
    DURATION,
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    MAP_OF_TEXT,
    MEMORY_SIZE,
    SECRET,
    TEXT,
    Password,
    TypeTag,
    enum_of,
    list_of,
)

HIDDEN_CONTENT = "******"

# fragmenty nazw kluczy, ktorych wartosci nie moga trafic do logow
SENSITIVE_KEYS = (
    "password",
    "secret",
    "token",
    "apikey",
    "api-key",
    "api_key",
    "service-key",
    "auth-params",
    "basic-auth",
    "jaas.config",
)


def is_sensitive(key: str) -> bool:
    """Sprawdza czy klucz (bez rozróżniania wielkości liter) przechowuje wartość wrażliwą."""
    key_lower = key.lower()
    return any(fragment in key_lower for fragment in SENSITIVE_KEYS)


def _holds_password(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return any(_holds_password(element) for element in value)
    return isinstance(value, Password)


class Configuration:
    """
    Magazyn konfiguracji przechowujący surowe wartości tekstowe.

    Wartości otypowane powstają dopiero przy odczycie (`get`) i nie są
    buforowane: każdy odczyt ponownie wykonuje konwersję z zapisanego tekstu.
    Klasa nie jest synchronizowana, współbieżne modyfikacje tej samej
    instancji wymagają zewnętrznej blokady.

    Wartości kluczy wrażliwych (`is_sensitive`) oraz kluczy zapisanych przez
    `set` jako `Password` są maskowane w `str`, `repr`, logach i wyjątkach.

    Args:
        message_logger (MessageLogger | None): Logger komunikatów; bez niego
            komunikaty trafiają na standardowe wyjście.
    """

    def __init__(self, message_logger: Optional[MessageLogger] = None):
        self._message_logger = message_logger
        self._data: Dict[str, str] = {}
        # klucze zapisane jako Password, maskowane niezaleznie od nazwy
        self._secret_keys: set = set()

    # ==== Dostęp do wartości surowych ====

    def set_string(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Raw value of '{key}' must be a str, got {type(value).__name__}")
        self._data[key] = value

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Zapisuje wartość otypowaną w jej kanonicznej postaci tekstowej."""
        self._data[key] = render(value)
        if _holds_password(value):
            self._secret_keys.add(key)
        else:
            self._secret_keys.discard(key)

    def get(self, key: str, type_tag: TypeTag, default: Any = None) -> Any:
        """
        Odczytuje wartość klucza skonwertowaną na `type_tag`.

        Args:
            key (str): Klucz konfiguracji.
            type_tag (TypeTag): Typ docelowy.
            default: Wartość zwracana bez zmian, gdy klucza brak.

        Returns:
            Any: Wartość typu docelowego lub `default`.

        Raises:
            ConversionError: Gdy zapisanego tekstu nie da się skonwertować.
            UnsupportedTypeError: Gdy typ docelowy nie ma reguły konwersji.
        """
        if key not in self._data:
            return default
        try:
            return convert_value(self._data[key], type_tag)
        except ConfigurationError as e:
            if not self._is_hidden(key):
                debug(f"Could not convert value of '{key}' to {type_tag!r}: {e}", self._message_logger)
                raise
            message = f"Could not convert value of '{key}' to {type_tag!r}"
            debug(message, self._message_logger)
            if isinstance(e, ConversionError):
                raise type(e)(message, HIDDEN_CONTENT, e.type_tag) from None
            raise

    # ==== Odczyty dla typów podstawowych ====

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.get(key, INT32, default)

    def get_long(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.get(key, INT64, default)

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self.get(key, BOOL, default)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        return self.get(key, FLOAT32, default)

    def get_double(self, key: str, default: Optional[float] = None) -> Optional[float]:
        return self.get(key, FLOAT64, default)

    def get_text(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.get(key, TEXT, default)

    def get_password(self, key: str, default: Optional[Password] = None) -> Optional[Password]:
        return self.get(key, SECRET, default)

    def get_enum(self, key: str, enum_type: type, default: Optional[Enum] = None) -> Optional[Enum]:
        return self.get(key, enum_of(enum_type), default)

    def get_duration(self, key: str, default: Optional[timedelta] = None) -> Optional[timedelta]:
        return self.get(key, DURATION, default)

    def get_memory_size(self, key: str, default: Optional[MemorySize] = None) -> Optional[MemorySize]:
        return self.get(key, MEMORY_SIZE, default)

    def get_map(self, key: str, default: Optional[Dict[str, str]] = None) -> Optional[Dict[str, str]]:
        return self.get(key, MAP_OF_TEXT, default)

    def get_list(self, key: str, element: TypeTag, default: Optional[List[Any]] = None) -> Optional[List[Any]]:
        return self.get(key, list_of(element), default)

    # ==== Operacje na kluczach ====

    def contains_key(self, key: str) -> bool:
        return key in self._data

    def remove_key(self, key: str) -> bool:
        self._secret_keys.discard(key)
        return self._data.pop(key, None) is not None

    def key_set(self) -> set:
        return set(self._data)

    def to_map(self) -> Dict[str, str]:
        return dict(self._data)

    def add_all(self, other: "Configuration", prefix: str = "") -> None:
        for key, value in other._data.items():
            self._data[prefix + key] = value
        self._secret_keys.update(prefix + key for key in other._secret_keys)

    def _is_hidden(self, key: str) -> bool:
        return key in self._secret_keys or is_sensitive(key)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._data == other._data

    def __str__(self) -> str:
        out = ""
        for key, value in self._data.items():
            out += f"{key} = {HIDDEN_CONTENT if self._is_hidden(key) else value}\n"
        return out

    def __repr__(self) -> str:
        items = ", ".join(
            f"{key!r}: {HIDDEN_CONTENT if self._is_hidden(key) else value!r}" for key, value in self._data.items()
        )
        return f"Configuration({{{items}}})"
