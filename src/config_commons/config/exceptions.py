"""Wyjątki modułu konfiguracji.

Hierarchia:
- `ConfigurationError`: bazowy wyjątek pakietu
    - `ConversionError` (również `ValueError`): wartości nie da się przekonwertować
        - `ParseFormatError`: tekst nie pasuje do gramatyki literału typu
        - `RangeOverflowError`: poprawna liczba nie mieści się w węższym typie
        - `MalformedStructureError`: wpis mapy nie jest parą klucz:wartość
    - `UnsupportedTypeError` (również `TypeError`): brak reguły konwersji dla typu
    - `PluginDiscoveryError` (również `RuntimeError`): błąd wyszukiwania pluginów
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Bazowy wyjątek dla błędów konfiguracji."""


class ConversionError(ConfigurationError, ValueError):
    """
    Wyjątek rzucany gdy surowej wartości nie da się przedstawić jako żądany typ.

    Attributes:
        value: Wartość, której dotyczy błąd (dla sekretów zawsze zamaskowana).
        type_tag: Docelowy typ konwersji.
        message: Wiadomość błędu.
    """

    def __init__(self, message: str, value: Any = None, type_tag: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.type_tag = type_tag


class ParseFormatError(ConversionError):
    """Tekst nie pasuje do gramatyki literału docelowego typu."""


class RangeOverflowError(ConversionError):
    """Wartość liczbowa nie mieści się w zakresie węższego typu."""


class MalformedStructureError(ConversionError):
    """Segment mapy nie dzieli się na dokładnie jeden klucz i jedną wartość."""


class UnsupportedTypeError(ConfigurationError, TypeError):
    """Brak reguły konwersji dla żądanego typu (błąd definicji schematu)."""

    def __init__(self, type_tag: Any):
        super().__init__(f"Unsupported type: {type_tag!r}")
        self.type_tag = type_tag


class PluginDiscoveryError(ConfigurationError, RuntimeError):
    """Nie udało się zbudować deskryptorów pluginów z katalogu."""
