"""
#### Moduł Config - Typowane Wartości Konfiguracji

Konwersja surowych wartości konfiguracyjnych na typy docelowe i zapis
wartości otypowanych w kanonicznej postaci tekstowej.

#### Komponenty:
- `convert_value` / `render`: konwerter wartości i jego odwrotność
- `split_escaped` / `escape_with_single_quote`: dzielenie tekstu z cytowaniem
- `Configuration`: magazyn surowych wartości z typowanym odczytem
- `create_configuration`, `load_dotenv_configuration`, `load_ini_configuration`: import źródeł
- typy docelowe (`INT32`, `TEXT`, `list_of(...)`, ...) oraz `Password`, `MemorySize`

#### Przykład użycia:
```python
from config_commons.config import INT32, TEXT, create_configuration, list_of

config = create_configuration({"workers": "8", "hosts": "a,b,c"})
workers = config.get("workers", INT32)           # 8
hosts = config.get("hosts", list_of(TEXT))       # ["a", "b", "c"]
```
"""

from .configuration import Configuration, is_sensitive
from .conversion import convert_value, render
from .exceptions import (
    ConfigurationError,
    ConversionError,
    MalformedStructureError,
    ParseFormatError,
    PluginDiscoveryError,
    RangeOverflowError,
    UnsupportedTypeError,
)
from .importer import (
    create_configuration,
    load_dotenv_configuration,
    load_ini_configuration,
)
from .memory_size import MemorySize, MemoryUnit
from .splitter import escape_with_single_quote, split_escaped
from .time_utils import format_with_highest_unit, parse_duration
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
    enum_of,
    list_of,
)

__all__ = [
    "BOOL",
    "DURATION",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "MAP_OF_TEXT",
    "MEMORY_SIZE",
    "SECRET",
    "TEXT",
    "BoolType",
    "Configuration",
    "ConfigurationError",
    "ConversionError",
    "DurationType",
    "EnumType",
    "Float32Type",
    "Float64Type",
    "Int32Type",
    "Int64Type",
    "ListType",
    "MalformedStructureError",
    "MapType",
    "MemorySize",
    "MemorySizeType",
    "MemoryUnit",
    "ParseFormatError",
    "Password",
    "PluginDiscoveryError",
    "RangeOverflowError",
    "SecretType",
    "TextType",
    "TypeTag",
    "UnsupportedTypeError",
    "convert_value",
    "create_configuration",
    "enum_of",
    "escape_with_single_quote",
    "format_with_highest_unit",
    "is_sensitive",
    "list_of",
    "load_dotenv_configuration",
    "load_ini_configuration",
    "parse_duration",
    "render",
    "split_escaped",
]
