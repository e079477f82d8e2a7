"""
#### Utility Module

Narzędzia pomocnicze współdzielone przez pozostałe moduły pakietu.

#### Główne komponenty:
- `logger`: funkcje `debug`/`info`/`warning`/`error` z opcjonalnym
  `MessageLogger` zapisującym komunikaty do pliku w osobnym procesie
"""

from .logger import (
    LogLevelType,
    MessageLogger,
    debug,
    error,
    format_message,
    info,
    warning,
)

__all__ = [
    "LogLevelType",
    "MessageLogger",
    "debug",
    "error",
    "format_message",
    "info",
    "warning",
]
