"""Import płaskich źródeł klucz/wartość do `Configuration`.

Import nie wykonuje konwersji typów, więc nie zgłasza błędów dla
niepoprawnych wartości: ujawniają się one dopiero przy pierwszym odczycie
klucza jako konkretny typ.

Obsługiwane źródła:
- dowolne mapowanie (np. `os.environ`, słownik)
- plik `.env` (python-dotenv)
- sekcja pliku INI (configparser)
"""

import os
from configparser import ConfigParser, Error as ConfigParserError
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from ..util.logger import MessageLogger, debug
from .configuration import Configuration
from .exceptions import ConfigurationError


def create_configuration(
    properties: Mapping, message_logger: Optional[MessageLogger] = None
) -> Configuration:
    """
    Tworzy nowy magazyn konfiguracji z płaskiego mapowania.

    Każdy klucz zapisywany jest pod tą samą nazwą jako surowy tekst.
    Klucze z wartością `None` (np. `KEY` bez `=` w pliku `.env`) są pomijane.

    Args:
        properties (Mapping): Źródło klucz -> wartość.
        message_logger (MessageLogger | None): Logger przekazywany do magazynu.

    Returns:
        Configuration: Nowy magazyn z surowymi wartościami.
    """
    configuration = Configuration(message_logger=message_logger)
    for name, value in properties.items():
        if value is None:
            continue
        configuration.set_string(str(name), str(value))
    debug(f"Imported {len(configuration)} properties", message_logger)
    return configuration


def load_dotenv_configuration(
    path, message_logger: Optional[MessageLogger] = None
) -> Configuration:
    """Wczytuje plik `.env` i importuje jego wartości (bez interpretacji typów)."""
    env_path = Path(path)
    if not env_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {env_path}")
    return create_configuration(dotenv_values(env_path), message_logger=message_logger)


def load_ini_configuration(
    path, section: str, message_logger: Optional[MessageLogger] = None
) -> Configuration:
    """
    Wczytuje jedną sekcję pliku INI.

    Interpolacja `%(zmienna)s` jest aktywna, a wartości z sekcji `[DEFAULT]`
    są dziedziczone przez każdą sekcję. Wielkość liter kluczy jest zachowana.

    Raises:
        ConfigurationError: Gdy plik lub sekcja nie istnieje albo plik jest niepoprawny.
    """
    parser = ConfigParser()
    parser.optionxform = str
    try:
        read_files = parser.read(os.fspath(path))
    except ConfigParserError as e:
        raise ConfigurationError(f"Could not parse configuration file {path}: {e}") from e
    if not read_files:
        raise ConfigurationError(f"Configuration file not found: {path}")
    if not parser.has_section(section):
        raise ConfigurationError(f"Section [{section}] not found in {path}")

    try:
        properties = dict(parser[section])
    except ConfigParserError as e:
        raise ConfigurationError(f"Could not interpolate section [{section}] of {path}: {e}") from e
    return create_configuration(properties, message_logger=message_logger)
