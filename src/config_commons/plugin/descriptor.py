from pathlib import Path
from typing import List

from pydantic import BaseModel, Field


class PluginDescriptor(BaseModel):
    """Opis pluginu znalezionego w katalogu pluginów.

    Attributes:
        plugin_id (str): Identyfikator pluginu (nazwa podkatalogu).
        plugin_resource_paths (List[Path]): Ścieżki artefaktów pluginu,
            posortowane leksykograficznie po nazwie pliku.
        loader_exclude_patterns (List[str]): Wzorce nazw wyłączonych z
            izolowanego ładowania (ładowane z procesu nadrzędnego).
    """

    plugin_id: str
    plugin_resource_paths: List[Path]
    loader_exclude_patterns: List[str] = Field(default_factory=list)
