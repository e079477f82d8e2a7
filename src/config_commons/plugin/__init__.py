"""
#### Moduł Plugin - Wyszukiwanie Pluginów

- `DirectoryBasedPluginFinder`: deskryptor dla każdego podkatalogu katalogu pluginów
- `PluginDescriptor`: identyfikator pluginu, ścieżki artefaktów i wzorce wyłączeń
"""

from .descriptor import PluginDescriptor
from .finder import DirectoryBasedPluginFinder

__all__ = ["DirectoryBasedPluginFinder", "PluginDescriptor"]
