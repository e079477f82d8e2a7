"""Wyszukiwanie pluginów w strukturze katalogów.

Każdy bezpośredni podkatalog katalogu głównego to jeden plugin, a jego
artefakty to pliki z zadanym rozszerzeniem leżące bezpośrednio w tym
podkatalogu:

    plugins/
        plugin-a/
            plugin_a-1.0-py3-none-any.whl
        plugin-b/
            ...
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ..config.exceptions import PluginDiscoveryError
from ..util.logger import MessageLogger, debug, info
from .descriptor import PluginDescriptor


class DirectoryBasedPluginFinder:
    """
    Tworzy deskryptory pluginów na podstawie podkatalogów katalogu głównego.

    Args:
        plugins_root (str | Path): Katalog główny pluginów.
        artifact_suffix (str): Rozszerzenie plików artefaktów.
        loader_exclude_patterns (Iterable[str]): Wzorce przekazywane do każdego deskryptora.
        message_logger (MessageLogger | None): Logger komunikatów.
    """

    def __init__(
        self,
        plugins_root,
        artifact_suffix: str = ".whl",
        loader_exclude_patterns: Iterable[str] = (),
        message_logger: Optional[MessageLogger] = None,
    ):
        self._plugins_root = Path(plugins_root)
        self._artifact_suffix = artifact_suffix
        self._loader_exclude_patterns = list(loader_exclude_patterns)
        self._message_logger = message_logger

    def find_plugins(self) -> List[PluginDescriptor]:
        """
        Zwraca po jednym deskryptorze dla każdego podkatalogu.

        Returns:
            List[PluginDescriptor]: Deskryptory (pusta lista dla pustego katalogu).

        Raises:
            PluginDiscoveryError: Gdy katalogu głównego nie da się odczytać albo
                któryś podkatalog nie zawiera żadnego artefaktu.
        """
        try:
            sub_dirs = sorted(path for path in self._plugins_root.iterdir() if path.is_dir())
        except OSError as e:
            raise PluginDiscoveryError(f"Could not list plugins root directory {self._plugins_root}") from e

        descriptors = []
        for sub_dir in sub_dirs:
            try:
                descriptors.append(self._create_plugin_descriptor_for_sub_directory(sub_dir))
            except OSError as e:
                raise PluginDiscoveryError(f"Could not create plugin descriptor for {sub_dir}: {e}") from e

        info(f"Found {len(descriptors)} plugin(s) in {self._plugins_root}", self._message_logger)
        return descriptors

    def _create_plugin_descriptor_for_sub_directory(self, sub_dir: Path) -> PluginDescriptor:
        artifacts = self._create_artifact_paths(sub_dir)
        debug(f"Plugin {sub_dir.name}: {[path.name for path in artifacts]}", self._message_logger)
        return PluginDescriptor(
            plugin_id=sub_dir.name,
            plugin_resource_paths=artifacts,
            loader_exclude_patterns=list(self._loader_exclude_patterns),
        )

    def _create_artifact_paths(self, sub_dir: Path) -> List[Path]:
        artifacts = sorted(
            (path for path in sub_dir.iterdir() if path.is_file() and path.name.endswith(self._artifact_suffix)),
            key=lambda path: path.name,
        )
        if not artifacts:
            raise FileNotFoundError(f"Cannot find any {self._artifact_suffix} files in plugin directory {sub_dir}")
        return artifacts
