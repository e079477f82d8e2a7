"""
Testy integracyjne DirectoryBasedPluginFinder na prawdziwym systemie plików.

Scenariusz:
- pusty katalog główny -> brak deskryptorów
- puste podkatalogi / podkatalogi bez artefaktów -> błąd wskazujący podkatalog
- N artefaktów w podkatalogu -> deskryptor z N ścieżkami w porządku leksykograficznym
"""

from unittest.mock import Mock

import pytest

from config_commons.config.exceptions import PluginDiscoveryError
from config_commons.plugin import DirectoryBasedPluginFinder, PluginDescriptor


class TestDirectoryBasedPluginFinder:
    """Testy wyszukiwania pluginów w katalogach."""

    @pytest.fixture
    def plugins_root(self, tmp_path):
        """Fixture providing an empty plugins root directory."""
        root = tmp_path / "plugins"
        root.mkdir()
        return root

    def test_empty_root_yields_no_descriptors(self, plugins_root):
        assert DirectoryBasedPluginFinder(plugins_root).find_plugins() == []

    def test_files_in_root_are_ignored(self, plugins_root):
        (plugins_root / "README.txt").write_text("not a plugin")
        assert DirectoryBasedPluginFinder(plugins_root).find_plugins() == []

    def test_empty_sub_directory_fails(self, plugins_root):
        (plugins_root / "A").mkdir()

        with pytest.raises(PluginDiscoveryError) as exc_info:
            DirectoryBasedPluginFinder(plugins_root).find_plugins()

        assert "A" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_sub_directory_without_artifacts_fails(self, plugins_root):
        sub_dir = plugins_root / "B"
        sub_dir.mkdir()
        (sub_dir / "ignore-test.zip").touch()
        (sub_dir / "ignore-dir.whl").mkdir()

        with pytest.raises(PluginDiscoveryError) as exc_info:
            DirectoryBasedPluginFinder(plugins_root).find_plugins()

        assert str(sub_dir) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_descriptors_for_sub_directories(self, plugins_root):
        expected = []
        for i, name in enumerate(["A", "B", "C"]):
            sub_dir = plugins_root / name
            sub_dir.mkdir()
            (sub_dir / "ignore-test.zip").touch()
            (sub_dir / "ignore-dir").mkdir()
            artifacts = []
            # tworzone w odwrotnej kolejnosci, wynik ma byc posortowany
            for j in reversed(range(i + 1)):
                artifact = sub_dir / f"plugin-file-{j}.whl"
                artifact.touch()
                artifacts.append(artifact)
            expected.append(
                PluginDescriptor(
                    plugin_id=name,
                    plugin_resource_paths=sorted(artifacts, key=lambda p: p.name),
                    loader_exclude_patterns=[],
                )
            )

        actual = DirectoryBasedPluginFinder(plugins_root).find_plugins()

        assert sorted(actual, key=lambda d: d.plugin_id) == expected
        assert [len(d.plugin_resource_paths) for d in sorted(actual, key=lambda d: d.plugin_id)] == [1, 2, 3]

    def test_custom_suffix_and_exclude_patterns(self, plugins_root):
        sub_dir = plugins_root / "legacy"
        sub_dir.mkdir()
        (sub_dir / "b.jar").touch()
        (sub_dir / "a.jar").touch()

        finder = DirectoryBasedPluginFinder(
            plugins_root, artifact_suffix=".jar", loader_exclude_patterns=["org.slf4j"]
        )
        [descriptor] = finder.find_plugins()

        assert descriptor.plugin_id == "legacy"
        assert [p.name for p in descriptor.plugin_resource_paths] == ["a.jar", "b.jar"]
        assert descriptor.loader_exclude_patterns == ["org.slf4j"]

    def test_missing_root_fails(self, tmp_path):
        with pytest.raises(PluginDiscoveryError) as exc_info:
            DirectoryBasedPluginFinder(tmp_path / "missing").find_plugins()
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_discovery_is_logged(self, plugins_root):
        (plugins_root / "A").mkdir()
        (plugins_root / "A" / "a.whl").touch()
        logger = Mock()

        DirectoryBasedPluginFinder(plugins_root, message_logger=logger).find_plugins()

        logger.info.assert_called_once()
        assert "1 plugin" in logger.info.call_args[0][0]
