"""Tests for the directory-walking config explorer."""

import asyncio

import pytest

from confscout.core.builder import default_search_places
from confscout.core.errors import ConfigSearchError
from confscout.core.explorer import ConfigExplorer
from confscout.models import SearchConfig


def explorer_for(tmp_path, places=None, loaders=None, module_name="foo", stop_dir=None):
    config = SearchConfig(
        search_places=places or default_search_places(module_name),
        loaders=loaders or {},
        stop_dir=str(stop_dir or tmp_path),
    )
    return ConfigExplorer(module_name, config)


def search(explorer, start_dir):
    return asyncio.run(explorer.search(str(start_dir)))


class TestConfigExplorer:

    def test_nothing_found(self, tmp_path):
        assert search(explorer_for(tmp_path), tmp_path) is None

    def test_json_file(self, tmp_path, write_file):
        target = write_file("foo.config.json", {"a": 1})

        result = search(explorer_for(tmp_path), tmp_path)

        assert result.config == {"a": 1}
        assert result.filepath == str(target)

    def test_yaml_and_extensionless_rc(self, tmp_path, write_file):
        write_file(".foorc", "answer: 42\n")

        result = search(explorer_for(tmp_path), tmp_path)

        assert result.config == {"answer": 42}
        assert result.filepath.endswith(".foorc")

    def test_search_place_order_within_directory(self, tmp_path, write_file):
        write_file("foo.config.yml", "from: yml\n")
        write_file(".foo.json", {"from": "json"})

        result = search(explorer_for(tmp_path), tmp_path)

        assert result.config == {"from": "json"}

    def test_package_json_property(self, tmp_path, write_file):
        write_file("package.json", {"name": "proj", "foo": {"from": "package"}})
        write_file(".foorc.json", {"from": "rc"})

        assert search(explorer_for(tmp_path), tmp_path).config == {"from": "package"}

    def test_package_json_without_property_is_skipped(self, tmp_path, write_file):
        write_file("package.json", {"name": "proj"})
        write_file(".foorc.json", {"from": "rc"})

        assert search(explorer_for(tmp_path), tmp_path).config == {"from": "rc"}

    def test_empty_files_are_skipped(self, tmp_path, write_file):
        write_file(".foorc.json", "   \n")
        write_file("foo.config.yaml", "from: yaml\n")

        assert search(explorer_for(tmp_path), tmp_path).config == {"from": "yaml"}

    def test_walks_up_to_stop_dir(self, tmp_path, write_file):
        target = write_file("foo.config.json", {"level": "root"})
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)

        result = search(explorer_for(tmp_path), start)

        assert result.filepath == str(target)

    def test_nearest_directory_wins(self, tmp_path, write_file):
        write_file("foo.config.json", {"level": "root"})
        write_file("a/.foorc.yml", "level: a\n")
        start = tmp_path / "a" / "b"
        start.mkdir(parents=True)

        assert search(explorer_for(tmp_path), start).config == {"level": "a"}

    def test_does_not_search_above_stop_dir(self, tmp_path, write_file):
        write_file("foo.config.json", {"level": "root"})
        stop = tmp_path / "a"
        start = stop / "b"
        start.mkdir(parents=True)

        assert search(explorer_for(tmp_path, stop_dir=stop), start) is None

    def test_custom_loader_sync_and_async(self, tmp_path, write_file):
        write_file("foo.config.toml", "x = 1")
        write_file("foo.config.ini", "[x]")

        def load_toml(filepath):
            return {"loader": "toml"}

        async def load_ini(filepath):
            return {"loader": "ini"}

        places = ["foo.config.ini", "foo.config.toml"]
        loaders = {".toml": load_toml, ".ini": load_ini}

        assert search(explorer_for(tmp_path, places, loaders), tmp_path).config == {"loader": "ini"}
        assert search(explorer_for(tmp_path, places[1:], loaders), tmp_path).config == {"loader": "toml"}

    def test_loader_returning_none_is_skipped(self, tmp_path, write_file):
        write_file("foo.config.js", "module.exports = undefined;")
        write_file("foo.config.json", {"a": 1})

        loaders = {".js": lambda filepath: None}

        assert search(explorer_for(tmp_path, loaders=loaders), tmp_path).config == {"a": 1}

    def test_missing_loader_raises(self, tmp_path, write_file):
        write_file("foo.config.toml", "x = 1")

        with pytest.raises(ConfigSearchError):
            search(explorer_for(tmp_path, ["foo.config.toml"]), tmp_path)

    def test_parse_error_propagates(self, tmp_path, write_file):
        write_file("foo.config.json", "{ broken")

        with pytest.raises(ValueError):
            search(explorer_for(tmp_path), tmp_path)

    def test_invalid_package_json_raises(self, tmp_path, write_file):
        write_file("package.json", "{ broken")

        with pytest.raises(ConfigSearchError):
            search(explorer_for(tmp_path), tmp_path)
