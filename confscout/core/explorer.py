# confscout/core/explorer.py
"""Walks up a directory tree looking for the first usable config file."""

import asyncio
import inspect
import json
import os
from typing import Any, Dict, Optional

from ..loaders.module import DualFormatLoader
from ..loaders.text import load_json, load_yaml, read_text
from ..models.request import LoaderFn, SearchConfig
from ..models.result import ExplorerResult
from .errors import ConfigSearchError

NO_EXTENSION = 'noExt'


def builtin_loaders(node_binary: str = "node") -> Dict[str, LoaderFn]:
    """Loaders available before the search config's own table is applied."""
    return {
        '.json': load_json,
        '.yaml': load_yaml,
        '.yml': load_yaml,
        NO_EXTENSION: load_yaml,
        '.cjs': DualFormatLoader(node_binary=node_binary),
    }


class ConfigExplorer:
    """
    Finds the config file for one module name.

    Directories are visited from the start directory upward, and inside each
    directory the search places are tried in order. The first file that
    yields a non-empty config wins. The walk ends after the stop directory
    (or the filesystem root) has been searched.
    """

    def __init__(self, module_name: str, search_config: SearchConfig, node_binary: str = "node"):
        self.module_name = module_name
        self.search_config = search_config
        self.loaders = builtin_loaders(node_binary)
        self.loaders.update(search_config.loaders)

    async def search(self, start_dir: str) -> Optional[ExplorerResult]:
        """
        Search from `start_dir` upward.

        Returns:
            ExplorerResult for the first match, or None

        Raises:
            ConfigSearchError: If a candidate has no loader or bad package.json
            Exception: Whatever a loader raises, unchanged
        """
        directory = os.path.abspath(start_dir)
        stop_dir = os.path.abspath(self.search_config.stop_dir)

        while True:
            result = await self._search_directory(directory)
            if result is not None:
                return result

            parent = os.path.dirname(directory)
            if directory == stop_dir or parent == directory:
                return None

            directory = parent

    async def _search_directory(self, directory: str) -> Optional[ExplorerResult]:
        for place in self.search_config.search_places:
            filepath = os.path.join(directory, place)

            if not await asyncio.to_thread(os.path.isfile, filepath):
                continue

            content = await asyncio.to_thread(read_text, filepath)

            # Empty files are skipped, not reported
            if not content.strip():
                continue

            if os.path.basename(filepath) == 'package.json':
                config = self._package_prop(filepath, content)
            else:
                config = await self._load(filepath)

            if config is None:
                continue

            return ExplorerResult(config=config, filepath=filepath)

        return None

    def _package_prop(self, filepath: str, content: str) -> Any:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigSearchError(f"JSON Error in {filepath}:\n{e}") from e

        if not isinstance(data, dict):
            return None

        return data.get(self.module_name)

    async def _load(self, filepath: str) -> Any:
        extension = os.path.splitext(filepath)[1].lower() or NO_EXTENSION
        loader = self.loaders.get(extension)

        if loader is None:
            raise ConfigSearchError(f"No loader for extension '{extension}', cannot load {filepath}")

        result = loader(filepath)
        if inspect.isawaitable(result):
            result = await result

        return result
