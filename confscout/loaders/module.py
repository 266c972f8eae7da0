# confscout/loaders/module.py
"""Dual-format loader for .js/.mjs config files."""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union

from ..contracts.strategy import IModuleStrategy
from ..core.errors import MissingDefaultExport, UnsupportedModuleFormat
from ..core.package_type import MODULE, package_type
from .node import CommonJsStrategy, EsmStrategy, NodeRunner


class ModuleFormat(Enum):
    ESM = 'esm'
    LEGACY = 'legacy'
    UNSUPPORTED = 'unsupported'


def choose_format(extension: str, pkg_type: Optional[str]) -> ModuleFormat:
    """
    Decide how a code file must be loaded.

    Only the extension and the owning package's type matter, never the file
    content: a '.js' file using `export` syntax inside a CommonJS package is
    still loaded as CommonJS (and fails there).
    """
    extension = extension.lower()

    if extension == '.mjs':
        return ModuleFormat.ESM
    if extension == '.js':
        return ModuleFormat.ESM if pkg_type == MODULE else ModuleFormat.LEGACY
    if extension == '.cjs':
        return ModuleFormat.LEGACY

    return ModuleFormat.UNSUPPORTED


class DualFormatLoader:
    """
    Loads a code config file as an ES module or a CommonJS module.

    ES modules must have a default export, which is returned. CommonJS
    modules return module.exports as is. Nothing is cached.
    """

    def __init__(
        self,
        esm: Optional[IModuleStrategy] = None,
        legacy: Optional[IModuleStrategy] = None,
        package_type_oracle: Callable[[Union[str, Path]], Optional[str]] = package_type,
        node_binary: str = "node",
    ):
        runner = NodeRunner(node_binary)
        self.esm = esm or EsmStrategy(runner)
        self.legacy = legacy or CommonJsStrategy(runner)
        self.package_type_oracle = package_type_oracle

    async def resolve_format(self, filepath: str) -> ModuleFormat:
        extension = Path(filepath).suffix.lower()

        # The package type only matters for plain .js files
        pkg_type = None
        if extension == '.js':
            pkg_type = await asyncio.to_thread(self.package_type_oracle, filepath)

        return choose_format(extension, pkg_type)

    async def __call__(self, filepath: str) -> Any:
        return await self.load(filepath)

    async def load(self, filepath: str) -> Any:
        """
        Load `filepath` and return its exported value.

        Raises:
            MissingDefaultExport: If an ES module has no default export
            UnsupportedModuleFormat: If the extension is not .js/.mjs/.cjs
            ModuleLoadError: If the runtime fails to load the file
        """
        filepath = str(filepath)
        module_format = await self.resolve_format(filepath)

        if module_format is ModuleFormat.ESM:
            loaded = await self.esm.load(filepath)
            if not loaded.has_default:
                raise MissingDefaultExport(filepath)
            return loaded.value

        if module_format is ModuleFormat.LEGACY:
            loaded = await self.legacy.load(filepath)
            return loaded.value

        raise UnsupportedModuleFormat(filepath)
