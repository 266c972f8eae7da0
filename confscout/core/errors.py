# confscout/core/errors.py
"""Exception hierarchy."""

from pathlib import Path
from typing import Optional, Union


class ConfscoutError(Exception):
    """Base class for all confscout errors."""


class OptionsTypeError(ConfscoutError, TypeError):
    """Raised when the options passed to a public operation are malformed."""


class ConfigSearchError(ConfscoutError):
    """Raised by the explorer when a candidate file cannot be handled."""


class ModuleLoadError(ConfscoutError):
    """Raised when a code configuration file cannot be loaded."""

    def __init__(self, filepath: Union[str, Path], detail: Optional[str] = None):
        self.filepath = str(filepath)
        self.detail = detail
        message = f"Failed to load module: {self.filepath}"
        if detail:
            message += f"\n{detail}"
        super().__init__(message)


class MissingDefaultExport(ModuleLoadError):
    """An ES module was loaded but exposes no default export."""

    def __init__(self, filepath: Union[str, Path]):
        super().__init__(filepath)
        self.args = (f"No default export: {self.filepath}",)

    def __str__(self) -> str:
        return self.args[0]


class UnsupportedModuleFormat(ModuleLoadError):
    """The file extension is not handled by the dual-format loader."""

    def __init__(self, filepath: Union[str, Path]):
        super().__init__(filepath)
        self.args = (f"Unsupported module extension: {self.filepath}",)

    def __str__(self) -> str:
        return self.args[0]
