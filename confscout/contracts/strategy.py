# confscout/contracts/strategy.py
"""Abstract interface for code-file loading strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class LoadedModule:
    """Value extracted from a loaded code file."""
    value: Any  # Default export (ESM) or module.exports (CommonJS)
    has_default: bool = True  # False only when an ES module has no default export


class IModuleStrategy(ABC):
    """
    Loads one code configuration file in a specific module format.

    Implementations must not cache: every call executes the file again.
    """

    @abstractmethod
    async def load(self, filepath: str) -> LoadedModule:
        """
        Execute the file and extract its exported value.

        Args:
            filepath: Absolute path to the file

        Returns:
            LoadedModule describing the exported value

        Raises:
            ModuleLoadError: If the file cannot be executed
        """
        pass
