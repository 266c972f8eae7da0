# confscout/__init__.py
"""confscout - find and load a module's local configuration file."""

from typing import Any, Awaitable, Optional

from .core.builder import build_search_config, default_search_places
from .core.diagnostics import Diagnostics
from .core.errors import (
    ConfigSearchError,
    ConfscoutError,
    MissingDefaultExport,
    ModuleLoadError,
    OptionsTypeError,
    UnsupportedModuleFormat,
)
from .core.registry import ContributionRegistry
from .core.resolver import ConfigResolver
from .core.settings import Settings
from .models import Contribution, LoadResult, SearchRequest

__version__ = "0.1.0"


def load_config(options: Any) -> Awaitable[Optional[LoadResult]]:
    """Shortcut for `ConfigResolver().load_config(options)`."""
    return ConfigResolver().load_config(options)


def load_config_safe(options: Any) -> Awaitable[Any]:
    """Shortcut for `ConfigResolver().load_config_safe(options)`."""
    return ConfigResolver().load_config_safe(options)


__all__ = [
    "ConfigResolver",
    "ContributionRegistry",
    "Contribution",
    "Diagnostics",
    "LoadResult",
    "SearchRequest",
    "Settings",
    "build_search_config",
    "default_search_places",
    "load_config",
    "load_config_safe",
    "ConfscoutError",
    "ConfigSearchError",
    "MissingDefaultExport",
    "ModuleLoadError",
    "OptionsTypeError",
    "UnsupportedModuleFormat",
]
