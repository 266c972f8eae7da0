# confscout/contracts/__init__.py
"""Abstract contracts for pluggable components."""

from .provider import IContributionProvider
from .strategy import IModuleStrategy, LoadedModule

__all__ = [
    "IContributionProvider",
    "IModuleStrategy",
    "LoadedModule",
]
