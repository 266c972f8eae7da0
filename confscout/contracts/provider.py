# confscout/contracts/provider.py
"""Abstract interface for search place / loader contributors."""

from abc import ABC, abstractmethod
from typing import Any


class IContributionProvider(ABC):
    """
    Offers extra search places and loaders for a module name.

    Providers are asked once per lookup. A provider that only cares about
    some module names returns None for the others.
    """

    @abstractmethod
    def contribute(self, module_name: str) -> Any:
        """
        Return additional search configuration for `module_name`.

        Returns:
            A Contribution, a mapping with 'search_places' and/or 'loaders'
            keys, a list of those (nested lists are flattened one level),
            or None
        """
        pass
