# confscout/models/contribution.py
"""Externally contributed search places and loaders."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .request import LoaderFn


@dataclass
class Contribution:
    """
    Extra search places and/or loaders offered by a provider.

    `None` means the provider has nothing to say about that part, which is
    different from an empty list or mapping only in intent.
    """

    search_places: Optional[List[str]] = None
    loaders: Optional[Dict[str, LoaderFn]] = field(default=None)

    @classmethod
    def coerce(cls, value: Any) -> 'Contribution':
        """Accept a Contribution or a mapping with the same keys."""
        if isinstance(value, Contribution):
            return value

        if isinstance(value, Mapping):
            places = value.get('search_places')
            loaders = value.get('loaders')
            return cls(
                search_places=list(places) if isinstance(places, (list, tuple)) else None,
                loaders=dict(loaders) if isinstance(loaders, Mapping) else None,
            )

        raise TypeError(f"Cannot use {type(value).__name__} as a contribution")
