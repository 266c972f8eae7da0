# confscout/models/request.py
"""Search request and search configuration models."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..core.errors import OptionsTypeError

# A loader receives the absolute path of a candidate file and returns the parsed
# value. It may be a plain function or a coroutine function.
LoaderFn = Callable[[str], Any]


@dataclass
class SearchRequest:
    """
    Normalized input for a single config lookup.

    Built from a caller's options mapping by `from_options`, which is the only
    place input validation happens.
    """

    module_name: str
    package_name: Optional[str] = None  # Only used to prefix diagnostics
    merge_external: bool = True
    search_places: Optional[List[str]] = None  # Replaces the default list when non-empty
    start_dir: str = field(default_factory=os.getcwd)
    stop_dir: str = field(default_factory=os.getcwd)

    @property
    def diagnostic_prefix(self) -> str:
        return f"{self.package_name}: " if self.package_name else ''

    @classmethod
    def from_options(cls, options: Any) -> 'SearchRequest':
        """
        Validate an options mapping and build a request from it.

        Required keys are type checked and raise `OptionsTypeError`. Optional
        keys holding a value of the wrong type fall back to their defaults.
        The working directory is read once here.

        Raises:
            OptionsTypeError: If `options` is not a mapping or `module_name`
                is not a non-empty string
        """
        if not isinstance(options, Mapping):
            raise OptionsTypeError("'options' is not a mapping")

        module_name = options.get('module_name')
        if not isinstance(module_name, str):
            raise OptionsTypeError("'options.module_name' is not a 'str'")
        if not module_name:
            raise OptionsTypeError("'options.module_name' is empty")

        package_name = options.get('package_name')
        merge_external = options.get('merge_external')
        search_places = options.get('search_places')

        cwd = os.getcwd()

        return cls(
            module_name=module_name,
            package_name=package_name if isinstance(package_name, str) else None,
            merge_external=merge_external if isinstance(merge_external, bool) else True,
            search_places=(
                [str(place) for place in search_places]
                if isinstance(search_places, (list, tuple)) else None
            ),
            start_dir=_dir_option(options.get('start_dir'), cwd),
            stop_dir=_dir_option(options.get('stop_dir'), cwd),
        )


@dataclass
class SearchConfig:
    """Everything the explorer needs to look for a config file."""

    search_places: List[str]
    loaders: Dict[str, LoaderFn]
    stop_dir: str


def _dir_option(value: Any, fallback: str) -> str:
    if isinstance(value, (str, os.PathLike)):
        return os.path.abspath(os.fspath(value))
    return fallback
