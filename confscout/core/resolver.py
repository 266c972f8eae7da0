# confscout/core/resolver.py
"""Config lookup with extensible search places and loaders."""

import os
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

from ..loaders.module import DualFormatLoader
from ..models.request import LoaderFn, SearchConfig, SearchRequest
from ..models.result import LoadResult
from .builder import build_search_config
from .diagnostics import Diagnostics
from .explorer import ConfigExplorer
from .registry import ContributionRegistry
from .settings import Settings

ExplorerFactory = Callable[..., ConfigExplorer]


def relative_path(base_path: str, filepath: str) -> str:
    """
    Express `filepath` relative to `base_path` when it lives below it.

    A './' marker is prepended unless the relative path already starts with
    a dot. Paths outside `base_path` are returned unchanged.
    """
    if not filepath.startswith(base_path):
        return filepath

    result = os.path.relpath(filepath, base_path)
    return result if result.startswith('.') else f".{os.sep}{result}"


class ConfigResolver:
    """
    Finds and loads a module's local configuration file.

    The default locations for a module name are listed by
    `builder.default_search_places`. Registered providers may add search
    places (e.g. 'foo.config.ts') and the loaders needed to read them.

    Both public operations validate their options before returning the
    coroutine, so malformed options raise immediately at the call site:

        resolver = ConfigResolver()
        result = await resolver.load_config({'module_name': 'foo'})
    """

    def __init__(
        self,
        registry: Optional[ContributionRegistry] = None,
        diagnostics: Optional[Diagnostics] = None,
        settings: Optional[Settings] = None,
        explorer_factory: ExplorerFactory = ConfigExplorer,
        module_loader: Optional[LoaderFn] = None,
    ):
        self.settings = settings or Settings()
        self.diagnostics = diagnostics or Diagnostics()
        self.registry = registry
        self.explorer_factory = explorer_factory
        self.module_loader = module_loader or DualFormatLoader(node_binary=self.settings.node_binary)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'ConfigResolver':
        """Resolver printing diagnostics to stderr and using configured providers."""
        diagnostics = Diagnostics.to_console(verbose=settings.verbose, color=settings.color)
        registry = ContributionRegistry.from_settings(settings.providers, diagnostics=diagnostics)
        return cls(registry=registry, diagnostics=diagnostics, settings=settings)

    def build(self, request: SearchRequest) -> SearchConfig:
        """Search configuration for `request`, including provider contributions."""
        externals = self.registry.collect(request.module_name) if self.registry is not None else []
        return build_search_config(request, externals, self.module_loader)

    def load_config(self, options: Any) -> Awaitable[Optional[LoadResult]]:
        """
        Load the first matching config file for `options['module_name']`.

        Args:
            options: Mapping with keys
                module_name (str, required),
                package_name (str, prefix for diagnostics),
                merge_external (bool, default True; False ignores provider
                search places),
                search_places (list of str, replaces the default places),
                start_dir (default: working directory),
                stop_dir (default: working directory)

        Returns:
            Awaitable resolving to a LoadResult, or None when nothing was
            found or the search failed

        Raises:
            OptionsTypeError: Immediately, if `options` is malformed
        """
        request = SearchRequest.from_options(options)
        return self._load_config(request)

    def load_config_safe(self, options: Any) -> Awaitable[Any]:
        """
        Load a config file, falling back to `options['default_config']`.

        The default (None unless a dict or list is given) is returned when no
        file is found, the file is not a mapping, or the mapping is empty.

        Raises:
            OptionsTypeError: Immediately, if `options` is malformed
        """
        request = SearchRequest.from_options(options)
        default_config = options.get('default_config')
        if not isinstance(default_config, (dict, list)):
            default_config = None

        return self._load_config_safe(request, default_config)

    async def _load_config(self, request: SearchRequest) -> Optional[LoadResult]:
        search_config = self.build(request)
        explorer = self.explorer_factory(
            request.module_name, search_config, node_binary=self.settings.node_binary
        )

        try:
            result = await explorer.search(request.start_dir)
        except Exception as e:
            self.diagnostics.error(
                f"{request.diagnostic_prefix}Loading local configuration file for "
                f"{request.module_name} failed...\n{e}"
            )
            return None

        if result is None:
            return None

        return LoadResult(
            config=result.config,
            filepath=result.filepath,
            filename=os.path.basename(result.filepath),
            extension=os.path.splitext(result.filepath)[1].lower(),
            relative_path=relative_path(request.start_dir, result.filepath),
        )

    async def _load_config_safe(self, request: SearchRequest, default_config: Any) -> Any:
        result = await self._load_config(request)

        if result is None:
            return default_config

        prefix = request.diagnostic_prefix
        module_name = request.module_name

        if not isinstance(result.config, Mapping):
            self.diagnostics.warn(
                f"{prefix}Local {module_name} configuration file malformed using default config; "
                f"expected a mapping:\n{result.relative_path}"
            )
            return default_config

        if len(result.config) == 0:
            self.diagnostics.warn(
                f"{prefix}Local {module_name} configuration file empty using default config:\n"
                f"{result.relative_path}"
            )
            return default_config

        self.diagnostics.log_verbose(
            f"{prefix}Deferring to local {module_name} configuration file.\n{result.relative_path}"
        )
        return result.config
