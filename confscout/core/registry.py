# confscout/core/registry.py
"""Registry of contribution providers for pluggable search places/loaders."""

import importlib
import inspect
from typing import Any, Callable, Dict, List, Optional, Union

from ..contracts.provider import IContributionProvider
from ..models.contribution import Contribution
from .builder import normalize_contributions
from .diagnostics import Diagnostics

Provider = Union[IContributionProvider, Callable[[str], Any]]


class ContributionRegistry:
    """
    Collects extra search places and loaders from registered providers.

    Providers can be registered as instances, plain callables, or loaded by
    their full Python path.
    Example: 'confscout_toml.provider.TomlProvider'
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None):
        self.diagnostics = diagnostics
        self._providers: Dict[str, Provider] = {}

    def register(self, name: str, provider: Provider) -> None:
        """
        Register a provider under `name`, replacing any previous one.

        Args:
            name: Provider name (e.g., 'typescript')
            provider: IContributionProvider instance or callable taking the
                module name
        """
        if not isinstance(provider, IContributionProvider) and not callable(provider):
            raise TypeError(f"Provider '{name}' is neither an IContributionProvider nor callable")

        self._providers[name] = provider

    def register_class(
        self,
        name: str,
        class_path: str,
        config: Optional[Dict[str, Any]] = None
    ) -> Provider:
        """
        Import a provider class by its full path, instantiate and register it.

        Args:
            name: Provider name
            class_path: Full path like 'package.module.ProviderClass'
            config: Configuration dict to pass to constructor

        Returns:
            The registered provider instance

        Raises:
            ImportError: If module/class cannot be loaded
        """
        try:
            module_path, class_name = class_path.rsplit('.', 1)
            module = importlib.import_module(module_path)
            cls = getattr(module, class_name)
        except (ValueError, ImportError, AttributeError) as e:
            raise ImportError(f"Cannot load provider '{class_path}': {e}")

        if config is None:
            config = {}

        # Inspect constructor to see if it accepts **kwargs
        sig = inspect.signature(cls.__init__)
        if 'config' in sig.parameters:
            instance = cls(config=config)
        elif len(sig.parameters) > 1 and config:
            instance = cls(**config)
        else:
            instance = cls()

        self.register(name, instance)
        return instance

    def unregister(self, name: str) -> None:
        self._providers.pop(name, None)

    def list_providers(self) -> Dict[str, Provider]:
        """Return all registered providers."""
        return self._providers.copy()

    def clear(self) -> None:
        self._providers.clear()

    def collect(self, module_name: str) -> List[Contribution]:
        """
        Ask every provider, in registration order, for contributions.

        A provider that raises is skipped with a warning; the others still
        contribute.
        """
        answers = []

        for name, provider in list(self._providers.items()):
            try:
                if isinstance(provider, IContributionProvider):
                    answer = provider.contribute(module_name)
                else:
                    answer = provider(module_name)
                answers.append(answer)
            except Exception as e:
                if self.diagnostics is not None:
                    self.diagnostics.warn(
                        f"Provider '{name}' failed for {module_name}, skipping it...\n{e}"
                    )

        return normalize_contributions(answers)

    @classmethod
    def from_settings(cls, providers: Dict[str, str], diagnostics: Optional[Diagnostics] = None) -> 'ContributionRegistry':
        """Build a registry from a name -> class path mapping."""
        registry = cls(diagnostics=diagnostics)
        for name, class_path in providers.items():
            registry.register_class(name, class_path)
        return registry
