# confscout/core/settings.py
"""confscout's own settings (.toml format)."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import toml
from rich.console import Console

LOCAL_SETTINGS = Path(".confscout/config.toml")
HOME_SETTINGS = Path.home() / ".confscout" / "config.toml"

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    """Runtime settings for lookups and the CLI."""
    node_binary: str = "node"  # Executable used to run .js/.mjs/.cjs config files
    verbose: bool = False  # Print 'verbose' diagnostics to the console
    color: bool = True
    providers: Dict[str, str] = field(default_factory=dict)  # name -> dotted class path

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Settings':
        """
        Load settings from a .toml file.

        Args:
            config_path: Path to settings file. If None, uses
                .confscout/config.toml, then ~/.confscout/config.toml

        Returns:
            Settings instance, with environment overrides applied
        """
        if config_path is None:
            config_path = LOCAL_SETTINGS

            if not config_path.exists() and HOME_SETTINGS.exists():
                config_path = HOME_SETTINGS

        settings = cls()

        if config_path.exists():
            try:
                data = toml.load(config_path)
            except (OSError, toml.TomlDecodeError) as e:
                # If corrupt, keep defaults
                Console(stderr=True).print(
                    f"[yellow]Warning:[/yellow] Could not load settings ({e}), using defaults"
                )
                data = {}

            settings = cls.from_dict(data)

        return settings.with_env()

    @classmethod
    def from_dict(cls, data: Dict) -> 'Settings':
        section = data.get('confscout', data)
        if not isinstance(section, dict):
            section = {}
        providers = section.get('providers', {})

        return cls(
            node_binary=str(section.get('node_binary', cls.node_binary)),
            verbose=bool(section.get('verbose', cls.verbose)),
            color=bool(section.get('color', cls.color)),
            providers={str(k): str(v) for k, v in providers.items()} if isinstance(providers, dict) else {},
        )

    def with_env(self) -> 'Settings':
        """Apply CONFSCOUT_NODE / CONFSCOUT_VERBOSE overrides."""
        node = os.environ.get('CONFSCOUT_NODE')
        if node:
            self.node_binary = node

        verbose = os.environ.get('CONFSCOUT_VERBOSE')
        if verbose is not None:
            self.verbose = verbose.strip().lower() in _TRUTHY

        return self
