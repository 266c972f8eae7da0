# confscout/cli/main.py
"""confscout - locate and print a module's local configuration file."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core.builder import default_search_places
from ..core.errors import ConfscoutError
from ..core.resolver import ConfigResolver
from ..core.settings import Settings

app = typer.Typer(
    name="confscout",
    help="confscout - find and load a module's local configuration file",
    add_completion=False,
)
console = Console()


def _resolver(settings_path: Optional[Path], verbose: bool) -> ConfigResolver:
    settings = Settings.load(settings_path)
    if verbose:
        settings.verbose = True
    return ConfigResolver.from_settings(settings)


def _options(
    module_name: str,
    package_name: Optional[str],
    search_places: Optional[List[str]],
    merge_external: bool,
    start_dir: Optional[Path],
    stop_dir: Optional[Path],
) -> dict:
    options = {
        'module_name': module_name,
        'merge_external': merge_external,
    }
    if package_name:
        options['package_name'] = package_name
    if search_places:
        options['search_places'] = list(search_places)
    if start_dir is not None:
        options['start_dir'] = str(start_dir)
    if stop_dir is not None:
        options['stop_dir'] = str(stop_dir)
    return options


@app.command()
def find(
    module_name: str = typer.Argument(..., help="Module name used to derive config file names"),
    start_dir: Optional[Path] = typer.Option(None, "--start-dir", help="Directory to start searching from (default: cwd)"),
    stop_dir: Optional[Path] = typer.Option(None, "--stop-dir", help="Do not search above this directory (default: cwd)"),
    search_place: Optional[List[str]] = typer.Option(None, "--search-place", "-s", help="Explicit search place (repeatable)"),
    merge_external: bool = typer.Option(True, "--merge-external/--no-merge-external", help="Append provider search places"),
    package_name: Optional[str] = typer.Option(None, "--package-name", help="Prefix for diagnostics"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="confscout settings file (.toml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose diagnostics"),
):
    """
    Find the config file for MODULE_NAME and show where it was loaded from.

    Examples:
        confscout find prettier
        confscout find eslint --start-dir src --stop-dir .
        confscout find foo --search-place foo.json --json
    """
    try:
        resolver = _resolver(settings_path, verbose)
        options = _options(module_name, package_name, search_place, merge_external, start_dir, stop_dir)
        result = asyncio.run(resolver.load_config(options))
    except (ConfscoutError, ImportError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        raise typer.Exit(1)

    if result is None:
        console.print(f"[yellow]No configuration file found for {module_name}.[/yellow]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, default=str))
        return

    table = Table(title=f"{module_name} configuration")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("File", result.filename)
    table.add_row("Extension", result.extension or "(none)")
    table.add_row("Relative path", result.relative_path)
    table.add_row("Absolute path", result.filepath)
    table.add_row("Config", json.dumps(result.config, default=str))

    console.print(table)


@app.command()
def show(
    module_name: str = typer.Argument(..., help="Module name used to derive config file names"),
    default: Optional[str] = typer.Option(None, "--default", "-d", help="Default config as JSON"),
    start_dir: Optional[Path] = typer.Option(None, "--start-dir", help="Directory to start searching from (default: cwd)"),
    stop_dir: Optional[Path] = typer.Option(None, "--stop-dir", help="Do not search above this directory (default: cwd)"),
    search_place: Optional[List[str]] = typer.Option(None, "--search-place", "-s", help="Explicit search place (repeatable)"),
    merge_external: bool = typer.Option(True, "--merge-external/--no-merge-external", help="Append provider search places"),
    package_name: Optional[str] = typer.Option(None, "--package-name", help="Prefix for diagnostics"),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="confscout settings file (.toml)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show verbose diagnostics"),
):
    """
    Print the effective config for MODULE_NAME as JSON.

    Falls back to --default when no file is found, or the file is empty or
    not a mapping.

    Examples:
        confscout show foo --default '{"indent": 2}'
    """
    default_config = None
    if default is not None:
        try:
            default_config = json.loads(default)
        except ValueError as e:
            console.print(f"[red]Invalid --default JSON:[/red] {e}")
            raise typer.Exit(1)

    try:
        resolver = _resolver(settings_path, verbose)
        options = _options(module_name, package_name, search_place, merge_external, start_dir, stop_dir)
        options['default_config'] = default_config
        config = asyncio.run(resolver.load_config_safe(options))
    except (ConfscoutError, ImportError) as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        raise typer.Exit(1)

    typer.echo(json.dumps(config, indent=2, default=str))


@app.command()
def places(
    module_name: str = typer.Argument(..., help="Module name used to derive config file names"),
):
    """List the default search places for MODULE_NAME, in search order."""
    for i, place in enumerate(default_search_places(module_name), 1):
        typer.echo(f"{i:2}. {place}")


def main():
    app()


if __name__ == "__main__":
    main()
