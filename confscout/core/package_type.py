# confscout/core/package_type.py
"""Classify a file as belonging to an ES module or CommonJS package."""

import json
from pathlib import Path
from typing import Optional, Union

MODULE = 'module'
COMMONJS = 'commonjs'


def find_package_json(start: Union[str, Path]) -> Optional[Path]:
    """Return the nearest package.json at or above `start`, if any."""
    directory = Path(start).resolve()

    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / 'package.json'
        if candidate.is_file():
            return candidate

    return None


def package_type(filepath: Union[str, Path]) -> Optional[str]:
    """
    Determine the module type of the package that owns `filepath`.

    Mirrors how Node.js decides the format of a `.js` file: the `type` field
    of the nearest package.json wins, and a package.json without one means
    CommonJS.

    Returns:
        'module', 'commonjs', or None when no readable package.json exists
    """
    package_json = find_package_json(Path(filepath).parent)
    if package_json is None:
        return None

    try:
        data = json.loads(package_json.read_text(encoding='utf-8'))
    except (OSError, ValueError):
        return None

    if isinstance(data, dict) and data.get('type') == MODULE:
        return MODULE

    return COMMONJS
