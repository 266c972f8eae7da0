# confscout/models/result.py
"""Lookup result models."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ExplorerResult:
    """Raw hit reported by the explorer."""

    config: Any
    filepath: str


@dataclass(frozen=True)
class LoadResult:
    """Normalized result of a successful lookup."""

    config: Any  # Parsed content, usually a mapping but not guaranteed
    filepath: str  # Absolute path of the file that matched
    filename: str
    extension: str  # Lower-cased, including the dot ('' for rc files)
    relative_path: str  # Relative to start_dir when below it, else filepath

    def to_dict(self) -> Dict[str, Any]:
        return {
            'config': self.config,
            'filepath': self.filepath,
            'filename': self.filename,
            'extension': self.extension,
            'relative_path': self.relative_path,
        }
