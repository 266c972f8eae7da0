# confscout/loaders/__init__.py
"""File loaders keyed by extension."""

from .module import DualFormatLoader, ModuleFormat, choose_format
from .node import CommonJsStrategy, EsmStrategy, NodeRunner
from .text import load_json, load_yaml

__all__ = [
    "DualFormatLoader",
    "ModuleFormat",
    "choose_format",
    "CommonJsStrategy",
    "EsmStrategy",
    "NodeRunner",
    "load_json",
    "load_yaml",
]
