# confscout/loaders/text.py
"""Loaders for JSON and YAML config files."""

import asyncio
import json
from typing import Any

import yaml


def read_text(filepath: str) -> str:
    """Read a whole UTF-8 file. Blocking; run it through asyncio.to_thread."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()


async def load_json(filepath: str) -> Any:
    content = await asyncio.to_thread(read_text, filepath)
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON Error in {filepath}:\n{e}") from e


async def load_yaml(filepath: str) -> Any:
    content = await asyncio.to_thread(read_text, filepath)
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"YAML Error in {filepath}:\n{e}") from e
