"""
Shared fixtures for confscout tests.

Provides:
- A helper to lay out config files in a temporary directory
- Fake module strategies/loaders so code files load without Node.js
- A diagnostics channel that records what was emitted
"""

import json
import shutil
from pathlib import Path
from typing import Any, List, Tuple

import pytest

from confscout.contracts.strategy import IModuleStrategy, LoadedModule
from confscout.core.diagnostics import Diagnostics

requires_node = pytest.mark.skipif(shutil.which("node") is None, reason="node is not installed")


class FakeStrategy(IModuleStrategy):
    """Records calls and returns a canned module."""

    def __init__(self, value: Any = None, has_default: bool = True):
        self.value = value
        self.has_default = has_default
        self.calls: List[str] = []

    async def load(self, filepath: str) -> LoadedModule:
        self.calls.append(filepath)
        return LoadedModule(value=self.value, has_default=self.has_default)


class RecordingDiagnostics(Diagnostics):
    """Diagnostics channel that keeps every (level, message) pair."""

    def __init__(self):
        super().__init__()
        self.records: List[Tuple[str, str]] = []
        self.subscribe(lambda level, message: self.records.append((level, message)))

    def levels(self) -> List[str]:
        return [level for level, _ in self.records]


@pytest.fixture
def write_file(tmp_path: Path):
    """Write a file below tmp_path, creating parent directories."""

    def _write(relative: str, content: Any = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()
