# confscout/loaders/node.py
"""Node.js backed strategies for ES module and CommonJS config files."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from ..contracts.strategy import IModuleStrategy, LoadedModule
from ..core.errors import ModuleLoadError
from .text import read_text

PATH_ENV = 'CONFSCOUT_MODULE_PATH'
RESULT_ENV = 'CONFSCOUT_RESULT_PATH'

# Both scripts write a JSON envelope {"hasDefault": bool, "value": any} to the
# file named by RESULT_ENV, so whatever the config prints stays out of it.
# Values that JSON cannot represent (functions, undefined) drop out as null.
ESM_SCRIPT = """
import { writeFileSync } from 'node:fs';
import { pathToFileURL } from 'node:url';
const mod = await import(pathToFileURL(process.env.%(path)s).href);
const hasDefault = 'default' in mod;
writeFileSync(process.env.%(result)s, JSON.stringify({ hasDefault, value: hasDefault ? mod.default : null }));
""" % {'path': PATH_ENV, 'result': RESULT_ENV}

# Newer runtimes let require() load ES module syntax and hand back the module
# namespace. A CommonJS load must not do that, so a namespace is an error.
COMMONJS_SCRIPT = """
const { writeFileSync } = require('node:fs');
const value = require(process.env.%(path)s);
if (value !== null && typeof value === 'object' && value[Symbol.toStringTag] === 'Module') {
  process.stderr.write('ES module syntax is not allowed in a CommonJS config file');
  process.exit(1);
}
writeFileSync(process.env.%(result)s, JSON.stringify({ hasDefault: true, value }));
""" % {'path': PATH_ENV, 'result': RESULT_ENV}


def _result_file() -> str:
    fd, path = tempfile.mkstemp(prefix='confscout-', suffix='.json')
    os.close(fd)
    return path


class NodeRunner:
    """Runs a loader script in a fresh Node.js process per call."""

    def __init__(self, node_binary: str = "node"):
        self.node_binary = node_binary

    async def run(self, script: str, filepath: str, esm: bool) -> Dict[str, Any]:
        """
        Execute `script` with `filepath` exposed to it and parse the envelope.

        Raises:
            ModuleLoadError: If node is missing, exits non-zero, or writes
                something that is not a JSON envelope
        """
        args = [self.node_binary]
        if esm:
            args.append('--input-type=module')
        args.extend(['--eval', script])

        result_path = await asyncio.to_thread(_result_file)

        env = dict(os.environ)
        env[PATH_ENV] = filepath
        env[RESULT_ENV] = result_path

        try:
            try:
                process = await asyncio.create_subprocess_exec(
                    *args,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                    env=env,
                    cwd=str(Path(filepath).parent),
                )
            except OSError as e:
                raise ModuleLoadError(filepath, f"Cannot start '{self.node_binary}': {e}")

            _, stderr = await process.communicate()

            if process.returncode != 0:
                raise ModuleLoadError(filepath, stderr.decode('utf-8', errors='replace').strip())

            output = await asyncio.to_thread(read_text, result_path)
        finally:
            await asyncio.to_thread(_remove, result_path)

        try:
            envelope = json.loads(output)
        except ValueError as e:
            raise ModuleLoadError(filepath, f"Unexpected loader output: {e}")

        if not isinstance(envelope, dict):
            raise ModuleLoadError(filepath, "Unexpected loader output")

        return envelope


def _remove(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


class EsmStrategy(IModuleStrategy):
    """Loads a file through dynamic import()."""

    def __init__(self, runner: Optional[NodeRunner] = None):
        self.runner = runner or NodeRunner()

    async def load(self, filepath: str) -> LoadedModule:
        envelope = await self.runner.run(ESM_SCRIPT, filepath, esm=True)
        return LoadedModule(
            value=envelope.get('value'),
            has_default=bool(envelope.get('hasDefault')),
        )


class CommonJsStrategy(IModuleStrategy):
    """Loads a file through require(); module.exports is passed through."""

    def __init__(self, runner: Optional[NodeRunner] = None):
        self.runner = runner or NodeRunner()

    async def load(self, filepath: str) -> LoadedModule:
        envelope = await self.runner.run(COMMONJS_SCRIPT, filepath, esm=False)
        return LoadedModule(value=envelope.get('value'))
