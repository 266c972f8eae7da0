# confscout/core/diagnostics.py
"""Fire-and-forget diagnostic channel."""

from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

ERROR = 'error'
WARN = 'warn'
VERBOSE = 'verbose'

LEVELS = (ERROR, WARN, VERBOSE)

Listener = Callable[[str, str], None]

_STYLES = {
    ERROR: "[bold red]✗ Error:[/bold red]",
    WARN: "[yellow]⚠ Warning:[/yellow]",
    VERBOSE: "[dim]›[/dim]",
}


class Diagnostics:
    """
    Broadcasts (level, message) pairs to listeners and an optional console.

    Emitting a known level never raises and never changes the caller's
    control flow, so a resolver works the same with or without anybody
    listening.
    """

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console
        self.verbose = verbose
        self._listeners: List[Listener] = []

    @classmethod
    def to_console(cls, verbose: bool = False, color: bool = True) -> 'Diagnostics':
        """Channel that prints to stderr."""
        return cls(console=Console(stderr=True, no_color=not color), verbose=verbose)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, level: str, message: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown diagnostic level: {level}")

        for listener in list(self._listeners):
            try:
                listener(level, message)
            except Exception:
                # A broken listener must not break config loading
                continue

        if self.console is not None and (level != VERBOSE or self.verbose):
            self.console.print(f"{_STYLES[level]} {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.emit(ERROR, message)

    def warn(self, message: str) -> None:
        self.emit(WARN, message)

    def log_verbose(self, message: str) -> None:
        self.emit(VERBOSE, message)
