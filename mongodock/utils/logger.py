"""Logging utilities for mongodock."""

from mongodock.ui.components import console
from mongodock.ui.styles import PRIMARY


class Logger:
    """Simple logger with Rich formatting."""

    def __init__(self, name="mongodock", verbose=False):
        self.name = name
        self.verbose = verbose

    def step(self, message):
        """Log a step in a process."""
        console.print(f"[{PRIMARY}]▶[/{PRIMARY}] {message}", highlight=False)

    def debug(self, message):
        """Log a debug message (dimmed). Only shown in verbose mode."""
        if self.verbose:
            console.print(f"[dim][DEBUG] {message}[/dim]", highlight=False)


# Default logger instance
log = Logger()
