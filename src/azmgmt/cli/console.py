"""Shared Rich console for CLI output."""

import json
import os
from functools import wraps
from typing import Any

from rich.console import Console
from rich.markup import escape

_console = Console()
_error_console = Console(stderr=True)


def _should_print() -> bool:
    """Check if console output is enabled."""
    return os.environ.get("AZMGMT_CONSOLE_ENABLED", "true").lower() == "true"


def _console_output(func):
    """Decorator to check if console output is enabled."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _should_print():
            return func(*args, **kwargs)

    return wrapper


def get_console() -> Console:
    """Get the shared console instance."""
    return _console


@_console_output
def print_success(message: str):
    """Print success message."""
    _console.print(f"[green]{escape(message)}[/green]", highlight=False)


@_console_output
def print_error(message: str):
    """Print error message to stderr."""
    _error_console.print(f"[red]{escape(message)}[/red]", highlight=False)


@_console_output
def print_info(message: str):
    """Print info message."""
    _console.print(f"[cyan]{escape(message)}[/cyan]", highlight=False)


@_console_output
def print_warning(message: str):
    """Print warning message."""
    _error_console.print(f"[yellow]{escape(message)}[/yellow]", highlight=False)


def print_json(data: Any):
    """Print JSON data (always outputs, ignores AZMGMT_CONSOLE_ENABLED)."""
    print(json.dumps(data, indent=2, sort_keys=True))
