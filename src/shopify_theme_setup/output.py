"""Console output for setup progress.

Everything goes to standard output through one rich ``Console``. Messages
are printed literally so paths and brackets are never read as markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


console = Console()

# Message category -> rich style
_STYLES: dict[str, str] = {
    "info": "blue",
    "warning": "yellow",
    "success": "green",
    "error": "red",
    "detail": "grey50",
}


def emit(category: str, message: str) -> None:
    """Print ``message`` in the style of ``category``."""
    console.print(Text(message, style=_STYLES[category]), soft_wrap=True)


def info(message: str) -> None:
    emit("info", message)


def warning(message: str) -> None:
    emit("warning", message)


def success(message: str) -> None:
    emit("success", message)


def error(message: str) -> None:
    emit("error", message)


def detail(message: str) -> None:
    emit("detail", message)
