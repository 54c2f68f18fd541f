"""Terminal front end for Twenty-One."""

from console.terminal import Terminal
from console.display import TableDisplay
from console.main import Application, main

__all__ = [
    "Terminal",
    "TableDisplay",
    "Application",
    "main",
]
