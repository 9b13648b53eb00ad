"""Rich formatting utilities for the CLI.

Keeps all console output in one module that knows nothing about domain
logic. Results go to stdout, errors to stderr.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Success / error output
# ---------------------------------------------------------------------------


def plain_line(text: str) -> None:
    """Print *text* verbatim on one line (no markup, wrapping or highlighting)."""
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def generation_summary(output_path: Path, font_size_pt: float) -> None:
    """Print the generated path and the chosen font size, one per line."""
    plain_line(f"Generated: {output_path}")
    plain_line(f"Font size: {font_size_pt:g}pt")


def error_message(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False, soft_wrap=True)
