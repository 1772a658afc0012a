"""Rich Console factory and theme for stdkit output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

STDKIT_THEME = Theme(
    {
        "stdkit.ok": "bold green",
        "stdkit.error": "bold red",
        "stdkit.warning": "bold yellow",
        "stdkit.op": "bold cyan",
        "stdkit.key": "dim",
        "stdkit.url": "bold blue",
        "stdkit.path": "magenta",
        "stdkit.date": "bold",
    }
)

_KEY_STYLES: dict[str, str] = {
    "url": "stdkit.url",
    "path": "stdkit.path",
    "src": "stdkit.path",
    "dest": "stdkit.path",
    "iso": "stdkit.date",
    "imf": "stdkit.date",
    "from": "stdkit.date",
    "to": "stdkit.date",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=STDKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a result data key."""
    return _KEY_STYLES.get(key, "")
