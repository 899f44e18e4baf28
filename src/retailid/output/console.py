"""Rich Console factory and theme for retailid output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RETAILID_THEME = Theme(
    {
        "rid.ok": "bold green",
        "rid.error": "bold red",
        "rid.warning": "bold yellow",
        "rid.op": "bold cyan",
        "rid.key": "dim",
        "rid.id": "bold blue",
        "rid.url": "underline",
        "rid.encoding.base36": "green",
        "rid.encoding.base64": "magenta",
    }
)

_ENCODING_STYLES: dict[str, str] = {
    "base36": "rid.encoding.base36",
    "base64": "rid.encoding.base64",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=RETAILID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_encoding(encoding: str) -> str:
    """Return the Rich style name for an encoding."""
    return _ENCODING_STYLES.get(encoding, "")
