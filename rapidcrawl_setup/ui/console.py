"""
Terminal output — stateless styled printing.

``style`` maps a message and a style tag to an ANSI-styled string;
nothing about the terminal is remembered between calls.
"""

from __future__ import annotations

import click

_STYLES: dict[str, dict] = {
    "header": {"fg": "cyan", "bold": True},
    "bright": {"bold": True},
    "info": {"fg": "blue"},
    "success": {"fg": "green"},
    "done": {"fg": "green", "bold": True},
    "warning": {"fg": "yellow"},
    "error": {"fg": "red"},
    "command": {"fg": "cyan"},
}

BANNER = """
╔═══════════════════════════════════════╗
║      {title:<33}║
╚═══════════════════════════════════════╝
"""


def style(message: str, tag: str = "") -> str:
    """Return ``message`` styled for ``tag`` (unknown/empty tag = plain)."""
    kwargs = _STYLES.get(tag)
    if not kwargs:
        return message
    return click.style(message, **kwargs)


def echo(message: str = "", tag: str = "", *, err: bool = False) -> None:
    click.echo(style(message, tag), err=err)


def banner(title: str) -> None:
    echo(BANNER.format(title=title), "header")
