"""Adapters — bindings to the shell and the Python toolchain.

Public re-exports for convenient access.
"""

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.mock import MockCommandRunner
from rapidcrawl_setup.adapters.shell.command import ShellCommandRunner

__all__ = [
    "CommandRunner",
    "MockCommandRunner",
    "ShellCommandRunner",
]
