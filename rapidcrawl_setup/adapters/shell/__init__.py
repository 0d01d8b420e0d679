"""Shell runner — executes commands through the system shell."""

from rapidcrawl_setup.adapters.shell.command import ShellCommandRunner

__all__ = ["ShellCommandRunner"]
