"""
Command runner base — the contract between the pipeline and the shell.

Services never call ``subprocess`` themselves. They hand a command
string to a runner and get a ProbeResult back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rapidcrawl_setup.core.models.probe import ProbeResult


class CommandRunner(ABC):
    """Abstract base class for command runners.

    Runners execute a command synchronously and return a ProbeResult.
    They NEVER raise exceptions — failures are captured in the result.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The runner identifier (e.g., 'shell', 'mock')."""

    @abstractmethod
    def run(self, command: str, silent: bool = False) -> ProbeResult:
        """Execute ``command`` and return its result.

        When ``silent`` is False the command is echoed to the user
        before it runs. MUST never raise.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
