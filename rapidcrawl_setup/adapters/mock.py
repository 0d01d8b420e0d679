"""
Mock runner — scripted test double for the command runner.

Returns success for every command unless told otherwise, and records
every command it receives so tests can assert on what ran and in
which order.
"""

from __future__ import annotations

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.core.models.probe import ProbeResult
from rapidcrawl_setup.ui import console


class MockCommandRunner(CommandRunner):
    """Mock command runner for tests.

    Responses are keyed by the exact command string.
    """

    def __init__(self, default_output: str = "[mock] executed"):
        self._default_output = default_output
        self._responses: dict[str, ProbeResult] = {}
        self._call_log: list[tuple[str, bool]] = []

    @property
    def name(self) -> str:
        return "mock"

    @property
    def commands(self) -> list[str]:
        """Every command run so far, in order."""
        return [command for command, _ in self._call_log]

    @property
    def call_log(self) -> list[tuple[str, bool]]:
        """``(command, silent)`` pairs in call order."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    def set_output(self, command: str, output: str) -> None:
        """Make ``command`` succeed with ``output``."""
        self._responses[command] = ProbeResult.success(command, output=output, return_code=0)

    def set_failure(self, command: str, error: str = "Mock failure", return_code: int = 1) -> None:
        """Make ``command`` fail."""
        self._responses[command] = ProbeResult.failure(
            command, error=error, return_code=return_code
        )

    def run(self, command: str, silent: bool = False) -> ProbeResult:
        self._call_log.append((command, silent))
        if not silent:
            console.echo(f"\n⚙️  Running: {command}", "warning")

        if command in self._responses:
            return self._responses[command]

        return ProbeResult.success(command, output=self._default_output, return_code=0)

    def reset(self) -> None:
        """Clear call log and custom responses."""
        self._call_log.clear()
        self._responses.clear()
