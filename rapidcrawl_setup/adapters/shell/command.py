"""
Shell command runner — execute setup commands and capture their output.

Every external command of the wizard (version probes, venv creation,
pip installs) goes through here.
"""

from __future__ import annotations

import logging
import subprocess
import time

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.core.models.probe import ProbeResult
from rapidcrawl_setup.ui import console

logger = logging.getLogger(__name__)


class ShellCommandRunner(CommandRunner):
    """Run commands through the system shell.

    Args:
        cwd: Working directory for every command (default: current).
        timeout: Seconds before a command is abandoned. None waits
            for the child to exit, however long that takes.
        dry_run: Echo commands but never execute them; every command
            reports success with empty output.
    """

    def __init__(
        self,
        cwd: str | None = None,
        timeout: int | None = None,
        dry_run: bool = False,
    ):
        self._cwd = cwd
        self._timeout = timeout
        self._dry_run = dry_run

    @property
    def name(self) -> str:
        return "shell"

    def run(self, command: str, silent: bool = False) -> ProbeResult:
        if not silent:
            console.echo(f"\n⚙️  Running: {command}", "warning")

        if self._dry_run:
            logger.info("[dry-run] %s", command)
            return ProbeResult.success(command, output="")

        logger.debug("Executing: %s (cwd=%s)", command, self._cwd)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            return ProbeResult.failure(
                command,
                error=f"Command timed out after {self._timeout}s",
            )
        except Exception as e:
            return ProbeResult.failure(command, error=f"Command execution error: {e}")

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()

        if stdout:
            logger.debug("STDOUT %s", stdout)
        if stderr:
            logger.debug("STDERR %s", stderr)

        if result.returncode == 0:
            return ProbeResult.success(
                command,
                output=stdout or stderr,
                return_code=0,
                duration_ms=elapsed_ms,
            )

        return ProbeResult.failure(
            command,
            error=stderr or f"Command exited with code {result.returncode}",
            output=stdout,
            return_code=result.returncode,
            duration_ms=elapsed_ms,
        )
