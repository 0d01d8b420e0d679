"""
Probe result model — the command execution contract.

The command runner returns a ProbeResult for every command it runs.
Runners never raise: a missing executable, a non-zero exit or a timeout
is captured here with ``succeeded=False`` and the error text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProbeResult(BaseModel):
    """Outcome of a single external command.

    Immutable once produced. ``output`` is the captured stdout; when a
    command writes only to stderr (``python --version`` on Python 2)
    the stderr text is used instead so callers can still parse it.
    """

    model_config = ConfigDict(frozen=True)

    command: str
    succeeded: bool
    output: str = ""
    error: str | None = None
    return_code: int | None = None
    duration_ms: int = 0

    @property
    def failed(self) -> bool:
        return not self.succeeded

    @classmethod
    def success(cls, command: str, output: str = "", **kwargs: Any) -> ProbeResult:
        """Create a success result."""
        return cls(command=command, succeeded=True, output=output, **kwargs)

    @classmethod
    def failure(cls, command: str, error: str, **kwargs: Any) -> ProbeResult:
        """Create a failure result."""
        return cls(command=command, succeeded=False, error=error, **kwargs)
