"""
Runtime models — what the version probe found on the host.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RuntimeVersion(BaseModel):
    """A parsed ``major.minor.patch`` interpreter version."""

    model_config = ConfigDict(frozen=True)

    major: int
    minor: int
    patch: int = 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def at_least(self, minimum: tuple[int, ...]) -> bool:
        """Inclusive comparison against a ``(major, minor[, patch])`` floor."""
        return self.as_tuple()[: len(minimum)] >= tuple(minimum)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class DetectedRuntime(BaseModel):
    """The interpreter chosen by the version probe.

    ``version`` is None when the probe succeeded but its output could
    not be parsed; the runtime is still usable.
    """

    model_config = ConfigDict(frozen=True)

    command: str
    version: RuntimeVersion | None = None
    raw_output: str = ""
