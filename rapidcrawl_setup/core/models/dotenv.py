"""
.env settings model — the answers collected by the configuration step.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class SettingKey(str, Enum):
    """The settings the wizard knows how to collect."""

    API_KEY = "RAPIDCRAWL_API_KEY"
    BASE_URL = "RAPIDCRAWL_BASE_URL"
    TIMEOUT = "RAPIDCRAWL_TIMEOUT"


class ConfigSettings:
    """Ordered mapping of setting key to value.

    Built one answer at a time. Empty answers are dropped, so an
    empty instance means "nothing to persist".
    """

    def __init__(self) -> None:
        self._values: dict[SettingKey, str] = {}

    def set(self, key: SettingKey, value: str) -> bool:
        """Record ``value`` for ``key``. Returns False when the value is empty."""
        value = value.strip()
        if not value:
            return False
        self._values[key] = value
        return True

    def get(self, key: SettingKey) -> str | None:
        return self._values.get(key)

    def items(self) -> Iterator[tuple[SettingKey, str]]:
        return iter(self._values.items())

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def render(self, header: str) -> str:
        """Serialize as a comment header followed by ``KEY=value`` lines."""
        lines = [f"# {header}"]
        lines.extend(f"{key.value}={value}" for key, value in self.items())
        return "\n".join(lines) + "\n"

    def to_dict(self) -> dict[str, str]:
        return {key.value: value for key, value in self.items()}
