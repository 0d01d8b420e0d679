"""
Settings loader — reads rapidcrawl-setup.yml into SetupSettings.

The file is optional. Without one the wizard runs with the built-in
RapidCrawl defaults; with one, any listed field overrides its default.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from rapidcrawl_setup.core.models.setup import SetupSettings

logger = logging.getLogger(__name__)

SETTINGS_FILE = "rapidcrawl-setup.yml"


class ConfigError(Exception):
    """Raised when the settings file is unreadable or invalid."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Return ``rapidcrawl-setup.yml`` in ``start_dir`` (default: cwd), if present."""
    candidate = (start_dir or Path.cwd()) / SETTINGS_FILE
    return candidate if candidate.is_file() else None


def load_settings(
    path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> SetupSettings:
    """Load and validate setup settings.

    Args:
        path: Explicit settings file. If None, looks in the working
            directory and falls back to defaults when absent.
        overrides: Values that win over the file (e.g. CLI flags).
            None values are ignored.

    Returns:
        Validated SetupSettings.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    data: dict[str, Any] = {}

    if path is None:
        path = find_settings_file()
    elif not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    if path is not None:
        data = _read_yaml(path)

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        settings = SetupSettings.model_validate(data)
    except ValidationError as e:
        source = str(path) if path else "command line"
        raise ConfigError(f"Invalid setup settings ({source}): {e}") from e

    logger.debug("Setup settings: %s", settings.model_dump())
    return settings


def _read_yaml(path: Path) -> dict[str, Any]:
    logger.debug("Loading setup settings from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data
