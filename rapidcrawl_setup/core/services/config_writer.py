"""
Configuration writer — collect settings and persist them to .env.

Every setting is optional. Nothing is written when all answers are
empty, and an existing .env is only replaced after the user confirms.
Declining, or failing to write, skips the step; it never fails the
pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rapidcrawl_setup.core.errors import ConfigWriteSkipped
from rapidcrawl_setup.core.models.dotenv import ConfigSettings, SettingKey
from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass
class ConfigWriteResult:
    path: Path
    written: bool = False
    keys: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"path": str(self.path), "written": self.written, "keys": self.keys}


def collect_settings(prompter: Prompter) -> ConfigSettings:
    """Ask for each setting in turn; empty answers are left out."""
    settings = ConfigSettings()

    settings.set(
        SettingKey.API_KEY,
        prompter.ask("\n🔑 API Key (leave empty for self-hosted mode)"),
    )

    if prompter.confirm("\n🌐 Use custom API URL?", default=False):
        settings.set(SettingKey.BASE_URL, prompter.ask("📍 API Base URL"))

    settings.set(
        SettingKey.TIMEOUT,
        prompter.ask("\n⏱️  Custom timeout in seconds (default: 30)"),
    )
    return settings


def write_settings(
    settings: ConfigSettings,
    env_path: Path,
    prompter: Prompter,
    header: str,
) -> None:
    """Persist ``settings`` to ``env_path``.

    Raises:
        ConfigWriteSkipped: The user kept an existing file, or the
            file could not be written.
    """
    if env_path.exists():
        if not prompter.confirm(
            f"\n⚠️  {env_path.name} file already exists. Overwrite?", default=False
        ):
            console.echo(f"ℹ️  Skipping {env_path.name} file creation", "warning")
            raise ConfigWriteSkipped(f"Kept existing {env_path.name}")

    try:
        payload = settings.render(header).encode("utf-8")
    except UnicodeEncodeError as e:
        console.echo(f"⚠️  Could not encode settings for {env_path.name}: {e.reason}", "warning")
        raise ConfigWriteSkipped(f"Settings are not valid UTF-8: {e}") from e

    try:
        env_path.write_bytes(payload)
    except OSError as e:
        console.echo(f"⚠️  Could not write {env_path.name}: {e}", "warning")
        raise ConfigWriteSkipped(f"Cannot write {env_path}: {e}") from e

    logger.info("Wrote %d setting(s) to %s", len(settings), env_path)
    console.echo(f"✅ Configuration saved to {env_path.name} file", "success")


def configure(
    prompter: Prompter,
    cwd: Path,
    header: str,
    env_file: str = ".env",
    display_name: str = "RapidCrawl",
) -> ConfigWriteResult:
    """Run the whole configuration step.

    Raises:
        ConfigWriteSkipped: See ``write_settings``.
    """
    console.echo(f"\n⚙️  Configuring {display_name}...", "info")

    settings = collect_settings(prompter)
    result = ConfigWriteResult(path=cwd / env_file, keys=list(settings.to_dict()))
    if not settings:
        logger.info("No settings entered; %s not written", env_file)
        return result

    write_settings(settings, result.path, prompter, header)
    result.written = True
    return result
