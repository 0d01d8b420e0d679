"""
Environment provisioning — create the virtual environment (or not).

The user chooses whether to isolate the install. Declining is a normal
path: later steps then target the host-global interpreter. Opting in
and failing to create the environment is fatal, since every later
install assumes it exists.
"""

from __future__ import annotations

import logging
import sys

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.languages.python import PythonToolchain
from rapidcrawl_setup.core.errors import EnvironmentCreationFailed
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor
from rapidcrawl_setup.core.models.runtime import DetectedRuntime
from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import Prompter

logger = logging.getLogger(__name__)


def is_windows_host() -> bool:
    return sys.platform == "win32"


def provision_environment(
    runner: CommandRunner,
    prompter: Prompter,
    runtime: DetectedRuntime,
    default_name: str = "venv",
    windows: bool | None = None,
) -> EnvironmentDescriptor | None:
    """Ask for and create a virtual environment.

    Args:
        runner: Command runner.
        prompter: Answer source.
        runtime: The detected interpreter that creates the environment.
        default_name: Name used when the user just presses enter.
        windows: Host platform override (default: detect).

    Returns:
        The descriptor, or None when the user declined.

    Raises:
        EnvironmentCreationFailed: The venv command failed.
    """
    if not prompter.confirm(
        "\n🌐 Do you want to create a virtual environment? (recommended)", default=True
    ):
        logger.info("User declined virtual environment; using host interpreter")
        return None

    name = prompter.ask("📁 Virtual environment name", default=default_name) or default_name
    if windows is None:
        windows = is_windows_host()

    console.echo(f"\n🔧 Creating virtual environment: {name}", "info")
    toolchain = PythonToolchain(runtime.command, windows=windows)
    result = runner.run(toolchain.create_venv(name))

    if not result.succeeded:
        console.echo("❌ Failed to create virtual environment", "error")
        raise EnvironmentCreationFailed(
            f"Failed to create virtual environment '{name}'",
            detail=result.error,
        )

    console.echo("✅ Virtual environment created", "success")
    descriptor = EnvironmentDescriptor.for_platform(name, windows=windows)
    logger.info("Created virtual environment %s", descriptor.name)

    console.echo("\n💡 To activate the virtual environment, run:", "warning")
    console.echo(f"   {descriptor.activation_instruction}", "command")
    return descriptor
