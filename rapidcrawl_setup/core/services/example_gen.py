"""
Example generator — drop a runnable example script into the project.

Always overwrites: the file is generated, so there is nothing of the
user's to protect.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rapidcrawl_setup.adapters.languages.python import PythonToolchain
from rapidcrawl_setup.core.data import EXAMPLE_SCRIPT
from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass
class ExampleResult:
    path: Path | None = None
    run_commands: list[str] = field(default_factory=list)

    @property
    def written(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        return {
            "path": str(self.path) if self.path else None,
            "run_commands": self.run_commands,
        }


def run_commands(toolchain: PythonToolchain, filename: str) -> list[str]:
    """Commands the user types to run the example, in order."""
    commands = []
    if toolchain.environment is not None:
        commands.append(toolchain.environment.activation_instruction)
    commands.append(toolchain.run_script(filename))
    return commands


def generate_example(
    prompter: Prompter,
    toolchain: PythonToolchain,
    cwd: Path,
    filename: str,
    content: str = EXAMPLE_SCRIPT,
) -> ExampleResult:
    """Offer to write the example script and show how to run it.

    Raises:
        OSError: The file could not be written.
    """
    if not prompter.confirm("\n📝 Create example script?", default=True):
        logger.info("User declined example script")
        return ExampleResult()

    path = cwd / filename
    path.write_bytes(content.encode("utf-8"))
    console.echo(f"\n✅ Created example script: {filename}", "success")

    result = ExampleResult(path=path, run_commands=run_commands(toolchain, filename))
    console.echo("\n💡 To run the example:", "warning")
    for command in result.run_commands:
        console.echo(f"   {command}", "command")
    return result
