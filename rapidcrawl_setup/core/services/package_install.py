"""
Package installation — the target package, then the optional browser.

The package install tries a plain ``pip install`` first and retries
with ``--user`` when that fails (usually a permission error on a
system interpreter). Both failing is fatal.

The auxiliary install (Playwright's Chromium) only runs after the
package is in place, and its failure never stops the pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.languages.python import PythonToolchain
from rapidcrawl_setup.core.engine.strategies import Strategy, StrategyOutcome, first_success
from rapidcrawl_setup.core.errors import AuxiliaryInstallFailed, PackageInstallFailed
from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import Prompter

logger = logging.getLogger(__name__)


@dataclass
class InstallReport:
    """Result of the package step, including the auxiliary install."""

    command: str = ""
    used_fallback: bool = False
    auxiliary: str = "declined"     # installed | declined | failed
    auxiliary_error: str | None = None

    def to_dict(self) -> dict:
        return {
            "command": self.command,
            "used_fallback": self.used_fallback,
            "auxiliary": self.auxiliary,
            "auxiliary_error": self.auxiliary_error,
        }


def install_strategies(
    toolchain: PythonToolchain,
    package: str,
    display_name: str = "",
) -> list[Strategy]:
    """Primary install, then the user-scope fallback."""
    display_name = display_name or package
    return [
        Strategy(label="install", command=toolchain.install(package)),
        Strategy(
            label="install --user",
            command=toolchain.install(package, user=True),
            notice=f"❌ Failed to install {display_name}\nTrying alternative installation method...",
        ),
    ]


def install_package(
    runner: CommandRunner,
    toolchain: PythonToolchain,
    package: str,
    display_name: str = "",
) -> StrategyOutcome:
    """Install ``package`` with the fallback strategy.

    Raises:
        PackageInstallFailed: Both the plain and the ``--user`` install failed.
    """
    display_name = display_name or package
    console.echo(f"\n📥 Installing {display_name}...", "info")

    outcome = first_success(install_strategies(toolchain, package, display_name), runner)
    if not outcome.succeeded:
        raise PackageInstallFailed(
            f"Failed to install {display_name}",
            detail=outcome.last_error,
        )

    if outcome.used_fallback:
        logger.warning("%s installed with the --user fallback", package)
    console.echo(f"✅ {display_name} installed successfully", "success")
    return outcome


def install_auxiliary(
    runner: CommandRunner,
    toolchain: PythonToolchain,
    tool: str,
    args: str,
) -> None:
    """Run ``<tool> <args>`` from the environment (or host).

    Raises:
        AuxiliaryInstallFailed: The command failed.
    """
    console.echo("\n📥 Installing Playwright browsers...", "info")
    result = runner.run(f"{toolchain.tool(tool)} {args}")
    if not result.succeeded:
        raise AuxiliaryInstallFailed(
            f"Failed to install Playwright browsers: {result.error}",
            detail=result.error,
        )
    console.echo("✅ Playwright browsers installed", "success")


def install_with_auxiliary(
    runner: CommandRunner,
    prompter: Prompter,
    toolchain: PythonToolchain,
    package: str,
    display_name: str,
    auxiliary_tool: str,
    auxiliary_args: str,
) -> InstallReport:
    """Install the package, then offer the auxiliary install.

    Raises:
        PackageInstallFailed: See ``install_package``. Raised before
            the auxiliary question is ever asked.
    """
    outcome = install_package(runner, toolchain, package, display_name)
    if outcome.strategy is None:
        raise RuntimeError("install reported success without a winning strategy")
    report = InstallReport(command=outcome.strategy.command, used_fallback=outcome.used_fallback)

    if not prompter.confirm(
        "\n🎭 Install Playwright browsers for dynamic content?", default=True
    ):
        return report

    try:
        install_auxiliary(runner, toolchain, auxiliary_tool, auxiliary_args)
        report.auxiliary = "installed"
    except AuxiliaryInstallFailed as e:
        logger.warning("%s", e)
        console.echo("⚠️  Playwright browsers could not be installed; continuing without them", "warning")
        console.echo(f"   You can retry later with: {toolchain.tool(auxiliary_tool)} {auxiliary_args}", "command")
        report.auxiliary = "failed"
        report.auxiliary_error = e.detail

    return report
