"""
Setup use cases — wire settings, runner and prompter into the orchestrator.

``run_setup`` is the full wizard; ``run_check`` runs only the two
detection stages without installing anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.shell.command import ShellCommandRunner
from rapidcrawl_setup.core.engine.orchestrator import SetupOrchestrator
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor
from rapidcrawl_setup.core.models.outcome import SetupReport, Stage
from rapidcrawl_setup.core.models.runtime import DetectedRuntime
from rapidcrawl_setup.core.models.setup import SetupSettings
from rapidcrawl_setup.ui.prompts import ClickPrompter, Prompter, ScriptedPrompter

logger = logging.getLogger(__name__)


@dataclass
class SetupRunResult:
    """Result of one wizard (or check) run."""

    report: SetupReport
    settings: SetupSettings
    runtime: DetectedRuntime | None = None
    environment: EnvironmentDescriptor | None = None
    dry_run: bool = False

    @property
    def exit_code(self) -> int:
        return self.report.exit_code

    def to_dict(self) -> dict:
        result = self.report.to_dict()
        result["package"] = self.settings.package
        result["dry_run"] = self.dry_run
        result["runtime"] = (
            {
                "command": self.runtime.command,
                "version": str(self.runtime.version) if self.runtime.version else None,
            }
            if self.runtime
            else None
        )
        result["environment"] = (
            {
                "name": self.environment.name,
                "activate": self.environment.activation_instruction,
            }
            if self.environment
            else None
        )
        return result


def run_setup(
    settings: SetupSettings,
    runner: CommandRunner | None = None,
    prompter: Prompter | None = None,
    use_defaults: bool = False,
    dry_run: bool = False,
    cwd: Path | None = None,
    windows: bool | None = None,
) -> SetupRunResult:
    """Run the interactive provisioning wizard.

    Args:
        settings: Pipeline parameters.
        runner: Command runner (default: a shell runner in ``cwd``).
        prompter: Answer source (default: terminal prompts, or every
            default when ``use_defaults`` is set).
        use_defaults: Accept every default without prompting.
        dry_run: Echo commands instead of executing them.
        cwd: Working directory for commands and written files.
        windows: Host platform override (default: detect).
    """
    if runner is None:
        runner = ShellCommandRunner(cwd=str(cwd) if cwd else None, dry_run=dry_run)
    if prompter is None:
        prompter = ScriptedPrompter(use_defaults=True) if use_defaults else ClickPrompter()

    logger.info("Setup starting (runner=%s, package=%s)", runner.name, settings.package)
    orchestrator = SetupOrchestrator(settings, runner, prompter, cwd=cwd, windows=windows)
    report = orchestrator.run()
    logger.info("Setup finished at %s (exit %d)", report.final_stage.value, report.exit_code)

    return SetupRunResult(
        report=report,
        settings=settings,
        runtime=orchestrator.runtime,
        environment=orchestrator.environment,
        dry_run=dry_run,
    )


def run_check(
    settings: SetupSettings,
    runner: CommandRunner | None = None,
    cwd: Path | None = None,
) -> SetupRunResult:
    """Detect the interpreter and pip, changing nothing on the host."""
    if runner is None:
        runner = ShellCommandRunner(cwd=str(cwd) if cwd else None)

    orchestrator = SetupOrchestrator(
        settings,
        runner,
        ScriptedPrompter(),
        cwd=cwd,
        bootstrap_pip=False,
        stop_after=Stage.DETECT_PACKAGE_MANAGER,
    )
    report = orchestrator.run()
    return SetupRunResult(report=report, settings=settings, runtime=orchestrator.runtime)
