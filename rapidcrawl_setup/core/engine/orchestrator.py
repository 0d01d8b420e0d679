"""
Setup orchestrator — the provisioning state machine.

The orchestrator walks a fixed sequence of stages. Each stage handler
does its work (asking the injected prompter when it needs an answer)
and returns a StepResult; the transition table then picks the next
stage. A FATAL result ends the run at once.

Flow:
    detect runtime → detect pip → provision env → install package
    → write config → generate example → done
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import click

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.languages.python import PythonToolchain
from rapidcrawl_setup.core.errors import SetupError
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor
from rapidcrawl_setup.core.models.outcome import SetupReport, Stage, StepOutcome, StepResult
from rapidcrawl_setup.core.models.runtime import DetectedRuntime
from rapidcrawl_setup.core.models.setup import SetupSettings
from rapidcrawl_setup.core.services.config_writer import configure
from rapidcrawl_setup.core.services.environment import is_windows_host, provision_environment
from rapidcrawl_setup.core.services.example_gen import generate_example
from rapidcrawl_setup.core.services.package_install import install_with_auxiliary
from rapidcrawl_setup.core.services.runtime_detect import detect_package_manager, detect_runtime
from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import Prompter

logger = logging.getLogger(__name__)

TRANSITIONS: dict[Stage, Stage] = {
    Stage.DETECT_RUNTIME: Stage.DETECT_PACKAGE_MANAGER,
    Stage.DETECT_PACKAGE_MANAGER: Stage.PROVISION_ENVIRONMENT,
    Stage.PROVISION_ENVIRONMENT: Stage.INSTALL_PACKAGE,
    Stage.INSTALL_PACKAGE: Stage.WRITE_CONFIG,
    Stage.WRITE_CONFIG: Stage.GENERATE_EXAMPLE,
    Stage.GENERATE_EXAMPLE: Stage.DONE,
}

# Any exception in these stages degrades to SKIPPED; only a user abort ends the run
NON_FATAL_STAGES = frozenset({Stage.WRITE_CONFIG, Stage.GENERATE_EXAMPLE})


class SetupOrchestrator:
    """Runs the provisioning pipeline once.

    Args:
        settings: Pipeline parameters.
        runner: Executes every external command.
        prompter: Answers every question.
        cwd: Directory that receives .env and the example script.
        windows: Host platform override (default: detect).
        bootstrap_pip: Allow ``ensurepip`` when pip is missing.
        stop_after: Finish successfully after this stage.
    """

    def __init__(
        self,
        settings: SetupSettings,
        runner: CommandRunner,
        prompter: Prompter,
        cwd: Path | None = None,
        windows: bool | None = None,
        bootstrap_pip: bool = True,
        stop_after: Stage | None = None,
    ):
        self.settings = settings
        self.runner = runner
        self.prompter = prompter
        self.cwd = cwd or Path.cwd()
        self.windows = is_windows_host() if windows is None else windows
        self.bootstrap_pip = bootstrap_pip
        self.stop_after = stop_after

        self.runtime: DetectedRuntime | None = None
        self.environment: EnvironmentDescriptor | None = None
        self.report = SetupReport()

        self._handlers: dict[Stage, Callable[[], StepResult]] = {
            Stage.DETECT_RUNTIME: self._detect_runtime,
            Stage.DETECT_PACKAGE_MANAGER: self._detect_package_manager,
            Stage.PROVISION_ENVIRONMENT: self._provision_environment,
            Stage.INSTALL_PACKAGE: self._install_package,
            Stage.WRITE_CONFIG: self._write_config,
            Stage.GENERATE_EXAMPLE: self._generate_example,
        }

    @property
    def detected_runtime(self) -> DetectedRuntime:
        if self.runtime is None:
            raise RuntimeError("runtime requested before it was detected")
        return self.runtime

    @property
    def toolchain(self) -> PythonToolchain:
        """Toolchain bound to the detected runtime and the environment, if any."""
        return PythonToolchain(self.detected_runtime.command, self.environment, windows=self.windows)

    # ── Driver ──────────────────────────────────────────────────

    def run(self) -> SetupReport:
        """Walk the stages until DONE or the first fatal outcome.

        Never raises: an unexpected exception becomes a fatal result
        for the stage that was running.
        """
        stage = Stage.DETECT_RUNTIME
        try:
            while stage is not Stage.DONE:
                self.report.final_stage = stage
                result = self.step(stage)
                self.report.steps.append(result)
                self._log_result(result)

                if result.fatal:
                    self._announce_fatal(result)
                    return self.report
                if stage is self.stop_after:
                    break
                stage = TRANSITIONS[stage]
        except Exception as e:
            reason = str(e) or type(e).__name__
            logger.error("Unexpected error during %s: %s", stage.value, reason)
            logger.debug("Traceback", exc_info=True)
            error = SetupError(f"Unexpected error: {reason}")
            self.report.steps.append(
                StepResult(stage=stage, outcome=StepOutcome.FATAL, message=str(error), error=error)
            )
            console.echo(f"\n❌ Unexpected error: {reason}", "error")
            return self.report

        self.report.final_stage = Stage.DONE
        return self.report

    def step(self, stage: Stage) -> StepResult:
        """Run one stage and classify whatever it raised."""
        handler = self._handlers[stage]
        try:
            return handler()
        except SetupError as e:
            if e.fatal and stage not in NON_FATAL_STAGES:
                return StepResult(stage=stage, outcome=StepOutcome.FATAL, message=str(e), error=e)
            logger.info("%s skipped: %s", stage.value, e)
            return StepResult(stage=stage, outcome=StepOutcome.SKIPPED, message=str(e), error=e)
        except click.Abort:
            raise
        except Exception as e:
            if stage not in NON_FATAL_STAGES:
                raise
            reason = str(e) or type(e).__name__
            logger.warning("%s skipped: %s", stage.value, reason)
            logger.debug("Traceback", exc_info=True)
            return StepResult(stage=stage, outcome=StepOutcome.SKIPPED, message=reason)

    # ── Stage handlers ──────────────────────────────────────────

    def _detect_runtime(self) -> StepResult:
        self.runtime = detect_runtime(
            self.runner,
            self.settings.runtime_candidates,
            self.settings.min_version,
        )
        if self.runtime.version is None:
            return StepResult(
                stage=Stage.DETECT_RUNTIME,
                outcome=StepOutcome.RECOVERED,
                message=f"{self.runtime.command} found, version unknown",
                data=self.runtime,
            )
        return StepResult(
            stage=Stage.DETECT_RUNTIME,
            outcome=StepOutcome.OK,
            message=f"{self.runtime.command} {self.runtime.version}",
            data=self.runtime,
        )

    def _detect_package_manager(self) -> StepResult:
        outcome = detect_package_manager(self.runner, self.detected_runtime, allow_bootstrap=self.bootstrap_pip)
        if outcome.used_fallback:
            return StepResult(
                stage=Stage.DETECT_PACKAGE_MANAGER,
                outcome=StepOutcome.RECOVERED,
                message="pip installed with ensurepip",
            )
        return StepResult(
            stage=Stage.DETECT_PACKAGE_MANAGER,
            outcome=StepOutcome.OK,
            message="pip available",
        )

    def _provision_environment(self) -> StepResult:
        self.environment = provision_environment(
            self.runner,
            self.prompter,
            self.detected_runtime,
            default_name=self.settings.default_env_name,
            windows=self.windows,
        )
        if self.environment is None:
            return StepResult(
                stage=Stage.PROVISION_ENVIRONMENT,
                outcome=StepOutcome.SKIPPED,
                message="No virtual environment; using the host interpreter",
            )
        return StepResult(
            stage=Stage.PROVISION_ENVIRONMENT,
            outcome=StepOutcome.OK,
            message=f"Created {self.environment.name}",
            data=self.environment,
        )

    def _install_package(self) -> StepResult:
        report = install_with_auxiliary(
            self.runner,
            self.prompter,
            self.toolchain,
            package=self.settings.package,
            display_name=self.settings.display_name,
            auxiliary_tool=self.settings.auxiliary_package,
            auxiliary_args=self.settings.auxiliary_args,
        )
        degraded = report.used_fallback or report.auxiliary == "failed"
        notes = []
        if report.used_fallback:
            notes.append("installed with --user")
        if report.auxiliary == "failed":
            notes.append("browser install failed")
        return StepResult(
            stage=Stage.INSTALL_PACKAGE,
            outcome=StepOutcome.RECOVERED if degraded else StepOutcome.OK,
            message=f"{self.settings.package} installed" + (f" ({', '.join(notes)})" if notes else ""),
            data=report,
        )

    def _write_config(self) -> StepResult:
        result = configure(
            self.prompter,
            self.cwd,
            header=self.settings.config_header,
            env_file=self.settings.env_file,
            display_name=self.settings.display_name,
        )
        if not result.written:
            return StepResult(
                stage=Stage.WRITE_CONFIG,
                outcome=StepOutcome.SKIPPED,
                message="No settings entered",
                data=result,
            )
        return StepResult(
            stage=Stage.WRITE_CONFIG,
            outcome=StepOutcome.OK,
            message=f"Wrote {len(result.keys)} setting(s) to {result.path.name}",
            data=result,
        )

    def _generate_example(self) -> StepResult:
        result = generate_example(
            self.prompter,
            self.toolchain,
            self.cwd,
            self.settings.example_filename,
        )
        if not result.written:
            return StepResult(
                stage=Stage.GENERATE_EXAMPLE,
                outcome=StepOutcome.SKIPPED,
                message="Example script declined",
                data=result,
            )
        return StepResult(
            stage=Stage.GENERATE_EXAMPLE,
            outcome=StepOutcome.OK,
            message=f"Created {self.settings.example_filename}",
            data=result,
        )

    # ── Reporting ───────────────────────────────────────────────

    def _log_result(self, result: StepResult) -> None:
        marker = {
            StepOutcome.OK: "✓",
            StepOutcome.RECOVERED: "↻",
            StepOutcome.SKIPPED: "⊘",
            StepOutcome.FATAL: "✗",
        }[result.outcome]
        logger.info("%s %s → %s %s", marker, result.stage.value, result.outcome.value, result.message)

    def _announce_fatal(self, result: StepResult) -> None:
        error = result.error
        if error is None:
            return
        if error.detail:
            for line in error.detail.strip().split("\n")[-5:]:
                console.echo(f"     │ {line}")
        if error.remediation:
            console.echo(f"\n{error.remediation}", "warning")
