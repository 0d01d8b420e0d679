"""
Step outcome models — how each pipeline stage ended.

The orchestrator reads these to decide whether to continue. Only
``FATAL`` stops the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from rapidcrawl_setup.core.errors import SetupError


class Stage(str, Enum):
    """Pipeline states, in execution order."""

    DETECT_RUNTIME = "detect_runtime"
    DETECT_PACKAGE_MANAGER = "detect_package_manager"
    PROVISION_ENVIRONMENT = "provision_environment"
    INSTALL_PACKAGE = "install_package"
    WRITE_CONFIG = "write_config"
    GENERATE_EXAMPLE = "generate_example"
    DONE = "done"


class StepOutcome(str, Enum):
    OK = "ok"                # primary path succeeded
    RECOVERED = "recovered"  # succeeded through a fallback
    SKIPPED = "skipped"      # not performed; pipeline continues
    FATAL = "fatal"          # pipeline stops, exit code 1


@dataclass
class StepResult:
    """Result of one pipeline stage."""

    stage: Stage
    outcome: StepOutcome
    message: str = ""
    error: SetupError | None = None
    data: Any = None

    @property
    def fatal(self) -> bool:
        return self.outcome is StepOutcome.FATAL

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "stage": self.stage.value,
            "outcome": self.outcome.value,
            "message": self.message,
        }
        if self.error is not None:
            result["error"] = {
                "type": type(self.error).__name__,
                "message": str(self.error),
                "remediation": self.error.remediation,
            }
        return result


@dataclass
class SetupReport:
    """Everything that happened during one wizard run."""

    steps: list[StepResult] = field(default_factory=list)
    final_stage: Stage = Stage.DETECT_RUNTIME

    @property
    def fatal_step(self) -> StepResult | None:
        for step in self.steps:
            if step.fatal:
                return step
        return None

    @property
    def completed(self) -> bool:
        return self.final_stage is Stage.DONE and self.fatal_step is None

    @property
    def exit_code(self) -> int:
        return 0 if self.completed else 1

    def get(self, stage: Stage) -> StepResult | None:
        for step in self.steps:
            if step.stage is stage:
                return step
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "completed": self.completed,
            "exit_code": self.exit_code,
            "final_stage": self.final_stage.value,
            "steps": [s.to_dict() for s in self.steps],
        }
