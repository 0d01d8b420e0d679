"""
Setup error taxonomy.

Services raise these; the orchestrator catches them and turns each one
into a StepResult. ``fatal`` errors stop the pipeline with exit code 1
and the ``remediation`` hint is shown to the user. Non-fatal errors are
logged and the pipeline continues.
"""

from __future__ import annotations


class SetupError(Exception):
    """Base class for every classified setup failure."""

    fatal = True
    remediation = ""

    def __init__(self, message: str, *, remediation: str | None = None, detail: str | None = None):
        super().__init__(message)
        if remediation is not None:
            self.remediation = remediation
        self.detail = detail


# ── Fatal ────────────────────────────────────────────────────────


class RuntimeNotFound(SetupError):
    remediation = "Please install Python 3.8 or higher from https://python.org"


class RuntimeTooOld(SetupError):
    remediation = "Please install Python 3.8 or higher from https://python.org"


class PackageManagerMissing(SetupError):
    remediation = "Please install pip manually: https://pip.pypa.io/en/stable/installation/"


class EnvironmentCreationFailed(SetupError):
    remediation = (
        "Check that the venv module is available (on Debian/Ubuntu: "
        "apt install python3-venv) and that the target directory is writable."
    )


class PackageInstallFailed(SetupError):
    remediation = "Setup failed. Please check the error messages above."


# ── Recoverable ──────────────────────────────────────────────────


class AuxiliaryInstallFailed(SetupError):
    fatal = False


class ConfigWriteSkipped(SetupError):
    fatal = False


class VersionParseFailed(SetupError):
    fatal = False
