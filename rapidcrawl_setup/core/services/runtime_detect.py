"""
Runtime detection — find a usable Python interpreter and its pip.

Read-only probes: runs ``--version`` for each candidate interpreter in
priority order and parses the reported version. Then checks that pip
answers for the chosen interpreter, bootstrapping it with ensurepip
when allowed.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.adapters.languages.python import PythonToolchain, version_probe
from rapidcrawl_setup.core.engine.strategies import Strategy, StrategyOutcome, first_success
from rapidcrawl_setup.core.errors import (
    PackageManagerMissing,
    RuntimeNotFound,
    RuntimeTooOld,
    VersionParseFailed,
)
from rapidcrawl_setup.core.models.runtime import DetectedRuntime, RuntimeVersion
from rapidcrawl_setup.ui import console

logger = logging.getLogger(__name__)

# "Python 3.12.8" → (3, 12, 8)
VERSION_PATTERN = re.compile(r"Python\s+(\d+)\.(\d+)\.(\d+)")


def parse_version(output: str) -> RuntimeVersion:
    """Parse ``Python X.Y.Z`` out of probe output.

    Raises:
        VersionParseFailed: If no version triple is present.
    """
    match = VERSION_PATTERN.search(output or "")
    if not match:
        raise VersionParseFailed(f"Could not parse a Python version from {output!r}")
    major, minor, patch = (int(g) for g in match.groups())
    return RuntimeVersion(major=major, minor=minor, patch=patch)


def detect_runtime(
    runner: CommandRunner,
    candidates: Sequence[str],
    min_version: Sequence[int],
) -> DetectedRuntime:
    """Probe ``candidates`` in order and return the first one that answers.

    Later candidates are never probed once one succeeds. An unparsable
    version is accepted as unknown; a parsed version below
    ``min_version`` is rejected.

    Raises:
        RuntimeNotFound: No candidate answered.
        RuntimeTooOld: The winning candidate is below ``min_version``.
    """
    console.echo("\n🐍 Checking Python installation...", "info")
    minimum = ".".join(str(part) for part in min_version)
    remediation = f"Please install Python {minimum} or higher from https://python.org"

    outcome = first_success(
        [Strategy(label=c, command=version_probe(c), silent=True) for c in candidates],
        runner,
    )
    if not outcome.succeeded:
        console.echo("❌ Python is not installed or not in PATH", "error")
        raise RuntimeNotFound(
            "Python is not installed or not in PATH",
            remediation=remediation,
            detail=outcome.last_error,
        )

    strategy, result = outcome.winner
    try:
        version = parse_version(result.output)
    except VersionParseFailed as e:
        logger.info("%s; continuing with unknown version", e)
        return DetectedRuntime(command=strategy.label, raw_output=result.output)

    if not version.at_least(tuple(min_version)):
        console.echo(
            f"❌ Python {version} is too old. Please install Python {minimum} or higher",
            "error",
        )
        raise RuntimeTooOld(f"Python {version} is too old", remediation=remediation)

    console.echo(f"✅ Found Python {version}", "success")
    logger.info("Using interpreter %s (Python %s)", strategy.label, version)
    return DetectedRuntime(command=strategy.label, version=version, raw_output=result.output)


def detect_package_manager(
    runner: CommandRunner,
    runtime: DetectedRuntime,
    allow_bootstrap: bool = True,
) -> StrategyOutcome:
    """Check that pip works for ``runtime``.

    Tries ``-m pip --version`` silently first; when that fails and
    ``allow_bootstrap`` is set, runs ``-m ensurepip --default-pip``.
    ``used_fallback`` on the returned outcome tells whether pip had to
    be bootstrapped.

    Raises:
        PackageManagerMissing: pip is absent and could not be installed.
    """
    console.echo("\n📦 Checking pip installation...", "info")
    toolchain = PythonToolchain(runtime.command)

    strategies = [Strategy(label="pip", command=toolchain.pip_probe(), silent=True)]
    if allow_bootstrap:
        strategies.append(
            Strategy(
                label="ensurepip",
                command=toolchain.ensurepip(),
                notice="❌ pip is not installed. Installing pip...",
            )
        )

    outcome = first_success(strategies, runner)
    if not outcome.succeeded:
        if allow_bootstrap:
            console.echo("❌ Failed to install pip automatically", "error")
        else:
            console.echo("❌ pip is not installed", "error")
        raise PackageManagerMissing("pip is not installed", detail=outcome.last_error)

    console.echo("✅ pip is installed", "success")
    return outcome
