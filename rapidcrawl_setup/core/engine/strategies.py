"""
First-success combinator — try strategies in order until one works.

Used wherever the pipeline has a primary way of doing something and
one or more fallbacks: probing interpreter names, finding pip, and
installing the package.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from rapidcrawl_setup.adapters.base import CommandRunner
from rapidcrawl_setup.core.models.probe import ProbeResult
from rapidcrawl_setup.ui import console

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Strategy:
    """One way of achieving a step: a label and the command to run.

    ``notice`` is shown to the user before the strategy runs as a
    fallback, i.e. only when an earlier strategy has already failed.
    """

    label: str
    command: str
    silent: bool = False
    notice: str = ""


@dataclass
class StrategyOutcome:
    """What happened when a strategy list was tried."""

    attempts: list[tuple[Strategy, ProbeResult]] = field(default_factory=list)

    @property
    def winner(self) -> tuple[Strategy, ProbeResult] | None:
        if self.attempts and self.attempts[-1][1].succeeded:
            return self.attempts[-1]
        return None

    @property
    def succeeded(self) -> bool:
        return self.winner is not None

    @property
    def used_fallback(self) -> bool:
        """Succeeded, but not on the first strategy."""
        return self.succeeded and len(self.attempts) > 1

    @property
    def strategy(self) -> Strategy | None:
        return self.winner[0] if self.winner else None

    @property
    def result(self) -> ProbeResult | None:
        return self.winner[1] if self.winner else None

    @property
    def last_error(self) -> str:
        if not self.attempts:
            return ""
        return self.attempts[-1][1].error or ""


def first_success(strategies: Sequence[Strategy], runner: CommandRunner) -> StrategyOutcome:
    """Run ``strategies`` in order, stopping at the first success.

    Strategies after the winner are never run. An empty list yields an
    outcome with no attempts, which counts as failure.
    """
    outcome = StrategyOutcome()
    for strategy in strategies:
        if outcome.attempts and strategy.notice:
            console.echo(strategy.notice, "warning")
        result = runner.run(strategy.command, silent=strategy.silent)
        outcome.attempts.append((strategy, result))
        if result.succeeded:
            logger.debug("Strategy '%s' succeeded", strategy.label)
            break
        logger.info("Strategy '%s' failed: %s", strategy.label, result.error)
    return outcome
