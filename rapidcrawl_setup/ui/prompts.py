"""
Prompters — where the wizard gets its answers from.

The pipeline only talks to the ``Prompter`` interface. ``ClickPrompter``
asks on the terminal; ``ScriptedPrompter`` replays a canned answer
sequence, which is how tests and ``--defaults`` drive the wizard
without a TTY.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

import click

logger = logging.getLogger(__name__)

_YES = {"y", "yes"}
_NO = {"n", "no"}


class PromptsExhausted(RuntimeError):
    """A scripted prompter ran out of answers."""


def parse_confirm(answer: str, default: bool) -> bool:
    """Interpret a yes/no answer. Empty or unrecognised input keeps the default."""
    normalized = answer.strip().lower()
    if normalized in _YES:
        return True
    if normalized in _NO:
        return False
    return default


class Prompter(ABC):
    """Source of answers for the wizard's questions."""

    @abstractmethod
    def ask(self, question: str, default: str = "") -> str:
        """Ask a free-text question. Empty input returns ``default``."""

    @abstractmethod
    def confirm(self, question: str, default: bool) -> bool:
        """Ask a yes/no question. Empty input returns ``default``."""


class ClickPrompter(Prompter):
    """Interactive prompts on the controlling terminal."""

    def ask(self, question: str, default: str = "") -> str:
        answer = click.prompt(
            click.style(question, fg="cyan"),
            default=default,
            show_default=bool(default),
        )
        return str(answer).strip()

    def confirm(self, question: str, default: bool) -> bool:
        answer = click.prompt(
            click.style(f"{question} {'[Y/n]' if default else '[y/N]'}", fg="cyan"),
            default="",
            show_default=False,
        )
        return parse_confirm(str(answer), default)


class ScriptedPrompter(Prompter):
    """Replays a fixed sequence of answers.

    Each question consumes one answer, and an empty answer means "take
    the default", exactly as on the terminal. With ``use_defaults``
    every question past the end of the script gets its default;
    otherwise running out raises ``PromptsExhausted``.
    """

    def __init__(self, answers: Iterable[str] = (), use_defaults: bool = False):
        self._answers = list(answers)
        self._use_defaults = use_defaults
        self.asked: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, question: str) -> str | None:
        self.asked.append(question)
        if self._answers:
            answer = self._answers.pop(0)
            logger.debug("Scripted answer for %r: %r", question, answer)
            return answer
        if self._use_defaults:
            return None
        raise PromptsExhausted(f"No scripted answer left for: {question}")

    def ask(self, question: str, default: str = "") -> str:
        answer = self._next(question)
        if answer is None or not answer.strip():
            return default
        return answer.strip()

    def confirm(self, question: str, default: bool) -> bool:
        answer = self._next(question)
        if answer is None:
            return default
        return parse_confirm(answer, default)
