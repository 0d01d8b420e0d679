"""
Tests for console styling and prompters.
"""

from unittest.mock import patch

import click
import pytest

from rapidcrawl_setup.ui import console
from rapidcrawl_setup.ui.prompts import ClickPrompter, PromptsExhausted, ScriptedPrompter, parse_confirm


class TestStyle:
    def test_unknown_tag_is_plain(self):
        assert console.style("hello", "nope") == "hello"
        assert console.style("hello") == "hello"

    def test_known_tag_adds_ansi(self):
        styled = console.style("done", "success")
        assert styled != "done"
        assert click.unstyle(styled) == "done"

    def test_stateless(self):
        console.style("a", "error")
        assert console.style("b") == "b"


class TestParseConfirm:
    @pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES "])
    def test_yes(self, answer):
        assert parse_confirm(answer, default=False) is True

    @pytest.mark.parametrize("answer", ["n", "No"])
    def test_no(self, answer):
        assert parse_confirm(answer, default=True) is False

    def test_empty_keeps_default(self):
        assert parse_confirm("", default=True) is True
        assert parse_confirm("", default=False) is False

    def test_garbage_keeps_default(self):
        assert parse_confirm("maybe", default=False) is False


class TestScriptedPrompter:
    def test_answers_in_order(self):
        prompter = ScriptedPrompter(["y", "myenv"])
        assert prompter.confirm("create?", default=False) is True
        assert prompter.ask("name", default="venv") == "myenv"
        assert prompter.asked == ["create?", "name"]
        assert prompter.remaining == 0

    def test_empty_answer_means_default(self):
        prompter = ScriptedPrompter(["", ""])
        assert prompter.ask("name", default="venv") == "venv"
        assert prompter.confirm("ok?", default=True) is True

    def test_exhausted(self):
        with pytest.raises(PromptsExhausted):
            ScriptedPrompter().ask("anything")

    def test_use_defaults(self):
        prompter = ScriptedPrompter(use_defaults=True)
        assert prompter.ask("name", default="venv") == "venv"
        assert prompter.confirm("overwrite?", default=False) is False


class TestClickPrompter:
    @patch("rapidcrawl_setup.ui.prompts.click.prompt", return_value="")
    def test_confirm_uses_default_on_empty(self, mock_prompt):
        assert ClickPrompter().confirm("Create?", default=True) is True
        assert "[Y/n]" in click.unstyle(mock_prompt.call_args.args[0])

    @patch("rapidcrawl_setup.ui.prompts.click.prompt", return_value="  my-env ")
    def test_ask_strips(self, mock_prompt):
        assert ClickPrompter().ask("Name", default="venv") == "my-env"
        assert mock_prompt.call_args.kwargs["default"] == "venv"
