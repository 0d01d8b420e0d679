"""
Tests for the example script generator.
"""

from pathlib import Path

from rapidcrawl_setup.adapters.languages.python import PythonToolchain
from rapidcrawl_setup.core.data import EXAMPLE_FILENAME, EXAMPLE_SCRIPT
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor
from rapidcrawl_setup.core.services.example_gen import generate_example, run_commands
from rapidcrawl_setup.ui.prompts import ScriptedPrompter


class TestTemplate:
    def test_template_uses_sdk(self):
        assert "from rapidcrawl import RapidCrawlApp" in EXAMPLE_SCRIPT
        assert EXAMPLE_FILENAME == "rapidcrawl_example.py"

    def test_template_keeps_literal_escapes(self):
        # The generated script prints "\n" itself; the template must not expand it
        assert "\\n" in EXAMPLE_SCRIPT


class TestGenerateExample:
    def test_declined(self, workdir: Path):
        result = generate_example(ScriptedPrompter(["n"]), PythonToolchain("python3"), workdir, EXAMPLE_FILENAME)
        assert not result.written
        assert not (workdir / EXAMPLE_FILENAME).exists()

    def test_writes_template_exactly(self, workdir: Path):
        result = generate_example(ScriptedPrompter([""]), PythonToolchain("python3"), workdir, EXAMPLE_FILENAME)
        assert result.written
        assert (workdir / EXAMPLE_FILENAME).read_bytes() == EXAMPLE_SCRIPT.encode("utf-8")

    def test_overwrites_existing_file(self, workdir: Path):
        target = workdir / EXAMPLE_FILENAME
        target.write_text("print('user edits')\n" * 200)
        generate_example(ScriptedPrompter(["y"]), PythonToolchain("python3"), workdir, EXAMPLE_FILENAME)
        assert target.read_bytes() == EXAMPLE_SCRIPT.encode("utf-8")

    def test_run_command_without_environment(self, workdir: Path, capsys):
        result = generate_example(ScriptedPrompter(["y"]), PythonToolchain("python3"), workdir, EXAMPLE_FILENAME)
        assert result.run_commands == ["python3 rapidcrawl_example.py"]
        assert "activate" not in capsys.readouterr().out


class TestRunCommands:
    def test_with_environment(self):
        env = EnvironmentDescriptor.for_platform("venv", windows=False)
        assert run_commands(PythonToolchain("python3", env), "ex.py") == [
            "source venv/bin/activate",
            "venv/bin/python ex.py",
        ]
