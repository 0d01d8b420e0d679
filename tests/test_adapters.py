"""
Tests for command runners and the Python toolchain.
"""

import subprocess
from unittest.mock import MagicMock, patch

from rapidcrawl_setup.adapters.languages.python import PythonToolchain, quote_arg, version_probe
from rapidcrawl_setup.adapters.mock import MockCommandRunner
from rapidcrawl_setup.adapters.shell.command import ShellCommandRunner
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor

# ── Shell Runner Tests ───────────────────────────────────────────────


def _completed(returncode=0, stdout="", stderr=""):
    proc = MagicMock()
    proc.returncode = returncode
    proc.stdout = stdout
    proc.stderr = stderr
    return proc


class TestShellCommandRunner:
    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_success_captures_stdout(self, mock_run):
        mock_run.return_value = _completed(stdout="Python 3.12.1\n")
        result = ShellCommandRunner().run("python3 --version", silent=True)
        assert result.succeeded
        assert result.output == "Python 3.12.1"
        assert result.return_code == 0
        args, kwargs = mock_run.call_args
        assert args[0] == "python3 --version"
        assert kwargs["shell"] is True

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_success_falls_back_to_stderr(self, mock_run):
        # Python 2 printed its version on stderr
        mock_run.return_value = _completed(stderr="Python 2.7.18")
        result = ShellCommandRunner().run("python --version", silent=True)
        assert result.output == "Python 2.7.18"

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_nonzero_exit_is_failure(self, mock_run):
        mock_run.return_value = _completed(returncode=1, stderr="Permission denied")
        result = ShellCommandRunner().run("pip install x", silent=True)
        assert result.failed
        assert result.error == "Permission denied"
        assert result.return_code == 1

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_nonzero_exit_without_stderr(self, mock_run):
        mock_run.return_value = _completed(returncode=127)
        result = ShellCommandRunner().run("nope", silent=True)
        assert "code 127" in result.error

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_timeout_is_failure(self, mock_run):
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="sleep 10", timeout=1)
        result = ShellCommandRunner(timeout=1).run("sleep 10", silent=True)
        assert result.failed
        assert "timed out" in result.error

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_spawn_error_is_failure(self, mock_run):
        mock_run.side_effect = OSError("no shell")
        result = ShellCommandRunner().run("anything", silent=True)
        assert result.failed
        assert "no shell" in result.error

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_dry_run_never_executes(self, mock_run, capsys):
        result = ShellCommandRunner(dry_run=True).run("pip install rapid-crawl")
        assert result.succeeded
        mock_run.assert_not_called()
        assert "Running: pip install rapid-crawl" in capsys.readouterr().out

    @patch("rapidcrawl_setup.adapters.shell.command.subprocess.run")
    def test_silent_echoes_nothing(self, mock_run, capsys):
        mock_run.return_value = _completed(stdout="ok")
        ShellCommandRunner().run("python3 --version", silent=True)
        assert capsys.readouterr().out == ""


# ── Mock Runner Tests ────────────────────────────────────────────────


class TestMockCommandRunner:
    def test_default_success(self):
        runner = MockCommandRunner()
        result = runner.run("anything", silent=True)
        assert result.succeeded
        assert result.output == "[mock] executed"
        assert runner.call_count == 1

    def test_set_output(self):
        runner = MockCommandRunner()
        runner.set_output("python3 --version", "Python 3.11.4")
        assert runner.run("python3 --version", silent=True).output == "Python 3.11.4"

    def test_set_failure(self):
        runner = MockCommandRunner()
        runner.set_failure("pip install x", error="Intentional failure")
        result = runner.run("pip install x", silent=True)
        assert result.failed
        assert result.error == "Intentional failure"

    def test_call_log_records_silence(self):
        runner = MockCommandRunner()
        runner.run("a", silent=True)
        runner.run("b")
        assert runner.call_log == [("a", True), ("b", False)]
        assert runner.commands == ["a", "b"]

    def test_reset(self):
        runner = MockCommandRunner()
        runner.set_failure("a")
        runner.run("a", silent=True)
        runner.reset()
        assert runner.call_count == 0
        assert runner.run("a", silent=True).succeeded


# ── Toolchain Tests ──────────────────────────────────────────────────


class TestPythonToolchain:
    def test_version_probe(self):
        assert version_probe("python3") == "python3 --version"

    def test_host_commands(self):
        tc = PythonToolchain("python3")
        assert tc.pip_probe() == "python3 -m pip --version"
        assert tc.ensurepip() == "python3 -m ensurepip --default-pip"
        assert tc.install("rapid-crawl") == "python3 -m pip install rapid-crawl"
        assert tc.install("rapid-crawl", user=True) == "python3 -m pip install --user rapid-crawl"
        assert tc.run_script("rapidcrawl_example.py") == "python3 rapidcrawl_example.py"
        assert tc.tool("playwright") == "playwright"

    def test_posix_environment(self):
        env = EnvironmentDescriptor.for_platform("venv", windows=False)
        tc = PythonToolchain("python3", env)
        assert tc.install("rapid-crawl") == "venv/bin/pip install rapid-crawl"
        assert tc.tool("playwright") == "venv/bin/playwright"
        assert tc.run_script("ex.py") == "venv/bin/python ex.py"

    def test_windows_environment(self):
        env = EnvironmentDescriptor.for_platform("venv", windows=True)
        tc = PythonToolchain("python", env)
        assert tc.install("rapid-crawl") == "venv\\Scripts\\pip install rapid-crawl"
        assert tc.tool("playwright") == "venv\\Scripts\\playwright"

    def test_venv_name_is_quoted(self):
        assert PythonToolchain("python3").create_venv("my env") == "python3 -m venv 'my env'"
        assert PythonToolchain("python", windows=True).create_venv("my env") == 'python -m venv "my env"'

    def test_quote_arg_plain(self):
        assert quote_arg("venv") == "venv"
        assert quote_arg("venv", windows=True) == "venv"
