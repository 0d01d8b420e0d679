"""
Smoke tests — verify the package and entrypoints are healthy.
"""

from click.testing import CliRunner

from rapidcrawl_setup import __version__
from rapidcrawl_setup.main import cli


class TestBootstrap:
    def test_version_is_set(self):
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "RapidCrawl" in result.output

    def test_cli_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_registered(self):
        assert set(cli.commands) == {"run", "check"}

    def test_main_module_importable(self):
        import rapidcrawl_setup.__main__  # noqa: F401
