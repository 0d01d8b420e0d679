"""
Python toolchain — command strings for interpreter, venv and pip.

Knows where executables live: inside the provisioned environment when
there is one (always via ``EnvironmentDescriptor.tool_path``), otherwise
the host-global interpreter.
"""

from __future__ import annotations

from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor, quote_arg


def version_probe(candidate: str) -> str:
    """Command that prints the interpreter version."""
    return f"{candidate} --version"


class PythonToolchain:
    """Builds the commands the pipeline runs for one interpreter.

    Args:
        interpreter: The detected interpreter command (``python3``).
        environment: The provisioned environment, or None to target
            the host-global interpreter.
        windows: Host shell flavour, used for quoting.
    """

    def __init__(
        self,
        interpreter: str,
        environment: EnvironmentDescriptor | None = None,
        windows: bool = False,
    ):
        self.interpreter = interpreter
        self.environment = environment
        self.windows = environment.is_windows_style if environment else windows

    def _q(self, arg: str) -> str:
        return quote_arg(arg, self.windows)

    # ── Host interpreter ────────────────────────────────────────

    def pip_probe(self) -> str:
        return f"{self.interpreter} -m pip --version"

    def ensurepip(self) -> str:
        return f"{self.interpreter} -m ensurepip --default-pip"

    def create_venv(self, name: str) -> str:
        return f"{self.interpreter} -m venv {self._q(name)}"

    # ── Environment-aware ───────────────────────────────────────

    def tool(self, name: str) -> str:
        """An executable, from the environment when one exists."""
        if self.environment is None:
            return name
        return self._q(self.environment.tool_path(name))

    @property
    def pip(self) -> str:
        if self.environment is None:
            return f"{self.interpreter} -m pip"
        return self.tool("pip")

    @property
    def python(self) -> str:
        if self.environment is None:
            return self.interpreter
        return self.tool("python")

    def install(self, package: str, user: bool = False) -> str:
        flag = " --user" if user else ""
        return f"{self.pip} install{flag} {self._q(package)}"

    def run_script(self, filename: str) -> str:
        return f"{self.python} {self._q(filename)}"
