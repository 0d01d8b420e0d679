"""
Environment descriptor — the virtual environment created for this run.

Created once by the provisioner and never mutated. Every later step
that needs an executable inside the environment asks the descriptor
for it via ``tool_path`` instead of rebuilding the path itself.
"""

from __future__ import annotations

import shlex

from pydantic import BaseModel, ConfigDict


def quote_arg(arg: str, windows: bool = False) -> str:
    """Quote a single shell argument for the host shell."""
    if windows:
        return f'"{arg}"' if any(c.isspace() for c in arg) else arg
    return shlex.quote(arg)


class EnvironmentDescriptor(BaseModel):
    """A provisioned virtual environment."""

    model_config = ConfigDict(frozen=True)

    name: str
    activation_instruction: str
    is_windows_style: bool = False

    @classmethod
    def for_platform(cls, name: str, windows: bool) -> EnvironmentDescriptor:
        """Build a descriptor with the activation instruction for the host."""
        if windows:
            activate = quote_arg(f"{name}\\Scripts\\activate", windows=True)
        else:
            activate = f"source {quote_arg(f'{name}/bin/activate')}"
        return cls(name=name, activation_instruction=activate, is_windows_style=windows)

    @property
    def bin_dir(self) -> str:
        if self.is_windows_style:
            return f"{self.name}\\Scripts"
        return f"{self.name}/bin"

    def tool_path(self, tool: str) -> str:
        """Path to an executable installed inside the environment."""
        sep = "\\" if self.is_windows_style else "/"
        return f"{self.bin_dir}{sep}{tool}"
