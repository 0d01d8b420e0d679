"""
Setup settings — the fixed parameters of the provisioning pipeline.

Defaults describe the RapidCrawl install. A ``rapidcrawl-setup.yml``
file can override any of them (see ``core.config.loader``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rapidcrawl_setup.core.data import EXAMPLE_FILENAME


class SetupSettings(BaseModel):
    """Everything the pipeline needs that is not asked interactively."""

    model_config = ConfigDict(extra="forbid")

    package: str = "rapid-crawl"
    import_name: str = "rapidcrawl"
    display_name: str = "RapidCrawl"

    # Probed in order; the first one that answers ``--version`` wins
    runtime_candidates: list[str] = Field(default_factory=lambda: ["python3", "python"])
    min_version: list[int] = Field(default_factory=lambda: [3, 8])

    default_env_name: str = "venv"
    env_file: str = ".env"
    example_filename: str = EXAMPLE_FILENAME

    auxiliary_package: str = "playwright"
    auxiliary_args: str = "install chromium"

    docs_url: str = "https://github.com/aoneahsan/rapid-crawl"

    @field_validator("runtime_candidates")
    @classmethod
    def _candidates_not_empty(cls, value: list[str]) -> list[str]:
        cleaned = [c.strip() for c in value if c.strip()]
        if not cleaned:
            raise ValueError("runtime_candidates must list at least one command")
        return cleaned

    @field_validator("min_version")
    @classmethod
    def _min_version_shape(cls, value: list[int]) -> list[int]:
        if not 1 <= len(value) <= 3 or any(part < 0 for part in value):
            raise ValueError("min_version must be [major], [major, minor] or [major, minor, patch]")
        return value

    @property
    def min_version_label(self) -> str:
        return ".".join(str(part) for part in self.min_version)

    @property
    def config_header(self) -> str:
        return f"{self.display_name} Configuration"
