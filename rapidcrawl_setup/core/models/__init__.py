"""
Domain models for the setup pipeline.

All models are re-exported here for convenient access:

    from rapidcrawl_setup.core.models import ProbeResult, EnvironmentDescriptor
"""

from rapidcrawl_setup.core.models.dotenv import ConfigSettings, SettingKey
from rapidcrawl_setup.core.models.environment import EnvironmentDescriptor
from rapidcrawl_setup.core.models.outcome import SetupReport, Stage, StepOutcome, StepResult
from rapidcrawl_setup.core.models.probe import ProbeResult
from rapidcrawl_setup.core.models.runtime import DetectedRuntime, RuntimeVersion
from rapidcrawl_setup.core.models.setup import SetupSettings

__all__ = [
    "ConfigSettings",
    "DetectedRuntime",
    "EnvironmentDescriptor",
    "ProbeResult",
    "RuntimeVersion",
    "SettingKey",
    "SetupReport",
    "SetupSettings",
    "Stage",
    "StepOutcome",
    "StepResult",
]
