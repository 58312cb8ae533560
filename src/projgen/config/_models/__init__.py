"""Configuration models.

This module provides the Pydantic models for generator configs and the
shared enums used by loader settings.
"""

from projgen.config._models._common import LogFormat, LogLevel
from projgen.config._models._generator import GeneratorConfig

__all__ = [
    "GeneratorConfig",
    "LogFormat",
    "LogLevel",
]
