"""Configuration module for mdbench."""

from .compat import env_bool
from .settings import (
    DEFAULT_LINKIFY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REPETITIONS,
    DEFAULT_SINK_MODE,
    DEFAULT_TRANSFORM,
    BenchConfig,
)

__all__ = [
    "DEFAULT_LINKIFY",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REPETITIONS",
    "DEFAULT_SINK_MODE",
    "DEFAULT_TRANSFORM",
    "BenchConfig",
    "env_bool",
]
