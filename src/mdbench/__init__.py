__version__ = "0.1.0"

from .config import BenchConfig
from .exceptions import (
    BenchError,
    ConfigError,
    ResourceLoadError,
    TransformationError,
    UnknownTransformationError,
)
from .harness import BenchmarkRunner, TimedRun, format_duration, run_timed
from .sink import SinkMode
from .transforms import Transformation, get_transformation
from .workload import load_workload

__all__ = [
    "__version__",
    "BenchConfig",
    "BenchError",
    "BenchmarkRunner",
    "ConfigError",
    "ResourceLoadError",
    "SinkMode",
    "TimedRun",
    "Transformation",
    "TransformationError",
    "UnknownTransformationError",
    "format_duration",
    "get_transformation",
    "load_workload",
    "run_timed",
]
