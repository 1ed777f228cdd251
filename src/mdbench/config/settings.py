import logging
import os
from dataclasses import dataclass

from ..exceptions import ConfigError
from ..sink import SinkMode
from .compat import env_bool

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LINKIFY",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REPETITIONS",
    "DEFAULT_SINK_MODE",
    "DEFAULT_TRANSFORM",
    "BenchConfig",
]

# Matches the original harnesses (Go, Rust, JS all loop 1000 times)
DEFAULT_REPETITIONS = 1000
DEFAULT_TRANSFORM = "html"
DEFAULT_SINK_MODE = SinkMode.ACCUMULATE
DEFAULT_LINKIFY = True
DEFAULT_LOG_LEVEL = "WARNING"


def _parse_repetitions(raw: str | int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Repetition count must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"Repetition count must be >= 1, got {value}")
    return value


def _check_log_level(level: str) -> None:
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(
            f"Invalid log level {level!r} (expected one of: DEBUG, INFO, WARNING, ERROR, CRITICAL)"
        )


@dataclass(frozen=True)
class BenchConfig:
    repetitions: int = DEFAULT_REPETITIONS
    transform: str = DEFAULT_TRANSFORM
    sink_mode: SinkMode = DEFAULT_SINK_MODE
    linkify: bool = DEFAULT_LINKIFY
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        _parse_repetitions(self.repetitions)
        _check_log_level(self.log_level)

    @classmethod
    def from_env(cls) -> "BenchConfig":
        repetitions = _parse_repetitions(
            os.getenv("MDBENCH_REPETITIONS", "").strip() or DEFAULT_REPETITIONS
        )
        transform = os.getenv("MDBENCH_TRANSFORM", "").strip().lower() or DEFAULT_TRANSFORM

        raw_mode = os.getenv("MDBENCH_SINK_MODE", "").strip()
        try:
            sink_mode = SinkMode.parse(raw_mode) if raw_mode else DEFAULT_SINK_MODE
        except ValueError as exc:
            raise ConfigError(str(exc)) from None

        try:
            linkify = env_bool("MDBENCH_LINKIFY", default=DEFAULT_LINKIFY)
        except ValueError as exc:
            raise ConfigError(str(exc)) from None

        log_level = os.getenv("MDBENCH_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL

        logger.debug(
            "Config from env: repetitions=%d transform=%s sink_mode=%s linkify=%s",
            repetitions,
            transform,
            sink_mode.value,
            linkify,
        )
        return cls(
            repetitions=repetitions,
            transform=transform,
            sink_mode=sink_mode,
            linkify=linkify,
            log_level=log_level,
        )
