from dataclasses import dataclass
from typing import Any

from ..sink import SinkMode


@dataclass(frozen=True)
class TimedRun:
    """Outcome of one complete repetition loop.

    Only the aggregate span is kept. A per-call average is ``elapsed_ns /
    repetitions`` if the caller wants it; the harness never reports one.
    """

    elapsed_ns: int
    repetitions: int
    transform: str
    sink_mode: SinkMode = SinkMode.ACCUMULATE

    @property
    def elapsed_s(self) -> float:
        return self.elapsed_ns / 1e9

    def to_dict(self) -> dict[str, Any]:
        return {
            "elapsed_ns": self.elapsed_ns,
            "repetitions": self.repetitions,
            "transform": self.transform,
            "sink_mode": self.sink_mode.value,
        }
