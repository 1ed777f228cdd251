import logging
import os
import time
from collections.abc import Callable
from enum import Enum

from ..config import DEFAULT_REPETITIONS, BenchConfig
from ..exceptions import TransformationError
from ..sink import SinkMode
from ..transforms import Transformation, get_transformation
from ..workload import load_workload
from .models import TimedRun

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


class RunState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    RUNNING = "running"
    REPORTING = "reporting"
    DONE = "done"
    FAILED = "failed"


def _describe(exc: BaseException) -> str:
    if isinstance(exc, TransformationError):
        return exc.reason
    detail = str(exc)
    return f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__


def run_timed(
    source: bytes,
    transformation: Transformation,
    *,
    repetitions: int = DEFAULT_REPETITIONS,
    sink_mode: SinkMode = SinkMode.ACCUMULATE,
    clock: Clock = time.perf_counter_ns,
) -> TimedRun:
    """Run ``transformation`` against ``source`` exactly ``repetitions`` times.

    The clock is read once before the first call and once after the last, so
    there is no per-iteration timing overhead and no warm-up exclusion. One sink
    is shared by every call; in RESET mode it is cleared in place, inside the
    timed span, before each call after the first.

    Raises:
        ValueError: ``repetitions`` < 1.
        TransformationError: any call failed. ``iteration`` is 1-based and no
            timing is returned.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be >= 1, got {repetitions}")

    sink = bytearray()
    transform = transformation.transform
    reset = sink_mode is SinkMode.RESET
    iteration = 0

    start = clock()
    try:
        for iteration in range(1, repetitions + 1):
            if reset and iteration > 1:
                del sink[:]
            transform(source, sink)
    except Exception as exc:
        raise TransformationError(
            _describe(exc),
            transform=transformation.name,
            iteration=iteration,
        ) from exc
    end = clock()

    return TimedRun(
        elapsed_ns=max(end - start, 0),
        repetitions=repetitions,
        transform=transformation.name,
        sink_mode=sink_mode,
    )


class BenchmarkRunner:
    """Load a workload, then time the configured transformation over it.

    The transformation is resolved by name from the registry during loading
    unless one is injected.

    State machine per invocation:
        idle -> loading -> running -> reporting -> done
    with a single transition to ``failed`` on the first error. A runner is
    single-shot; calling ``run`` twice raises RuntimeError.
    """

    def __init__(
        self,
        config: BenchConfig,
        *,
        transformation: Transformation | None = None,
        clock: Clock = time.perf_counter_ns,
    ) -> None:
        self.config = config
        self.transformation = transformation
        self._clock = clock
        self.state = RunState.IDLE

    def _enter(self, state: RunState) -> None:
        logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state

    def run(self, path: str | os.PathLike[str]) -> TimedRun:
        if self.state is not RunState.IDLE:
            raise RuntimeError(f"BenchmarkRunner already used (state={self.state.value})")

        try:
            self._enter(RunState.LOADING)
            source = load_workload(path)
            if self.transformation is None:
                self.transformation = get_transformation(
                    self.config.transform, linkify=self.config.linkify
                )

            self._enter(RunState.RUNNING)
            logger.info(
                "Running %s x%d (sink=%s, %d input bytes)",
                self.transformation.name,
                self.config.repetitions,
                self.config.sink_mode.value,
                len(source),
            )
            result = run_timed(
                source,
                self.transformation,
                repetitions=self.config.repetitions,
                sink_mode=self.config.sink_mode,
                clock=self._clock,
            )
        except Exception:
            self._enter(RunState.FAILED)
            raise

        self._enter(RunState.REPORTING)
        logger.info("Run complete: %s", result.to_dict())
        return result

    def finish(self) -> None:
        """Mark the run as reported."""
        if self.state is RunState.REPORTING:
            self._enter(RunState.DONE)
