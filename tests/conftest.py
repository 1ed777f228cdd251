import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from mdbench.exceptions import TransformationError
from mdbench.transforms import Transformation

SAMPLE_MARKDOWN = "# Title\n\nBody text."


class FakeClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 0) -> None:
        self.now = start
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        return self.now

    def advance(self, ns: int) -> None:
        self.now += ns


class CountingTransformation(Transformation):
    """Test double: appends ``payload`` and advances a fake clock by ``cost_ns``."""

    name = "counting"

    def __init__(
        self,
        *,
        clock: FakeClock | None = None,
        cost_ns: int = 0,
        fail_on: int | None = None,
        payload: bytes = b"<p>ok</p>\n",
        error: Exception | None = None,
    ) -> None:
        self.clock = clock
        self.cost_ns = cost_ns
        self.fail_on = fail_on
        self.payload = payload
        self.error = error
        self.calls = 0
        self.sinks: list[bytearray] = []
        self.sink_sizes: list[int] = []
        self.sources: list[bytes] = []

    def transform(self, source: bytes, sink: bytearray) -> int:
        self.calls += 1
        self.sinks.append(sink)
        self.sink_sizes.append(len(sink))
        self.sources.append(source)
        if self.clock is not None:
            self.clock.advance(self.cost_ns)
        if self.fail_on is not None and self.calls == self.fail_on:
            raise self.error or TransformationError(f"boom on call {self.calls}")
        sink += self.payload
        return len(self.payload)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MDBENCH_REPETITIONS",
        "MDBENCH_TRANSFORM",
        "MDBENCH_SINK_MODE",
        "MDBENCH_LINKIFY",
        "MDBENCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Never pick up a developer's .env during tests
    monkeypatch.setattr("mdbench.cli.load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "TEST.md"
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock(start=1_000_000)


@pytest.fixture
def make_transformation(fake_clock: FakeClock):
    def _make(**kwargs) -> CountingTransformation:
        kwargs.setdefault("clock", fake_clock)
        return CountingTransformation(**kwargs)

    return _make
