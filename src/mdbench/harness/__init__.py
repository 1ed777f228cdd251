"""Timed repetition harness.

Modules:
    - runner: run_timed() loop and the single-shot BenchmarkRunner
    - models: TimedRun result record
    - report: Go-style duration formatting and the one-line report
"""

from .models import TimedRun
from .report import format_duration, report
from .runner import BenchmarkRunner, RunState, run_timed

__all__ = [
    "BenchmarkRunner",
    "RunState",
    "TimedRun",
    "format_duration",
    "report",
    "run_timed",
]
