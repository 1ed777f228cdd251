from typing import IO

import click

from .models import TimedRun

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000
NS_PER_MIN = 60 * NS_PER_S
NS_PER_H = 60 * NS_PER_MIN


def _with_fraction(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(ns: int) -> str:
    """Format nanoseconds the way Go's ``time.Duration`` prints.

    ``850ns``, ``12.5µs``, ``812.5ms``, ``1.234s``, ``2m3.5s``, ``1h0m0s``.
    """
    if ns < 0:
        return "-" + format_duration(-ns)
    if ns == 0:
        return "0s"
    if ns < NS_PER_US:
        return f"{ns}ns"
    if ns < NS_PER_MS:
        return _with_fraction(ns, NS_PER_US) + "µs"
    if ns < NS_PER_S:
        return _with_fraction(ns, NS_PER_MS) + "ms"

    hours, rem = divmod(ns, NS_PER_H)
    minutes, rem = divmod(rem, NS_PER_MIN)
    out = ""
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + _with_fraction(rem, NS_PER_S) + "s"


def report(run: TimedRun, stream: IO[str] | None = None) -> None:
    """Write the single result line (stdout unless ``stream`` is given)."""
    click.echo(format_duration(run.elapsed_ns), file=stream)
