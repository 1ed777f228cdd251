import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from dotenv import load_dotenv

from . import __version__
from .config import BenchConfig
from .exceptions import BenchError, ConfigError
from .harness import BenchmarkRunner, report
from .sink import SinkMode
from .transforms import available_transformations

logger = logging.getLogger("mdbench")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--repetitions",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of timed repetitions [default: MDBENCH_REPETITIONS or 1000]",
)
@click.option(
    "--transform",
    "transform_name",
    type=click.Choice(available_transformations(), case_sensitive=False),
    default=None,
    help="Transformation to time [default: MDBENCH_TRANSFORM or html]",
)
@click.option(
    "--sink-mode",
    type=click.Choice([m.value for m in SinkMode], case_sensitive=False),
    default=None,
    help="Keep growing the shared output sink, or clear it between repetitions "
    "[default: MDBENCH_SINK_MODE or accumulate]",
)
@click.option(
    "--linkify/--no-linkify",
    default=None,
    help="Autolink bare URLs [default: MDBENCH_LINKIFY or on]",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.version_option(__version__, prog_name="mdbench")
def main(
    path: Path,
    repetitions: int | None,
    transform_name: str | None,
    sink_mode: str | None,
    linkify: bool | None,
    verbose: bool,
) -> None:
    """Time repeated Markdown rendering of the document at PATH.

    Prints one line, the total elapsed time for all repetitions.
    """
    # Load .env from current directory or parents
    load_dotenv()

    try:
        config = BenchConfig.from_env()
    except ConfigError as e:
        click.echo(f"Error loading config: {e.message}", err=True)
        sys.exit(e.exit_code)

    overrides: dict[str, Any] = {}
    if repetitions is not None:
        overrides["repetitions"] = repetitions
    if transform_name is not None:
        overrides["transform"] = transform_name.lower()
    if sink_mode is not None:
        overrides["sink_mode"] = SinkMode.parse(sink_mode)
    if linkify is not None:
        overrides["linkify"] = linkify
    if verbose:
        overrides["log_level"] = "DEBUG"
    config = replace(config, **overrides)

    setup_logging(config.log_level)
    logger.debug("Effective config: %s", config)

    try:
        runner = BenchmarkRunner(config)
        result = runner.run(path)
    except BenchError as e:
        logger.error("%s (%s)", e.message, e.error_code)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(e.exit_code)

    report(result)
    runner.finish()


if __name__ == "__main__":
    main()
