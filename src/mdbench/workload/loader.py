import logging
import os
from pathlib import Path

from ..exceptions import ResourceLoadError

logger = logging.getLogger(__name__)


def load_workload(path: str | os.PathLike[str]) -> bytes:
    """Read the whole benchmark input into memory.

    Runs before the timer starts so file I/O never lands in the measurement.
    There is no size limit and no streaming; this is for benchmark inputs only.

    Raises:
        ResourceLoadError: path is missing, not a regular file, or unreadable.
    """
    resolved = Path(path)
    if resolved.is_dir():
        raise ResourceLoadError(str(path), "is a directory")

    try:
        data = resolved.read_bytes()
    except FileNotFoundError:
        raise ResourceLoadError(str(path), "no such file") from None
    except PermissionError:
        raise ResourceLoadError(str(path), "permission denied") from None
    except OSError as exc:
        raise ResourceLoadError(str(path), exc.strerror or str(exc)) from exc

    logger.debug("Loaded workload %s (%d bytes)", resolved, len(data))
    return data
