import logging
import os
import sys
from typing import Optional, Tuple

LOG_LEVEL_ENV = "EMBED_MODELS_LOG_LEVEL"
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _BelowLevelFilter(logging.Filter):
    """Pass records strictly below *threshold*; the rest belong on stderr."""

    def __init__(self, threshold: int) -> None:
        super().__init__()
        self.threshold = threshold

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.threshold


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``EMBED_MODELS_LOG_LEVEL``, or *default*.

    Accepts level names (``debug``, ``WARNING``) and numeric levels (``10``).
    """
    raw = (os.environ.get(LOG_LEVEL_ENV) or "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def configure_split_stream_logging(
    *,
    level: Optional[int] = None,
    stderr_level: int = logging.WARNING,
) -> Tuple[logging.Handler, logging.Handler]:
    """Route root logging for the checker CLI.

    Records below *stderr_level* are written to stdout next to the check
    report, the rest to stderr. Without *level* the root level comes from
    ``EMBED_MODELS_LOG_LEVEL``. Returns the ``(stdout, stderr)`` handlers.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level if level is not None else level_from_env())

    stderr_level = max(stderr_level, logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.addFilter(_BelowLevelFilter(stderr_level))

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)

    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return stdout_handler, stderr_handler
