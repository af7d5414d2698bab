"""miniplot logger.

Usage from any module::

    from ._log import log

    log.debug("appended series %r", name)

Enable via environment variable::

    MINIPLOT_LOG=DEBUG python my_script.py   # all messages
    MINIPLOT_LOG=INFO  python my_script.py   # info and above
    MINIPLOT_LOG=1     python my_script.py   # alias for DEBUG

Or programmatically::

    import logging
    logging.getLogger("miniplot").setLevel(logging.DEBUG)
"""

import logging
import os

log = logging.getLogger("miniplot")

# ANSI color codes
_COLORS = {
    "DEBUG": "\033[36m",    # Cyan
    "INFO": "\033[32m",     # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",    # Red
    "RESET": "\033[0m",
}

_ALIASES = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}


class ColoredFormatter(logging.Formatter):
    """Color the level name when the handler writes to a terminal."""

    def __init__(self, fmt: str, handler: logging.StreamHandler) -> None:
        super().__init__(fmt)
        self.handler = handler

    def format(self, record):
        stream = getattr(self.handler, "stream", None)
        if stream is not None and hasattr(stream, "isatty") and stream.isatty():
            color = _COLORS.get(record.levelname, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{_COLORS['RESET']}"
        return super().format(record)


def level_from_env(value: str):
    """Map a MINIPLOT_LOG value to a logging level, or None if unrecognized."""
    name = value.strip().upper()
    if not name:
        return None
    name = _ALIASES.get(name, name)
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else None


def configure(value: str) -> bool:
    """Apply a MINIPLOT_LOG style level string. Returns True if it was applied."""
    level = level_from_env(value)
    if level is None:
        return False
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter(
            "[miniplot %(levelname)s] %(message)s (%(filename)s:%(lineno)d)",
            handler,
        ))
        log.addHandler(handler)
    return True


configure(os.environ.get("MINIPLOT_LOG", ""))
