import sys

from loguru import logger

LOG_FORMAT = "[{level}] {message}"
DEFAULT_LEVEL = "DEBUG"


def enable_logging(level: str = DEFAULT_LEVEL, sink=sys.stderr) -> int:
    """
    Turn on inter_val's debug output through one extra sink.

    Sinks the application already configured are left alone; pass the returned
    id to `disable_logging` to drop only the sink added here.
    """
    logger.enable("inter_val")
    return logger.add(sink, format=LOG_FORMAT, level=level)


def disable_logging(handler_id: int | None = None):
    logger.disable("inter_val")
    if handler_id is not None:
        logger.remove(handler_id)
