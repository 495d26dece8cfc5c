import logging
import sys
from typing import ClassVar


class CustomFormatter(logging.Formatter):
    """Level-coloured formatter; plain text when the stream is not a terminal."""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    plain = "%(asctime)s [%(levelname)s] - %(name)s - %(message)s"
    format = "\x1b[1m%(asctime)s [%(levelname)s]\x1b[0m - %(name)s - %(message)s"

    FORMATS: ClassVar[dict[int, str]] = {
        logging.DEBUG: grey + format + reset,
        logging.INFO: grey + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset,
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno) if self.use_color else self.plain
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def setup_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Return a named logger, attaching the coloured handler to the root logger
    on first use. A given level is applied to the root logger so it reaches
    every module.
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(CustomFormatter(use_color=sys.stderr.isatty()))

    logging.addLevelName(logging.WARNING, "WARN")
    logging.addLevelName(logging.ERROR, "ERRR")
    logging.addLevelName(logging.CRITICAL, "CRIT")

    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(level=logging.INFO, handlers=[stream_handler])
    if level is not None:
        logging.getLogger().setLevel(level)
    return logging.getLogger(name)
