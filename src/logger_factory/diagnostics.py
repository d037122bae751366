import logging
import os
import sys

_LOGGER_NAME = "logger_factory"
_LEVEL_ENV = "LOGGER_FACTORY_LOG_LEVEL"


class ConsoleFormatter(logging.Formatter):

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def setup_logger(name: str = _LOGGER_NAME, log_level: str | None = None) -> logging.Logger:
    if log_level is None:
        log_level = os.environ.get(_LEVEL_ENV, "WARNING")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # stdout belongs to the loggers this package creates
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    return logger


_DIAGNOSTICS = setup_logger()


def get_logger() -> logging.Logger:
    return _DIAGNOSTICS


def set_level(log_level: str) -> None:
    _DIAGNOSTICS.setLevel(getattr(logging, log_level.upper()))
