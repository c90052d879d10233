"""Centralized logging configuration."""

import logging

from temperatures.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Web stack loggers that keep their own handler instead of propagating to root
WEB_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "fastapi")


def _console_handler(level: str, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def configure_logging(level: str = LOG_LEVEL):
    """
    Route the service and web stack loggers through one console format.

    Existing handlers are replaced so repeated calls do not duplicate output.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    targets = [(logging.getLogger(), True)]
    targets += [(logging.getLogger(name), False) for name in WEB_LOGGERS]

    for logger, propagate in targets:
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_console_handler(level, formatter))
        if not propagate:
            logger.propagate = False
