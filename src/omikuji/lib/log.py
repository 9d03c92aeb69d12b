"""
Logging helpers for omikuji.

Every module asks for a logger under the ``omikuji.`` namespace. The
namespace root gets a single stderr handler the first time a logger is
requested; the level comes from ``OMIKUJI_LOG_LEVEL``.
"""

import logging
import os

from omikuji import config

ROOT_LOGGER_NAME = "omikuji"


def _setup_logging() -> logging.Logger:
    """Setup logging configuration for the omikuji namespace."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()

        level_name = os.getenv(config.LOG_LEVEL_ENV_VAR, config.DEFAULT_LOG_LEVEL)
        root.setLevel(getattr(logging, level_name.upper(), logging.WARNING))

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a configured logger below the omikuji namespace."""
    _setup_logging()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
