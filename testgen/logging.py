"""Logging setup shared by the CLI, the engine and the HTTP service."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import LoggingConfig

_LOGGER_NAME = "testgen"

_CONSOLE_FORMAT = "[testgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# uvicorn's loggers are re-homed onto the testgen handlers when serving.
SERVER_LOGGERS: tuple[str, ...] = ("uvicorn", "uvicorn.error", "uvicorn.access")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the testgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    config: Optional[LoggingConfig] = None, *, verbose: bool = False
) -> logging.Logger:
    """Install testgen's handlers from ``.testgen.yml`` settings.

    ``verbose`` forces DEBUG even when the config leaves it off; a CLI flag can
    raise verbosity but never lower it. Calling this again replaces the
    handlers installed by the previous call.
    """
    config = config or LoggingConfig()
    level = logging.DEBUG if (verbose or config.verbose) else logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    _replace_handlers(logger, _build_handlers(config, level))
    return logger


def route_server_logs(level: Optional[int] = None) -> None:
    """Send uvicorn's startup and access logs through testgen's handlers."""
    owner = logging.getLogger(_LOGGER_NAME)
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level if level is not None else owner.level)
        server_logger.propagate = False
        _replace_handlers(server_logger, list(owner.handlers), close=False)


def _build_handlers(config: LoggingConfig, level: int) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)
    return handlers


def _replace_handlers(
    logger: logging.Logger, handlers: List[logging.Handler], *, close: bool = True
) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if close:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)


__all__ = ["SERVER_LOGGERS", "configure_logging", "get_logger", "route_server_logs"]
