"""Logging configuration module for the weather lookup application.

Provides structured logging setup with support for console and file output
in both JSON and human-readable formats.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

from weather_lookup.models.config import LoggingConfig
from weather_lookup.utils.early_error_handler import handle_startup_error
from weather_lookup.utils.path_utils import path_resolver

BYTES_PER_MEGABYTE = 1024 * 1024


def setup_logging(
    config: LoggingConfig, name: str, stream: TextIO | None = None
) -> logging.Logger:
    """Set up logging with the specified configuration.

    Handlers are attached to the package logger as well as the named logger,
    so module loggers created with logging.getLogger(__name__) share them.

    Args:
        config: Logging configuration.
        name: Logger name.
        stream: Console stream, defaults to stdout. The CLI passes stderr so
            log lines do not mix with command output.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    package_logger = logging.getLogger("weather_lookup")

    level = getattr(logging, config.level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.format.lower() == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    )

    handler: logging.Handler
    file_error: str | None = None
    if config.file:
        try:
            log_path = path_resolver.normalize_path(config.file)
            path_resolver.ensure_dir_exists(log_path.parent)

            handler = RotatingFileHandler(
                config.file,
                maxBytes=config.max_size_mb * BYTES_PER_MEGABYTE,
                backupCount=config.backup_count,
            )
        except Exception as e:
            file_error = f"Failed to set up file logging: {e}"
            handle_startup_error("LOGGING_FILE_ERROR", file_error, {"log_file": str(config.file)})

            # Fall back to console logging if file logging fails
            handler = logging.StreamHandler(stream or sys.stdout)
    else:
        handler = logging.StreamHandler(stream or sys.stdout)

    handler.setFormatter(formatter)
    handler.setLevel(level)

    for target in {logger, package_logger}:
        target.handlers = []
        target.setLevel(level)
        target.addHandler(handler)

    # Keep package records from reaching the root logger twice
    if logger is not package_logger:
        logger.propagate = False

    if file_error:
        logger.error(file_error)

    return logger
