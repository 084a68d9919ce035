# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Logging configuration and utilities for VISM components."""

import os
import logging
import re
import sys
import logging.config
from dataclasses import dataclass
from typing import ClassVar

LOG_FORMAT = '%(asctime)s [%(levelname)-8s] %(message)s'
VERBOSE_LOG_FORMAT = '%(asctime)s [%(name)-20s] [%(levelname)-8s] %(message)s'


@dataclass
class LoggingConfig:
    """Configuration for the logging system."""

    __path__: ClassVar[str] = "logging"

    log_root: str = "vism_acme_client"
    log_dir: str = None
    verbose: bool = False
    log_file: str = "acme_client.log"
    log_level: str = "INFO"


class SensitiveDataFilter(logging.Filter): # pylint: disable=too-few-public-methods
    """Filter to mask private key material in log messages."""

    SENSITIVE_PATTERNS = {
        "private_key": {
            "pattern": r'-----BEGIN ([A-Z ]*)PRIVATE KEY-----[\s\S]*?-----END \1PRIVATE KEY-----',
            "replace": '[REDACTED PRIVATE KEY]',
        },
    }

    def filter(self, record):
        """Filter and mask sensitive data in log record."""
        for pattern in self.SENSITIVE_PATTERNS.values():
            if isinstance(record.msg, str):
                record.msg = re.sub(pattern['pattern'], pattern['replace'], record.msg)
            if record.args:
                record.args = tuple(
                    re.sub(pattern['pattern'], pattern['replace'], arg)
                    if isinstance(arg, str) else arg
                    for arg in record.args
                )
        return True


class BelowErrorFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    def filter(self, record):
        return record.levelno < logging.ERROR


class ColoredFormatter(logging.Formatter):  # pylint: disable=too-few-public-methods
    """Formatter that prints errors in red."""

    RED = '\033[91m'
    RESET = '\033[0m'

    def format(self, record):
        formatted = super().format(record)
        if record.levelno >= logging.ERROR:
            formatted = f"{self.RED}{formatted}{self.RESET}"

        return formatted


def setup_logger(config: LoggingConfig):
    """
    Install console (and optionally file) logging for the client loggers.

    Records below ERROR go to stdout, errors go to stderr. A log file is
    only written when log_dir is set.

    Args:
        config: Logging configuration
    """
    handlers = {
        "stdout": {
            "level": config.log_level,
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": sys.stdout,
            "filters": ["sensitive_data", "below_error"],
        },
        "stderr": {
            "level": "ERROR",
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": sys.stderr,
            "filters": ["sensitive_data"],
        },
    }

    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        handlers["file"] = {
            "level": config.log_level,
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": os.path.join(config.log_dir, config.log_file),
            "encoding": "utf8",
            "filters": ["sensitive_data"],
        }

    logger_config = {
        "level": config.log_level,
        "handlers": list(handlers),
        "propagate": False,
    }

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "sensitive_data": {"()": SensitiveDataFilter},
            "below_error": {"()": BelowErrorFilter},
        },
        "formatters": {
            "default": {
                "()": ColoredFormatter,
                "format": VERBOSE_LOG_FORMAT if config.verbose else LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            config.log_root: dict(logger_config),
            "vism_shared": dict(logger_config),
        },
    })
    logging.getLogger(config.log_root).debug("Logging is set up and ready")
