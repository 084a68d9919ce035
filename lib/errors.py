# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Shared exception classes for VISM components."""

import logging

shared_logger = logging.getLogger("vism_shared")


class VismException(RuntimeError):
    """Base exception class for VISM errors."""

    log_level = logging.ERROR
    include_traceback = False

    def __init__(self, message: str, *args):
        super().__init__(message, *args)
        self._log_error(message, *args)

    def _log_error(self, message: str, *args):
        shared_logger.log(
            self.log_level,
            "%s: %s",
            self.__class__.__name__,
            message,
            exc_info=self.include_traceback,
        )
