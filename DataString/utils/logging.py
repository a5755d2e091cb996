"""
Logging for DataString.
"""

import logging
import sys
from typing import Optional

class DataStringLogger:
    """
    Wraps the named "DataString" logger.

    A level already configured on that logger is left alone; the default only
    applies when none was set. The stdout handler carries no level of its own,
    so the logger level alone decides what is printed.
    """

    def __init__(self, name: str = "DataString", level: int = logging.WARNING):
        self.logger = logging.getLogger(name)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def transfer(
        self,
        operation: str,
        accepted: bool,
        **kwargs,
    ) -> None:
        """
        Logs one ownership transfer at DEBUG level.

        The line is only formatted when DEBUG is enabled.

        Args:
            operation: Name of the DataString operation
            accepted: Whether the value accepted the transfer
            **kwargs: Extra fields appended as "key: value"
        """
        if not self.logger.isEnabledFor(logging.DEBUG):
            return

        msg = f"{operation} | {'accepted' if accepted else 'rejected'}"
        for k, v in kwargs.items():
            msg += f" | {k}: {v}"
        self.debug(msg)


_logger: Optional[DataStringLogger] = None

def get_logger() -> DataStringLogger:
    global _logger
    if _logger is None:
        _logger = DataStringLogger()
    return _logger
