"""
Logging configuration for the framing grid engine.

Grid and layout modules log through standard named loggers
(``logging.getLogger(__name__)``). This module wires those loggers to file
and console handlers for scripts and host applications, and adds a TRACE
level below DEBUG for per-split diagnostics.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


class FramingGridLogger:
    """
    Configures logging for the framing grid engine.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - TRACE level for individual split positions during divisions
    - Optional log file alongside console output
    """

    TRACE_LEVEL = TRACE_LEVEL

    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """Log a message with level TRACE."""
                if self.isEnabledFor(TRACE_LEVEL):
                    self._log(TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: str = "logs",
        console_only: bool = False,
        logger_name: str = "framing_grid",
    ) -> Optional[str]:
        """
        Configure handlers for the engine's logger hierarchy.

        Args:
            debug_mode: If True, sets DEBUG level on the package logger
            log_dir: Directory to store log files
            console_only: If True, skip the file handler
            logger_name: Root of the logger hierarchy to configure

        Returns:
            Path to the created log file, or None when console_only is set
        """
        FramingGridLogger._add_trace_method()

        level = logging.DEBUG if debug_mode else logging.INFO
        package_logger = logging.getLogger(logger_name)
        package_logger.setLevel(level)

        if package_logger.handlers:
            package_logger.handlers.clear()

        log_file = None
        if not console_only:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"framing_grid_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            package_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            logging.Formatter('%(name)s - %(levelname)s: %(message)s')
        )
        console_handler.setLevel(logging.INFO)
        package_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A configured logger
        """
        FramingGridLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """Convenience wrapper around FramingGridLogger.get_logger."""
    return FramingGridLogger.get_logger(name, level)
