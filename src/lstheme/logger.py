#!/usr/bin/env python

import logging
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

from .constants import LOG_FILE_NAME, LOGGER_NAME


class LsThemeLogger:
    """Centralized logging for lstheme"""

    _instance: Optional['LsThemeLogger'] = None

    def __new__(cls) -> 'LsThemeLogger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(LOGGER_NAME)
        self.file_handler: Optional[logging.FileHandler] = None
        self._setup_logging()

    def _setup_logging(self):
        """Setup console logging"""
        # Diagnostics go to stderr so they never mix with a listing on stdout.
        # Markup is off: glob patterns are full of square brackets.
        console_handler = RichHandler(
            console=self.console,
            show_time=False,
            show_path=False,
            markup=False
        )
        console_handler.setLevel(logging.WARNING)

        self.logger.setLevel(logging.DEBUG)
        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def enable_file_logging(self, log_dir: Path) -> Path:
        """Also write DEBUG and above to a log file in *log_dir*"""
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        if self.file_handler is not None:
            self.logger.removeHandler(self.file_handler)
            self.file_handler.close()

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        self.logger.addHandler(file_handler)
        self.file_handler = file_handler
        return log_file

    def debug(self, message: str, **kwargs):
        """Log debug message"""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message"""
        self.logger.error(message, **kwargs)


# Global logger instance
logger = LsThemeLogger()
