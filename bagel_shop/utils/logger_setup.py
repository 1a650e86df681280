"""
Centralized logging configuration for bagel-shop.

Provides a simple, consistent logging interface across all modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class LoggerManager:
    """Manages logging configuration for the application."""

    _initialized = False
    _log_file = None

    @classmethod
    def setup_logging(cls, log_file: Optional[str] = None, level: str = "INFO", console: bool = False):
        """
        Setup logging configuration.

        Args:
            log_file (Optional[str]): Path to log file. If None, no file handler is added.
            level (str): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console (bool): Enable console logging (default: False)
        """
        if cls._initialized:
            return

        # Convert string level to logging constant
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger('bagel_shop')
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()

        # Console handler on stderr; stdout carries command output
        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(numeric_level)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if log_file:
            cls._log_file = Path(log_file)
            cls._log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(cls._log_file, encoding='utf-8')
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not root_logger.handlers:
            root_logger.addHandler(logging.NullHandler())

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Drop the current configuration so setup_logging() can run again."""
        root_logger = logging.getLogger('bagel_shop')
        for handler in list(root_logger.handlers):
            handler.close()
        root_logger.handlers.clear()
        cls._initialized = False
        cls._log_file = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger for a specific module.

        Module loggers are created at import time, before any entry point has
        had a chance to call setup_logging(), so this does not configure
        anything itself.

        Args:
            name (str): Module name (usually __name__)

        Returns:
            logging.Logger: Logger under the 'bagel_shop' hierarchy
        """
        if name == 'bagel_shop' or name.startswith('bagel_shop.'):
            return logging.getLogger(name)
        return logging.getLogger(f'bagel_shop.{name}')


def get_logger(name: str) -> logging.Logger:
    """
    Convenience function to get a logger.

    Args:
        name (str): Module name (usually __name__)

    Returns:
        logging.Logger: Logger under the 'bagel_shop' hierarchy
    """
    return LoggerManager.get_logger(name)
