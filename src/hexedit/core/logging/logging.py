# -----------------------------------------------------------------------------
# hexedit - binary file patch utility
# Copyright (c) 2025 The hexedit authors
#
# This file is part of hexedit.
#
# hexedit is licensed under the MIT License.
#   - See LICENSE.txt for the full license text
# -----------------------------------------------------------------------------


"""
Logging configuration for the hexedit CLI application.

Console output goes to stderr so stdout only ever carries the success line.
Every run also gets a timestamped debug log file in the user log directory.
"""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from hexedit.constants import ENV_APP_PREFIX, LOG_DIR

LOG_LEVEL_ENV = f"{ENV_APP_PREFIX}LOG_LEVEL"
CONSOLE_LOG_LEVEL_ENV = f"{ENV_APP_PREFIX}CONSOLE_LOG_LEVEL"


class StructuredLogger:
    """Structured logging helper for consistent log formatting."""

    def __init__(self, command_name: str, debug: bool = False, silent: bool = False):
        self.command_name = command_name
        self.debug = debug
        self.silent = silent
        self.console = Console(stderr=True)
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Set up loguru with a console sink and a file sink."""
        # Clear existing sinks to avoid duplicates
        logger.remove()

        default_level = "DEBUG" if self.debug else "WARNING"
        log_level = os.getenv(LOG_LEVEL_ENV, "DEBUG").upper()
        console_level = os.getenv(CONSOLE_LOG_LEVEL_ENV, default_level).upper()
        if self.debug:
            console_level = "DEBUG"

        LOG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        logfile = LOG_DIR / f"hexedit_{timestamp}.log"

        def console_sink(message):
            text = message.record["message"].rstrip("\n")
            self.console.print(text, markup=False, highlight=False)

        if not self.silent:
            logger.add(
                console_sink, level=console_level, format="{message}", catch=True
            )

        logger.add(
            logfile,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>",
            encoding="utf-8",
            errors="backslashreplace",
            rotation="10 MB",
            retention="14 days",
            compression="gz",
            catch=True,
            backtrace=True,
            diagnose=False,
        )

        logger.bind(
            command=self.command_name, logfile=str(logfile), log_level=log_level
        ).debug("Logger initialized")

        self.logfile = logfile

    def get_logfile(self) -> Path:
        """Get the current log file path."""
        return self.logfile


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Show debug output on the console
        silent: Do not log to the console at all (the log file is still written)

    Returns:
        Path to the log file
    """
    structured_logger = StructuredLogger(command_name, debug=debug, silent=silent)
    return structured_logger.get_logfile()


def get_log_directory() -> Path:
    """Get the directory where log files are stored."""
    return LOG_DIR
