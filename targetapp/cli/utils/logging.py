"""
Console logger for CLI commands.

Everything goes to stderr so stdout carries only command results.
"""

import logging
from typing import Optional

import click

PACKAGE_LOGGER = "targetapp"


class ClickHandler(logging.Handler):
    """Logging handler that writes through click, resolving stderr at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.secho(self.format(record), dim=True, err=True)
        except Exception:
            self.handleError(record)


class CLILogger:
    """
    Step-oriented progress output for commands.

    In verbose mode the package loggers are routed to stderr at DEBUG level
    until close() is called.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._handler: Optional[ClickHandler] = None
        self._previous_level: Optional[int] = None
        if verbose:
            self._attach()

    def _attach(self) -> None:
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        self._handler = ClickHandler()
        self._handler.setFormatter(logging.Formatter("  %(name)s: %(message)s"))
        self._previous_level = package_logger.level
        package_logger.addHandler(self._handler)
        package_logger.setLevel(logging.DEBUG)

    def close(self) -> None:
        """Detach the verbose handler and restore the package log level."""
        if self._handler is None:
            return
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.removeHandler(self._handler)
        package_logger.setLevel(self._previous_level)
        self._handler = None

    def step(self, message: str, current: int, total: int) -> None:
        if self.verbose:
            click.secho(f"[{current}/{total}] {message}", fg="blue", err=True)

    def success(self, message: str) -> None:
        if self.verbose:
            click.secho(f"✓ {message}", fg="green", err=True)

    def debug(self, message: str) -> None:
        if self.verbose:
            click.secho(f"  {message}", dim=True, err=True)

    def error(self, message: str) -> None:
        click.secho(f"✗ {message}", fg="red", err=True)


def create_logger(verbose: bool = False) -> CLILogger:
    """Create a CLI logger. Callers should close() it when the command ends."""
    return CLILogger(verbose=verbose)
