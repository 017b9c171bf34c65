"""
Error types and exit codes for the TargetApp CLI.
"""

import traceback

import click

EXIT_SUCCESS = 0
EXIT_GENERAL_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_COMPUTATION_ERROR = 3


class CalculatorCLIError(Exception):
    """Base class for errors reported to the user with a specific exit code."""

    exit_code = EXIT_GENERAL_ERROR

    def __init__(self, message: str, exit_code: int = None):
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigurationError(CalculatorCLIError):
    """Invalid or unreadable configuration."""

    exit_code = EXIT_CONFIG_ERROR


class ComputationError(CalculatorCLIError):
    """An operand was rejected or a checked operation overflowed."""

    exit_code = EXIT_COMPUTATION_ERROR


def handle_error(error: Exception, verbose: bool = False) -> int:
    """
    Report an unexpected error and return the exit code to use.

    Args:
        error: The exception that was raised
        verbose: Also print the traceback

    Returns:
        Process exit code
    """
    if isinstance(error, CalculatorCLIError):
        click.secho(f"\n✗ {error.message}", fg="red", err=True)
        exit_code = error.exit_code
    else:
        click.secho(f"\n✗ Unexpected error: {error}", fg="red", err=True)
        exit_code = EXIT_GENERAL_ERROR

    if verbose:
        click.echo(traceback.format_exc(), err=True)

    return exit_code
