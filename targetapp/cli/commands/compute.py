"""
Arithmetic commands: add and multiply.

The result is the only thing written to stdout (a bare integer, or a JSON
object with --json). Progress and errors go to stderr.
"""

import sys
import json
from typing import Optional

import click

from targetapp.cli.utils.errors import (
    ConfigurationError,
    ComputationError,
    CalculatorCLIError,
    handle_error,
    EXIT_SUCCESS,
)
from targetapp.cli.utils.logging import create_logger
from targetapp.src.calculator import Calculator, OperandError, IntegerOverflowError
from targetapp.src.config import (
    Config,
    ConfigError,
    OVERFLOW_POLICIES,
    SUPPORTED_BIT_WIDTHS,
    load_config,
)

# Allows negative operands such as "-5" without a "--" separator
OPERAND_CONTEXT = {"ignore_unknown_options": True}


def operation_options(func):
    """Options shared by every arithmetic command."""
    decorators = [
        click.argument("a", type=int),
        click.argument("b", type=int),
        click.option(
            "--overflow",
            type=click.Choice(OVERFLOW_POLICIES),
            default=None,
            help="Overflow policy (default: unbounded, or the value from --config)",
        ),
        click.option(
            "--bits",
            type=click.Choice([str(w) for w in SUPPORTED_BIT_WIDTHS]),
            default=None,
            help="Signed integer width for bounded policies (default: 32)",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(),
            default=None,
            help="Path to a JSON configuration file",
        ),
        click.option(
            "--json",
            "as_json",
            is_flag=True,
            help="Print the result as a JSON object",
        ),
        click.option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Show detailed progress and debug information",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def resolve_config(
    config_path: Optional[str],
    overflow: Optional[str],
    bits: Optional[str],
) -> Config:
    """
    Build the effective configuration.

    Command-line values take precedence over the configuration file, which
    takes precedence over defaults.
    """
    try:
        config = load_config(config_path) if config_path else Config()
        return config.with_overrides(
            overflow_policy=overflow,
            bit_width=int(bits) if bits is not None else None,
        )
    except ConfigError as e:
        raise ConfigurationError(str(e))


def format_result(result: int) -> str:
    """
    Render a result as decimal text.

    Raises:
        ComputationError: If the result exceeds the interpreter's limit on
            integer-to-string conversion
    """
    try:
        return str(result)
    except ValueError as e:
        raise ComputationError(
            f"Result is too large to print ({result.bit_length()} bits): {e}"
        )


def run_operation(
    operation: str,
    a: int,
    b: int,
    overflow: Optional[str],
    bits: Optional[str],
    config_path: Optional[str],
    as_json: bool,
    verbose: bool,
) -> None:
    """Run one calculator operation and exit with the matching code."""
    logger = create_logger(verbose=verbose)

    try:
        logger.step("Resolving configuration...", 1, 2)
        config = resolve_config(config_path, overflow, bits)
        logger.debug(f"Overflow policy: {config.overflow_policy}, bit width: {config.bit_width}")

        logger.step(f"Computing {operation}({a}, {b})...", 2, 2)
        calculator = Calculator.from_config(config)
        try:
            result = getattr(calculator, operation)(a, b)
        except (OperandError, IntegerOverflowError) as e:
            raise ComputationError(str(e))
        result_text = format_result(result)
        logger.success(f"{operation}({a}, {b}) = {result_text}")

        if as_json:
            click.echo(json.dumps({
                "operation": operation,
                "operands": [a, b],
                "result": result,
                **config.to_dict(),
            }))
        else:
            click.echo(result_text)

        sys.exit(EXIT_SUCCESS)

    except CalculatorCLIError as e:
        logger.error(e.message)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        sys.exit(handle_error(e, verbose=verbose))
    finally:
        logger.close()


@click.command(name="add", context_settings=OPERAND_CONTEXT)
@operation_options
def add_command(a, b, overflow, bits, config_path, as_json, verbose):
    """
    Add two integers.

    Examples:

    \b
    $ targetapp add 5 3
    8

    \b
    # Wrap around like a 32-bit signed integer
    $ targetapp add 2147483647 1 --overflow wrap
    -2147483648

    \b
    # Fail instead of overflowing
    $ targetapp add 127 1 --overflow checked --bits 8
    """
    run_operation("add", a, b, overflow, bits, config_path, as_json, verbose)


@click.command(name="multiply", context_settings=OPERAND_CONTEXT)
@operation_options
def multiply_command(a, b, overflow, bits, config_path, as_json, verbose):
    """
    Multiply two integers.

    Examples:

    \b
    $ targetapp multiply 4 3
    12

    \b
    # Clamp to the 16-bit range
    $ targetapp multiply 300 300 --overflow saturate --bits 16
    32767

    \b
    # JSON output
    $ targetapp multiply 4 3 --json
    """
    run_operation("multiply", a, b, overflow, bits, config_path, as_json, verbose)
