"""
Main CLI application for TargetApp using Click framework.
"""

import sys
import click

from targetapp import __version__


@click.group()
@click.version_option(version=__version__, prog_name="TargetApp CLI")
@click.pass_context
def cli(ctx):
    """
    TargetApp: integer arithmetic from the command line.

    Add or multiply integers with optional fixed-width overflow handling.
    """
    ctx.ensure_object(dict)


@cli.command()
def version():
    """Display version information."""
    click.echo(f"TargetApp CLI v{__version__}")


# Import commands
from targetapp.cli.commands.compute import add_command, multiply_command

# Register commands
cli.add_command(add_command, name="add")
cli.add_command(multiply_command, name="multiply")


def main():
    """Entry point for the CLI."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user", err=True)
        sys.exit(130)
    except Exception as e:
        click.secho(f"\n✗ Unexpected error: {e}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
