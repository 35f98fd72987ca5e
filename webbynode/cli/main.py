# webbynode/cli/main.py
"""Main CLI entry point for wn"""

import sys
import logging

import click
from rich.logging import RichHandler

from .output import console, print_error, print_webbynode_error
from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..commands import CommandContext, CommandExecutor
from ..core.settings import load_settings
from ..exceptions import MissingParameterError, SettingsError, WebbynodeError


def setup_logging(verbose: bool = False, debug: bool = False, default_level: str = "WARNING") -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        default_level: Level used when neither flag is given
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, default_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


@click.command(
    name=APP_NAME,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    }
)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.version_option(__version__, prog_name=APP_NAME)
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, verbose, debug, quiet, tokens):
    """Webbynode deployment client

    Run 'wn help' for the list of commands, or
    'wn help <command>' for the parameters of one command.
    """
    try:
        settings = load_settings()
    except SettingsError as e:
        print_webbynode_error(e, debug)
        ctx.exit(1)

    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug, default_level=settings.log_level)

    executor = CommandExecutor(context=CommandContext(settings=settings, console=console))

    try:
        command = executor.resolve(list(tokens))
        try:
            command.validate()
        except MissingParameterError as e:
            console.print(f"[yellow]{e}[/yellow]")
            console.print(command.help(), markup=False, soft_wrap=True)
            return

        executor.run(command)

    except WebbynodeError as e:
        print_webbynode_error(e, debug)
        ctx.exit(1)


def main():
    """Main entry point for the CLI application

    Handles keyboard interrupts and unexpected exceptions.
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        print_error("Unexpected error", e)
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
