"""Entry point for the fstools package.

Run with: python -m fstools {copy,move} SRC DST [options]
"""

import sys

from dotenv import load_dotenv
from loguru import logger

from fstools.config.cli import CLIArgs, parse_arguments, args_to_cli_args
from fstools.config.settings import LOG_FILE, OpMode
from fstools.engine import copy, move
from fstools.ui import ConsoleUI


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def display_configuration(cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Display the requested operation to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    recursive = "[green]yes[/green]" if cli_args.recursive else "[yellow]no[/yellow]"
    console.print_panel(
        f"[bold]{cli_args.operation}[/bold]\n"
        f"Source: [cyan]{cli_args.source}[/cyan]\n"
        f"Destination: [cyan]{cli_args.destination}[/cyan]\n"
        f"Existing files: {cli_args.file_mode}\n"
        f"Existing folders: {cli_args.fldr_mode}\n"
        f"Recursive: {recursive}",
        title="fstools",
    )


def main(args=None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 otherwise).
    """
    load_dotenv()
    cli_args = args_to_cli_args(parse_arguments(args))

    setup_logging(cli_args.debug)
    console = ConsoleUI()
    display_configuration(cli_args, console)

    operation = move if cli_args.operation == OpMode.MOVE.value else copy
    result = operation(cli_args.source, cli_args.destination, cli_args.to_options())

    console.print_result(result)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
