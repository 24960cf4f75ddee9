"""Command-line interface argument parsing."""

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from fstools.config.settings import (
    DEFAULT_OPTIONS,
    ENV_FILE_MODE,
    ENV_FLDR_MODE,
    VALID_FILEMODES,
    VALID_FLDRMODES,
    OpMode,
)


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        operation: "copy" or "move".
        source: Source file or folder.
        destination: Destination file or folder.
        file_mode: Conflict policy for existing files.
        fldr_mode: Conflict policy for existing folders.
        recursive: If False, subfolders are not processed.
        debug: If True, enable debug logging.
    """

    operation: str = OpMode.COPY.value
    source: Optional[Path] = None
    destination: Optional[Path] = None
    file_mode: str = DEFAULT_OPTIONS["file_mode"]
    fldr_mode: str = DEFAULT_OPTIONS["fldr_mode"]
    recursive: bool = True
    debug: bool = False

    def to_options(self) -> Dict[str, Any]:
        """Return the engine options for these arguments."""
        return {
            "file_mode": self.file_mode,
            "fldr_mode": self.fldr_mode,
            "recursive": self.recursive,
        }


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Mode defaults come from the FSTOOLS_FILE_MODE and FSTOOLS_FLDR_MODE
    environment variables when set.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='fstools',
        description="""
        Copies or moves a file or folder with explicit handling of
        destinations that already exist.
        """
    )

    parser.add_argument(
        'operation',
        choices=[mode.value for mode in OpMode],
        help='operation to perform'
    )

    parser.add_argument('source', help='full path to source file/folder')

    parser.add_argument('destination', help='full path to destination file/folder')

    file_default = os.getenv(ENV_FILE_MODE) or DEFAULT_OPTIONS["file_mode"]
    parser.add_argument(
        '-f', '--file-mode',
        default=file_default,
        help=f"existing file handling: {', '.join(sorted(VALID_FILEMODES))} "
             f"(default: {file_default})"
    )

    fldr_default = os.getenv(ENV_FLDR_MODE) or DEFAULT_OPTIONS["fldr_mode"]
    parser.add_argument(
        '-F', '--fldr-mode',
        default=fldr_default,
        help=f"existing folder handling: {', '.join(sorted(VALID_FLDRMODES))} "
             f"(default: {fldr_default})"
    )

    parser.add_argument(
        '--no-recursive',
        action='store_true',
        help="do not process subfolders"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        operation=namespace.operation,
        source=Path(namespace.source),
        destination=Path(namespace.destination),
        file_mode=namespace.file_mode,
        fldr_mode=namespace.fldr_mode,
        recursive=not namespace.no_recursive,
        debug=namespace.debug,
    )
