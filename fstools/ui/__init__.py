"""User interface components."""

from fstools.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
