"""Blackjack command line interface."""

from .cli_game import BlackjackCLI, main
from .input_handler import CLIInputHandler
from .render import CLIRenderer

__all__ = ['BlackjackCLI', 'CLIInputHandler', 'CLIRenderer', 'main']
