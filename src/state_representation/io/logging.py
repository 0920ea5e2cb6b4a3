"""Define utility functions to simplify logging to the CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from state_representation.state import State

logger = logging.getLogger(__name__)
console = Console()


def log_debug(message: str) -> None:
    """Log the given string at the debug level."""
    logger.debug(message)


def print_state(state: State) -> None:
    """Print a human-readable description of the given state to the console."""
    console.print(state.describe(), markup=False, highlight=False)
