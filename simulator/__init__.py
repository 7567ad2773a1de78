"""Terminal and spectator front-ends for the hold'em table."""

from .console import ConsoleInput, EventPrinter
from .server import SpectatorFeed, run_with_spectators

__all__ = ["ConsoleInput", "EventPrinter", "SpectatorFeed", "run_with_spectators"]
