from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from .models import Player

if TYPE_CHECKING:
    from .table import TableState

FOLD_SENTINEL = "-1"


class HumanInput(Protocol):
    """Terminal (or scripted) source of the human seat's decisions."""

    def show(self, table: "TableState", player: Player) -> None:
        ...

    def read(self, prompt: str) -> str:
        ...

    def warn(self, message: str) -> None:
        ...


def ask_bet(source: HumanInput, player: Player, current_bet: int) -> Optional[int]:
    """Prompt until the human folds (None) or names a legal bet.

    A legal bet lies between the current bet and the player's stack. Shoving the
    whole stack is accepted even when it is short of the current bet.
    """
    prompt = f"Call the current bet of {current_bet}, raise, or type '{FOLD_SENTINEL}' to fold: "
    while True:
        raw = source.read(prompt).strip()
        if raw == FOLD_SENTINEL:
            return None
        amount = _parse_int(raw)
        if amount is None:
            source.warn(f"{raw} is not a valid integer. Please enter a number greater or equal to {current_bet}")
            continue
        if amount == player.stack:
            if amount > 0:
                source.warn("You are All In, Good Luck!")
            return amount
        if amount < current_bet:
            source.warn(f"Please enter a number greater or equal to {current_bet}")
            continue
        if amount > player.stack:
            source.warn("Please enter a number less than or equal to your current stack")
            continue
        return amount


def ask_call(source: HumanInput, player: Player, shortfall: int) -> Optional[int]:
    """Prompt for exactly the re-raise shortfall (capped at the stack) or a fold."""
    due = min(shortfall, player.stack)
    prompt = f"Call {due} dollars or type '{FOLD_SENTINEL}' to fold: "
    while True:
        raw = source.read(prompt).strip()
        if raw == FOLD_SENTINEL:
            return None
        amount = _parse_int(raw)
        if amount == due:
            return amount
        source.warn(f"Please enter a number equal to the Re-Raise ({due})")


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None
