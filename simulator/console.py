from __future__ import annotations

from typing import Callable, List

from holdem.cards import cards_to_labels
from holdem.human import FOLD_SENTINEL
from holdem.models import MAX_PLAYERS, MIN_PLAYERS, Event, Player
from holdem.table import TableState

# Terminal front-end: renders the table for the human seat and prints events.


class ConsoleInput:
    def __init__(self, reader: Callable[[str], str] = input, writer: Callable[[str], None] = print) -> None:
        self._reader = reader
        self._writer = writer

    def show(self, table: TableState, player: Player) -> None:
        for line in render_table(table, player):
            self._writer(line)

    def read(self, prompt: str) -> str:
        return self._reader(prompt)

    def warn(self, message: str) -> None:
        self._writer(message)


def render_table(table: TableState, current: Player) -> List[str]:
    board = " ".join(cards_to_labels(table.community)) or "-"
    to_call = max((player.current_bet for player in table.players if player.in_hand), default=0)
    lines = ["", f"Table Cards: {board}   Pot: {table.pot}", ""]
    for player in table.players:
        marker = " <-" if player is current else ""
        dealer = " (D)" if player.is_dealer else ""
        lines.append(f"Player: {player.name}{dealer}{marker}")
        lines.append(f"Money: {player.stack}")
        if not player.in_hand:
            lines.append("Folded")
            continue
        lines.append(f"Current Bet: {player.current_bet}")
        if player is current:
            lines.append("Cards: " + " ".join(cards_to_labels(player.hand)))
    lines.append(f"{to_call} dollars to CALL current bet ('{FOLD_SENTINEL}' folds)")
    lines.append("_________________________")
    return lines


def prompt_player_count(reader: Callable[[str], str] = input, writer: Callable[[str], None] = print) -> int:
    prompt = f"Choose number of players ({MIN_PLAYERS}-{MAX_PLAYERS}) including yourself: "
    while True:
        raw = reader(prompt).strip()
        try:
            count = int(raw)
        except ValueError:
            writer(f"{raw} is not a valid integer. Please enter a number between {MIN_PLAYERS} and {MAX_PLAYERS}.")
            continue
        if MIN_PLAYERS <= count <= MAX_PLAYERS:
            return count
        writer(f"Number must be between {MIN_PLAYERS} and {MAX_PLAYERS}.")


class EventPrinter:
    """Channel subscriber that echoes announcements to the terminal."""

    def __init__(self, writer: Callable[[str], None] = print) -> None:
        self._writer = writer

    def __call__(self, event: Event) -> None:
        self._writer(f"[{event.kind.value}] {event.text}")
