from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from holdem.cards import parse_cards
from holdem.evaluator import HandCategory
from holdem.events import EventChannel
from holdem.models import Event, Personality, Player, TableConfig
from holdem.table import TableState, build_table


class ScriptedInput:
    """Feeds canned answers to the human seat and records what it was told."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []
        self.warnings: List[str] = []
        self.shown = 0

    def show(self, table: TableState, player: Player) -> None:
        self.shown += 1

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError("Human seat asked for more input than scripted")
        return self.answers.pop(0)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class Recorder:
    def __init__(self) -> None:
        self.events: List[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    def texts(self) -> List[str]:
        return [event.text for event in self.events]


def create_table(
    *,
    players: int = 3,
    starting_stack: int = 500,
    personalities: Optional[Sequence[Personality]] = None,
    human_seat: Optional[int] = None,
    seed: int = 42,
) -> tuple[TableState, EventChannel, Recorder]:
    """Build a table with a recording subscriber attached."""
    channel = EventChannel()
    recorder = Recorder()
    channel.subscribe(recorder)
    config = TableConfig(
        players=players,
        starting_stack=starting_stack,
        human_seat=human_seat,
        personalities=personalities,
        seed=seed,
    )
    return build_table(config, channel), channel, recorder


def rig_ranks(table: TableState, ranks: Sequence[HandCategory]) -> None:
    """Pin every seat's category for the current street."""
    table.ranks = {player.seat: rank for player, rank in zip(table.players, ranks)}


def give_cards(player: Player, labels: Sequence[str]) -> None:
    player.hand = parse_cards(labels)


def total_chips(table: TableState) -> int:
    return sum(player.stack for player in table.players) + table.pot
