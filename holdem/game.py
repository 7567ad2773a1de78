from __future__ import annotations

import logging
from typing import Optional

from .betting import BettingEngine, ReRaiseResolver
from .events import EventChannel
from .human import HumanInput
from .models import EventKind, Phase, Player, TableConfig
from .table import TableState, build_table

LOGGER = logging.getLogger("holdem.game")

STREETS = (Phase.PRE_FLOP, Phase.FLOP, Phase.TURN, Phase.RIVER)


class Game:
    """Plays hands until one player holds every chip."""

    def __init__(
        self,
        table: TableState,
        events: EventChannel,
        human: Optional[HumanInput] = None,
        action_delay_ms: int = 0,
    ) -> None:
        self.table = table
        self.events = events
        self.betting = BettingEngine(table, human=human, action_delay_ms=action_delay_ms)
        self.resolver = ReRaiseResolver(table, human=human, action_delay_ms=action_delay_ms)
        self.hand_number = 1
        self.game_over = False
        self.phase = Phase.PRE_FLOP

    @classmethod
    def from_config(
        cls,
        config: TableConfig,
        events: EventChannel,
        human: Optional[HumanInput] = None,
    ) -> "Game":
        table = build_table(config, events)
        return cls(table, events, human=human, action_delay_ms=config.action_delay_ms)

    def play(self, max_hands: Optional[int] = None) -> Player:
        self.events.publish(EventKind.GAME_START, "The game has started! Good Luck!")
        played = 0
        while not self.game_over:
            if max_hands is not None and played >= max_hands:
                break
            self.play_hand()
            played += 1

        if not self.table.players:
            raise RuntimeError("No players left at the table")
        leader = max(self.table.players, key=lambda player: player.stack)
        LOGGER.info("Game over after %s hands. %s holds %s", played, leader.name, leader.stack)
        if leader.is_human:
            self.events.publish(EventKind.WIN, "Congratulations! You Won!")
        else:
            self.events.publish(EventKind.LOSE, f"Player {leader.name} won the poker game!")
        return leader

    def play_hand(self) -> Optional[Player]:
        LOGGER.info("Starting hand %s", self.hand_number)
        self.events.publish(EventKind.NEW_HAND, f"Starting hand {self.hand_number}")
        table = self.table
        table.reset()
        table.deal_players()

        for street in STREETS:
            self.phase = street
            if street == Phase.FLOP:
                table.deal_flop()
            elif street in (Phase.TURN, Phase.RIVER):
                table.deal_turn_or_river()
            table.evaluate_hands()
            if self.betting_round():
                break

        self.phase = Phase.SHOWDOWN
        table.evaluate_hands()
        winner = table.award_pot_to_winner()
        self._finish_hand()
        return winner

    def betting_round(self) -> bool:
        """Run one street; True when the hand is down to at most one player."""
        if self.betting.run_pass():
            return True
        self.resolver.resolve(self.betting.current_bet)
        return len(self.table.players_in_hand()) <= 1

    def _finish_hand(self) -> None:
        self.table.set_next_dealer()
        self.table.remove_busted()
        self.game_over = len(self.table.players) <= 1
        self.hand_number += 1
