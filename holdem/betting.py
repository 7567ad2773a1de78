from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .human import HumanInput, ask_bet, ask_call
from .models import Action, ActionType, EventKind, Player
from .strategies import strategy_for
from .table import TableState

LOGGER = logging.getLogger("holdem.betting")

# One street of betting: a single pass over the queue, then (when the pass left
# bets uneven) a resolution pass that settles the shortfalls.


class _StreetActor:
    def __init__(
        self,
        table: TableState,
        human: Optional[HumanInput] = None,
        action_delay_ms: int = 0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.table = table
        self.human = human
        self.action_delay_ms = action_delay_ms
        self._sleep = sleep

    def _pace(self) -> None:
        if self.action_delay_ms > 0:
            self._sleep(self.action_delay_ms / 1000)

    def _human_for(self, player: Player) -> HumanInput:
        if self.human is None:
            raise RuntimeError(f"Seat {player.seat} is human but no input source is attached")
        return self.human

    def _fold(self, player: Player) -> None:
        player.fold_cards()
        LOGGER.info("Player %s folds.", player.name)
        self.table.events.publish(EventKind.FOLD, f"Player {player.name} folded")

    def _pay(self, player: Player, amount: int) -> ActionType:
        paid = player.bet_money(amount)
        self.table.add_to_pot(paid)
        if player.stack == 0 and paid > 0:
            return ActionType.ALL_IN
        return ActionType.CALL


class BettingEngine(_StreetActor):
    """Runs the first pass of a street over the betting queue."""

    current_bet = 0

    def run_pass(self) -> bool:
        """Return True when at most one player is left in the hand."""
        self.current_bet = 0
        if len(self.table.players_in_hand()) <= 1:
            return True

        for player in self.table.betting_queue():
            # All-in seats stay in the hand but have nothing left to act with.
            if not player.in_hand or player.stack == 0:
                continue
            if player.is_human:
                self._human_turn(player)
            else:
                self._scripted_turn(player)
                self._pace()

        return len(self.table.players_in_hand()) <= 1

    def _human_turn(self, player: Player) -> None:
        source = self._human_for(player)
        source.show(self.table, player)
        amount = ask_bet(source, player, self.current_bet)
        if amount is None:
            self._fold(player)
            return

        outcome = self._pay(player, amount)
        player.current_bet = amount
        # A short all-in does not lower the bet everyone else has to match.
        if amount >= self.current_bet:
            self.current_bet = amount
        self._announce(player, outcome, amount)

    def _scripted_turn(self, player: Player) -> None:
        rank = self.table.rank_of(player)
        strategy = strategy_for(player.personality)
        action = strategy.decide(rank, self.current_bet, player.stack)
        LOGGER.debug("%s (%r, %s) -> %s", player.name, strategy, rank.name, action)
        self.apply(player, action)

    def apply(self, player: Player, action: Action) -> None:
        """Apply a scripted action to the table."""
        if action.type == ActionType.FOLD:
            self._fold(player)
            return
        outcome = self._pay(player, action.amount)
        player.current_bet = action.amount
        if action.type == ActionType.RAISE:
            self.current_bet = action.amount
            if outcome != ActionType.ALL_IN:
                outcome = ActionType.RAISE
        self._announce(player, outcome, self.current_bet)

    def _announce(self, player: Player, outcome: ActionType, amount: int) -> None:
        if outcome == ActionType.ALL_IN:
            text = f"Player {player.name} is all in"
        else:
            text = f"Player {player.name} bet {amount}"
        LOGGER.info("%s (%s, pot %s)", text, outcome.value, self.table.pot)
        self.table.events.publish(EventKind.BET, text)


class ReRaiseResolver(_StreetActor):
    """Second pass: everyone short of the final bet calls the difference or folds."""

    def resolve(self, current_bet: int) -> bool:
        for player in self.table.betting_queue():
            if player.in_hand and player.current_bet < current_bet and player.stack > 0:
                shortfall = current_bet - player.current_bet
                if player.is_human:
                    self._human_call(player, shortfall)
                else:
                    self._scripted_call(player, shortfall)
                    self._pace()
            player.current_bet = 0
        return False

    def _human_call(self, player: Player, shortfall: int) -> None:
        source = self._human_for(player)
        source.show(self.table, player)
        amount = ask_call(source, player, shortfall)
        if amount is None:
            self._fold(player)
            return
        self._settle(player, amount)

    def _scripted_call(self, player: Player, shortfall: int) -> None:
        rank = self.table.rank_of(player)
        if strategy_for(player.personality).calls_reraise(rank):
            self._settle(player, shortfall)
        else:
            self._fold(player)

    def _settle(self, player: Player, amount: int) -> None:
        outcome = self._pay(player, amount)
        player.current_bet += amount
        if outcome == ActionType.ALL_IN:
            text = f"Player {player.name} is all in"
        else:
            text = f"Player {player.name} called the re-raise with {amount}"
        LOGGER.info("%s (pot %s)", text, self.table.pot)
        self.table.events.publish(EventKind.BET, text)
