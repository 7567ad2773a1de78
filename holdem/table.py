from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from .cards import Card, Deck, build_cards
from .evaluator import HandCategory, describe_rank, evaluate
from .events import EventChannel
from .models import MAX_PLAYERS, MIN_PLAYERS, EventKind, Personality, Player, TableConfig

LOGGER = logging.getLogger("holdem.table")

# TableState owns seats, board, pot and the per-street rank cache. Betting
# decisions live in betting.py; the hand sequence lives in game.py.


class TableState:
    def __init__(self, players: List[Player], deck: Deck, events: EventChannel) -> None:
        self.players = players
        self.deck = deck
        self.events = events
        self.community: List[Card] = []
        self.pot = 0
        self.ranks: Dict[int, HandCategory] = {}

    # Seats -----------------------------------------------------------

    @property
    def dealer(self) -> Player:
        for player in self.players:
            if player.is_dealer:
                return player
        raise RuntimeError("No dealer at the table")

    def betting_queue(self) -> List[Player]:
        """Players in acting order: first seat after the dealer, dealer last."""
        idx = self.players.index(self.dealer)
        return self.players[idx + 1 :] + self.players[: idx + 1]

    def players_in_hand(self) -> List[Player]:
        return [player for player in self.players if player.in_hand]

    def find_player(self, name: str) -> Optional[Player]:
        for player in self.players:
            if player.name == name:
                return player
        return None

    def remove_player(self, name: str) -> Optional[Player]:
        player = self.find_player(name)
        if player is not None:
            self.players.remove(player)
        return player

    # Hand lifecycle --------------------------------------------------

    def reset(self) -> None:
        for player in self.players:
            player.fold_cards()
        self.community.clear()
        self.pot = 0
        self.deck.shuffle()
        self.ranks.clear()
        for player in self.players:
            player.reset_for_hand()

    def deal_players(self) -> None:
        # One card each, twice round, starting left of the dealer.
        queue = self.betting_queue()
        for _ in range(2):
            for player in queue:
                player.hand.append(self.deck.draw())

    def deal_flop(self) -> None:
        self.deck.draw()
        for _ in range(3):
            self.community.append(self.deck.draw())

    def deal_turn_or_river(self) -> None:
        self.deck.draw()
        self.community.append(self.deck.draw())

    def evaluate_hands(self) -> Dict[int, HandCategory]:
        self.ranks = {
            player.seat: evaluate(player.hand, self.community)
            for player in self.players
            if player.in_hand
        }
        return self.ranks

    def rank_of(self, player: Player) -> HandCategory:
        try:
            return self.ranks[player.seat]
        except KeyError:
            raise RuntimeError(f"No hand rank for seat {player.seat} ({player.name})") from None

    def add_to_pot(self, amount: int) -> None:
        self.pot += amount

    def award_pot_to_winner(self) -> Optional[Player]:
        """Pay the whole pot to the live player with the lowest category code.

        Ties go to the first of them in acting order. With nobody left in the
        hand the pot stays where it is.
        """
        winner: Optional[Player] = None
        best: Optional[HandCategory] = None
        for player in self.betting_queue():
            if not player.in_hand:
                continue
            rank = self.rank_of(player)
            if best is None or rank < best:
                best = rank
                winner = player

        if winner is None or best is None:
            LOGGER.info("No winner. Pot of %s remains.", self.pot)
            self.events.publish(EventKind.WIN, "No winner, pot remains")
            return None

        amount = self.pot
        winner.add_money(amount)
        self.pot = 0
        LOGGER.info("Player %s wins the pot of %s with %s", winner.name, amount, describe_rank(best))
        self.events.publish(EventKind.WIN, f"Player {winner.name} won {amount} dollars")
        return winner

    def set_next_dealer(self) -> Player:
        """Hand the button to the next seat that still has chips."""
        current = self.dealer
        idx = self.players.index(current)
        for step in range(1, len(self.players) + 1):
            candidate = self.players[(idx + step) % len(self.players)]
            if candidate.stack > 0:
                current.is_dealer = False
                candidate.is_dealer = True
                return candidate
        return current

    def remove_busted(self) -> List[Player]:
        busted = [player for player in self.players if player.stack == 0]
        for player in busted:
            self.players.remove(player)
            LOGGER.info("Player %s is out of chips", player.name)
            self.events.publish(EventKind.LOSE, f"Player {player.name} is out of the game")
        return busted


def build_table(config: TableConfig, events: EventChannel) -> TableState:
    if not MIN_PLAYERS <= config.players <= MAX_PLAYERS:
        raise ValueError(f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    if len(config.names) < config.players:
        raise ValueError("Not enough player names for the table")
    if config.personalities is not None and len(config.personalities) != config.players:
        raise ValueError("Personalities must match the player count")

    rng = random.Random(config.seed)
    players: List[Player] = []
    for seat in range(config.players):
        if config.personalities is not None:
            personality = Personality(config.personalities[seat])
        else:
            personality = Personality(rng.randint(1, 5))
        players.append(
            Player(
                seat=seat,
                name=config.names[seat],
                stack=config.starting_stack,
                personality=personality,
                is_human=seat == config.human_seat,
            )
        )
    players[0].is_dealer = True

    deck = Deck(build_cards(), random.Random(rng.getrandbits(32)))
    return TableState(players, deck, events)
