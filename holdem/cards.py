from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUITS = ("♥", "♣", "♦", "♠")
SUIT_ALIASES = {"h": "♥", "c": "♣", "d": "♦", "s": "♠"}


class EmptyDeckError(RuntimeError):
    pass


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"


class Deck:
    """Draw pile plus discards. Drawn cards stay out until the next shuffle."""

    def __init__(self, cards: Sequence[Card], rng: Optional[random.Random] = None) -> None:
        self.cards: List[Card] = list(cards)
        self.discards: List[Card] = []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.cards)

    def draw(self) -> Card:
        if not self.cards:
            raise EmptyDeckError("Not enough cards left in deck")
        card = self.cards.pop(0)
        self.discards.append(card)
        return card

    def shuffle(self) -> None:
        self.cards.extend(self.discards)
        self.discards.clear()
        self._rng.shuffle(self.cards)


def build_cards() -> List[Card]:
    return [Card(rank, suit) for suit in SUITS for rank in RANKS]


def build_deck(seed: Optional[int] = None) -> Deck:
    return Deck(build_cards(), random.Random(seed))


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    if len(label) not in (2, 3):
        raise ValueError(f"Invalid card label: {label}")
    rank, suit = label[:-1].upper(), label[-1]
    return Card(rank, SUIT_ALIASES.get(suit.lower(), suit))


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
